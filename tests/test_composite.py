"""
Unit tests for ArithmeticCombinator and the indicator composition helpers.
"""

import pytest

from quantstream.data.sample_data import samples_from_values
from quantstream.indicators.composite import ArithmeticCombinator
from quantstream.indicators.errors import IndicatorDivisionByZero, InvalidConfigurationError
from quantstream.indicators.streaming import (
    ConstantIndicator,
    SimpleMovingAverage,
    StandardDeviation,
)
from quantstream.models.enums import ArithmeticOperator


def feed(indicator, values):
    result = None
    for sample in samples_from_values(values):
        result = indicator.update(sample)
    return result


class TestArithmeticCombinator:
    @pytest.mark.parametrize(
        "operator, expected",
        [
            (ArithmeticOperator.ADD, 8.0),
            (ArithmeticOperator.SUBTRACT, 4.0),
            (ArithmeticOperator.MULTIPLY, 12.0),
            (ArithmeticOperator.DIVIDE, 3.0),
        ],
    )
    def test_operators(self, operator, expected):
        combo = ArithmeticCombinator(SimpleMovingAverage(1), ConstantIndicator(2.0), operator)
        assert feed(combo, [6.0]) == pytest.approx(expected)

    def test_string_operator(self):
        combo = ArithmeticCombinator(SimpleMovingAverage(1), ConstantIndicator(2.0), "multiply")
        assert combo.operator == ArithmeticOperator.MULTIPLY
        assert feed(combo, [4.0]) == pytest.approx(8.0)

    def test_unknown_operator(self):
        with pytest.raises(InvalidConfigurationError):
            ArithmeticCombinator(SimpleMovingAverage(1), ConstantIndicator(2.0), "MODULO")

    def test_forwards_samples_to_both_sides(self):
        left = SimpleMovingAverage(2)
        right = StandardDeviation(2)
        combo = ArithmeticCombinator(left, right, ArithmeticOperator.ADD)
        feed(combo, [1.0, 3.0])
        assert left.value == pytest.approx(2.0)
        assert right.value == pytest.approx(1.0)
        assert combo.value == pytest.approx(3.0)

    def test_ready_requires_both_sides(self):
        combo = ArithmeticCombinator(
            SimpleMovingAverage(2), SimpleMovingAverage(4), ArithmeticOperator.SUBTRACT
        )
        feed(combo, [1.0, 2.0])
        assert combo.left.ready
        assert not combo.ready
        feed(combo, [3.0, 4.0])
        assert combo.ready

    def test_default_name(self):
        combo = ArithmeticCombinator(
            SimpleMovingAverage(3), ConstantIndicator(2.0), ArithmeticOperator.MULTIPLY
        )
        assert combo.name == "SMA(3)*2.0"

    def test_shared_upstream_consumed_once(self):
        sma = SimpleMovingAverage(2)
        doubled = ArithmeticCombinator(sma, sma, ArithmeticOperator.ADD)
        feed(doubled, [1.0, 3.0])
        assert sma.samples == 2
        assert sma.value == pytest.approx(2.0)
        assert doubled.value == pytest.approx(4.0)

    def test_combinators_nest(self):
        sma = SimpleMovingAverage(2)
        std = StandardDeviation(2)
        band = sma.plus(std.times(3.0))
        feed(band, [1.0, 3.0])
        assert band.value == pytest.approx(2.0 + 3.0 * 1.0)
        assert band.ready


class TestDivision:
    def test_zero_denominator_when_ready_raises(self):
        combo = SimpleMovingAverage(1).over(ConstantIndicator(0.0))
        with pytest.raises(IndicatorDivisionByZero):
            feed(combo, [5.0])

    def test_is_a_zero_division_error(self):
        combo = SimpleMovingAverage(1).over(0.0)
        with pytest.raises(ZeroDivisionError):
            feed(combo, [5.0])

    def test_zero_denominator_during_warmup_keeps_value(self):
        combo = ConstantIndicator(1.0).over(SimpleMovingAverage(2))
        assert feed(combo, [0.0]) == 0.0
        assert not combo.ready
        with pytest.raises(IndicatorDivisionByZero):
            feed(combo, [0.0])

    def test_nonzero_denominator(self):
        combo = SimpleMovingAverage(2).over(StandardDeviation(2))
        assert feed(combo, [1.0, 3.0]) == pytest.approx(2.0)


class TestCompositionHelpers:
    def test_scalar_operand_wrapped_in_constant(self):
        combo = SimpleMovingAverage(1).minus(1.5)
        assert isinstance(combo.right, ConstantIndicator)
        assert combo.operator == ArithmeticOperator.SUBTRACT
        assert feed(combo, [4.0]) == pytest.approx(2.5)

    def test_helper_names(self):
        sma = SimpleMovingAverage(2)
        assert sma.plus(1.0, "shifted").name == "shifted"
        assert sma.minus(1.0).name == "SMA(2)-1.0"

    def test_operator_symbols(self):
        assert [op.symbol for op in ArithmeticOperator] == ["+", "-", "*", "/"]


class TestFailureConsistency:
    def test_sibling_branch_sees_failed_sample(self):
        ratio = ConstantIndicator(1.0).over(SimpleMovingAverage(1))
        counter = SimpleMovingAverage(3)
        total = ratio.plus(counter)
        samples = samples_from_values([1.0, 0.0, 2.0, 4.0])

        total.update(samples[0])
        with pytest.raises(IndicatorDivisionByZero):
            total.update(samples[1])
        total.update(samples[2])
        total.update(samples[3])

        assert counter.samples == 4
        assert counter.current == pytest.approx(2.0)  # mean of [0, 2, 4]
        assert total.current == pytest.approx(0.25 + 2.0)

    def test_right_operand_updated_when_left_fails(self):
        right = StandardDeviation(2)
        combo = ArithmeticCombinator(
            SimpleMovingAverage(1).over(0.0), right, ArithmeticOperator.ADD
        )
        with pytest.raises(IndicatorDivisionByZero):
            feed(combo, [3.0])
        assert right.samples == 1

    def test_current_raises_after_failed_sample(self):
        ratio = ConstantIndicator(1.0).over(SimpleMovingAverage(1))
        with pytest.raises(IndicatorDivisionByZero):
            feed(ratio, [0.0])
        assert ratio.ready
        with pytest.raises(IndicatorDivisionByZero):
            ratio.current

    def test_failure_cleared_by_next_success(self):
        ratio = ConstantIndicator(1.0).over(SimpleMovingAverage(1))
        with pytest.raises(IndicatorDivisionByZero):
            feed(ratio, [0.0])
        feed(ratio, [2.0])
        assert ratio.current == pytest.approx(0.5)

    def test_shared_failed_node_fails_every_consumer(self):
        ratio = ConstantIndicator(1.0).over(SimpleMovingAverage(1))
        shifted = ratio.plus(1.0)
        scaled = ratio.times(2.0)
        sample = samples_from_values([0.0])[0]

        with pytest.raises(IndicatorDivisionByZero):
            shifted.update(sample)
        with pytest.raises(IndicatorDivisionByZero):
            scaled.update(sample)
        with pytest.raises(IndicatorDivisionByZero):
            scaled.current
        assert ratio.samples == 1
