"""
ArithmeticCombinator — derives a value from two upstream indicators.

Upstreams may be shared with other consumers; each one advances at most
once per sample (see ``quantstream.indicators.base``).
"""

from __future__ import annotations

import logging
import operator as _op
from typing import Callable

from quantstream.indicators.base import StreamingIndicator
from quantstream.indicators.errors import IndicatorDivisionByZero, InvalidConfigurationError
from quantstream.models.enums import ArithmeticOperator
from quantstream.models.types import Sample

logger = logging.getLogger(__name__)

_OPERATIONS: dict[ArithmeticOperator, Callable[[float, float], float]] = {
    ArithmeticOperator.ADD: _op.add,
    ArithmeticOperator.SUBTRACT: _op.sub,
    ArithmeticOperator.MULTIPLY: _op.mul,
    ArithmeticOperator.DIVIDE: _op.truediv,
}


class ArithmeticCombinator(StreamingIndicator):
    """Applies a binary operator to the current values of two indicators.

    ``update()`` forwards the sample to ``left`` then ``right`` and combines
    their fresh values. Ready when both operands are ready.

    A DIVIDE by a zero right-hand value raises ``IndicatorDivisionByZero``
    once the combinator is ready. While warming up the value is left as it
    was.

    The right operand still receives the sample when the left one fails,
    so both windows stay aligned with the stream.
    """

    __slots__ = ("left", "right", "operator", "_apply")

    def __init__(
        self,
        left: StreamingIndicator,
        right: StreamingIndicator,
        operator: ArithmeticOperator | str,
        name: str | None = None,
    ) -> None:
        if isinstance(operator, str) and not isinstance(operator, ArithmeticOperator):
            try:
                operator = ArithmeticOperator(operator.upper())
            except ValueError:
                raise InvalidConfigurationError(f"Unknown arithmetic operator: {operator}")

        super().__init__(name or f"{left.name}{operator.symbol}{right.name}")
        self.left = left
        self.right = right
        self.operator = operator
        self._apply = _OPERATIONS[operator]

    def _compute_next_value(self, sample: Sample) -> float:
        # Right must see the sample even when left fails
        try:
            self.left.update(sample)
        finally:
            self.right.update(sample)

        if self.operator == ArithmeticOperator.DIVIDE and self.right.value == 0:
            if self.ready:
                raise IndicatorDivisionByZero(
                    f"{self.name}: denominator {self.right.name} is zero"
                )
            logger.debug("%s skipped zero denominator during warm-up", self.name)
            return self._value

        return self._apply(self.left.value, self.right.value)

    @property
    def ready(self) -> bool:
        return self.left.ready and self.right.ready
