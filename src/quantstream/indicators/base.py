"""
Base class for streaming indicators.

Every indicator consumes one ``Sample`` at a time through ``update()`` and
exposes its latest output through ``value``. Primitive and derived
indicators share this contract, so any indicator can feed any combinator.

Shared upstreams: an indicator consumes a given ``Sample`` object once.
When the same object arrives again through another path in the graph, the
delivery is ignored and the already computed value is returned.

A sample that fails with ``IndicatorDivisionByZero`` still counts as
consumed, because every upstream has already advanced with it. Delivering
it again raises the same failure, and ``current`` raises until the next
successful update, so no consumer reads the stale value.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Union

from quantstream.indicators.errors import (
    IndicatorDivisionByZero,
    InvalidConfigurationError,
    NotReadyError,
)
from quantstream.models.enums import ArithmeticOperator
from quantstream.models.types import IndicatorReading, Sample

if TYPE_CHECKING:
    from quantstream.indicators.composite import ArithmeticCombinator

logger = logging.getLogger(__name__)

Operand = Union["StreamingIndicator", float]


def validate_period(period: int, label: str = "period") -> int:
    """Return ``period`` or raise if it is not a positive integer."""
    if isinstance(period, bool) or not isinstance(period, int) or period <= 0:
        raise InvalidConfigurationError(f"{label} must be a positive integer, got {period!r}")
    return period


class StreamingIndicator(ABC):
    """Stateful function over an ordered stream of samples."""

    __slots__ = ("name", "samples", "timestamp", "_value", "_last_sample", "_was_ready", "_failure")

    def __init__(self, name: str) -> None:
        self.name = name
        self.samples: int = 0
        self.timestamp: float | None = None
        self._value: float = 0.0
        self._last_sample: Sample | None = None
        self._was_ready: bool = False
        self._failure: IndicatorDivisionByZero | None = None

    def update(self, sample: Sample) -> float:
        """Consume ``sample`` and return the new value."""
        if sample is self._last_sample:
            if self._failure is not None:
                raise self._failure
            return self._value

        if self.timestamp is not None and sample.timestamp < self.timestamp:
            logger.warning(
                "%s received out-of-order sample (%s < %s)",
                self.name, sample.timestamp, self.timestamp,
            )

        self._last_sample = sample
        self.samples += 1
        self.timestamp = sample.timestamp
        try:
            self._value = self._compute_next_value(sample)
        except IndicatorDivisionByZero as exc:
            self._failure = exc
            raise
        self._failure = None

        if not self._was_ready and self.ready:
            self._was_ready = True
            logger.debug("%s ready after %d samples", self.name, self.samples)
        return self._value

    @abstractmethod
    def _compute_next_value(self, sample: Sample) -> float:
        """Advance internal state with ``sample`` and return the new value."""

    @property
    @abstractmethod
    def ready(self) -> bool:
        """True once enough samples have been seen for ``value`` to be meaningful."""

    @property
    def value(self) -> float:
        """Latest value, unchecked. Unspecified until ``ready``."""
        return self._value

    @property
    def current(self) -> float:
        """Latest value; raises ``NotReadyError`` before the indicator is ready.

        Also raises ``IndicatorDivisionByZero`` while the latest sample has
        no value because its computation divided by zero.
        """
        if not self.ready:
            raise NotReadyError(f"{self.name} is not ready after {self.samples} samples")
        if self._failure is not None:
            raise IndicatorDivisionByZero(
                f"{self.name} has no value for t={self.timestamp}"
            ) from self._failure
        return self._value

    @property
    def reading(self) -> IndicatorReading:
        return IndicatorReading(value=self._value, is_ready=self.ready)

    # ── Composition ──

    def plus(self, other: Operand, name: str | None = None) -> ArithmeticCombinator:
        return self._combine(other, ArithmeticOperator.ADD, name)

    def minus(self, other: Operand, name: str | None = None) -> ArithmeticCombinator:
        return self._combine(other, ArithmeticOperator.SUBTRACT, name)

    def times(self, other: Operand, name: str | None = None) -> ArithmeticCombinator:
        return self._combine(other, ArithmeticOperator.MULTIPLY, name)

    def over(self, other: Operand, name: str | None = None) -> ArithmeticCombinator:
        return self._combine(other, ArithmeticOperator.DIVIDE, name)

    def _combine(
        self, other: Operand, operator: ArithmeticOperator, name: str | None
    ) -> ArithmeticCombinator:
        # Deferred: composite and streaming both subclass this module's base
        from quantstream.indicators.composite import ArithmeticCombinator
        from quantstream.indicators.streaming import ConstantIndicator

        if not isinstance(other, StreamingIndicator):
            other = ConstantIndicator(other)
        return ArithmeticCombinator(self, other, operator, name=name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, value={self._value}, ready={self.ready})"
