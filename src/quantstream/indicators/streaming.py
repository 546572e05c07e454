"""
Streaming primitive indicators — constant-time or window-bounded updates.

Each indicator maintains internal state so that a new sample requires only
an update over its own window, never a rescan of the stream.
"""

from __future__ import annotations

import collections
import math

from quantstream.indicators.base import StreamingIndicator, validate_period
from quantstream.models.types import Sample


class ConstantIndicator(StreamingIndicator):
    """Always returns a fixed value; lets a scalar take part in composition."""

    __slots__ = ("_constant",)

    def __init__(self, value: float, name: str | None = None) -> None:
        super().__init__(name or str(value))
        self._constant = value
        self._value = value

    def _compute_next_value(self, sample: Sample) -> float:
        return self._constant

    @property
    def ready(self) -> bool:
        return True


class SimpleMovingAverage(StreamingIndicator):
    """Simple Moving Average using circular buffer + running sum."""

    __slots__ = ("period", "_buffer", "_sum")

    def __init__(self, period: int, name: str | None = None) -> None:
        self.period = validate_period(period)
        super().__init__(name or f"SMA({period})")
        self._buffer: collections.deque[float] = collections.deque(maxlen=period)
        self._sum: float = 0.0

    def _compute_next_value(self, sample: Sample) -> float:
        if len(self._buffer) == self.period:
            self._sum -= self._buffer[0]
        self._buffer.append(sample.value)
        self._sum += sample.value
        return self._sum / len(self._buffer)

    @property
    def ready(self) -> bool:
        return self.samples >= self.period


class ExponentialMovingAverage(StreamingIndicator):
    """Exponential Moving Average — single multiply-add, seeded with the first sample."""

    __slots__ = ("period", "_alpha", "_ema")

    def __init__(self, period: int, name: str | None = None) -> None:
        self.period = validate_period(period)
        super().__init__(name or f"EMA({period})")
        self._alpha: float = 2.0 / (period + 1)
        self._ema: float | None = None

    def _compute_next_value(self, sample: Sample) -> float:
        if self._ema is None:
            self._ema = sample.value
        else:
            self._ema = self._alpha * sample.value + (1.0 - self._alpha) * self._ema
        return self._ema

    @property
    def ready(self) -> bool:
        return self.samples >= self.period


class WildersMovingAverage(ExponentialMovingAverage):
    """Wilder's smoothing: an EMA with alpha = 1 / period."""

    __slots__ = ()

    def __init__(self, period: int, name: str | None = None) -> None:
        super().__init__(period, name or f"WWMA({period})")
        self._alpha = 1.0 / self.period


class LinearWeightedMovingAverage(StreamingIndicator):
    """Linearly weighted average over the window; the newest sample weighs most."""

    __slots__ = ("period", "_buffer")

    def __init__(self, period: int, name: str | None = None) -> None:
        self.period = validate_period(period)
        super().__init__(name or f"LWMA({period})")
        self._buffer: collections.deque[float] = collections.deque(maxlen=period)

    def _compute_next_value(self, sample: Sample) -> float:
        self._buffer.append(sample.value)
        n = len(self._buffer)
        weighted = sum(weight * x for weight, x in enumerate(self._buffer, start=1))
        return weighted / (n * (n + 1) / 2)

    @property
    def ready(self) -> bool:
        return self.samples >= self.period


class StandardDeviation(StreamingIndicator):
    """Population standard deviation over a rolling window.

    Recomputed with a two-pass mean / squared-deviation sweep on every
    update. A window of 1 always yields 0.
    """

    __slots__ = ("period", "_buffer")

    def __init__(self, period: int, name: str | None = None) -> None:
        self.period = validate_period(period)
        super().__init__(name or f"STD({period})")
        self._buffer: collections.deque[float] = collections.deque(maxlen=period)

    def _compute_next_value(self, sample: Sample) -> float:
        self._buffer.append(sample.value)
        n = len(self._buffer)
        mean = sum(self._buffer) / n
        variance = sum((x - mean) ** 2 for x in self._buffer) / n
        return math.sqrt(variance)

    @property
    def ready(self) -> bool:
        return self.samples >= self.period
