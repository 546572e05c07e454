"""
Moving-average factory — creates a moving average from its type tag.
"""

from __future__ import annotations

from quantstream.indicators.base import StreamingIndicator
from quantstream.indicators.errors import InvalidConfigurationError
from quantstream.indicators.streaming import (
    ExponentialMovingAverage,
    LinearWeightedMovingAverage,
    SimpleMovingAverage,
    WildersMovingAverage,
)
from quantstream.models.enums import MovingAverageType


def coerce_moving_average_type(kind: MovingAverageType | str) -> MovingAverageType:
    """Resolve an enum or case-insensitive string to a ``MovingAverageType``."""
    if isinstance(kind, MovingAverageType):
        return kind
    try:
        return MovingAverageType(str(kind).upper())
    except ValueError:
        raise InvalidConfigurationError(f"Unknown moving average type: {kind}")


def moving_average(
    kind: MovingAverageType | str,
    period: int,
    name: str | None = None,
) -> StreamingIndicator:
    """Create a moving-average indicator.

    Args:
        kind: Enum or string (SIMPLE, EXPONENTIAL, WILDERS, LINEAR_WEIGHTED).
        period: Window length, must be positive.
        name: Optional indicator name; each variant has its own default.

    Returns:
        A streaming indicator computing the requested average.

    Raises:
        InvalidConfigurationError: If kind is unknown or period is not positive.
    """
    kind = coerce_moving_average_type(kind)

    if kind == MovingAverageType.SIMPLE:
        return SimpleMovingAverage(period, name)

    elif kind == MovingAverageType.EXPONENTIAL:
        return ExponentialMovingAverage(period, name)

    elif kind == MovingAverageType.WILDERS:
        return WildersMovingAverage(period, name)

    elif kind == MovingAverageType.LINEAR_WEIGHTED:
        return LinearWeightedMovingAverage(period, name)

    raise InvalidConfigurationError(f"Unsupported moving average type: {kind}")
