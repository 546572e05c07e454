"""Indicators package."""

from quantstream.indicators.base import StreamingIndicator  # noqa: F401
from quantstream.indicators.bollinger import BollingerBands  # noqa: F401
from quantstream.indicators.composite import ArithmeticCombinator  # noqa: F401
from quantstream.indicators.errors import (  # noqa: F401
    IndicatorDivisionByZero,
    IndicatorError,
    InvalidConfigurationError,
    NotReadyError,
)
from quantstream.indicators.factory import moving_average  # noqa: F401
from quantstream.indicators.streaming import (  # noqa: F401
    ConstantIndicator,
    ExponentialMovingAverage,
    LinearWeightedMovingAverage,
    SimpleMovingAverage,
    StandardDeviation,
    WildersMovingAverage,
)
