"""
Bollinger Bands — moving average ± k standard deviations, emitting a Z-Score.

The bands are built purely by composition:

    upper = middle + std * k
    lower = middle - std * k

and the indicator's own value is the Z-Score of the latest sample,
``(value - middle) / std``.
"""

from __future__ import annotations

import logging

from quantstream.config import Settings, settings
from quantstream.indicators.base import StreamingIndicator, validate_period
from quantstream.indicators.errors import IndicatorDivisionByZero
from quantstream.indicators.factory import coerce_moving_average_type, moving_average
from quantstream.indicators.streaming import ConstantIndicator, StandardDeviation
from quantstream.models.enums import MovingAverageType
from quantstream.models.types import BollingerSnapshot, Sample

logger = logging.getLogger(__name__)


class BollingerBands(StreamingIndicator):
    """Bollinger Bands with a selectable middle-band moving average.

    Args:
        ma_period: Period of the middle-band moving average.
        std_period: Period of the standard deviation. Defaults to ``ma_period``.
        k: Number of standard deviations between the middle and outer bands.
        moving_average_type: Variant used for the middle band.
        name: Indicator name. Defaults to ``BOL(ma,std,k)``, or ``BOL(period,k)``
            when a single period is given.

    Sub-indicators are exposed as ``standard_deviation``, ``middle_band``,
    ``upper_band`` and ``lower_band``; each has a ``reading`` with its value
    and readiness.
    """

    __slots__ = (
        "k",
        "moving_average_type",
        "standard_deviation",
        "middle_band",
        "upper_band",
        "lower_band",
    )

    def __init__(
        self,
        ma_period: int,
        std_period: int | None = None,
        k: float = 2.0,
        moving_average_type: MovingAverageType | str = MovingAverageType.SIMPLE,
        name: str | None = None,
    ) -> None:
        validate_period(ma_period, "ma_period")
        moving_average_type = coerce_moving_average_type(moving_average_type)
        if name is None:
            if std_period is None:
                name = f"BOL({ma_period},{k})"
            else:
                name = f"BOL({ma_period},{std_period},{k})"
        if std_period is None:
            std_period = ma_period
        validate_period(std_period, "std_period")

        super().__init__(name)
        self.k = k

        self.standard_deviation = StandardDeviation(std_period, f"{name}_StandardDeviation")
        self.moving_average_type = moving_average_type
        self.middle_band = moving_average(moving_average_type, ma_period, f"{name}_MiddleBand")

        k_constant = ConstantIndicator(k, str(k))
        self.lower_band = self.middle_band.minus(
            self.standard_deviation.times(k_constant), f"{name}_LowerBand"
        )
        self.upper_band = self.middle_band.plus(
            self.standard_deviation.times(k_constant), f"{name}_UpperBand"
        )

        logger.info(
            "%s created (ma=%s/%d, std=%d, k=%s)",
            name, self.moving_average_type.value, ma_period, std_period, k,
        )

    @classmethod
    def from_settings(cls, config: Settings | None = None) -> BollingerBands:
        """Build an instance from the configured Bollinger defaults."""
        config = config or settings
        return cls(
            config.bollinger_period,
            config.bollinger_std_period,
            config.bollinger_k,
            config.moving_average_type,
        )

    def _compute_next_value(self, sample: Sample) -> float:
        # Bands read middle/std synchronously, so those advance first
        self.standard_deviation.update(sample)
        self.middle_band.update(sample)
        self.upper_band.update(sample)
        self.lower_band.update(sample)
        return self._compute_z_score(sample)

    def _compute_z_score(self, sample: Sample) -> float:
        """Z-Score = (value - moving average) / standard deviation."""
        std = self.standard_deviation.value
        if std == 0:
            if self.ready:
                raise IndicatorDivisionByZero(
                    f"{self.name}: standard deviation is zero at t={sample.timestamp}"
                )
            return self._value
        return (sample.value - self.middle_band.value) / std

    @property
    def ready(self) -> bool:
        return self.middle_band.ready and self.upper_band.ready and self.lower_band.ready

    def snapshot(self) -> BollingerSnapshot:
        """Return the full band state after the latest sample.

        Raises ``IndicatorDivisionByZero`` if the latest Z-Score failed.
        """
        if self._failure is not None:
            raise self._failure
        return BollingerSnapshot(
            timestamp=self.timestamp,
            middle=self.middle_band.value,
            upper=self.upper_band.value,
            lower=self.lower_band.value,
            standard_deviation=self.standard_deviation.value,
            z_score=self._value,
            ready=self.ready,
        )
