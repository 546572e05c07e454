"""Core data types (dataclasses) used throughout quantstream."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


# ─── Input ─────────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class Sample:
    """Single timestamped observation fed to an indicator."""

    timestamp: float
    value: float


# ─── Output ────────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class IndicatorReading:
    """Value of an indicator together with its readiness flag.

    Unpacks like a tuple: ``value, is_ready = sma.reading``.
    """

    value: float
    is_ready: bool

    def __iter__(self) -> Iterator:
        yield self.value
        yield self.is_ready


@dataclass(slots=True)
class BollingerSnapshot:
    """Complete Bollinger Bands state after one sample."""

    timestamp: float | None
    middle: float
    upper: float
    lower: float
    standard_deviation: float
    z_score: float
    ready: bool

