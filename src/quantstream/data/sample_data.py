"""
Sample series generator for testing.

Produces deterministic random-walk samples with configurable trend and
volatility — no external data needed.
"""

from __future__ import annotations

import math
import random
from typing import Iterable

from quantstream.models.types import Sample


def generate_samples(
    n: int = 200,
    start_value: float = 100.0,
    volatility: float = 0.01,
    trend: float = 0.0,
    seed: int | None = 42,
) -> list[Sample]:
    """Generate a sequence of log-normal random-walk samples.

    Args:
        n: Number of samples to generate.
        start_value: Value before the first step.
        volatility: Per-step volatility (std dev of log returns).
        trend: Drift per step (+ve = uptrend, -ve = downtrend).
        seed: Random seed for reproducibility.

    Returns:
        List of Sample objects with timestamps 0, 1, 2, ...
    """
    if seed is not None:
        random.seed(seed)

    samples: list[Sample] = []
    value = start_value

    for i in range(n):
        value *= math.exp(trend + volatility * random.gauss(0, 1))
        samples.append(Sample(timestamp=float(i), value=round(value, 4)))

    return samples


def samples_from_values(
    values: Iterable[float], start: float = 0.0, step: float = 1.0
) -> list[Sample]:
    """Wrap plain values as evenly spaced samples."""
    return [Sample(timestamp=start + i * step, value=v) for i, v in enumerate(values)]
