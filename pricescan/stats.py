"""Summary statistics over a collected price list."""

from __future__ import annotations

import statistics
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class PriceStats:
    mean: float
    stddev: float

    def __str__(self) -> str:
        return f"mean = {self.mean:.0f}, stddev = {self.stddev:.0f}"


def calculate_price_stats(prices: Sequence[int]) -> PriceStats:
    """Return the mean and sample standard deviation (n - 1) of *prices*.

    A single price has a standard deviation of 0.

    Raises:
        ValueError: If *prices* is empty.
    """
    if not prices:
        raise ValueError("cannot compute statistics of an empty price list")

    mean = float(statistics.fmean(prices))
    stddev = statistics.stdev(prices, xbar=mean) if len(prices) > 1 else 0.0
    return PriceStats(mean=mean, stddev=float(stddev))
