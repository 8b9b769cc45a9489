"""
Trace sampling policy for payoff reports.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class SamplingPolicy:
    """
    Decide which simulated periods appear in a report's trace.

    Periods up to ``dense_until`` are kept every ``dense_every`` periods,
    later ones every ``sparse_every`` periods. The final period of a run is
    always kept by the report builder regardless of this policy.

    Attributes:
        dense_every: Cadence for the early part of the run
        dense_until: Last period (inclusive) sampled at the dense cadence
        sparse_every: Cadence after ``dense_until``
    """

    dense_every: int = 3
    dense_until: int = 24
    sparse_every: int = 6

    def __post_init__(self):
        if self.dense_every <= 0 or self.sparse_every <= 0:
            raise ValueError("sampling cadences must be > 0")
        if self.dense_until < 0:
            raise ValueError("dense_until must be >= 0")

    def includes(self, period: int) -> bool:
        """Whether ``period`` (1-based) is sampled."""
        if period <= 0:
            return False
        if period <= self.dense_until:
            return period % self.dense_every == 0
        return period % self.sparse_every == 0

    def mask(self, periods: Sequence[int] | np.ndarray) -> np.ndarray:
        """Boolean mask over ``periods``; the last entry is always selected."""
        p = np.asarray(periods, dtype=int)
        selected = np.where(
            p <= self.dense_until,
            p % self.dense_every == 0,
            p % self.sparse_every == 0,
        ) & (p > 0)
        if len(p):
            selected[-1] = True
        return selected

    def to_dict(self) -> dict[str, int]:
        return {
            "dense_every": self.dense_every,
            "dense_until": self.dense_until,
            "sparse_every": self.sparse_every,
        }
