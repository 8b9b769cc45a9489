"""
PayoffLab strategy kinds and run outcomes.
"""

from __future__ import annotations

from enum import Enum


class Strategy(str, Enum):
    """Repayment ordering strategy used to pick the target for surplus budget."""

    AVALANCHE = "avalanche"  # highest annual rate first
    SNOWBALL = "snowball"  # lowest balance first

    @classmethod
    def parse(cls, value: Strategy | str) -> Strategy:
        """Coerce a strategy name (case-insensitive) into the enum."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            known = ", ".join(s.value for s in cls)
            raise ValueError(
                f"Unknown strategy {value!r}; expected one of: {known}"
            ) from None

    @classmethod
    def all_kinds(cls) -> list[str]:
        """Enumerate all known strategy names (for validation and docs)."""
        return [s.value for s in cls]


class Outcome(str, Enum):
    """Terminal state of a payoff simulation."""

    COMPLETED = "completed"
    INFEASIBLE = "infeasible"  # budget below the sum of minimum payments
    ABORTED = "aborted"  # max_periods exceeded before every account closed
