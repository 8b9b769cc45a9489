"""
Results and output structures for PayoffLab.
"""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from dataclasses import dataclass, field
from datetime import date
from typing import Any, NamedTuple

import numpy as np
import pandas as pd

from .kinds import Outcome, Strategy
from .sampling import SamplingPolicy

TRACE_COLUMNS = [
    "period",
    "total_remaining_balance",
    "cumulative_interest",
    "accounts_remaining",
]


class TracePoint(NamedTuple):
    """
    State of the simulation at the end of one period.

    Attributes:
        period: 1-based period number
        total_remaining_balance: Sum of open balances after all payments
        cumulative_interest: Interest accrued from period 1 through this one
        accounts_remaining: Number of accounts still open
    """

    period: int
    total_remaining_balance: float
    cumulative_interest: float
    accounts_remaining: int


class PayoffEvent(NamedTuple):
    """An account leaving the open set."""

    period: int
    account_id: Hashable


@dataclass(frozen=True)
class PayoffReport:
    """
    Outcome of one payoff simulation.

    Created fresh per call and never modified afterwards. ``months_to_payoff``
    is only set for completed runs; aborted and infeasible runs leave it as
    ``None`` so callers can show "exceeds N years" instead of a number.

    Attributes:
        outcome: Completed, Infeasible, or Aborted
        months_to_payoff: Periods needed to close every account (completed only)
        total_interest_paid: Interest accrued over the simulated periods
        total_paid: Cash paid over the simulated periods (minimums plus extras)
        trace: Sampled per-period states, always ending with the final period
        total_minimum: Sum of minimum payments used for the feasibility check
        strategy: Ordering strategy used
        monthly_budget: Budget per period
        periods_simulated: Number of periods actually run
        total_fees_paid: Flat annual fees charged over the simulated periods
        initial_balance: Sum of starting balances
        payoff_order: Accounts in the order they were closed
    """

    outcome: Outcome
    months_to_payoff: int | None
    total_interest_paid: float
    total_paid: float
    trace: tuple[TracePoint, ...]
    total_minimum: float
    strategy: Strategy | None = None
    monthly_budget: float = 0.0
    periods_simulated: int = 0
    total_fees_paid: float = 0.0
    initial_balance: float = 0.0
    payoff_order: tuple[PayoffEvent, ...] = field(default_factory=tuple)

    @property
    def completed(self) -> bool:
        return self.outcome is Outcome.COMPLETED

    @property
    def final_balance(self) -> float:
        """Remaining balance at the last simulated period."""
        if not self.trace:
            return self.initial_balance
        return self.trace[-1].total_remaining_balance

    def to_frame(self, start: date | str | None = None) -> pd.DataFrame:
        """
        Return the sampled trace as a DataFrame.

        Args:
            start: Optional month of period 1. When given, the frame is
                indexed by a monthly ``PeriodIndex``; otherwise by period number.
        """
        df = pd.DataFrame(list(self.trace), columns=TRACE_COLUMNS)
        df = df.astype(
            {
                "period": int,
                "total_remaining_balance": float,
                "cumulative_interest": float,
                "accounts_remaining": int,
            }
        )
        if start is None:
            return df.set_index("period", drop=False)

        base = pd.Period(start, freq="M")
        df.index = pd.PeriodIndex(
            [base + int(p - 1) for p in df["period"]], freq="M", name="month"
        )
        return df

    def summary(self) -> dict[str, Any]:
        """Lightweight summary for API/CLI usage."""
        return {
            "outcome": self.outcome.value,
            "strategy": self.strategy.value if self.strategy else None,
            "months_to_payoff": self.months_to_payoff,
            "total_interest_paid": self.total_interest_paid,
            "total_paid": self.total_paid,
            "total_minimum": self.total_minimum,
            "monthly_budget": self.monthly_budget,
        }

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        data = self.summary()
        data.update(
            {
                "periods_simulated": self.periods_simulated,
                "total_fees_paid": self.total_fees_paid,
                "initial_balance": self.initial_balance,
                "payoff_order": [e._asdict() for e in self.payoff_order],
                "trace": [p._asdict() for p in self.trace],
            }
        )
        return data


def sample_trace(
    trace: Sequence[TracePoint], sampling: SamplingPolicy
) -> tuple[TracePoint, ...]:
    """Apply the sampling policy, keeping the final period unconditionally."""
    if not trace:
        return ()
    mask = sampling.mask([p.period for p in trace])
    return tuple(p for p, keep in zip(trace, mask) if keep)


def build_report(
    trace: Sequence[TracePoint],
    cumulative_interest: float,
    period: int,
    outcome: Outcome,
    *,
    sampling: SamplingPolicy | None = None,
    strategy: Strategy | None = None,
    monthly_budget: float = 0.0,
    total_minimum: float = 0.0,
    total_paid: float = 0.0,
    total_fees_paid: float = 0.0,
    initial_balance: float = 0.0,
    payoff_order: Sequence[PayoffEvent] = (),
) -> PayoffReport:
    """
    Assemble an immutable report from the full per-period trace.

    Args:
        trace: One ``TracePoint`` per simulated period, in order
        cumulative_interest: Interest accrued over the whole run
        period: Number of periods simulated
        outcome: Terminal state of the run
        sampling: Trace sampling policy (default cadence when omitted)

    Returns:
        PayoffReport whose trace is sampled but always ends at ``period``
    """
    sampling = sampling or SamplingPolicy()
    sampled = sample_trace(trace, sampling)

    return PayoffReport(
        outcome=outcome,
        months_to_payoff=period if outcome is Outcome.COMPLETED else None,
        total_interest_paid=float(cumulative_interest),
        total_paid=float(total_paid),
        trace=sampled,
        total_minimum=float(total_minimum),
        strategy=strategy,
        monthly_budget=float(monthly_budget),
        periods_simulated=int(period),
        total_fees_paid=float(total_fees_paid),
        initial_balance=float(initial_balance),
        payoff_order=tuple(payoff_order),
    )


def trace_arrays(trace: Sequence[TracePoint]) -> dict[str, np.ndarray]:
    """Column-wise numpy view of a trace, one array per field."""
    return {
        name: np.array([getattr(p, name) for p in trace])
        for name in TRACE_COLUMNS
    }
