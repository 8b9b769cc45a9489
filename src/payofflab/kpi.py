"""
KPI helpers for comparing payoff reports.

These functions only read ``PayoffReport`` objects; they never re-run a
simulation.
"""

from __future__ import annotations

from datetime import date

import pandas as pd

from .core.results import PayoffReport, trace_arrays


def interest_savings(baseline: PayoffReport, alternative: PayoffReport) -> float:
    """
    Interest saved by choosing ``alternative`` over ``baseline``.

    Positive when the alternative pays less interest. Only meaningful when
    both runs completed.
    """
    return baseline.total_interest_paid - alternative.total_interest_paid


def months_saved(baseline: PayoffReport, alternative: PayoffReport) -> int | None:
    """Months saved by ``alternative``; ``None`` unless both runs completed."""
    if not (baseline.completed and alternative.completed):
        return None
    return baseline.months_to_payoff - alternative.months_to_payoff


def payoff_duration(months: int) -> tuple[int, int]:
    """Split a month count into (years, months)."""
    if months < 0:
        raise ValueError("months must be >= 0")
    return divmod(months, 12)


def debt_free_month(report: PayoffReport, start: date | str) -> pd.Period | None:
    """
    Calendar month in which the last account closes.

    Args:
        report: Completed payoff report
        start: Month of period 1

    Returns:
        Monthly ``pd.Period``, or ``None`` when the run did not complete
    """
    if not report.completed:
        return None
    if report.months_to_payoff == 0:
        return None
    return pd.Period(start, freq="M") + (report.months_to_payoff - 1)


def principal_paid_cum(report: PayoffReport) -> pd.Series:
    """
    Cumulative principal paid at each sampled period.

    Principal paid = initial balance - remaining balance. Indexed by period.
    """
    arrays = trace_arrays(report.trace)
    principal = report.initial_balance - arrays["total_remaining_balance"]
    return pd.Series(
        principal, index=arrays["period"], name="principal_paid_cum", dtype=float
    )
