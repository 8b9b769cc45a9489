"""
Input validation and the budget feasibility pre-check.
"""

from __future__ import annotations

import math
import numbers
import warnings
from collections import Counter
from collections.abc import Hashable, Iterable, Sequence

from .accounts import Account
from .errors import PayoffWarning, ValidationError


def total_minimum(accounts: Iterable[Account]) -> float:
    """Sum of the minimum payments across all accounts."""
    return sum(account.minimum_payment for account in accounts)


def is_feasible(accounts: Iterable[Account], monthly_budget: float) -> bool:
    """
    Check whether the monthly budget covers every minimum payment.

    Minimums are fixed inputs, so this runs once before the simulation loop
    and gives the same answer no matter how often it is called.
    """
    return monthly_budget >= total_minimum(accounts)


def _is_number(value) -> bool:
    # numbers.Real covers numpy scalars pulled out of DataFrames
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(float(value))


def validate_inputs(
    accounts: Sequence[Account], monthly_budget: float, max_periods: int
) -> None:
    """
    Validate simulation input, collecting every problem before raising.

    Raises:
        ValidationError: If any account field, the budget, or the period
            bound is unusable
    """
    problems: list[str] = []
    problem_ids: list[Hashable] = []

    if not accounts:
        problems.append("at least one account is required")

    hashable_ids = []
    for account in accounts:
        if isinstance(account.id, Hashable):
            hashable_ids.append(account.id)
        else:
            problems.append(
                f"account ids must be hashable, got {type(account.id).__name__}"
            )

    for account in accounts:
        account_problems = []
        if not _is_number(account.balance) or account.balance < 0:
            account_problems.append(f"balance must be >= 0, got {account.balance!r}")
        if not _is_number(account.annual_rate) or account.annual_rate < 0:
            account_problems.append(
                f"annual_rate must be >= 0, got {account.annual_rate!r}"
            )
        if not _is_number(account.minimum_payment) or account.minimum_payment < 0:
            account_problems.append(
                f"minimum_payment must be >= 0, got {account.minimum_payment!r}"
            )
        if not _is_number(account.annual_fee) or account.annual_fee < 0:
            account_problems.append(
                f"annual_fee must be >= 0, got {account.annual_fee!r}"
            )
        if account_problems:
            problems.extend(f"{account.id}: {p}" for p in account_problems)
            if isinstance(account.id, Hashable):
                problem_ids.append(account.id)

    # Ids are opaque, so sort them by their text form
    duplicates = sorted(
        (i for i, count in Counter(hashable_ids).items() if count > 1), key=str
    )
    if duplicates:
        problems.append(f"duplicate account ids: {', '.join(map(str, duplicates))}")
        problem_ids.extend(d for d in duplicates if d not in problem_ids)

    if not _is_number(monthly_budget) or monthly_budget <= 0:
        problems.append(f"monthly_budget must be > 0, got {monthly_budget!r}")

    if isinstance(max_periods, bool) or not isinstance(max_periods, numbers.Integral):
        problems.append(f"max_periods must be an integer, got {max_periods!r}")
    elif max_periods <= 0:
        problems.append(f"max_periods must be > 0, got {max_periods!r}")

    if problems:
        raise ValidationError(problems, problem_ids)


def warn_negative_amortization(accounts: Iterable[Account]) -> None:
    """Warn about accounts whose minimum does not cover first-period interest."""
    for account in accounts:
        if account.balance <= 0:
            continue
        first_interest = account.balance * account.periodic_rate + account.monthly_fee
        if account.minimum_payment < first_interest:
            warnings.warn(
                f"[{account.id}] minimum_payment {account.minimum_payment:.2f} does not "
                f"cover first-period interest {first_interest:.2f}; the balance grows "
                "unless the account receives surplus budget.",
                PayoffWarning,
                stacklevel=3,
            )
