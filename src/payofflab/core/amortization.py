"""
Single-debt payoff helpers.

``months_to_payoff`` is the closed-form annuity term; ``payoff_single_debt``
runs the same case through the simulator so both can be cross-checked.
"""

from __future__ import annotations

import math

from .accounts import Account
from .errors import ValidationError
from .kinds import Outcome, Strategy
from .results import PayoffReport, build_report
from .simulator import SimulationConfig, simulate


def months_to_payoff(balance: float, annual_rate: float, payment: float) -> int:
    """
    Calculate the number of monthly payments needed to repay a balance.

    Uses the closed-form annuity term:
    n = -log(1 - r * B / P) / log(1 + r), with r = annual_rate / 100 / 12

    Args:
        balance: Starting balance
        annual_rate: Annual percentage rate in percent (e.g. 12 for 12%)
        payment: Fixed payment per month

    Returns:
        Number of months, rounded up (the last payment may be partial)

    Raises:
        ValueError: If parameters are invalid or the payment does not cover
            the first month's interest
    """
    if balance < 0:
        raise ValueError("balance must be >= 0")
    if annual_rate < 0:
        raise ValueError("annual_rate must be >= 0")
    if payment <= 0:
        raise ValueError("payment must be > 0")
    if balance == 0:
        return 0

    r = annual_rate / 100 / 12
    if r == 0.0:
        return math.ceil(balance / payment)

    if payment <= balance * r:
        raise ValueError("payment must exceed the first month's interest")

    n = -math.log(1 - r * balance / payment) / math.log(1 + r)
    return int(math.ceil(n))


def payoff_single_debt(
    balance: float,
    annual_rate: float,
    monthly_payment: float,
    extra_payment: float = 0.0,
    *,
    config: SimulationConfig | None = None,
) -> PayoffReport:
    """
    Payoff report for one debt paid with a fixed payment plus optional extra.

    The debt is infeasible when the combined payment does not exceed the
    first month's interest, since the balance could never shrink.

    Args:
        balance: Starting balance
        annual_rate: Annual percentage rate in percent
        monthly_payment: Regular monthly payment
        extra_payment: Additional amount paid every month

    Returns:
        PayoffReport from the simulator (or an Infeasible report)
    """
    problems = []
    if monthly_payment <= 0:
        problems.append(f"monthly_payment must be > 0, got {monthly_payment!r}")
    if extra_payment < 0:
        problems.append(f"extra_payment must be >= 0, got {extra_payment!r}")
    if problems:
        raise ValidationError(problems)

    effective = monthly_payment + extra_payment
    account = Account(
        id="debt",
        balance=balance,
        annual_rate=annual_rate,
        minimum_payment=effective,
    )
    if balance > 0 and effective <= balance * account.periodic_rate:
        config = config or SimulationConfig()
        return build_report(
            [],
            0.0,
            0,
            Outcome.INFEASIBLE,
            sampling=config.sampling,
            strategy=Strategy.AVALANCHE,
            monthly_budget=effective,
            total_minimum=effective,
            initial_balance=balance,
        )
    return simulate([account], Strategy.AVALANCHE, effective, config=config)
