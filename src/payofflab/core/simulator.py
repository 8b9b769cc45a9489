"""
Payoff simulator: runs a set of accounts across monthly periods.

State machine:
    Running -> Running | Completed | Aborted(max periods exceeded)

Infeasible budgets are detected before the loop starts and never iterate.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from .accounts import Account, coerce_accounts, total_balance
from .errors import ValidationError
from .kinds import Outcome, Strategy
from .ledger import apply_extra_payment, apply_period
from .ordering import order_accounts
from .results import PayoffEvent, PayoffReport, TracePoint, build_report
from .sampling import SamplingPolicy
from .validation import (
    is_feasible,
    total_minimum,
    validate_inputs,
    warn_negative_amortization,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_PERIODS = 600  # 50 years
DEFAULT_EPSILON = 0.01


@dataclass
class SimulationConfig:
    """
    Configuration options for payoff simulation.

    Attributes:
        max_periods: Safety bound on simulated periods
        epsilon: Balances at or below this amount count as paid off
        cascade_surplus: When True, budget left after closing the target
            account flows to the next account in strategy order within the
            same period. When False it is left unspent for that period.
        sampling: Trace sampling policy for the report
    """

    max_periods: int = DEFAULT_MAX_PERIODS
    epsilon: float = DEFAULT_EPSILON
    cascade_surplus: bool = False
    sampling: SamplingPolicy = field(default_factory=SamplingPolicy)

    def __post_init__(self):
        if self.epsilon < 0:
            raise ValidationError([f"epsilon must be >= 0, got {self.epsilon!r}"])

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> SimulationConfig:
        """Build a config from a plan's ``simulation`` section."""
        data = dict(data or {})
        sampling = data.pop("sampling", None)
        unknown = sorted(set(data) - {"max_periods", "epsilon", "cascade_surplus"})
        if unknown:
            raise ValidationError(
                [f"unknown simulation option(s): {', '.join(unknown)}"]
            )
        config = cls(**data)
        if sampling is not None:
            config.sampling = SamplingPolicy(**sampling)
        return config


def _parse_strategy(strategy: Strategy | str) -> Strategy:
    try:
        return Strategy.parse(strategy)
    except ValueError as exc:
        raise ValidationError([str(exc)]) from exc


def simulate(
    accounts: Iterable[Account | Mapping[str, Any]],
    strategy: Strategy | str,
    monthly_budget: float,
    max_periods: int | None = None,
    *,
    config: SimulationConfig | None = None,
) -> PayoffReport:
    """
    Simulate paying off a set of accounts with a fixed monthly budget.

    Each period every open account accrues interest and receives its minimum
    payment; whatever is left of the budget goes to the first account in
    strategy order. Accounts at or below ``config.epsilon`` close for good.

    Args:
        accounts: Accounts or mappings with id, balance, annual_rate, minimum_payment
        strategy: ``Strategy`` member or its name ("avalanche" / "snowball")
        monthly_budget: Total cash available per period
        max_periods: Override of ``config.max_periods``
        config: Simulation options (defaults to ``SimulationConfig()``)

    Returns:
        PayoffReport with outcome Completed, Infeasible, or Aborted

    Raises:
        ValidationError: If the input is malformed (negative amounts, empty or
            duplicate accounts, non-positive budget or period bound)

    Example:
        ```python
        report = simulate(
            [
                {"id": "visa", "balance": 5000, "annual_rate": 18.99, "minimum_payment": 100},
                {"id": "store", "balance": 3000, "annual_rate": 22.99, "minimum_payment": 60},
            ],
            "avalanche",
            monthly_budget=300,
        )
        report.months_to_payoff, report.total_interest_paid
        ```
    """
    config = config or SimulationConfig()
    strategy = _parse_strategy(strategy)
    bound = config.max_periods if max_periods is None else max_periods

    # Private working copy; caller objects are never touched.
    working = coerce_accounts(accounts)
    validate_inputs(working, monthly_budget, bound)

    floor = total_minimum(working)
    initial = total_balance(working)
    report_kwargs = {
        "sampling": config.sampling,
        "strategy": strategy,
        "monthly_budget": monthly_budget,
        "total_minimum": floor,
        "initial_balance": initial,
    }

    logger.debug(
        "Simulating %d accounts (strategy=%s, budget=%.2f, bound=%d)",
        len(working),
        strategy.value,
        monthly_budget,
        bound,
    )

    if not is_feasible(working, monthly_budget):
        logger.info(
            "Budget %.2f is below total minimum payments %.2f; plan is infeasible",
            monthly_budget,
            floor,
        )
        return build_report([], 0.0, 0, Outcome.INFEASIBLE, **report_kwargs)

    warn_negative_amortization(working)

    # (input position, account) pairs; position is the last tie-break key
    open_accounts = [(pos, a) for pos, a in enumerate(working) if a.balance > 0]

    period = 0
    cumulative_interest = 0.0
    cumulative_fees = 0.0
    total_paid = 0.0
    trace: list[TracePoint] = []
    payoff_order: list[PayoffEvent] = []
    outcome = Outcome.COMPLETED

    while open_accounts:
        period += 1
        if period > bound:
            period = bound
            outcome = Outcome.ABORTED
            break

        # 1. Interest, fees and minimum payments on every open account
        budget_remaining = monthly_budget
        for i, (pos, account) in enumerate(open_accounts):
            interest, after = apply_period(account, account.periodic_rate)
            paid = account.balance + interest + account.monthly_fee - after.balance
            cumulative_interest += interest
            cumulative_fees += account.monthly_fee
            total_paid += paid
            budget_remaining -= paid
            open_accounts[i] = (pos, after)

        # 2. Surplus to the strategy target (and onwards when cascading)
        if budget_remaining > 0:
            ranked = order_accounts(
                [a for _, a in open_accounts],
                strategy,
                [pos for pos, _ in open_accounts],
            )
            targets = ranked if config.cascade_surplus else ranked[:1]
            for i in targets:
                if budget_remaining <= 0:
                    break
                pos, account = open_accounts[i]
                applied, account = apply_extra_payment(account, budget_remaining)
                open_accounts[i] = (pos, account)
                budget_remaining -= applied
                total_paid += applied

        # 3. Close paid-off accounts
        still_open = []
        for pos, account in open_accounts:
            if account.balance <= config.epsilon:
                payoff_order.append(PayoffEvent(period, account.id))
                logger.debug("Account %s paid off in period %d", account.id, period)
            else:
                still_open.append((pos, account))
        open_accounts = still_open

        trace.append(
            TracePoint(
                period=period,
                total_remaining_balance=float(sum(a.balance for _, a in open_accounts)),
                cumulative_interest=cumulative_interest,
                accounts_remaining=len(open_accounts),
            )
        )

    if outcome is Outcome.ABORTED:
        logger.info(
            "Payoff did not converge within %d periods (%d accounts still open)",
            bound,
            len(open_accounts),
        )
    else:
        logger.info(
            "All accounts paid off in %d periods; interest %.2f", period, cumulative_interest
        )

    return build_report(
        trace,
        cumulative_interest,
        period,
        outcome,
        total_paid=total_paid,
        total_fees_paid=cumulative_fees,
        payoff_order=payoff_order,
        **report_kwargs,
    )


def compare_strategies(
    accounts: Iterable[Account | Mapping[str, Any]],
    monthly_budget: float,
    max_periods: int | None = None,
    *,
    config: SimulationConfig | None = None,
) -> dict[Strategy, PayoffReport]:
    """Run every strategy on the same accounts and budget."""
    working = coerce_accounts(accounts)
    return {
        strategy: simulate(
            working, strategy, monthly_budget, max_periods, config=config
        )
        for strategy in Strategy
    }
