"""
Core module for PayoffLab.

This module contains the account model, the per-period ledger transition,
the simulator and its report structures.
"""

from .accounts import Account, coerce_accounts, total_balance
from .amortization import months_to_payoff, payoff_single_debt
from .currency import Currency, format_amount, get_currency
from .errors import ConfigError, PayoffWarning, PlanError, ValidationError
from .interfaces import IOrderingStrategy
from .kinds import Outcome, Strategy
from .ledger import apply_extra_payment, apply_period
from .ordering import OrderingRegistry, order_accounts
from .plan_loader import PayoffPlan, load_plan
from .results import PayoffEvent, PayoffReport, TracePoint, build_report, sample_trace
from .sampling import SamplingPolicy
from .simulator import (
    DEFAULT_EPSILON,
    DEFAULT_MAX_PERIODS,
    SimulationConfig,
    compare_strategies,
    simulate,
)
from .validation import is_feasible, total_minimum, validate_inputs

__all__ = [
    # Errors
    "ConfigError",
    "ValidationError",
    "PlanError",
    "PayoffWarning",
    # Accounts and ledger
    "Account",
    "coerce_accounts",
    "total_balance",
    "apply_period",
    "apply_extra_payment",
    # Strategies
    "Strategy",
    "IOrderingStrategy",
    "OrderingRegistry",
    "order_accounts",
    # Simulation
    "Outcome",
    "SimulationConfig",
    "DEFAULT_MAX_PERIODS",
    "DEFAULT_EPSILON",
    "simulate",
    "compare_strategies",
    "is_feasible",
    "total_minimum",
    "validate_inputs",
    # Results
    "PayoffReport",
    "PayoffEvent",
    "TracePoint",
    "SamplingPolicy",
    "build_report",
    "sample_trace",
    # Single debt
    "months_to_payoff",
    "payoff_single_debt",
    # Plans and currency
    "PayoffPlan",
    "load_plan",
    "Currency",
    "get_currency",
    "format_amount",
]
