"""
PayoffLab - Multi-Account Debt Payoff Simulation

PayoffLab answers one question: given a set of revolving balances, their
interest rates and a monthly budget, how long until the debt is gone and how
much interest does it cost along the way?

Key Features:
- **Strategy Ordering**: 'avalanche' (highest rate first) or 'snowball'
  (lowest balance first) decides which account receives surplus budget
- **Value Semantics**: caller accounts are copied, never mutated
- **Explicit Outcomes**: infeasible budgets and non-converging plans are
  reported, not raised
- **Bounded**: every run stops after ``max_periods`` simulated months
- **Tabular Output**: reports convert to pandas DataFrames

Quick Start:
    ```python
    from payofflab import Account, simulate

    accounts = [
        Account(id="card_1", balance=5000, annual_rate=18.99, minimum_payment=100),
        Account(id="card_2", balance=3000, annual_rate=22.99, minimum_payment=60),
    ]
    report = simulate(accounts, "avalanche", monthly_budget=300)
    report.months_to_payoff, report.total_interest_paid
    report.to_frame(start="2026-01")
    ```

Available Strategies:
    - 'avalanche': highest annual rate first (ties: larger balance)
    - 'snowball': lowest balance first (ties: smaller minimum payment)
"""

# Version information
__version__ = "0.1.0"
__author__ = "PayoffLab Team"
__description__ = "Multi-account debt payoff simulation engine"

# Registers default ordering strategies
import payofflab.strategies

from .core import (
    Account,
    ConfigError,
    Currency,
    IOrderingStrategy,
    Outcome,
    PayoffEvent,
    PayoffPlan,
    PayoffReport,
    PayoffWarning,
    PlanError,
    SamplingPolicy,
    SimulationConfig,
    Strategy,
    TracePoint,
    ValidationError,
    apply_period,
    build_report,
    compare_strategies,
    format_amount,
    is_feasible,
    load_plan,
    months_to_payoff,
    order_accounts,
    payoff_single_debt,
    simulate,
    total_minimum,
)
from .kpi import (
    debt_free_month,
    interest_savings,
    months_saved,
    payoff_duration,
    principal_paid_cum,
)

__all__ = [
    # Core classes
    "Account",
    "Strategy",
    "Outcome",
    "SimulationConfig",
    "SamplingPolicy",
    "PayoffReport",
    "PayoffEvent",
    "TracePoint",
    "PayoffPlan",
    "IOrderingStrategy",
    "Currency",
    # Errors
    "ConfigError",
    "ValidationError",
    "PlanError",
    "PayoffWarning",
    # Operations
    "apply_period",
    "is_feasible",
    "total_minimum",
    "order_accounts",
    "simulate",
    "compare_strategies",
    "build_report",
    "months_to_payoff",
    "payoff_single_debt",
    "load_plan",
    "format_amount",
    # KPI utilities
    "interest_savings",
    "months_saved",
    "payoff_duration",
    "debt_free_month",
    "principal_paid_cum",
    # Version info
    "__version__",
    "__author__",
    "__description__",
]
