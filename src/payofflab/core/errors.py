"""
Error classes for PayoffLab.

This module defines the exceptions raised for malformed input. Ordinary domain
outcomes (a budget below the minimum payments, a plan that does not converge)
are not errors: they are reported through ``PayoffReport.outcome``.
"""

from __future__ import annotations

from collections.abc import Hashable


class ConfigError(Exception):
    """
    Configuration error while preparing a payoff simulation.

    Raised when accounts, budgets or simulation options cannot be used as given.

    **Common Causes:**
    - Negative balances, rates or minimum payments
    - An empty account list or duplicate account ids
    - A non-positive monthly budget or period bound
    - Unknown strategy names in a plan file

    **Example Usage:**
        ```python
        from payofflab import simulate
        from payofflab.core.errors import ConfigError

        try:
            simulate([], "avalanche", monthly_budget=300)
        except ConfigError as e:
            print(f"Configuration error: {e}")
        ```
    """

    pass


class ValidationError(ConfigError):
    """
    Raised when simulation input fails validation before the loop starts.

    Attributes:
        problems: Human-readable description of every failed check
        problem_ids: Account ids that caused issues (may be empty for
            run-level problems such as the budget)
    """

    def __init__(self, problems: list[str], problem_ids: list[Hashable] | None = None):
        self.problems = list(problems)
        self.problem_ids = problem_ids or []
        super().__init__(self._fmt())

    def _fmt(self) -> str:
        """Format the error message with additional context."""
        msg = "; ".join(self.problems) if self.problems else "invalid input"
        suffix = ""
        if self.problem_ids:
            preview = ", ".join(map(str, self.problem_ids[:10]))
            more = (
                f" (+{len(self.problem_ids)-10} more)"
                if len(self.problem_ids) > 10
                else ""
            )
            suffix = f" | problem_ids: [{preview}]{more}"
        return f"{msg}{suffix}"


class PlanError(ConfigError):
    """Raised when a payoff plan file cannot be parsed or validated."""


class PayoffWarning(UserWarning):
    """Warning for inputs that are valid but likely not what the caller meant."""
