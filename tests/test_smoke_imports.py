"""
Smoke tests to verify basic imports and functionality.
"""

import pytest


def test_import_payofflab():
    """Test that we can import the main package."""
    import payofflab

    assert hasattr(payofflab, "__version__")
    assert payofflab.__version__ == "0.1.0"


def test_import_core_components():
    """Test that core components can be imported."""
    from payofflab import (
        Account,
        PayoffReport,
        SimulationConfig,
        Strategy,
        compare_strategies,
        simulate,
    )

    assert Account is not None
    assert PayoffReport is not None
    assert SimulationConfig is not None
    assert Strategy is not None
    assert callable(simulate)
    assert callable(compare_strategies)


def test_import_strategies():
    """Test that strategies can be imported and are registered."""
    from payofflab import strategies
    from payofflab.core.ordering import missing_strategies

    assert strategies is not None
    assert missing_strategies() == []


def test_basic_simulation():
    """Test that we can run a basic simulation from plain dicts."""
    from payofflab import Outcome, simulate

    report = simulate(
        [{"id": "card", "balance": 500.0, "annual_rate": 0.0, "minimum_payment": 100.0}],
        "snowball",
        monthly_budget=100.0,
    )

    assert report.outcome is Outcome.COMPLETED
    assert report.months_to_payoff == 5
    assert report.total_interest_paid == 0.0


def test_malformed_account_rejected():
    """Test that accounts missing fields fail with a clear message."""
    from payofflab import ConfigError, simulate

    with pytest.raises(ConfigError, match="Missing required field"):
        simulate([{"id": "card", "balance": 500.0}], "snowball", 100.0)
