"""Tests for the per-period account transition."""

import pytest

from payofflab.core.accounts import Account
from payofflab.core.ledger import apply_extra_payment, apply_period


def test_interest_accrues_before_minimum_payment():
    account = Account(id="a", balance=1000.0, annual_rate=12.0, minimum_payment=100.0)

    interest, after = apply_period(account, account.periodic_rate)

    assert interest == pytest.approx(10.0)
    assert after.balance == pytest.approx(910.0)


def test_minimum_never_overshoots_near_zero_balance():
    """A minimum larger than what is owed closes the account at exactly zero."""
    account = Account(id="a", balance=50.0, annual_rate=12.0, minimum_payment=100.0)

    interest, after = apply_period(account, account.periodic_rate)

    assert interest == pytest.approx(0.5)
    assert after.balance == pytest.approx(0.0, abs=1e-12)
    assert after.balance >= 0.0


def test_balance_grows_when_minimum_below_interest():
    account = Account(id="a", balance=1000.0, annual_rate=24.0, minimum_payment=10.0)

    interest, after = apply_period(account, account.periodic_rate)

    assert interest == pytest.approx(20.0)
    assert after.balance == pytest.approx(1010.0)


def test_flat_annual_fee_is_charged_monthly():
    account = Account(
        id="a", balance=1000.0, annual_rate=0.0, minimum_payment=100.0, annual_fee=120.0
    )

    interest, after = apply_period(account, account.periodic_rate)

    assert interest == 0.0
    assert after.balance == pytest.approx(910.0)


def test_apply_period_is_pure():
    account = Account(id="a", balance=1000.0, annual_rate=12.0, minimum_payment=100.0)

    first = apply_period(account, account.periodic_rate)
    second = apply_period(account, account.periodic_rate)

    assert account.balance == 1000.0
    assert first == second
    assert first[1] is not account


def test_extra_payment_is_capped_at_balance():
    account = Account(id="a", balance=40.0, annual_rate=12.0, minimum_payment=10.0)

    applied, after = apply_extra_payment(account, 100.0)

    assert applied == pytest.approx(40.0)
    assert after.balance == pytest.approx(0.0)


def test_periodic_rate_is_monthly_share_of_apr():
    account = Account(id="a", balance=1.0, annual_rate=18.0, minimum_payment=0.0)
    assert account.periodic_rate == pytest.approx(0.015)
