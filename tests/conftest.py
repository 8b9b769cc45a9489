"""Shared fixtures for PayoffLab tests."""

import pytest

from payofflab import Account


@pytest.fixture
def two_cards():
    """The two-card example: a 18.99% card and a smaller 22.99% card."""
    return [
        Account(id="card_1", balance=5000.0, annual_rate=18.99, minimum_payment=100.0),
        Account(id="card_2", balance=3000.0, annual_rate=22.99, minimum_payment=60.0),
    ]


@pytest.fixture
def diverging_cards():
    """Cards where avalanche and snowball pick different targets."""
    return [
        Account(id="low_rate", balance=5000.0, annual_rate=18.99, minimum_payment=100.0),
        Account(id="high_rate", balance=8000.0, annual_rate=22.99, minimum_payment=160.0),
    ]
