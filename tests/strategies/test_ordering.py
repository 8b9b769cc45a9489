"""
Tests for avalanche/snowball ordering and registry alignment.
"""

import pytest

from payofflab import Account, ConfigError, Strategy
from payofflab.core.ordering import OrderingRegistry, missing_strategies, order_accounts
from payofflab.strategies import OrderingAvalanche, OrderingSnowball, register_defaults


def _acct(id, balance, rate, minimum=10.0):
    return Account(id=id, balance=balance, annual_rate=rate, minimum_payment=minimum)


def test_every_strategy_is_registered():
    assert missing_strategies() == []
    assert set(OrderingRegistry) == set(Strategy)
    assert isinstance(OrderingRegistry[Strategy.AVALANCHE], OrderingAvalanche)
    assert isinstance(OrderingRegistry[Strategy.SNOWBALL], OrderingSnowball)


def test_register_defaults_is_repeatable():
    register_defaults()
    register_defaults()
    assert len(OrderingRegistry) == len(Strategy)


class TestAvalanche:
    def test_highest_rate_first(self):
        accounts = [_acct("low", 9000, 9.9), _acct("high", 100, 29.9), _acct("mid", 500, 19.9)]

        assert order_accounts(accounts, Strategy.AVALANCHE) == [1, 2, 0]

    def test_rate_tie_prefers_larger_balance(self):
        accounts = [_acct("small", 100, 20.0), _acct("large", 900, 20.0)]

        assert order_accounts(accounts, Strategy.AVALANCHE)[0] == 1

    def test_full_tie_keeps_input_position(self):
        accounts = [_acct("a", 100, 20.0), _acct("b", 100, 20.0)]

        assert order_accounts(accounts, Strategy.AVALANCHE) == [0, 1]


class TestSnowball:
    def test_lowest_balance_first(self):
        accounts = [_acct("big", 9000, 29.9), _acct("small", 100, 9.9), _acct("mid", 500, 19.9)]

        assert order_accounts(accounts, Strategy.SNOWBALL) == [1, 2, 0]

    def test_balance_tie_prefers_smaller_minimum(self):
        accounts = [_acct("a", 100, 20.0, minimum=50.0), _acct("b", 100, 20.0, minimum=25.0)]

        assert order_accounts(accounts, Strategy.SNOWBALL)[0] == 1

    def test_positions_override_tie_break(self):
        accounts = [_acct("a", 100, 20.0), _acct("b", 100, 20.0)]

        assert order_accounts(accounts, Strategy.SNOWBALL, positions=[5, 2]) == [1, 0]


def test_unregistered_strategy_raises(monkeypatch):
    monkeypatch.delitem(OrderingRegistry, Strategy.SNOWBALL)

    with pytest.raises(ConfigError, match="No ordering strategy registered"):
        order_accounts([_acct("a", 1, 1)], Strategy.SNOWBALL)


@pytest.mark.parametrize("raw", ["avalanche", "SNOWBALL", " Avalanche "])
def test_strategy_parse_is_case_insensitive(raw):
    assert Strategy.parse(raw).value == raw.strip().lower()


def test_strategy_parse_rejects_unknown():
    with pytest.raises(ValueError, match="expected one of: avalanche, snowball"):
        Strategy.parse("hybrid")
