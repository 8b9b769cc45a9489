"""Tests for loading payoff plans from YAML/JSON/dicts."""

import json
from datetime import date
from textwrap import dedent

import pytest

from payofflab import PlanError, Strategy, load_plan, simulate


@pytest.fixture
def yaml_plan(tmp_path):
    path = tmp_path / "plan.yaml"
    path.write_text(
        dedent(
            """
            strategy: snowball
            monthly_budget: 300
            currency: eur
            start: 2026-01
            defaults:
              annual_fee: 12
            accounts:
              - id: card_1
                balance: 5000
                apr: 18.99
                min_payment: 100
              - id: card_2
                balance: 3000
                annual_rate: 22.99
                minimum_payment: 60
                annual_fee: 0
            simulation:
              max_periods: 360
              cascade_surplus: true
              sampling:
                dense_every: 1
                dense_until: 12
                sparse_every: 12
            """
        ),
        encoding="utf-8",
    )
    return path


def test_load_yaml_plan(yaml_plan):
    plan = load_plan(yaml_plan)

    assert plan.strategy is Strategy.SNOWBALL
    assert plan.monthly_budget == 300.0
    assert plan.currency == "EUR"
    assert plan.start == date(2026, 1, 1)
    assert [a.id for a in plan.accounts] == ["card_1", "card_2"]
    assert plan.accounts[0].annual_rate == pytest.approx(18.99)
    assert plan.accounts[0].minimum_payment == pytest.approx(100.0)
    assert plan.accounts[0].annual_fee == pytest.approx(12.0)
    assert plan.accounts[1].annual_fee == 0.0
    assert plan.config.max_periods == 360
    assert plan.config.cascade_surplus is True
    assert plan.config.sampling.sparse_every == 12
    assert plan.source == str(yaml_plan)


def test_loaded_plan_runs(yaml_plan):
    plan = load_plan(yaml_plan)

    report = simulate(plan.accounts, plan.strategy, plan.monthly_budget, config=plan.config)

    assert report.completed


def test_load_json_plan(tmp_path):
    path = tmp_path / "plan.json"
    path.write_text(
        json.dumps(
            {
                "monthly_budget": 150,
                "accounts": [{"balance": 1000, "annual_rate": 12, "minimum_payment": 50}],
            }
        ),
        encoding="utf-8",
    )

    plan = load_plan(path)

    assert plan.strategy is Strategy.AVALANCHE
    assert plan.accounts[0].id == "account_1"
    assert plan.start is None


def test_load_from_mapping_does_not_mutate_input():
    raw = {
        "monthly_budget": 100,
        "accounts": [{"id": "a", "balance": 10, "annual_rate": 1, "minimum_payment": 5}],
    }

    plan = load_plan(raw)

    assert plan.source == "<mapping>"
    assert raw["accounts"][0] == {
        "id": "a",
        "balance": 10,
        "annual_rate": 1,
        "minimum_payment": 5,
    }


@pytest.mark.parametrize(
    "mapping, message",
    [
        ({"accounts": [{"id": "a", "balance": 1, "annual_rate": 1, "minimum_payment": 1}]}, "monthly_budget"),
        ({"monthly_budget": 10, "accounts": []}, "at least one account"),
        ({"monthly_budget": 10, "accounts": "nope"}, "must be a list"),
        ({"monthly_budget": 10, "strategy": "hybrid", "accounts": [{"id": "a", "balance": 1, "annual_rate": 1, "minimum_payment": 1}]}, "Unknown strategy"),
        ({"monthly_budget": 10, "accounts": [{"id": "a", "balance": 1}]}, "Missing required field"),
        ({"monthly_budget": "lots", "accounts": [{"id": "a", "balance": 1, "annual_rate": 1, "minimum_payment": 1}]}, "must be a number"),
        ({"monthly_budget": 10, "simulation": {"speed": 2}, "accounts": [{"id": "a", "balance": 1, "annual_rate": 1, "minimum_payment": 1}]}, "unknown simulation option"),
        ({"monthly_budget": 10, "start": "next year", "accounts": [{"id": "a", "balance": 1, "annual_rate": 1, "minimum_payment": 1}]}, "invalid month"),
    ],
)
def test_malformed_plans(mapping, message):
    with pytest.raises(PlanError, match=message):
        load_plan(mapping)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_plan(tmp_path / "missing.yaml")


def test_unsupported_format(tmp_path):
    path = tmp_path / "plan.txt"
    path.write_text("monthly_budget: 1", encoding="utf-8")

    with pytest.raises(PlanError, match="Unsupported plan format"):
        load_plan(path)
