"""Utilities for loading payoff plans from YAML/JSON sources."""

from __future__ import annotations

import json
from copy import deepcopy
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Any

import yaml

from .accounts import Account
from .errors import ConfigError, PlanError
from .kinds import Strategy
from .simulator import SimulationConfig

__all__ = [
    "PayoffPlan",
    "load_plan",
]


@dataclass(slots=True)
class PayoffPlan:
    """Structured representation of a payoff plan file."""

    accounts: list[Account]
    strategy: Strategy
    monthly_budget: float
    config: SimulationConfig = field(default_factory=SimulationConfig)
    currency: str = "USD"
    start: date | None = None
    metadata: dict[str, Any] = field(default_factory=dict)
    source: str = "<memory>"


def load_plan(
    source: str | Path | dict[str, Any], *, format: str | None = None
) -> PayoffPlan:
    """
    Parse a payoff plan from YAML/JSON/dict.

    Expected layout::

        strategy: avalanche
        monthly_budget: 300
        currency: USD            # optional
        start: 2026-01           # optional, month of period 1
        defaults:                # optional, merged into every account
          annual_fee: 0
        accounts:
          - {id: visa, balance: 5000, annual_rate: 18.99, minimum_payment: 100}
        simulation:              # optional, maps onto SimulationConfig
          max_periods: 600
          cascade_surplus: false

    Raises:
        PlanError: If the plan is malformed
        FileNotFoundError: If ``source`` is a path that does not exist
    """
    mapping, label = _read_source(source, format=format)

    defaults = _ensure_dict(mapping.get("defaults"), f"{label}::defaults")
    accounts = _normalize_accounts(mapping.get("accounts"), defaults, label)

    strategy_raw = mapping.get("strategy", Strategy.AVALANCHE.value)
    try:
        strategy = Strategy.parse(strategy_raw)
    except ValueError as exc:
        raise PlanError(f"{label}::strategy: {exc}") from exc

    if "monthly_budget" not in mapping:
        raise PlanError(f"{label}: 'monthly_budget' is required")
    monthly_budget = _coerce_float(mapping["monthly_budget"], f"{label}::monthly_budget")

    simulation = _ensure_dict(mapping.get("simulation"), f"{label}::simulation")
    try:
        config = SimulationConfig.from_dict(simulation)
    except (ConfigError, TypeError, ValueError) as exc:
        raise PlanError(f"{label}::simulation: {exc}") from exc

    currency = mapping.get("currency", "USD")
    if not isinstance(currency, str) or not currency.strip():
        raise PlanError(f"{label}::currency must be a non-empty string")

    return PayoffPlan(
        accounts=accounts,
        strategy=strategy,
        monthly_budget=monthly_budget,
        config=config,
        currency=currency.strip().upper(),
        start=_coerce_month(mapping.get("start"), f"{label}::start"),
        metadata={"version": mapping.get("version", 1)},
        source=label,
    )


def _read_source(
    source: str | Path | dict[str, Any], *, format: str | None
) -> tuple[dict[str, Any], str]:
    if isinstance(source, dict):
        return deepcopy(source), "<mapping>"

    path = Path(source)
    if not path.exists():
        raise FileNotFoundError(path)

    fmt = (format or path.suffix.lstrip(".")).lower()
    text = path.read_text(encoding="utf-8")
    if fmt in {"yaml", "yml", ""}:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise PlanError(f"Invalid YAML in {path}: {exc}") from exc
    elif fmt == "json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise PlanError(f"Invalid JSON in {path}: {exc}") from exc
    else:
        raise PlanError(f"Unsupported plan format '{fmt}' for {path}")

    if not isinstance(data, dict):
        raise PlanError(f"Plan root must be a mapping (source={path})")
    return data, str(path)


def _normalize_accounts(
    raw: Any, defaults: dict[str, Any], label: str
) -> list[Account]:
    if not isinstance(raw, list):
        raise PlanError(f"{label}::accounts must be a list")
    if not raw:
        raise PlanError(f"{label}: plan must define at least one account")

    accounts: list[Account] = []
    for idx, entry in enumerate(raw):
        ctx = f"{label}::accounts[{idx}]"
        data = _ensure_dict(entry, ctx)
        merged = {**defaults, **data}
        merged.setdefault("id", f"account_{idx + 1}")
        try:
            accounts.append(Account.from_dict(merged))
        except ConfigError as exc:
            raise PlanError(f"{ctx}: {exc}") from exc
    return accounts


def _ensure_dict(value: Any, ctx: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise PlanError(f"{ctx} must be a mapping")
    return dict(value)


def _coerce_float(value: Any, ctx: str) -> float:
    if isinstance(value, bool):
        raise PlanError(f"{ctx} must be a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise PlanError(f"{ctx} must be a number, got {value!r}") from exc


def _coerce_month(value: Any, ctx: str) -> date | None:
    if value is None:
        return None
    if isinstance(value, date):
        return value.replace(day=1)
    if isinstance(value, str):
        text = value.strip()
        try:
            if len(text) == 7:  # YYYY-MM
                return date.fromisoformat(f"{text}-01")
            return date.fromisoformat(text).replace(day=1)
        except ValueError as exc:
            raise PlanError(f"{ctx}: invalid month {value!r}") from exc
    raise PlanError(f"{ctx} must be a date or 'YYYY-MM' string")
