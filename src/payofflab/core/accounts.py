"""
Revolving account definitions for PayoffLab.

An ``Account`` is an immutable value: the simulator never edits the caller's
objects, it derives new ones with ``replace_balance``.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping
from dataclasses import dataclass, replace
from typing import Any

from .errors import ConfigError

_REQUIRED_FIELDS = ("id", "balance", "annual_rate", "minimum_payment")

# Field aliases accepted from plan files and UI payloads.
_ALIASES = {
    "apr": "annual_rate",
    "rate": "annual_rate",
    "min": "minimum_payment",
    "min_payment": "minimum_payment",
    "minimumPayment": "minimum_payment",
}


@dataclass(frozen=True, slots=True)
class Account:
    """
    One revolving balance (credit card, store card, line of credit).

    Attributes:
        id: Opaque hashable identifier, unique within a simulation run
        balance: Outstanding balance (>= 0)
        annual_rate: Annual percentage rate in percent, e.g. 18.99
        minimum_payment: Floor payment applied every period before any extra
        annual_fee: Flat annual fee, charged as one twelfth per open period
        name: Optional display label
    """

    id: Hashable
    balance: float
    annual_rate: float
    minimum_payment: float
    annual_fee: float = 0.0
    name: str | None = None

    @property
    def periodic_rate(self) -> float:
        """Monthly equivalent of the annual percentage rate."""
        return self.annual_rate / 100 / 12

    @property
    def monthly_fee(self) -> float:
        return self.annual_fee / 12

    def replace_balance(self, balance: float) -> Account:
        """Return a copy of this account carrying a new balance."""
        return replace(self, balance=balance)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "balance": self.balance,
            "annual_rate": self.annual_rate,
            "minimum_payment": self.minimum_payment,
            "annual_fee": self.annual_fee,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Account:
        """
        Build an account from a mapping such as a plan-file entry.

        Raises:
            ConfigError: If a required field is missing or not numeric
        """
        payload = dict(data)
        for alias, canonical in _ALIASES.items():
            if alias in payload:
                payload.setdefault(canonical, payload.pop(alias))

        missing = [key for key in _REQUIRED_FIELDS if key not in payload]
        if missing:
            label = payload.get("id", "<account>")
            raise ConfigError(
                f"{label}: Missing required field(s): {', '.join(missing)}"
            )

        try:
            return cls(
                id=payload["id"],
                balance=float(payload["balance"]),
                annual_rate=float(payload["annual_rate"]),
                minimum_payment=float(payload["minimum_payment"]),
                annual_fee=float(payload.get("annual_fee", 0.0) or 0.0),
                name=payload.get("name"),
            )
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"{payload['id']}: {exc}") from exc


def coerce_accounts(accounts: Iterable[Account | Mapping[str, Any]]) -> list[Account]:
    """Normalize a mix of ``Account`` objects and mappings into accounts."""
    result: list[Account] = []
    for item in accounts:
        if isinstance(item, Account):
            result.append(item)
        elif isinstance(item, Mapping):
            result.append(Account.from_dict(item))
        else:
            raise ConfigError(
                f"Accounts must be Account objects or mappings, got {type(item).__name__}"
            )
    return result


def total_balance(accounts: Iterable[Account]) -> float:
    return sum(account.balance for account in accounts)
