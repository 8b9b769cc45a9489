"""
Strategy interface protocols for PayoffLab.
Defines the contract that all ordering strategies must satisfy.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .accounts import Account


@runtime_checkable
class IOrderingStrategy(Protocol):
    """
    Contract for repayment ORDERING strategies.
    Responsibilities: rank open accounts so the first one receives surplus budget.
    """

    def sort_key(self, account: Account, position: int) -> tuple[Any, ...]:
        """
        Return the sort key of an account; smaller keys come first.

        ``position`` is the account's index in the caller's input list and
        must be the last component of the key, which makes the order total
        even when every other field ties.
        """
        ...


__all__ = ["IOrderingStrategy"]
