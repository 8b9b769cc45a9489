"""
Snowball ordering: lowest balance first.
"""

from __future__ import annotations

from payofflab.core.accounts import Account
from payofflab.core.interfaces import IOrderingStrategy


class OrderingSnowball(IOrderingStrategy):
    """
    Snowball ordering strategy (kind: 'snowball').

    Surplus budget goes to the smallest balance so accounts close early.
    Balances change every period, so the order must be recomputed each
    period. Ties go to the smaller minimum payment, then to the earlier
    input position.
    """

    def sort_key(self, account: Account, position: int) -> tuple[float, float, int]:
        return (account.balance, account.minimum_payment, position)
