"""
Avalanche ordering: highest interest rate first.
"""

from __future__ import annotations

from payofflab.core.accounts import Account
from payofflab.core.interfaces import IOrderingStrategy


class OrderingAvalanche(IOrderingStrategy):
    """
    Avalanche ordering strategy (kind: 'avalanche').

    Surplus budget goes to the account with the highest annual rate, which
    minimizes total interest. Ties go to the larger balance, then to the
    earlier input position.
    """

    def sort_key(self, account: Account, position: int) -> tuple[float, float, int]:
        return (-account.annual_rate, -account.balance, position)
