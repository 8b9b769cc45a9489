"""
Per-period account transition.

The ledger step is a pure function: it never touches the input account and
always returns a new one.
"""

from __future__ import annotations

from .accounts import Account


def apply_period(account: Account, periodic_rate: float) -> tuple[float, Account]:
    """
    Accrue one period of interest and apply the minimum payment.

    The monthly share of any flat annual fee is charged together with the
    interest. The payment never exceeds what is owed, so a minimum that
    overshoots a near-zero balance closes the account at exactly zero.

    Args:
        account: Account with a positive balance
        periodic_rate: The account's own monthly rate (``annual_rate / 100 / 12``)

    Returns:
        Tuple of (interest accrued this period, account after the minimum payment)

    Note:
        The balance grows when the minimum does not cover the interest. That
        is a valid state; the simulator's period bound handles it.
    """
    interest = account.balance * periodic_rate
    owed = account.balance + interest + account.monthly_fee
    payment_applied = min(account.minimum_payment, owed)
    return interest, account.replace_balance(owed - payment_applied)


def apply_extra_payment(account: Account, amount: float) -> tuple[float, Account]:
    """
    Apply a strategy-directed extra payment, capped at the balance.

    Returns:
        Tuple of (amount actually applied, updated account)
    """
    extra = min(amount, account.balance)
    if extra <= 0:
        return 0.0, account
    return extra, account.replace_balance(account.balance - extra)
