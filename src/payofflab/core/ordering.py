"""
Ordering dispatch for PayoffLab.

``OrderingRegistry`` maps each ``Strategy`` member to its implementation;
``order_accounts`` is the single entry point the simulator uses.
"""

from __future__ import annotations

from collections.abc import Sequence

from .accounts import Account
from .errors import ConfigError
from .interfaces import IOrderingStrategy
from .kinds import Strategy

OrderingRegistry: dict[Strategy, IOrderingStrategy] = {}


def missing_strategies() -> list[Strategy]:
    """Strategy members with no registered implementation."""
    return [s for s in Strategy if s not in OrderingRegistry]


def order_accounts(
    accounts: Sequence[Account],
    strategy: Strategy,
    positions: Sequence[int] | None = None,
) -> list[int]:
    """
    Rank accounts for the given strategy.

    Args:
        accounts: Open accounts to rank
        strategy: Ordering strategy
        positions: Stable input positions used as the final tie-break;
            defaults to the index within ``accounts``

    Returns:
        Indices into ``accounts``, first element being the surplus target
    """
    impl = OrderingRegistry.get(strategy)
    if impl is None:
        raise ConfigError(f"No ordering strategy registered for '{strategy}'")
    if positions is None:
        positions = range(len(accounts))
    return sorted(
        range(len(accounts)),
        key=lambda i: impl.sort_key(accounts[i], positions[i]),
    )
