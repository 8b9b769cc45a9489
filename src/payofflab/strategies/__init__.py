"""
Ordering strategy implementations for PayoffLab.

Each strategy ranks open accounts; the simulator gives surplus budget to the
first account in that ranking. Importing this module registers the default
strategies in ``payofflab.core.ordering.OrderingRegistry``.
"""

from .avalanche import OrderingAvalanche
from .registry import register_defaults
from .snowball import OrderingSnowball

# Register all default strategies when module is imported
register_defaults()

__all__ = [
    "OrderingAvalanche",
    "OrderingSnowball",
    "register_defaults",
]
