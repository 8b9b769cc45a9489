"""
Strategy registry setup for PayoffLab.
"""

from payofflab.core.kinds import Strategy
from payofflab.core.ordering import OrderingRegistry, missing_strategies

from .avalanche import OrderingAvalanche
from .snowball import OrderingSnowball


def register_defaults():
    """
    Register the default ordering implementations in the global registry.

    Registered Strategies:
        - 'avalanche': highest annual rate first
        - 'snowball': lowest balance first

    Raises:
        RuntimeError: If a ``Strategy`` member is left without an implementation

    Note:
        This function is automatically called when the module is imported.
    """
    OrderingRegistry[Strategy.AVALANCHE] = OrderingAvalanche()
    OrderingRegistry[Strategy.SNOWBALL] = OrderingSnowball()

    missing = missing_strategies()
    if missing:
        raise RuntimeError(
            "Ordering strategies not registered: "
            + ", ".join(s.value for s in missing)
        )
