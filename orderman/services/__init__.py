"""
Order services — modular organization of the order engine.

    from orderman.services import OrderLifecycle, InventoryCounter, EnrichmentProjector, InventoryQueries
"""

from orderman.services.inventory import InventoryCounter
from orderman.services.lifecycle import OrderLifecycle
from orderman.services.projection import EnrichmentProjector
from orderman.services.queries import InventoryQueries, ItemStatus
from orderman.services.saga import SagaOutcome

__all__ = [
    'OrderLifecycle',
    'InventoryCounter',
    'EnrichmentProjector',
    'InventoryQueries',
    'ItemStatus',
    'SagaOutcome',
]
