"""
Orders Service — the single public interface for the order engine.

Usage:
    from orderman import orders, OrderError

    order_id = orders.create({"item_type": "casket", "item_id": 7, "po_number": "PO-1"})
    orders.update(order_id, {"backordered": True, "tbd_expected": True})
    orders.arrive(order_id, received_by="Alice")
    orders.list_orders()
    orders.inventory_status(short_only=True)
"""

from orderman.services.inventory import InventoryCounter
from orderman.services.lifecycle import OrderLifecycle
from orderman.services.projection import EnrichmentProjector
from orderman.services.queries import InventoryQueries


class Orders(OrderLifecycle, EnrichmentProjector, InventoryQueries):
    """
    Single interface for all order operations.

    Writes (create, update, arrive, delete) are single-row statements;
    create and arrive compensate their order write when the paired stock
    adjustment fails. See orderman.services.lifecycle.
    """

    qualifies = staticmethod(InventoryCounter.qualifies)
