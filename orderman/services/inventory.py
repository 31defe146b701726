"""
Inventory counter — the single entry point for order-driven stock changes.

reserve() at creation and restock() at arrival, for qualifying orders only.
Both go through ItemCatalog.adjust_on_hand(), an atomic single-row update,
so concurrent orders against the same item never lose an adjustment.
"""

import logging

from django.db import DatabaseError

from orderman.adapters import get_item_catalog
from orderman.exceptions import PersistenceError
from orderman.models.enums import ItemType

logger = logging.getLogger('orderman')


class InventoryCounter:
    """Qualification rule and delta application against the Item Catalog."""

    RESERVE_DELTA = -1
    RESTOCK_DELTA = 1

    @staticmethod
    def qualifies(order) -> bool:
        """
        Does an order event move stock?

        Works on anything with the order's attributes (Order, CreateOrder).
        A qualifying order is a regular purchase (not special, not a return)
        for a concrete item of a known kind.
        """
        return (
            not order.special_order
            and not order.is_return
            and order.item_id is not None
            and order.item_type in ItemType.values
        )

    @classmethod
    def reserve(cls, item_type: str, item_id: int, order_id=None) -> int:
        """
        Take one unit off the item's on_hand (order placed).

        Returns:
            New on_hand value

        Raises:
            NotFoundError('ITEM_NOT_FOUND'): item does not exist
            PersistenceError('WRITE_FAILED'): write failed
        """
        return cls._apply(item_type, item_id, cls.RESERVE_DELTA, "inventory.reserve", order_id)

    @classmethod
    def restock(cls, item_type: str, item_id: int, order_id=None) -> int:
        """
        Put one unit back on the item's on_hand (order arrived).

        Raises:
            NotFoundError('ITEM_NOT_FOUND'): item does not exist
            PersistenceError('WRITE_FAILED'): write failed
        """
        return cls._apply(item_type, item_id, cls.RESTOCK_DELTA, "inventory.restock", order_id)

    @classmethod
    def _apply(cls, item_type, item_id, delta, event, order_id):
        catalog = get_item_catalog()
        try:
            on_hand = catalog.adjust_on_hand(item_type, item_id, delta)
        except DatabaseError as e:
            raise PersistenceError(
                'WRITE_FAILED', item_type=item_type, item_id=item_id, detail=str(e)
            ) from e

        logger.info(
            event,
            extra={
                "item_type": item_type,
                "item_id": item_id,
                "delta": delta,
                "on_hand": on_hand,
                "order_id": order_id,
            },
        )
        return on_hand
