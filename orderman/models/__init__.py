"""
Orderman Models.

- Supplier: who ships the merchandise
- Casket / Urn: the two stock catalogs, each with an on_hand counter
- Order: purchase order that replenishes one item (or a special order)
- EnrichedOrder: read-only view joining orders to item/supplier names
"""

from orderman.models.enriched import EnrichedOrder
from orderman.models.enums import CasketMaterial, ItemType, OrderStatus, UrnCategory
from orderman.models.item import Casket, StockItem, Urn
from orderman.models.order import Order
from orderman.models.supplier import Supplier

__all__ = [
    'ItemType',
    'OrderStatus',
    'CasketMaterial',
    'UrnCategory',
    'Supplier',
    'StockItem',
    'Casket',
    'Urn',
    'Order',
    'EnrichedOrder',
]
