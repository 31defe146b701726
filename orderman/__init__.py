"""
Django Orderman — purchase orders that keep casket and urn stock honest.

Usage:
    from orderman import orders, OrderError

    order_id = orders.create({"item_type": "casket", "item_id": 7, "po_number": "PO-1"})
    orders.arrive(order_id, received_by="Alice")
    orders.list_orders()  # newest first, enriched when possible
"""


def __getattr__(name):
    """Lazy import to avoid circular imports during app loading."""
    if name == 'orders':
        from orderman.service import Orders
        return Orders
    elif name == 'OrderError':
        from orderman.exceptions import OrderError
        return OrderError
    elif name == 'Order':
        from orderman.models.order import Order
        return Order
    elif name == 'Casket':
        from orderman.models.item import Casket
        return Casket
    elif name == 'Urn':
        from orderman.models.item import Urn
        return Urn
    elif name == 'Supplier':
        from orderman.models.supplier import Supplier
        return Supplier
    elif name == 'OrderStatus':
        from orderman.models.enums import OrderStatus
        return OrderStatus
    elif name == 'ItemType':
        from orderman.models.enums import ItemType
        return ItemType
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    'orders',
    'OrderError',
    'Order',
    'Casket',
    'Urn',
    'Supplier',
    'OrderStatus',
    'ItemType',
]

__version__ = '0.1.0'
