"""
Order projections — read-side views joining orders to item and supplier names.

list_orders() reads the orderman_v_orders_enriched SQL view. If the view is
missing or broken, it serves the raw order rows instead: callers must accept
rows with and without supplier_name / item_display_name.
"""

import logging

from django.db import DatabaseError, transaction

from orderman.adapters import get_item_catalog, get_supplier_directory
from orderman.conf import orderman_settings
from orderman.models.enriched import EnrichedOrder
from orderman.models.order import Order

logger = logging.getLogger('orderman')


ORDER_FIELDS = (
    'id',
    'item_type',
    'item_id',
    'item_name',
    'supplier_id',
    'po_number',
    'expected_date',
    'status',
    'backordered',
    'tbd_expected',
    'special_order',
    'deceased_name',
    'need_by_date',
    'notes',
    'is_return',
    'return_reason',
    'created_at',
    'arrived_at',
    'received_by',
)

ENRICHED_FIELDS = ('supplier_name', 'item_display_name')


def serialize_order(order: Order) -> dict:
    """Raw order row as a dict (same keys as the fallback list rows)."""
    return {name: getattr(order, name) for name in ORDER_FIELDS}


class EnrichmentProjector:
    """Read-side order projections."""

    @classmethod
    def list_orders(cls) -> list[dict]:
        """
        All orders, newest created_at first.

        Returns:
            Enriched rows (with supplier_name and item_display_name), or raw
            order rows when the enriched view is unavailable or disabled.
        """
        if orderman_settings.USE_ENRICHED_VIEW:
            try:
                # Savepoint: a failed view query must not poison an outer transaction
                with transaction.atomic():
                    return list(
                        EnrichedOrder.objects.order_by('-created_at', '-id')
                        .values(*ORDER_FIELDS, *ENRICHED_FIELDS)
                    )
            except DatabaseError as e:
                logger.warning(
                    "orders.enriched_view_unavailable",
                    extra={"error": str(e)},
                )

        return list(Order.objects.newest_first().values(*ORDER_FIELDS))

    @classmethod
    def enrich(cls, order: Order) -> dict:
        """
        Project a single order through the collaborators.

        item_display_name: catalog name for regular orders, item_name for
        special orders. supplier_name: resolved from the order's own
        supplier_id, independent of the item.
        """
        row = serialize_order(order)

        if order.special_order:
            display_name = order.item_name
        else:
            item = get_item_catalog().find(order.item_type, order.item_id)
            display_name = item.name if item else None

        supplier = get_supplier_directory().find(order.supplier_id)

        row['item_display_name'] = display_name
        row['supplier_name'] = supplier.name if supplier else None
        return row
