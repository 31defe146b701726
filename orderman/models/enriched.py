"""
EnrichedOrder — read-only model over the orderman_v_orders_enriched SQL view.

The view is created by migration 0002 and joins each order to its supplier
name and item display name. Nothing writes through this model.
"""

from django.db import models

from orderman.models.enums import ItemType, OrderStatus


class EnrichedOrder(models.Model):
    """Denormalized order row as produced by the database view."""

    item_type = models.CharField(max_length=10, choices=ItemType.choices)
    item_id = models.PositiveIntegerField(null=True)
    item_name = models.CharField(max_length=255, null=True)
    supplier_id = models.BigIntegerField(null=True)
    po_number = models.CharField(max_length=100)
    expected_date = models.DateField(null=True)
    status = models.CharField(max_length=20, choices=OrderStatus.choices)
    backordered = models.BooleanField()
    tbd_expected = models.BooleanField()
    special_order = models.BooleanField()
    deceased_name = models.CharField(max_length=255, null=True)
    need_by_date = models.DateField(null=True)
    notes = models.TextField(null=True)
    is_return = models.BooleanField()
    return_reason = models.TextField(null=True)
    created_at = models.DateTimeField()
    arrived_at = models.DateTimeField(null=True)
    received_by = models.CharField(max_length=200, null=True)

    supplier_name = models.CharField(max_length=200, null=True)
    item_display_name = models.CharField(max_length=255, null=True)

    class Meta:
        managed = False
        db_table = 'orderman_v_orders_enriched'
        ordering = ['-created_at']

    def __str__(self) -> str:
        return f"{self.po_number} · {self.item_display_name or '?'}"
