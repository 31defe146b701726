"""
Order model — purchase order that replenishes one item (or a special order).
"""

from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from orderman.models.enums import ItemType, OrderStatus


class OrderQuerySet(models.QuerySet):
    """Custom QuerySet for Order with lifecycle filters."""

    def active(self):
        """Orders not yet arrived."""
        return self.exclude(status=OrderStatus.ARRIVED)

    def arrived(self):
        return self.filter(status=OrderStatus.ARRIVED)

    def qualifying(self):
        """
        Orders that move stock.

        Queryset-level version of InventoryCounter.qualifies().
        """
        return self.filter(
            special_order=False,
            is_return=False,
            item_id__isnull=False,
            item_type__in=ItemType.values,
        )

    def for_item(self, item_type, item_id):
        return self.filter(item_type=item_type, item_id=item_id)

    def newest_first(self):
        return self.order_by('-created_at', '-pk')


class Order(models.Model):
    """
    Purchase order for a casket or urn.

    LIFECYCLE:

        create()                 update()            arrive()
           │                    ┌───────┐               │
           ▼                    ▼       │               ▼
      ┌─────────┐  ┌─────────────┐  ┌─────────┐    ┌─────────┐
      │ PENDING │  │ BACKORDERED │  │ SPECIAL │ ─► │ ARRIVED │ (terminal)
      └─────────┘  └─────────────┘  └─────────┘    └─────────┘

    Item reference is a (item_type, item_id) pair, not a foreign key: an
    order outlives the catalog row it points to. Special orders carry a
    free-text item_name instead and never touch stock.
    """

    item_type = models.CharField(
        max_length=10,
        choices=ItemType.choices,
        verbose_name=_('Item type'),
    )
    item_id = models.PositiveIntegerField(
        null=True,
        blank=True,
        verbose_name=_('Item ID'),
    )
    item_name = models.CharField(
        max_length=255,
        null=True,
        blank=True,
        verbose_name=_('Item description'),
        help_text=_('Special orders only.'),
    )
    supplier = models.ForeignKey(
        'orderman.Supplier',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='orders',
        verbose_name=_('Supplier'),
    )

    po_number = models.CharField(max_length=100, verbose_name=_('PO number'))
    expected_date = models.DateField(null=True, blank=True, verbose_name=_('Expected date'))

    status = models.CharField(
        max_length=20,
        choices=OrderStatus.choices,
        default=OrderStatus.PENDING,
        db_index=True,
        verbose_name=_('Status'),
    )
    backordered = models.BooleanField(default=False, verbose_name=_('Backordered'))
    tbd_expected = models.BooleanField(
        default=False,
        verbose_name=_('Expected date TBD'),
    )

    special_order = models.BooleanField(default=False, verbose_name=_('Special order'))
    deceased_name = models.CharField(max_length=255, null=True, blank=True, verbose_name=_('Deceased'))
    need_by_date = models.DateField(null=True, blank=True, verbose_name=_('Need by'))
    notes = models.TextField(null=True, blank=True, verbose_name=_('Notes'))

    is_return = models.BooleanField(default=False, verbose_name=_('Return'))
    return_reason = models.TextField(null=True, blank=True, verbose_name=_('Return reason'))

    created_at = models.DateTimeField(default=timezone.now, editable=False, db_index=True)
    arrived_at = models.DateTimeField(null=True, blank=True, verbose_name=_('Arrived at'))
    received_by = models.CharField(max_length=200, null=True, blank=True, verbose_name=_('Received by'))

    objects = OrderQuerySet.as_manager()

    class Meta:
        verbose_name = _('Order')
        verbose_name_plural = _('Orders')
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['item_type', 'item_id'], name='orderman_order_item_idx'),
            models.Index(fields=['status', 'created_at'], name='orderman_order_status_idx'),
        ]

    @property
    def is_arrived(self) -> bool:
        return self.status == OrderStatus.ARRIVED

    @property
    def qualifies(self) -> bool:
        """Does this order move stock?"""
        from orderman.services.inventory import InventoryCounter
        return InventoryCounter.qualifies(self)

    def __str__(self) -> str:
        what = self.item_name if self.special_order else f"{self.item_type}#{self.item_id}"
        return f"{self.po_number} · {what} [{self.status}]"
