"""
Orderman Admin.

- Supplier, Casket, Urn: editable (the catalogs' attribute CRUD lives here;
  on_hand edits are administrative corrections)
- Order: status and arrival fields read-only, with a "mark arrived" action
  that goes through the lifecycle service so stock is restocked
"""

import logging

from django.contrib import admin, messages
from django.utils.translation import gettext_lazy as _

from orderman.exceptions import OrderError
from orderman.models import Casket, Order, OrderStatus, Supplier, Urn

logger = logging.getLogger(__name__)


# =========================================================================
# SUPPLIER ADMIN
# =========================================================================

@admin.register(Supplier)
class SupplierAdmin(admin.ModelAdmin):
    """Supplier admin — editable."""

    list_display = ['name', 'phone', 'email', 'ordering_website']
    search_fields = ['name', 'email']
    readonly_fields = ['created_at']


# =========================================================================
# CATALOG ADMINS
# =========================================================================

class StockItemAdmin(admin.ModelAdmin):
    """Shared admin for the two catalogs."""

    list_display = ['name', 'supplier', 'on_hand', 'target_qty', 'green']
    list_filter = ['supplier', 'green']
    search_fields = ['name']
    readonly_fields = ['created_at', 'updated_at']


@admin.register(Casket)
class CasketAdmin(StockItemAdmin):
    list_display = StockItemAdmin.list_display + ['material', 'jewish']
    list_filter = StockItemAdmin.list_filter + ['material', 'jewish']


@admin.register(Urn)
class UrnAdmin(StockItemAdmin):
    list_display = StockItemAdmin.list_display + ['category']
    list_filter = StockItemAdmin.list_filter + ['category']


# =========================================================================
# ORDER ADMIN
# =========================================================================

@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    """Order admin — lifecycle fields read-only, arrive via action."""

    list_display = ['po_number', 'item_display', 'supplier', 'status',
                    'expected_date', 'backordered', 'special_order', 'created_at']
    list_filter = ['status', 'item_type', 'special_order', 'backordered', 'is_return']
    search_fields = ['po_number', 'item_name', 'deceased_name']
    readonly_fields = ['status', 'created_at', 'arrived_at', 'received_by']
    date_hierarchy = 'created_at'
    actions = ['mark_arrived']

    def has_add_permission(self, request):
        # Creation must go through orders.create() to reserve stock
        return False

    @admin.display(description=_('Item'))
    def item_display(self, obj):
        if obj.special_order:
            return obj.item_name or '?'
        return f"{obj.get_item_type_display()} #{obj.item_id}"

    @admin.action(description=_('Mark selected orders as arrived'))
    def mark_arrived(self, request, queryset):
        from orderman import orders

        count = 0
        for order in queryset.exclude(status=OrderStatus.ARRIVED):
            try:
                orders.arrive(order.pk, received_by=request.user.get_username())
                count += 1
            except OrderError as exc:
                logger.warning("mark_arrived: failed to arrive order %s: %s", order.pk, exc)
                self.message_user(
                    request,
                    _('Order {po}: {error}').format(po=order.po_number, error=exc.message),
                    level=messages.ERROR,
                )

        self.message_user(request, _('{count} order(s) marked as arrived.').format(count=count))
