"""
Inventory queries — read-only stock status per item.

All methods are classmethods and take no locks.
"""

from dataclasses import asdict, dataclass

from django.db.models import Count, Q

from orderman.models.enums import ItemType
from orderman.models.item import Casket, Urn
from orderman.models.order import Order


@dataclass(frozen=True)
class ItemStatus:
    """Stock position of one catalog item."""

    item_type: str
    id: int
    name: str
    supplier_id: int | None
    on_hand: int
    target_qty: int
    on_order: int      # open qualifying orders
    backordered: int   # subset of on_order flagged backordered

    @property
    def available(self) -> int:
        """What we will have once everything on order arrives."""
        return self.on_hand + self.on_order

    @property
    def short_by(self) -> int:
        return max(0, self.target_qty - self.available)

    @property
    def is_full(self) -> bool:
        return self.available >= self.target_qty

    def as_dict(self) -> dict:
        data = asdict(self)
        data.update(available=self.available, short_by=self.short_by, is_full=self.is_full)
        return data


class InventoryQueries:
    """Read-only inventory query methods."""

    CATALOGS = (
        (ItemType.CASKET.value, Casket),
        (ItemType.URN.value, Urn),
    )

    @classmethod
    def open_order_counts(cls, item_type: str | None = None) -> dict[tuple[str, int], tuple[int, int]]:
        """
        Open (not arrived) qualifying orders per item.

        Returns:
            {(item_type, item_id): (on_order, backordered)}
        """
        qs = Order.objects.active().qualifying()
        if item_type is not None:
            qs = qs.filter(item_type=item_type)

        rows = (
            qs.order_by()
            .values('item_type', 'item_id')
            .annotate(
                on_order=Count('pk'),
                backordered_count=Count('pk', filter=Q(backordered=True)),
            )
        )
        return {
            (row['item_type'], row['item_id']): (row['on_order'], row['backordered_count'])
            for row in rows
        }

    @classmethod
    def has_items(cls, item_type: str | None = None) -> bool:
        """Is there at least one catalog item (of this kind)?"""
        return any(
            model.objects.exists()
            for kind, model in cls.CATALOGS
            if item_type is None or kind == item_type
        )

    @classmethod
    def inventory_status(cls, item_type: str | None = None, short_only: bool = False) -> list[ItemStatus]:
        """
        Stock status for every catalog item, caskets first, then by name.

        Args:
            item_type: Only this kind ("casket" | "urn"), None = both
            short_only: Only items below their target quantity
        """
        counts = cls.open_order_counts(item_type)
        result = []

        for kind, model in cls.CATALOGS:
            if item_type is not None and kind != item_type:
                continue
            for item in model.objects.order_by('name', 'pk'):
                on_order, backordered = counts.get((kind, item.pk), (0, 0))
                status = ItemStatus(
                    item_type=kind,
                    id=item.pk,
                    name=item.name,
                    supplier_id=item.supplier_id,
                    on_hand=item.on_hand,
                    target_qty=item.target_qty,
                    on_order=on_order,
                    backordered=backordered,
                )
                if short_only and status.is_full:
                    continue
                result.append(status)

        return result
