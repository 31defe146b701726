"""
Django ORM adapters for the Item Catalog and Supplier Directory protocols.

Usage in settings.py (these are the defaults):
    ORDERMAN = {
        "ITEM_CATALOG": "orderman.adapters.django_catalog.ModelItemCatalog",
        "SUPPLIER_DIRECTORY": "orderman.adapters.django_catalog.ModelSupplierDirectory",
    }
"""

from __future__ import annotations

import logging

from django.db import DatabaseError
from django.db.models import F
from django.utils import timezone

from orderman.exceptions import NotFoundError, PersistenceError
from orderman.models.enums import ItemType
from orderman.models.item import Casket, Urn
from orderman.models.supplier import Supplier
from orderman.protocols.catalog import ItemRecord, SupplierRecord

logger = logging.getLogger(__name__)


ITEM_MODELS = {
    ItemType.CASKET.value: Casket,
    ItemType.URN.value: Urn,
}


def _to_record(item_type: str, item) -> ItemRecord:
    return ItemRecord(
        item_type=item_type,
        id=item.pk,
        name=item.name,
        supplier_id=item.supplier_id,
        on_hand=item.on_hand,
    )


class ModelItemCatalog:
    """
    Item catalog backed by the Casket and Urn models.

    Counter writes are single-row UPDATEs. adjust_on_hand() uses an F()
    expression so the increment happens inside the database and two
    concurrent adjustments both land.
    """

    def _model(self, item_type: str):
        try:
            return ITEM_MODELS[item_type]
        except KeyError:
            raise NotFoundError('ITEM_NOT_FOUND', item_type=item_type) from None

    def find(self, item_type: str, item_id: int) -> ItemRecord | None:
        model = ITEM_MODELS.get(item_type)
        if model is None or item_id is None:
            return None
        item = model.objects.filter(pk=item_id).only(
            'pk', 'name', 'supplier_id', 'on_hand'
        ).first()
        return _to_record(item_type, item) if item else None

    def get(self, item_type: str, item_id: int) -> ItemRecord:
        record = self.find(item_type, item_id)
        if record is None:
            raise NotFoundError('ITEM_NOT_FOUND', item_type=item_type, item_id=item_id)
        return record

    def set_on_hand(self, item_type: str, item_id: int, value: int) -> None:
        model = self._model(item_type)
        try:
            updated = model.objects.filter(pk=item_id).update(
                on_hand=value,
                updated_at=timezone.now(),
            )
        except DatabaseError as e:
            raise PersistenceError(
                'WRITE_FAILED', item_type=item_type, item_id=item_id, detail=str(e)
            ) from e

        if not updated:
            raise NotFoundError('ITEM_NOT_FOUND', item_type=item_type, item_id=item_id)

        logger.info(
            "catalog.on_hand_set",
            extra={"item_type": item_type, "item_id": item_id, "on_hand": value},
        )

    def adjust_on_hand(self, item_type: str, item_id: int, delta: int) -> int:
        model = self._model(item_type)
        try:
            updated = model.objects.filter(pk=item_id).update(
                on_hand=F('on_hand') + delta,
                updated_at=timezone.now(),
            )
            if not updated:
                raise NotFoundError('ITEM_NOT_FOUND', item_type=item_type, item_id=item_id)
            return model.objects.values_list('on_hand', flat=True).get(pk=item_id)
        except DatabaseError as e:
            raise PersistenceError(
                'WRITE_FAILED', item_type=item_type, item_id=item_id, detail=str(e)
            ) from e
        except model.DoesNotExist:
            # Deleted between the update and the read-back
            raise NotFoundError('ITEM_NOT_FOUND', item_type=item_type, item_id=item_id) from None


class ModelSupplierDirectory:
    """Supplier directory backed by the Supplier model."""

    def find(self, supplier_id: int) -> SupplierRecord | None:
        if supplier_id is None:
            return None
        row = Supplier.objects.filter(pk=supplier_id).values('pk', 'name').first()
        return SupplierRecord(id=row['pk'], name=row['name']) if row else None

    def get(self, supplier_id: int) -> SupplierRecord:
        record = self.find(supplier_id)
        if record is None:
            raise NotFoundError('SUPPLIER_NOT_FOUND', supplier_id=supplier_id)
        return record
