"""
Collaborator Protocols — Item Catalog and Supplier Directory.

Orderman defines these protocols; the default implementation lives in
orderman.adapters.django_catalog and reads the Casket/Urn/Supplier models.
Another back-office can plug its own stores in via settings.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class ItemRecord:
    """Stock item as seen by the order lifecycle."""

    item_type: str  # "casket" | "urn"
    id: int
    name: str
    supplier_id: int | None
    on_hand: int


@dataclass(frozen=True)
class SupplierRecord:
    """Supplier as seen by the order lifecycle."""

    id: int
    name: str


@runtime_checkable
class ItemCatalog(Protocol):
    """
    Protocol for the per-kind item stores.

    Implementations raise orderman.exceptions.NotFoundError('ITEM_NOT_FOUND')
    for absent items and PersistenceError('WRITE_FAILED') when a write fails.
    """

    def get(self, item_type: str, item_id: int) -> ItemRecord:
        """
        Fetch an item.

        Raises:
            NotFoundError: item does not exist
        """
        ...

    def find(self, item_type: str, item_id: int) -> ItemRecord | None:
        """Fetch an item, or None if it does not exist."""
        ...

    def set_on_hand(self, item_type: str, item_id: int, value: int) -> None:
        """
        Unconditionally overwrite the on_hand counter.

        For administrative corrections only: the lifecycle uses
        adjust_on_hand(), which cannot lose concurrent updates.
        """
        ...

    def adjust_on_hand(self, item_type: str, item_id: int, delta: int) -> int:
        """
        Atomically add delta to on_hand.

        Returns:
            The new on_hand value
        """
        ...


@runtime_checkable
class SupplierDirectory(Protocol):
    """Protocol for supplier lookup."""

    def get(self, supplier_id: int) -> SupplierRecord:
        """
        Raises:
            NotFoundError: supplier does not exist
        """
        ...

    def find(self, supplier_id: int) -> SupplierRecord | None:
        ...
