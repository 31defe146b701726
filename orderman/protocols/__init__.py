"""
Orderman Protocols.

Defines interfaces for the collaborators the order lifecycle consumes.
"""

from orderman.protocols.catalog import (
    ItemCatalog,
    ItemRecord,
    SupplierDirectory,
    SupplierRecord,
)

__all__ = [
    "ItemCatalog",
    "ItemRecord",
    "SupplierDirectory",
    "SupplierRecord",
]
