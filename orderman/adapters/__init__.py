"""
Orderman Adapters.

Implementations of the collaborator protocols, and the settings-driven loader.
"""

from orderman.adapters.loading import (
    get_item_catalog,
    get_supplier_directory,
    reset_adapters,
)

__all__ = [
    "get_item_catalog",
    "get_supplier_directory",
    "reset_adapters",
]
