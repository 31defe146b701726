"""
Orderman configuration.

Usage in settings.py:
    ORDERMAN = {
        "ITEM_CATALOG": "orderman.adapters.django_catalog.ModelItemCatalog",
        "SUPPLIER_DIRECTORY": "orderman.adapters.django_catalog.ModelSupplierDirectory",
        "SPECIAL_ORDER_SUPPLIER": 3,
        "USE_ENRICHED_VIEW": True,
    }
"""

from dataclasses import dataclass
from typing import Any

from django.conf import settings


@dataclass
class OrdermanSettings:
    """Orderman configuration settings."""

    # Item catalog backend (dotted path)
    ITEM_CATALOG: str = "orderman.adapters.django_catalog.ModelItemCatalog"

    # Supplier directory backend (dotted path)
    SUPPLIER_DIRECTORY: str = "orderman.adapters.django_catalog.ModelSupplierDirectory"

    # Supplier id assigned to special orders created without one (None = leave empty)
    SPECIAL_ORDER_SUPPLIER: int | None = None

    # Read order lists from the enriched SQL view (False = always raw rows)
    USE_ENRICHED_VIEW: bool = True


def get_orderman_settings() -> OrdermanSettings:
    """Load settings from Django settings."""
    user_settings: dict[str, Any] = getattr(settings, "ORDERMAN", {})
    return OrdermanSettings(**{
        k: v for k, v in user_settings.items()
        if k in OrdermanSettings.__dataclass_fields__
    })


class _LazySettings:
    """Lazy proxy that re-reads settings on every attribute access."""

    def __getattr__(self, name):
        return getattr(get_orderman_settings(), name)


orderman_settings = _LazySettings()
