"""
Adapter loading — resolves the configured collaborators from settings.

Usage:
    from orderman.adapters import get_item_catalog

    catalog = get_item_catalog()
    catalog.adjust_on_hand("casket", 7, -1)

Settings:
    ORDERMAN = {
        "ITEM_CATALOG": "orderman.adapters.django_catalog.ModelItemCatalog",
        "SUPPLIER_DIRECTORY": "orderman.adapters.django_catalog.ModelSupplierDirectory",
    }

A bad dotted path raises ImproperlyConfigured.
"""

from __future__ import annotations

import logging
import threading

from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from orderman.conf import orderman_settings
from orderman.protocols.catalog import ItemCatalog, SupplierDirectory

logger = logging.getLogger(__name__)


# Cached adapter instances
_lock = threading.Lock()
_item_catalog: ItemCatalog | None = None
_supplier_directory: SupplierDirectory | None = None


def _load(setting_name: str):
    path = getattr(orderman_settings, setting_name)
    if not path:
        raise ImproperlyConfigured(f"ORDERMAN['{setting_name}'] must be configured.")
    try:
        adapter_class = import_string(path)
    except ImportError as e:
        raise ImproperlyConfigured(
            f"Failed to import {setting_name} '{path}': {e}"
        ) from e
    logger.debug("Loaded %s: %s", setting_name, path)
    return adapter_class()


def get_item_catalog() -> ItemCatalog:
    """
    Return the configured item catalog.

    Raises:
        ImproperlyConfigured: If ITEM_CATALOG is empty or import fails
    """
    global _item_catalog

    if _item_catalog is None:
        with _lock:
            if _item_catalog is None:  # double-checked
                _item_catalog = _load("ITEM_CATALOG")

    return _item_catalog


def get_supplier_directory() -> SupplierDirectory:
    """
    Return the configured supplier directory.

    Raises:
        ImproperlyConfigured: If SUPPLIER_DIRECTORY is empty or import fails
    """
    global _supplier_directory

    if _supplier_directory is None:
        with _lock:
            if _supplier_directory is None:
                _supplier_directory = _load("SUPPLIER_DIRECTORY")

    return _supplier_directory


def reset_adapters() -> None:
    """Reset the cached adapters. Useful for testing."""
    global _item_catalog, _supplier_directory
    _item_catalog = None
    _supplier_directory = None
