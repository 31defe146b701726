"""
Test doubles and helpers.
"""

from orderman.adapters.django_catalog import ModelItemCatalog
from orderman.exceptions import PersistenceError


class FailingWriteCatalog(ModelItemCatalog):
    """Reads work, every counter write fails."""

    def adjust_on_hand(self, item_type, item_id, delta):
        raise PersistenceError('WRITE_FAILED', item_type=item_type, item_id=item_id)

    def set_on_hand(self, item_type, item_id, value):
        raise PersistenceError('WRITE_FAILED', item_type=item_type, item_id=item_id)


def on_hand(item):
    """Current on_hand straight from the database."""
    return type(item).objects.values_list('on_hand', flat=True).get(pk=item.pk)
