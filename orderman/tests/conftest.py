"""
Pytest fixtures for Orderman tests.
"""

from datetime import date, timedelta

import pytest

from orderman.adapters import reset_adapters
from orderman.models import Casket, Supplier, Urn


@pytest.fixture(autouse=True)
def fresh_adapters():
    """Adapters are cached per process; tests may swap them via settings."""
    reset_adapters()
    yield
    reset_adapters()


@pytest.fixture
def supplier(db):
    """Create the main supplier."""
    return Supplier.objects.create(
        name='Batesville',
        phone='800-555-0100',
        email='orders@batesville.example',
    )


@pytest.fixture
def northstar(db):
    """Supplier used for special orders."""
    return Supplier.objects.create(name='NorthStar Specialties')


@pytest.fixture
def casket(db, supplier):
    """Casket #7 with 3 on hand."""
    return Casket.objects.create(
        pk=7,
        name='Oak Traditional',
        supplier=supplier,
        on_hand=3,
        target_qty=4,
        material='WOOD',
    )


@pytest.fixture
def urn(db, supplier):
    """Urn with 5 on hand."""
    return Urn.objects.create(
        name='Pewter Classic',
        supplier=supplier,
        on_hand=5,
        target_qty=2,
        category='FULL',
    )


@pytest.fixture
def casket_order(casket):
    """Payload for a regular casket order."""
    return {
        'item_type': 'casket',
        'item_id': casket.pk,
        'po_number': 'PO-1',
        'status': 'PENDING',
    }


@pytest.fixture
def special_order():
    """Payload for a special order."""
    return {
        'item_type': 'urn',
        'special_order': True,
        'item_name': 'Custom Urn',
        'po_number': 'PO-2',
        'deceased_name': 'Jane Doe',
    }


@pytest.fixture
def failing_catalog(settings):
    """Catalog whose counter writes always fail."""
    settings.ORDERMAN = {
        **settings.ORDERMAN,
        'ITEM_CATALOG': 'orderman.tests.support.FailingWriteCatalog',
    }
    reset_adapters()


@pytest.fixture
def today():
    return date.today()


@pytest.fixture
def next_week():
    return date.today() + timedelta(days=7)
