"""
Tests for order list and enrichment projections.
"""

import logging

import pytest
from django.db import connection

from orderman import orders
from orderman.models import Order


pytestmark = pytest.mark.django_db


class TestListOrders:

    def test_enriched_rows(self, casket, casket_order, special_order, northstar):
        casket_id = orders.create(casket_order)
        special_id = orders.create({**special_order, 'supplier_id': northstar.pk})

        rows = {row['id']: row for row in orders.list_orders()}

        assert rows[casket_id]['item_display_name'] == 'Oak Traditional'
        assert rows[casket_id]['supplier_name'] == 'Batesville'
        assert rows[special_id]['item_display_name'] == 'Custom Urn'
        assert rows[special_id]['supplier_name'] == 'NorthStar Specialties'

    def test_newest_first(self, casket, casket_order):
        first = orders.create(casket_order)
        second = orders.create({**casket_order, 'po_number': 'PO-1B'})

        assert [row['id'] for row in orders.list_orders()] == [second, first]

    def test_orphaned_item_still_listed(self, casket, casket_order):
        """Item removed from the catalog: the row stays, display name is null."""
        order_id = orders.create(casket_order)
        casket.delete()

        (row,) = orders.list_orders()

        assert row['id'] == order_id
        assert row['item_display_name'] is None

    def test_view_disabled(self, settings, casket, casket_order):
        settings.ORDERMAN = {**settings.ORDERMAN, 'USE_ENRICHED_VIEW': False}
        order_id = orders.create(casket_order)

        (row,) = orders.list_orders()

        assert row['id'] == order_id
        assert 'supplier_name' not in row

    def test_falls_back_when_view_missing(self, caplog, casket, casket_order):
        first = orders.create(casket_order)
        second = orders.create({**casket_order, 'po_number': 'PO-1B'})
        with connection.cursor() as cursor:
            cursor.execute('DROP VIEW orderman_v_orders_enriched')

        with caplog.at_level(logging.WARNING, logger='orderman'):
            rows = orders.list_orders()

        assert [row['id'] for row in rows] == [second, first]
        assert 'item_display_name' not in rows[0]
        assert any(r.getMessage() == 'orders.enriched_view_unavailable' for r in caplog.records)


class TestEnrich:

    def test_regular_order(self, casket, casket_order):
        order = Order.objects.get(pk=orders.create(casket_order))

        row = orders.enrich(order)

        assert row['item_display_name'] == 'Oak Traditional'
        assert row['supplier_name'] == 'Batesville'
        assert row['po_number'] == 'PO-1'

    def test_special_order_without_supplier(self, special_order):
        order = Order.objects.get(pk=orders.create(special_order))

        row = orders.enrich(order)

        assert row['item_display_name'] == 'Custom Urn'
        assert row['supplier_name'] is None
