"""
Tests for the JSON endpoints.
"""

import json

import pytest
from django.urls import reverse

from orderman.models import Order, OrderStatus
from orderman.tests.support import on_hand


pytestmark = pytest.mark.django_db


def _send(client, method, url, payload=None, raw=None):
    body = raw if raw is not None else json.dumps(payload or {})
    return getattr(client, method)(url, data=body, content_type='application/json')


@pytest.fixture
def created(client, casket, casket_order):
    response = _send(client, 'post', reverse('orderman:order-list'), casket_order)
    assert response.status_code == 201
    return response.json()['id']


class TestOrderCollection:

    def test_create(self, client, casket, casket_order):
        response = _send(client, 'post', reverse('orderman:order-list'), casket_order)

        assert response.status_code == 201
        assert Order.objects.filter(pk=response.json()['id']).exists()
        assert on_hand(casket) == 2

    def test_create_invalid(self, client, db):
        response = _send(client, 'post', reverse('orderman:order-list'), {'item_type': 'vault'})

        assert response.status_code == 400
        error = response.json()['error']
        assert error['code'] == 'INVALID_INPUT'
        assert 'po_number' in error['data']['errors']

    def test_create_invalid_json(self, client, db):
        response = _send(client, 'post', reverse('orderman:order-list'), raw='{not json')

        assert response.status_code == 400
        assert response.json()['error']['data']['errors'] == {'__all__': ['invalid JSON']}

    @pytest.mark.parametrize('item_id', [-1, 10**20])
    def test_create_out_of_range_item_id(self, client, db, item_id):
        response = _send(
            client, 'post', reverse('orderman:order-list'),
            {'item_type': 'casket', 'item_id': item_id, 'po_number': 'PO-X'},
        )

        assert response.status_code == 400
        assert 'item_id' in response.json()['error']['data']['errors']

    def test_create_missing_item(self, client, db):
        response = _send(
            client, 'post', reverse('orderman:order-list'),
            {'item_type': 'casket', 'item_id': 999, 'po_number': 'PO-X'},
        )

        assert response.status_code == 404
        assert response.json()['error']['code'] == 'ITEM_NOT_FOUND'
        assert not Order.objects.exists()

    def test_create_write_failure(self, client, failing_catalog, casket, casket_order):
        response = _send(client, 'post', reverse('orderman:order-list'), casket_order)

        assert response.status_code == 500
        assert response.json()['error']['code'] == 'WRITE_FAILED'

    def test_list(self, client, created):
        response = client.get(reverse('orderman:order-list'))

        assert response.status_code == 200
        (row,) = response.json()
        assert row['id'] == created
        assert row['item_display_name'] == 'Oak Traditional'

    def test_method_not_allowed(self, client, db):
        response = client.put(reverse('orderman:order-list'))

        assert response.status_code == 405


class TestOrderDetail:

    def test_update(self, client, created):
        url = reverse('orderman:order-detail', args=[created])

        response = _send(client, 'patch', url, {'backordered': True, 'tbd_expected': True})

        assert response.status_code == 200
        assert response.json()['status'] == OrderStatus.BACKORDERED
        assert response.json()['supplier_name'] == 'Batesville'

    def test_update_missing(self, client, db):
        url = reverse('orderman:order-detail', args=[404])

        response = _send(client, 'patch', url, {'po_number': 'PO-404'})

        assert response.status_code == 404

    def test_delete(self, client, created, casket):
        url = reverse('orderman:order-detail', args=[created])

        assert client.delete(url).status_code == 204
        assert client.delete(url).status_code == 404
        assert on_hand(casket) == 2


class TestOrderArrive:

    def test_arrive_then_conflict(self, client, created, casket):
        url = reverse('orderman:order-arrive', args=[created])

        response = _send(client, 'patch', url, {'received_by': 'Alice'})

        assert response.status_code == 200
        body = response.json()
        assert body['ok'] is True
        assert body['order']['status'] == OrderStatus.ARRIVED
        assert body['order']['received_by'] == 'Alice'
        assert on_hand(casket) == 3

        again = _send(client, 'post', url, {'received_by': 'Bob'})

        assert again.status_code == 409
        assert again.json()['error']['code'] == 'ALREADY_ARRIVED'
        assert on_hand(casket) == 3

    def test_arrive_requires_received_by(self, client, created):
        url = reverse('orderman:order-arrive', args=[created])

        response = _send(client, 'patch', url, {})

        assert response.status_code == 400


class TestInventoryEndpoint:

    def test_status(self, client, casket, urn):
        response = client.get(reverse('orderman:inventory-status'), {'short': '1'})

        assert response.status_code == 200
        assert [row['name'] for row in response.json()] == ['Oak Traditional']

    def test_bad_type(self, client, db):
        response = client.get(reverse('orderman:inventory-status'), {'type': 'vault'})

        assert response.status_code == 400
