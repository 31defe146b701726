"""
Tests for order status derivation.
"""

from types import SimpleNamespace

import pytest

from orderman.exceptions import ConflictError, ValidationError
from orderman.models.enums import OrderStatus
from orderman.states import (
    can_arrive,
    derive_status,
    ensure_can_arrive,
    initial_status,
    recompute,
)


def _order(status='PENDING', backordered=False, item_name=None, **kwargs):
    return SimpleNamespace(
        pk=kwargs.get('pk', 1),
        status=status,
        backordered=backordered,
        item_name=item_name,
        arrived_at=kwargs.get('arrived_at'),
        received_by=kwargs.get('received_by'),
    )


class TestDeriveStatus:

    @pytest.mark.parametrize('backordered,item_name,expected', [
        (False, None, OrderStatus.PENDING),
        (False, '', OrderStatus.PENDING),
        (False, '   ', OrderStatus.PENDING),
        (False, 'Custom Urn', OrderStatus.SPECIAL),
        (True, None, OrderStatus.BACKORDERED),
        (True, 'Custom Urn', OrderStatus.BACKORDERED),
    ])
    def test_precedence(self, backordered, item_name, expected):
        assert derive_status(backordered, item_name) == expected

    def test_arrived_wins(self):
        assert derive_status(True, 'Custom Urn', arrived=True) == OrderStatus.ARRIVED


class TestRecompute:

    def test_arrived_is_kept(self):
        order = _order(status='ARRIVED', backordered=True)
        assert recompute(order) == OrderStatus.ARRIVED

    def test_idempotent(self):
        order = _order(status='PENDING', backordered=True)
        order.status = recompute(order)
        assert recompute(order) == order.status == OrderStatus.BACKORDERED


class TestInitialStatus:

    def test_derived_when_not_given(self):
        assert initial_status(None, False, 'Custom Urn') == OrderStatus.SPECIAL

    def test_given_status_used(self):
        assert initial_status('BACKORDERED', False, None) == OrderStatus.BACKORDERED

    @pytest.mark.parametrize('requested', ['ARRIVED', 'LOST'])
    def test_non_initial_rejected(self, requested):
        with pytest.raises(ValidationError) as exc:
            initial_status(requested, False, None)

        assert exc.value.code == 'INVALID_STATUS'
        assert 'status' in exc.value.errors


class TestArriveGuard:

    def test_can_arrive(self):
        assert can_arrive('PENDING')
        assert can_arrive('SPECIAL')
        assert not can_arrive('ARRIVED')

    def test_ensure_can_arrive_raises_conflict(self):
        order = _order(status='ARRIVED', received_by='Alice', pk=5)

        with pytest.raises(ConflictError) as exc:
            ensure_can_arrive(order)

        assert exc.value.code == 'ALREADY_ARRIVED'
        assert exc.value.data['order_id'] == 5
        assert exc.value.data['received_by'] == 'Alice'
