"""
Tests for the validating command constructors.

Pure functions, no database.
"""

from datetime import date

import pytest

from orderman.commands import (
    MAX_ID,
    UNSET,
    ArriveOrder,
    CreateOrder,
    UpdateOrder,
    validate_arrive,
    validate_create,
    validate_update,
)


class TestValidateCreate:

    def test_minimal_payload(self):
        result = validate_create({'item_type': 'casket', 'item_id': 7, 'po_number': 'PO-1'})

        assert result.valid
        assert result.command == CreateOrder(item_type='casket', item_id=7, po_number='PO-1')

    def test_unknown_keys_ignored(self):
        result = validate_create({'item_type': 'urn', 'po_number': 'PO-1', 'color': 'blue'})

        assert result.valid

    def test_dates_parsed_and_blank_is_null(self):
        result = validate_create({
            'item_type': 'urn',
            'po_number': 'PO-1',
            'expected_date': '2026-11-02',
            'need_by_date': '',
        })

        assert result.command.expected_date == date(2026, 11, 2)
        assert result.command.need_by_date is None

    def test_missing_required(self):
        result = validate_create({})

        assert not result.valid
        assert result.errors['item_type'] == ['required']
        assert result.errors['po_number'] == ['required']

    def test_blank_po_number(self):
        result = validate_create({'item_type': 'urn', 'po_number': '   '})

        assert result.errors['po_number'] == ['must not be blank']

    def test_unknown_item_type(self):
        result = validate_create({'item_type': 'vault', 'po_number': 'PO-1'})

        assert 'item_type' in result.errors

    @pytest.mark.parametrize('status', ['ARRIVED', 'LOST', 3, ['PENDING']])
    def test_bad_status(self, status):
        result = validate_create({'item_type': 'urn', 'po_number': 'PO-1', 'status': status})

        assert 'status' in result.errors

    @pytest.mark.parametrize('field,value', [
        ('item_id', 'seven'),
        ('item_id', True),
        ('backordered', 'yes'),
        ('expected_date', '11/02/2026'),
        ('notes', 12),
    ])
    def test_wrong_types(self, field, value):
        result = validate_create({'item_type': 'urn', 'po_number': 'PO-1', field: value})

        assert field in result.errors

    @pytest.mark.parametrize('field', ['item_id', 'supplier_id'])
    @pytest.mark.parametrize('value', [0, -1, 2**63, 10**20])
    def test_ids_out_of_range(self, field, value):
        result = validate_create({'item_type': 'casket', 'po_number': 'PO-1', field: value})

        assert not result.valid
        assert result.errors[field] == [f'must be between 1 and {MAX_ID}']

    def test_largest_id_accepted(self):
        result = validate_create({'item_type': 'casket', 'po_number': 'PO-1', 'item_id': MAX_ID})

        assert result.command.item_id == MAX_ID

    def test_not_an_object(self):
        result = validate_create(['item_type'])

        assert result.errors == {'__all__': ['expected a JSON object']}


class TestValidateUpdate:

    def test_only_sent_fields_change(self):
        result = validate_update({'po_number': 'PO-2'})

        assert result.command.changes() == {'po_number': 'PO-2'}
        assert result.command.backordered is UNSET

    def test_empty_patch(self):
        result = validate_update({})

        assert result.valid
        assert result.command.changes() == {}

    def test_tbd_expected_clears_date(self):
        result = validate_update({'tbd_expected': True, 'expected_date': '2026-11-02'})

        assert result.command.changes() == {'tbd_expected': True, 'expected_date': None}

    def test_null_date_clears(self):
        result = validate_update({'expected_date': None})

        assert result.command.changes() == {'expected_date': None}

    @pytest.mark.parametrize('field', ['status', 'item_id', 'created_at', 'arrived_at'])
    def test_non_updatable_rejected(self, field):
        result = validate_update({field: 'x'})

        assert result.errors[field] == ['field cannot be updated']

    def test_backorder_alone_is_well_formed(self):
        """The date rule depends on the stored order, not on the patch shape."""
        result = validate_update({'backordered': True})

        assert result.valid
        assert result.command.changes() == {'backordered': True}

    def test_command_is_frozen(self):
        with pytest.raises(AttributeError):
            UpdateOrder(po_number='PO-1').po_number = 'PO-2'


class TestValidateArrive:

    def test_received_by_required(self):
        assert validate_arrive({}).errors == {'received_by': ['required']}

    def test_arrived_at_made_aware(self):
        result = validate_arrive({'received_by': 'Alice', 'arrived_at': '2026-10-01T09:30:00'})

        assert isinstance(result.command, ArriveOrder)
        assert result.command.arrived_at.tzinfo is not None

    def test_bad_arrived_at(self):
        result = validate_arrive({'received_by': 'Alice', 'arrived_at': 'yesterday'})

        assert 'arrived_at' in result.errors
