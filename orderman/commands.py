"""
Order commands — typed requests plus pure validating constructors.

Each validate_* function takes a raw payload (decoded JSON) and returns a
Validation: either valid with a frozen command dataclass, or invalid with
field-level messages. Nothing here touches the database.

Usage:
    result = validate_create({"item_type": "casket", "item_id": 7, "po_number": "PO-1"})
    if result.valid:
        orders.create(result.command)
    else:
        print(result.errors)  # {"po_number": ["required"], ...}
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any

from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime

from orderman.models.enums import ItemType, OrderStatus
from orderman.states import INITIAL_STATUSES


class _Unset:
    """Marker for patch fields the caller did not send."""

    def __repr__(self) -> str:
        return 'UNSET'

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()

# Largest id a signed 64-bit column holds
MAX_ID = 2**63 - 1

UPDATABLE_FIELDS = (
    'po_number',
    'expected_date',
    'backordered',
    'tbd_expected',
    'need_by_date',
    'is_return',
    'return_reason',
)


@dataclass(frozen=True)
class Validation:
    """Tagged result of a validating constructor."""

    valid: bool
    command: Any = None
    errors: dict[str, list[str]] = field(default_factory=dict)

    @classmethod
    def ok(cls, command) -> Validation:
        return cls(valid=True, command=command)

    @classmethod
    def invalid(cls, errors: dict[str, list[str]]) -> Validation:
        return cls(valid=False, errors=errors)


@dataclass(frozen=True)
class CreateOrder:
    """Create Order request."""

    item_type: str
    po_number: str
    item_id: int | None = None
    item_name: str | None = None
    supplier_id: int | None = None
    expected_date: date | None = None
    status: str | None = None  # None = derive from fields
    backordered: bool = False
    tbd_expected: bool = False
    special_order: bool = False
    is_return: bool = False
    deceased_name: str | None = None
    need_by_date: date | None = None
    notes: str | None = None
    return_reason: str | None = None


@dataclass(frozen=True)
class UpdateOrder:
    """Update Order request. Fields left UNSET are not touched."""

    po_number: str = UNSET
    expected_date: date | None = UNSET
    backordered: bool = UNSET
    tbd_expected: bool = UNSET
    need_by_date: date | None = UNSET
    is_return: bool = UNSET
    return_reason: str | None = UNSET

    def changes(self) -> dict[str, Any]:
        """
        Columns to write, normalized.

        tbd_expected=True clears expected_date.
        """
        result = {
            name: getattr(self, name)
            for name in UPDATABLE_FIELDS
            if getattr(self, name) is not UNSET
        }
        if result.get('tbd_expected') is True:
            result['expected_date'] = None
        return result


@dataclass(frozen=True)
class ArriveOrder:
    """Arrive Order request."""

    received_by: str
    arrived_at: datetime | None = None


# ══════════════════════════════════════════════════════════════
# FIELD PARSERS
# ══════════════════════════════════════════════════════════════

class _Errors(dict):
    def add(self, name: str, message: str) -> None:
        self.setdefault(name, []).append(message)


def _text(data, name, errors, required=False):
    value = data.get(name)
    if value is None or value == '':
        if required:
            errors.add(name, 'required')
        return None
    if not isinstance(value, str):
        errors.add(name, 'expected a string')
        return None
    if required and not value.strip():
        errors.add(name, 'must not be blank')
        return None
    return value


def _flag(data, name, errors):
    value = data.get(name)
    if value is None:
        return False
    if not isinstance(value, bool):
        errors.add(name, 'expected a boolean')
        return False
    return value


def _integer(data, name, errors):
    value = data.get(name)
    if value is None:
        return None
    # bool is an int subclass; true/false is not an id
    if isinstance(value, bool) or not isinstance(value, int):
        errors.add(name, 'expected an integer or null')
        return None
    if not 1 <= value <= MAX_ID:
        errors.add(name, f'must be between 1 and {MAX_ID}')
        return None
    return value


def _date(data, name, errors):
    value = data.get(name)
    if value is None or value == '':
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            parsed = parse_date(value)
        except ValueError:
            parsed = None
        if parsed is not None:
            return parsed
    errors.add(name, 'expected YYYY-MM-DD')
    return None


def _datetime(data, name, errors):
    value = data.get(name)
    if value is None or value == '':
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        try:
            parsed = parse_datetime(value)
        except ValueError:
            parsed = None
        if parsed is None:
            errors.add(name, 'expected an ISO 8601 datetime')
            return None
    else:
        errors.add(name, 'expected an ISO 8601 datetime')
        return None
    if timezone.is_naive(parsed):
        parsed = timezone.make_aware(parsed)
    return parsed


def _require_object(payload) -> dict[str, list[str]] | None:
    if not isinstance(payload, dict):
        return {'__all__': ['expected a JSON object']}
    return None


# ══════════════════════════════════════════════════════════════
# VALIDATING CONSTRUCTORS
# ══════════════════════════════════════════════════════════════

def validate_create(payload) -> Validation:
    """
    Validate a Create Order payload.

    Unknown keys are ignored. Empty-string dates become null.
    """
    bad = _require_object(payload)
    if bad:
        return Validation.invalid(bad)

    errors = _Errors()

    item_type = payload.get('item_type')
    if item_type is None:
        errors.add('item_type', 'required')
    elif item_type not in ItemType.values:
        errors.add('item_type', f"must be one of {ItemType.values}")

    status = payload.get('status')
    if status is not None:
        if status == OrderStatus.ARRIVED:
            errors.add('status', 'orders cannot be created as ARRIVED')
        elif not isinstance(status, str) or status not in INITIAL_STATUSES:
            errors.add('status', f"must be one of {sorted(INITIAL_STATUSES)}")

    command_fields = dict(
        item_type=item_type,
        po_number=_text(payload, 'po_number', errors, required=True),
        item_id=_integer(payload, 'item_id', errors),
        item_name=_text(payload, 'item_name', errors),
        supplier_id=_integer(payload, 'supplier_id', errors),
        expected_date=_date(payload, 'expected_date', errors),
        status=status,
        backordered=_flag(payload, 'backordered', errors),
        tbd_expected=_flag(payload, 'tbd_expected', errors),
        special_order=_flag(payload, 'special_order', errors),
        is_return=_flag(payload, 'is_return', errors),
        deceased_name=_text(payload, 'deceased_name', errors),
        need_by_date=_date(payload, 'need_by_date', errors),
        notes=_text(payload, 'notes', errors),
        return_reason=_text(payload, 'return_reason', errors),
    )

    if errors:
        return Validation.invalid(dict(errors))
    return Validation.ok(CreateOrder(**command_fields))


def validate_update(payload) -> Validation:
    """
    Validate an Update Order patch.

    Only UPDATABLE_FIELDS may appear. The backorder date rule needs the
    stored order and is checked by OrderLifecycle.update().
    """
    bad = _require_object(payload)
    if bad:
        return Validation.invalid(bad)

    errors = _Errors()

    for name in sorted(set(payload) - set(UPDATABLE_FIELDS)):
        errors.add(name, 'field cannot be updated')

    parsers = {
        'po_number': lambda: _text(payload, 'po_number', errors, required=True),
        'expected_date': lambda: _date(payload, 'expected_date', errors),
        'backordered': lambda: _flag(payload, 'backordered', errors),
        'tbd_expected': lambda: _flag(payload, 'tbd_expected', errors),
        'need_by_date': lambda: _date(payload, 'need_by_date', errors),
        'is_return': lambda: _flag(payload, 'is_return', errors),
        'return_reason': lambda: _text(payload, 'return_reason', errors),
    }
    command_fields = {name: parse() for name, parse in parsers.items() if name in payload}

    if errors:
        return Validation.invalid(dict(errors))
    return Validation.ok(UpdateOrder(**command_fields))


def validate_arrive(payload) -> Validation:
    """Validate an Arrive Order payload."""
    bad = _require_object(payload)
    if bad:
        return Validation.invalid(bad)

    errors = _Errors()
    received_by = _text(payload, 'received_by', errors, required=True)
    arrived_at = _datetime(payload, 'arrived_at', errors)

    if errors:
        return Validation.invalid(dict(errors))
    return Validation.ok(ArriveOrder(received_by=received_by, arrived_at=arrived_at))
