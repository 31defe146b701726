"""
Exceptions for Orderman.

All errors are OrderError subclasses with a structured code for programmatic
handling. The subclass tells the caller WHAT kind of failure happened, the
code tells it exactly which one.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Any


class OrderError(Exception):
    """
    Structured exception for order lifecycle operations.

    Usage:
        try:
            orders.arrive(order_id, received_by='Alice')
        except OrderError as e:
            if e.code == 'ALREADY_ARRIVED':
                print(f"Already received by {e.data['received_by']}")

    Attributes:
        code: Error code for programmatic handling
        message: Human-readable message
        data: Additional context data
    """

    _default_messages: dict[str, str] = {}

    def __init__(self, code: str, message: str | None = None, **data):
        self.code = code
        self.message = message or self._default_messages.get(code, code)
        self.data = data
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.code!r}, data={self.data!r})"

    def as_dict(self) -> dict[str, Any]:
        """Serialize to dict (useful for APIs)."""
        return {
            'code': self.code,
            'message': self.message,
            'data': {k: _jsonable(v) for k, v in self.data.items()},
        }


def _jsonable(value):
    if isinstance(value, (Decimal, date, datetime)):
        return str(value)
    if isinstance(value, OrderError):
        return value.as_dict()
    if isinstance(value, dict):
        return {k: _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    return value


class ValidationError(OrderError):
    """Malformed or missing input. ``data['errors']`` maps field -> messages."""

    _default_messages = {
        'INVALID_INPUT': 'Invalid input',
        'INVALID_STATUS': 'Invalid status for this operation',
    }

    @property
    def errors(self) -> dict[str, list[str]]:
        """Shortcut for data['errors']."""
        return self.data.get('errors', {})


class NotFoundError(OrderError):
    """Referenced order, item or supplier does not exist."""

    _default_messages = {
        'ORDER_NOT_FOUND': 'Order not found',
        'ITEM_NOT_FOUND': 'Item not found in catalog',
        'SUPPLIER_NOT_FOUND': 'Supplier not found',
    }


class ConflictError(OrderError):
    """Operation not valid in the order's current state."""

    _default_messages = {
        'ALREADY_ARRIVED': 'Order has already arrived',
    }


class InventoryAdjustmentError(OrderError):
    """
    The paired stock update failed and the order mutation could not be undone.

    ``__cause__`` and ``data['cause']`` carry the error that started the
    compensation; ``data['compensation_error']`` the one that broke it.
    """

    _default_messages = {
        'COMPENSATION_FAILED': 'Could not undo order change after stock update failed',
    }

    @property
    def cause(self) -> OrderError | None:
        """Shortcut for data['cause']."""
        return self.data.get('cause')


class PersistenceError(OrderError):
    """Generic backing-store failure."""

    _default_messages = {
        'WRITE_FAILED': 'Failed to write to the backing store',
        'READ_FAILED': 'Failed to read from the backing store',
    }
