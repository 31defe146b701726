"""
Order status rules — isolated, testable, pure.

Status is derived state: a function of (backordered, item_name, arrived).
Every write path that changes those inputs recomputes it through here, so
the stored column never drifts from the fields it summarizes.

Precedence:
    arrived       -> ARRIVED (terminal, never recomputed away)
    backordered   -> BACKORDERED
    item_name set -> SPECIAL
    otherwise     -> PENDING

special_order and tbd_expected do not take part in classification.
"""

from orderman.exceptions import ConflictError, ValidationError
from orderman.models.enums import OrderStatus

INITIAL_STATUSES = frozenset({
    OrderStatus.PENDING.value,
    OrderStatus.BACKORDERED.value,
    OrderStatus.SPECIAL.value,
})

TERMINAL_STATUSES = frozenset({OrderStatus.ARRIVED.value})


def derive_status(backordered: bool, item_name: str | None, arrived: bool = False) -> OrderStatus:
    """
    Compute the status for the given inputs.

    Args:
        backordered: Supplier reported a backorder
        item_name: Free-text description (special orders)
        arrived: Order has been received

    Returns:
        OrderStatus
    """
    if arrived:
        return OrderStatus.ARRIVED
    if backordered:
        return OrderStatus.BACKORDERED
    if item_name and item_name.strip():
        return OrderStatus.SPECIAL
    return OrderStatus.PENDING


def recompute(order) -> OrderStatus:
    """
    Status an order should have after a field update.

    ARRIVED orders keep their status. Idempotent: recompute(o) applied to an
    order already carrying recompute(o) yields the same value.
    """
    if order.status in TERMINAL_STATUSES:
        return OrderStatus(order.status)
    return derive_status(order.backordered, order.item_name)


def initial_status(requested: str | None, backordered: bool, item_name: str | None) -> OrderStatus:
    """
    Status for a new order.

    Uses the caller's status when given (must be an initial status),
    otherwise derives it.

    Raises:
        ValidationError('INVALID_STATUS'): requested status is ARRIVED or unknown
    """
    if requested is None:
        return derive_status(backordered, item_name)
    if requested not in INITIAL_STATUSES:
        raise ValidationError(
            'INVALID_STATUS',
            errors={'status': [f"must be one of {sorted(INITIAL_STATUSES)}"]},
            current=requested,
        )
    return OrderStatus(requested)


def can_arrive(status: str) -> bool:
    return status not in TERMINAL_STATUSES


def ensure_can_arrive(order) -> None:
    """
    Raises:
        ConflictError('ALREADY_ARRIVED'): order is already ARRIVED
    """
    if not can_arrive(order.status):
        raise ConflictError(
            'ALREADY_ARRIVED',
            order_id=order.pk,
            arrived_at=order.arrived_at,
            received_by=order.received_by,
        )
