"""
Order lifecycle — create, update, arrive, delete.

Every write is a single-row statement. create() and arrive() pair an order
write with a stock adjustment and run as sagas (see services.saga): if the
stock step fails, the order write is undone and the caller sees the error.

The *_saga methods return a SagaOutcome and never raise OrderError;
the plain methods unwrap it.
"""

import logging

from django.db import DatabaseError
from django.utils import timezone

from orderman.adapters import get_item_catalog, get_supplier_directory
from orderman.commands import (
    ArriveOrder,
    CreateOrder,
    UpdateOrder,
    validate_arrive,
    validate_create,
    validate_update,
)
from orderman.conf import orderman_settings
from orderman.exceptions import (
    ConflictError,
    NotFoundError,
    OrderError,
    PersistenceError,
    ValidationError,
)
from orderman.models.enums import OrderStatus
from orderman.models.order import Order
from orderman.services.inventory import InventoryCounter
from orderman.services.saga import SagaOutcome, compensate
from orderman.states import ensure_can_arrive, initial_status, recompute

logger = logging.getLogger('orderman')


def _validated(command, command_class, validate):
    """Accept a ready command or validate a raw payload into one."""
    if isinstance(command, command_class):
        return command
    result = validate(command)
    if not result.valid:
        raise ValidationError('INVALID_INPUT', errors=result.errors)
    return result.command


def _write(step: str, statement, **context):
    """Run a single-row statement, mapping backing-store failures."""
    try:
        return statement()
    except DatabaseError as e:
        raise PersistenceError('WRITE_FAILED', step=step, detail=str(e), **context) from e


def _fetch(order_id) -> Order:
    try:
        return Order.objects.get(pk=order_id)
    except Order.DoesNotExist:
        raise NotFoundError('ORDER_NOT_FOUND', order_id=order_id) from None
    except DatabaseError as e:
        raise PersistenceError('READ_FAILED', order_id=order_id, detail=str(e)) from e


class OrderLifecycle:
    """Order lifecycle methods."""

    # ══════════════════════════════════════════════════════════════
    # CREATE
    # ══════════════════════════════════════════════════════════════

    @classmethod
    def create(cls, command) -> int:
        """
        Create an order and reserve stock for it if it qualifies.

        Args:
            command: CreateOrder or raw payload dict

        Returns:
            The new order's id

        Raises:
            ValidationError: malformed payload
            NotFoundError: supplier or (qualifying) item does not exist
            PersistenceError: backing store failure
            InventoryAdjustmentError: stock failed and the insert could not be undone
        """
        command = _validated(command, CreateOrder, validate_create)
        return cls.create_saga(command).unwrap().pk

    @classmethod
    def create_saga(cls, command: CreateOrder) -> SagaOutcome:
        """
        Step 1: insert the order row.
        Step 2: reserve one unit, if the order qualifies.
        Undo:   delete the inserted row.
        """
        try:
            try:
                fields = cls._insert_fields(command)
            except DatabaseError as e:
                raise PersistenceError('READ_FAILED', step='create.resolve', detail=str(e)) from e
            order = _write('create.insert', lambda: Order.objects.create(**fields))
        except OrderError as e:
            return SagaOutcome.failure(e)

        logger.info(
            "order.created",
            extra={
                "order_id": order.pk,
                "po_number": order.po_number,
                "status": order.status,
                "item_type": order.item_type,
                "item_id": order.item_id,
                "special_order": order.special_order,
            },
        )

        if not InventoryCounter.qualifies(order):
            return SagaOutcome.success(order)

        try:
            InventoryCounter.reserve(order.item_type, order.item_id, order_id=order.pk)
        except OrderError as e:
            return compensate(
                'create.reserve',
                e,
                undo=lambda: cls._remove(order.pk),
                order_id=order.pk,
            )

        return SagaOutcome.success(order)

    @classmethod
    def _insert_fields(cls, command: CreateOrder) -> dict:
        """
        Normalize a CreateOrder into Order columns.

        - special orders drop item_id, regular orders drop item_name
        - deceased_name only kept on special orders
        - tbd_expected clears expected_date
        """
        special = command.special_order
        item_id = None if special else command.item_id
        item_name = command.item_name if special else None

        return dict(
            item_type=command.item_type,
            item_id=item_id,
            item_name=item_name,
            supplier_id=cls._resolve_supplier(command, item_id),
            po_number=command.po_number,
            expected_date=None if command.tbd_expected else command.expected_date,
            status=initial_status(command.status, command.backordered, item_name),
            backordered=command.backordered,
            tbd_expected=command.tbd_expected,
            special_order=special,
            deceased_name=command.deceased_name if special else None,
            need_by_date=command.need_by_date,
            notes=command.notes,
            is_return=command.is_return,
            return_reason=command.return_reason,
            created_at=timezone.now(),
        )

    @classmethod
    def _resolve_supplier(cls, command: CreateOrder, item_id):
        """
        Supplier for a new order.

        Explicit supplier_id wins. Otherwise regular orders copy the item's
        supplier (when the item exists) and special orders use
        SPECIAL_ORDER_SUPPLIER.

        Raises:
            NotFoundError('SUPPLIER_NOT_FOUND'): explicit supplier_id is unknown
        """
        if command.supplier_id is not None:
            return get_supplier_directory().get(command.supplier_id).id

        if command.special_order:
            return orderman_settings.SPECIAL_ORDER_SUPPLIER

        if item_id is None:
            return None
        item = get_item_catalog().find(command.item_type, item_id)
        return item.supplier_id if item else None

    # ══════════════════════════════════════════════════════════════
    # UPDATE
    # ══════════════════════════════════════════════════════════════

    @classmethod
    def update(cls, order_id, patch) -> Order:
        """
        Apply a partial patch, then recompute status unless ARRIVED.

        Never touches stock: qualification is decided at create/arrive only.

        Args:
            order_id: Order pk
            patch: UpdateOrder or raw payload dict

        Returns:
            The refreshed order

        Raises:
            ValidationError: malformed patch, or a backorder left without
                expected_date and tbd_expected
            NotFoundError('ORDER_NOT_FOUND'): no such order
            PersistenceError: backing store failure
        """
        command = _validated(patch, UpdateOrder, validate_update)
        changes = command.changes()
        order = _fetch(order_id)
        cls._check_backorder(order, changes)
        rows = Order.objects.filter(pk=order_id)

        if changes:
            updated = _write('update.patch', lambda: rows.update(**changes), order_id=order_id)
            if not updated:
                raise NotFoundError('ORDER_NOT_FOUND', order_id=order_id)
            order = _fetch(order_id)

        status = recompute(order)
        if status != order.status:
            # Conditional on the row still not being ARRIVED
            _write(
                'update.status',
                lambda: rows.exclude(status=OrderStatus.ARRIVED).update(status=status),
                order_id=order_id,
            )
            order.status = status

        logger.info(
            "order.updated",
            extra={
                "order_id": order.pk,
                "fields": sorted(changes),
                "status": order.status,
            },
        )
        return order

    @staticmethod
    def _check_backorder(order: Order, changes: dict) -> None:
        """
        A patch setting backordered=true needs an expected_date or
        tbd_expected=true, from the patch or already on the order.
        """
        if changes.get('backordered') is not True:
            return
        tbd_expected = changes.get('tbd_expected', order.tbd_expected)
        expected_date = changes.get('expected_date', order.expected_date)
        if not tbd_expected and expected_date is None:
            raise ValidationError(
                'INVALID_INPUT',
                errors={'expected_date': [
                    'provide expected_date or set tbd_expected=true for backorders'
                ]},
                order_id=order.pk,
            )

    # ══════════════════════════════════════════════════════════════
    # ARRIVE
    # ══════════════════════════════════════════════════════════════

    @classmethod
    def arrive(cls, order_id, received_by=None, arrived_at=None) -> Order:
        """
        Mark an order as received and restock the item if it qualifies.

        Args:
            order_id: Order pk
            received_by: Who received it (None = keep previous value)
            arrived_at: When (None = now)

        Returns:
            The arrived order

        Raises:
            NotFoundError: order (or qualifying item) does not exist
            ConflictError('ALREADY_ARRIVED'): order already ARRIVED
            PersistenceError: backing store failure
            InventoryAdjustmentError: stock failed and the arrival could not be undone
        """
        return cls.arrive_saga(order_id, received_by, arrived_at).unwrap()

    @classmethod
    def arrive_command(cls, order_id, command) -> Order:
        """arrive() taking an ArriveOrder or raw payload dict."""
        command = _validated(command, ArriveOrder, validate_arrive)
        return cls.arrive(order_id, command.received_by, command.arrived_at)

    @classmethod
    def arrive_saga(cls, order_id, received_by=None, arrived_at=None) -> SagaOutcome:
        """
        Step 1: conditional write status=ARRIVED (only if not ARRIVED yet).
        Step 2: restock one unit, if the order qualifies.
        Undo:   restore the pre-image's status, arrived_at, received_by.
        """
        try:
            before = _fetch(order_id)
            ensure_can_arrive(before)

            arrival = {
                'status': OrderStatus.ARRIVED,
                'arrived_at': arrived_at or timezone.now(),
                'received_by': received_by or before.received_by,
            }
            written = _write(
                'arrive.mark',
                lambda: Order.objects.filter(pk=order_id)
                .exclude(status=OrderStatus.ARRIVED)
                .update(**arrival),
                order_id=order_id,
            )
            if not written:
                # Deleted or arrived by someone else since the fetch
                ensure_can_arrive(_fetch(order_id))
                raise ConflictError('ALREADY_ARRIVED', order_id=order_id)
        except OrderError as e:
            return SagaOutcome.failure(e)

        if InventoryCounter.qualifies(before):
            try:
                InventoryCounter.restock(before.item_type, before.item_id, order_id=order_id)
            except OrderError as e:
                return compensate(
                    'arrive.restock',
                    e,
                    undo=lambda: cls._restore_arrival(before),
                    order_id=order_id,
                )

        order = before
        for name, value in arrival.items():
            setattr(order, name, value)

        logger.info(
            "order.arrived",
            extra={
                "order_id": order.pk,
                "received_by": order.received_by,
                "restocked": InventoryCounter.qualifies(order),
            },
        )
        return SagaOutcome.success(order)

    # ══════════════════════════════════════════════════════════════
    # DELETE
    # ══════════════════════════════════════════════════════════════

    @classmethod
    def delete(cls, order_id) -> None:
        """
        Remove an order, whatever its status.

        Stock already moved by the order is left as is: deletion is an
        administrative correction outside the stock ledger.

        Raises:
            NotFoundError('ORDER_NOT_FOUND'): no such order
            PersistenceError: backing store failure
        """
        if not cls._remove(order_id):
            raise NotFoundError('ORDER_NOT_FOUND', order_id=order_id)

        logger.info(
            "order.deleted",
            extra={"order_id": order_id, "inventory_reversed": False},
        )

    # ══════════════════════════════════════════════════════════════
    # COMPENSATING WRITES
    # ══════════════════════════════════════════════════════════════

    @classmethod
    def _remove(cls, order_id) -> int:
        deleted, _ = _write(
            'delete',
            lambda: Order.objects.filter(pk=order_id).delete(),
            order_id=order_id,
        )
        return deleted

    @classmethod
    def _restore_arrival(cls, before: Order) -> None:
        _write(
            'arrive.restore',
            lambda: Order.objects.filter(pk=before.pk).update(
                status=before.status,
                arrived_at=before.arrived_at,
                received_by=before.received_by,
            ),
            order_id=before.pk,
        )
