"""
Saga outcome — typed result of a two-step order mutation.

create() and arrive() each write the order row and then adjust stock.
There is no transaction spanning both, so a failed second step is undone by
a compensating write. The outcome records which of three things happened:

    ok                         order is the final order, error is None
    failed, compensated=True   first step undone, error is the original one
    failed, compensated=False  undo failed too, error is COMPENSATION_FAILED
    failed, compensated=None   nothing was written, nothing to undo
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable

from django.db import DatabaseError

from orderman.exceptions import InventoryAdjustmentError, OrderError

logger = logging.getLogger('orderman')


@dataclass(frozen=True)
class SagaOutcome:
    """Result of a lifecycle saga."""

    order: Any = None
    error: OrderError | None = None
    compensated: bool | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, order) -> 'SagaOutcome':
        return cls(order=order)

    @classmethod
    def failure(cls, error: OrderError) -> 'SagaOutcome':
        """Failure before anything was written."""
        return cls(error=error)

    def unwrap(self):
        """
        Return the order or raise the error.

        Raises:
            OrderError: whatever made the saga fail
        """
        if self.error is not None:
            raise self.error
        return self.order


def compensate(step: str, error: OrderError, undo: Callable[[], Any], **context) -> SagaOutcome:
    """
    Run the compensating write for a failed step, exactly once.

    Args:
        step: Name of the step that failed (for logs), e.g. 'create.reserve'
        error: The error raised by that step
        undo: Callable that reverts the already-applied order mutation
        **context: Extra identifiers for logs and error data

    Returns:
        Failed SagaOutcome. The original error when the undo worked,
        InventoryAdjustmentError('COMPENSATION_FAILED') when it did not.
    """
    try:
        undo()
    except (OrderError, DatabaseError) as undo_error:
        logger.error(
            "order.compensation_failed",
            extra={
                "step": step,
                "error": str(error),
                "compensation_error": str(undo_error),
                **context,
            },
        )
        failure = InventoryAdjustmentError(
            'COMPENSATION_FAILED',
            step=step,
            cause=error,
            compensation_error=str(undo_error),
            **context,
        )
        failure.__cause__ = error
        return SagaOutcome(error=failure, compensated=False)

    error.data.setdefault('compensated', True)
    logger.warning(
        "order.compensated",
        extra={"step": step, "error": str(error), **context},
    )
    return SagaOutcome(error=error, compensated=True)
