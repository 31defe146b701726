"""
JSON endpoints for the order engine.

    GET    /orders/                 list (enriched, or raw rows as fallback)
    POST   /orders/                 create -> 201 {"id": ...}
    PATCH  /orders/<id>/            update -> 200 order
    DELETE /orders/<id>/            delete -> 204
    PATCH  /orders/<id>/arrive/     arrive -> 200 {"ok": true, "order": ...}
    GET    /inventory/status/       stock status per item

Errors are returned as {"error": {"code", "message", "data"}}.
"""

import json
import logging
from functools import wraps

from django.http import HttpResponse, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from orderman.exceptions import (
    ConflictError,
    InventoryAdjustmentError,
    NotFoundError,
    OrderError,
    PersistenceError,
    ValidationError,
)
from orderman.models.enums import ItemType
from orderman.service import Orders

logger = logging.getLogger(__name__)


ERROR_STATUS = (
    (ValidationError, 400),
    (NotFoundError, 404),
    (ConflictError, 409),
    (InventoryAdjustmentError, 500),
    (PersistenceError, 500),
)


def _error_response(error: OrderError) -> JsonResponse:
    status = next(
        (code for error_class, code in ERROR_STATUS if isinstance(error, error_class)),
        500,
    )
    if status >= 500:
        logger.error("api.error", extra={"code": error.code, "error": str(error)})
    return JsonResponse({'error': error.as_dict()}, status=status)


def _json_body(request):
    if not request.body:
        return {}
    try:
        return json.loads(request.body)
    except ValueError:
        raise ValidationError('INVALID_INPUT', errors={'__all__': ['invalid JSON']}) from None


def order_errors(view):
    """Turn OrderError into a structured JSON error response."""

    @wraps(view)
    def wrapper(request, *args, **kwargs):
        try:
            return view(request, *args, **kwargs)
        except OrderError as e:
            return _error_response(e)

    return wrapper


@csrf_exempt
@require_http_methods(["GET", "POST"])
@order_errors
def order_collection(request):
    if request.method == "GET":
        return JsonResponse(Orders.list_orders(), safe=False)

    order_id = Orders.create(_json_body(request))
    return JsonResponse({'id': order_id}, status=201)


@csrf_exempt
@require_http_methods(["PATCH", "DELETE"])
@order_errors
def order_detail(request, order_id):
    if request.method == "DELETE":
        Orders.delete(order_id)
        return HttpResponse(status=204)

    order = Orders.update(order_id, _json_body(request))
    return JsonResponse(Orders.enrich(order))


@csrf_exempt
@require_http_methods(["PATCH", "POST"])
@order_errors
def order_arrive(request, order_id):
    order = Orders.arrive_command(order_id, _json_body(request))
    return JsonResponse({'ok': True, 'order': Orders.enrich(order)})


@require_http_methods(["GET"])
@order_errors
def inventory_status(request):
    item_type = request.GET.get('type') or None
    if item_type is not None and item_type not in ItemType.values:
        raise ValidationError('INVALID_INPUT', errors={'type': [f"must be one of {ItemType.values}"]})

    short_only = request.GET.get('short') in ('1', 'true', 'yes')
    rows = Orders.inventory_status(item_type=item_type, short_only=short_only)
    return JsonResponse([row.as_dict() for row in rows], safe=False)
