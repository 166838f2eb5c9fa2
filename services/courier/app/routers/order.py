from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from packages.shared.schemas.events import EventTypeV1, OrderEventV1
from services.courier.app.domain.errors import (
    CatalogItemNotFoundError,
    InvalidArgumentError,
    InvalidQuantityError,
    OrderError,
    OrderFinalizedError,
)
from services.courier.app.domain.factory import OrderBuilder
from services.courier.app.domain.lifecycle import Order, OrderKind
from services.courier.app.domain.pricing import order_subtotal
from services.courier.app.models.order import (
    ObserverFailureOut,
    OrderAdvanceResponse,
    OrderCreateRequest,
    OrderLineInput,
    OrderOut,
    OrderQuoteResponse,
)
from services.courier.app.services.audit import EventLogObserver, LoggingObserver
from services.courier.app.services.catalog_factory import get_catalog
from services.courier.app.services.pricing_factory import get_cost_pipeline
from services.courier.app.services.store import store

logger = logging.getLogger(__name__)

router = APIRouter()


def _raise_order_http_error(e: Exception) -> None:
    if isinstance(e, CatalogItemNotFoundError):
        status_code = 404
    elif isinstance(e, OrderFinalizedError):
        status_code = 409
    elif isinstance(e, (InvalidQuantityError, InvalidArgumentError)):
        status_code = 422
    elif isinstance(e, OrderError):
        status_code = 400
    else:
        raise HTTPException(status_code=500, detail="Internal Server Error") from e

    raise HTTPException(status_code=status_code, detail={"kind": e.kind, "message": str(e)}) from e


def _get_order_or_404(order_id: str) -> Order:
    order = store.get_order(order_id)
    if order is None:
        raise HTTPException(status_code=404, detail="Order not found")
    return order


@router.post("/v1/orders", response_model=OrderOut)
def create_order(payload: OrderCreateRequest) -> OrderOut:
    try:
        catalog = get_catalog()
    except ValueError as e:
        raise HTTPException(status_code=500, detail=str(e)) from e

    builder = OrderBuilder()
    if payload.kind is OrderKind.SPECIAL:
        builder.special(
            payload.customer_name,
            payload.address,
            express_requested=payload.express_requested,
            note=payload.note,
        )
    else:
        builder.standard(payload.customer_name, payload.address)

    try:
        for line in payload.lines:
            builder.add(catalog.get(line.item_id), line.quantity)
        order = builder.build()
    except Exception as e:
        _raise_order_http_error(e)

    order.subscribe(EventLogObserver(store))
    order.subscribe(LoggingObserver())
    store.save_order(order)

    order_id = str(order.id)
    store.append_event(order_id, EventTypeV1.ORDER_CREATED, {"kind": order.kind.value})
    for line in order.lines:
        store.append_event(
            order_id,
            EventTypeV1.LINE_ADDED,
            {"item_id": line.item.id, "quantity": line.quantity},
        )

    logger.info("Created %s order %s with %d lines", order.kind.value, order_id, len(order.lines))
    return OrderOut.from_order(order)


@router.get("/v1/orders/{order_id}", response_model=OrderOut)
def get_order(order_id: str) -> OrderOut:
    return OrderOut.from_order(_get_order_or_404(order_id))


@router.post("/v1/orders/{order_id}/lines", response_model=OrderOut)
def add_order_line(order_id: str, payload: OrderLineInput) -> OrderOut:
    order = _get_order_or_404(order_id)

    try:
        catalog = get_catalog()
    except ValueError as e:
        raise HTTPException(status_code=500, detail=str(e)) from e

    try:
        line = order.add_line(catalog.get(payload.item_id), payload.quantity)
    except Exception as e:
        _raise_order_http_error(e)

    store.append_event(
        order_id,
        EventTypeV1.LINE_ADDED,
        {"item_id": line.item.id, "quantity": line.quantity},
    )
    return OrderOut.from_order(order)


@router.post("/v1/orders/{order_id}/advance", response_model=OrderAdvanceResponse)
def advance_order(order_id: str) -> OrderAdvanceResponse:
    order = _get_order_or_404(order_id)

    previous = order.status
    failures = order.advance()

    return OrderAdvanceResponse(
        order=OrderOut.from_order(order),
        changed=order.status is not previous,
        observer_failures=[
            ObserverFailureOut(
                kind=failure.kind,
                observer=repr(failure.observer),
                status=failure.status,
                message=failure.message,
            )
            for failure in failures
        ],
    )


@router.get("/v1/orders/{order_id}/quote", response_model=OrderQuoteResponse)
def quote_order(order_id: str) -> OrderQuoteResponse:
    order = _get_order_or_404(order_id)

    try:
        pipeline = get_cost_pipeline()
    except (ValueError, OrderError) as e:
        raise HTTPException(status_code=500, detail=str(e)) from e

    return OrderQuoteResponse(
        order_id=order_id,
        subtotal=order_subtotal(order),
        total=pipeline.compute_total(order),
    )


@router.get("/v1/orders/{order_id}/events", response_model=list[OrderEventV1])
def list_order_events(order_id: str) -> list[OrderEventV1]:
    _get_order_or_404(order_id)
    return store.list_events(order_id)
