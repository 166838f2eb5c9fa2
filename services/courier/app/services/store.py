from __future__ import annotations

from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from packages.shared.schemas.events import EventTypeV1, OrderEventV1
from services.courier.app.domain.lifecycle import Order


class InMemoryStore:
    def __init__(self) -> None:
        self._orders: dict[str, Order] = {}
        self._events: dict[str, list[OrderEventV1]] = {}

    def save_order(self, order: Order) -> None:
        self._orders[str(order.id)] = order
        self._events.setdefault(str(order.id), [])

    def get_order(self, order_id: str) -> Order | None:
        return self._orders.get(order_id)

    def append_event(
        self,
        order_id: str,
        event_type: EventTypeV1,
        payload: dict[str, Any] | None = None,
    ) -> OrderEventV1:
        event = OrderEventV1(
            id=uuid4().hex,
            order_id=order_id,
            event_type=event_type,
            payload=payload or {},
            created_at=datetime.now(timezone.utc).isoformat(),
        )
        self._events.setdefault(order_id, []).append(event)
        return event

    def list_events(self, order_id: str) -> list[OrderEventV1]:
        return list(self._events.get(order_id, []))


store = InMemoryStore()
