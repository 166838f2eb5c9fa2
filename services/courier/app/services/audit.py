"""Status-change observers attached to every order the service creates."""

from __future__ import annotations

import logging
from uuid import UUID

from packages.shared.schemas.events import EventTypeV1
from services.courier.app.domain.lifecycle import OrderStatus
from services.courier.app.services.store import InMemoryStore

logger = logging.getLogger(__name__)


class EventLogObserver:
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def __call__(self, order_id: UUID, status: OrderStatus) -> None:
        self._store.append_event(
            str(order_id),
            EventTypeV1.STATUS_CHANGED,
            {"status": status.value},
        )


class LoggingObserver:
    def __call__(self, order_id: UUID, status: OrderStatus) -> None:
        logger.info("Order %s is now %s", order_id, status.value)
