"""Order lifecycle: line items, fulfillment status and status-change observers.

Status moves strictly forward along PREPARING -> DELIVERING -> COMPLETED. COMPLETED is
absorbing: advancing it again is a no-op and notifies nobody, so every observer sees each
status at most once.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum
from uuid import UUID, uuid4

from services.courier.app.domain.catalog import CatalogItem, DeliveryOptions, OrderLine
from services.courier.app.domain.errors import ObserverFailure, OrderFinalizedError

logger = logging.getLogger(__name__)


class OrderKind(str, Enum):
    STANDARD = "STANDARD"
    SPECIAL = "SPECIAL"


class OrderStatus(str, Enum):
    PREPARING = "PREPARING"
    DELIVERING = "DELIVERING"
    COMPLETED = "COMPLETED"


_NEXT_STATUS: dict[OrderStatus, OrderStatus] = {
    OrderStatus.PREPARING: OrderStatus.DELIVERING,
    OrderStatus.DELIVERING: OrderStatus.COMPLETED,
    OrderStatus.COMPLETED: OrderStatus.COMPLETED,
}

StatusObserver = Callable[[UUID, OrderStatus], None]


def next_status(status: OrderStatus) -> OrderStatus:
    return _NEXT_STATUS[status]


class Order:
    def __init__(
        self,
        kind: OrderKind,
        customer_name: str,
        address: str,
        options: DeliveryOptions | None = None,
    ) -> None:
        self.id: UUID = uuid4()
        self.kind = kind
        self.customer_name = customer_name
        self.address = address
        self.options = options

        self._status = OrderStatus.PREPARING
        self._lines: list[OrderLine] = []
        self._observers: list[StatusObserver] = []

    def __repr__(self) -> str:
        return f"Order(id={self.id}, kind={self.kind.value}, status={self._status.value})"

    @property
    def status(self) -> OrderStatus:
        return self._status

    @property
    def lines(self) -> tuple[OrderLine, ...]:
        return tuple(self._lines)

    @property
    def observers(self) -> tuple[StatusObserver, ...]:
        return tuple(self._observers)

    def add_line(self, item: CatalogItem, quantity: int) -> OrderLine:
        """Append a new line. Repeated items are kept as separate lines."""

        line = OrderLine(item=item, quantity=quantity)
        if self._status is OrderStatus.COMPLETED:
            raise OrderFinalizedError(self.id)
        self._lines.append(line)
        return line

    def advance(self) -> list[ObserverFailure]:
        previous = self._status
        current = next_status(previous)
        if current is previous:
            return []

        self._status = current
        logger.info("Order %s status %s -> %s", self.id, previous.value, current.value)
        return self._notify(current)

    def subscribe(self, observer: StatusObserver) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def unsubscribe(self, observer: StatusObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def _notify(self, status: OrderStatus) -> list[ObserverFailure]:
        failures: list[ObserverFailure] = []
        # Snapshot: an observer may unsubscribe itself while being notified.
        for observer in tuple(self._observers):
            try:
                observer(self.id, status)
            except Exception as e:
                logger.warning(
                    "Observer %r failed for order %s status %s",
                    observer,
                    self.id,
                    status.value,
                    exc_info=True,
                )
                failures.append(ObserverFailure(observer=observer, status=status, error=e))
        return failures
