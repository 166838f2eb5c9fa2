from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from services.courier.app.domain.lifecycle import OrderStatus


class OrderError(Exception):
    """Base class for order domain errors.

    `kind` is the stable, user-facing error name reported by the HTTP layer and the CLI.
    """

    kind = "OrderError"


class InvalidQuantityError(OrderError):
    kind = "InvalidQuantity"

    def __init__(self, quantity: object) -> None:
        super().__init__(f"Quantity must be a positive integer, got {quantity!r}")
        self.quantity = quantity


class InvalidArgumentError(OrderError):
    kind = "InvalidArgument"


class InvalidRateError(InvalidArgumentError):
    kind = "InvalidRate"

    def __init__(self, rate: object) -> None:
        super().__init__(f"Rate must be within [0, 1], got {rate!r}")
        self.rate = rate


class OrderFinalizedError(OrderError):
    kind = "OrderFinalized"

    def __init__(self, order_id: object) -> None:
        super().__init__(f"Order {order_id} is completed and can no longer be modified")
        self.order_id = order_id


class CatalogItemNotFoundError(OrderError):
    kind = "CatalogItemNotFound"

    def __init__(self, item_id: str) -> None:
        super().__init__(f"Catalog item not found: {item_id!r}")
        self.item_id = item_id


@dataclass(frozen=True, slots=True)
class ObserverFailure:
    """An exception captured while notifying one observer of a status change."""

    observer: Any
    status: OrderStatus
    error: Exception

    @property
    def kind(self) -> str:
        return "ObserverFailure"

    @property
    def message(self) -> str:
        return f"{type(self.error).__name__}: {self.error}"
