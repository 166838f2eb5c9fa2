from __future__ import annotations

from collections.abc import Callable

from services.courier.app.domain.catalog import CatalogItem, DeliveryOptions
from services.courier.app.domain.errors import InvalidArgumentError
from services.courier.app.domain.lifecycle import Order, OrderKind

OrderFactory = Callable[[OrderKind, str, str, DeliveryOptions | None], Order]


def create_order(
    kind: OrderKind | str,
    customer_name: str,
    address: str,
    options: DeliveryOptions | None = None,
) -> Order:
    """Create an empty PREPARING order.

    Standard orders never carry delivery options. Special orders always do, defaulting to
    non-express with no note.
    """

    raw_kind = kind.value if isinstance(kind, OrderKind) else str(kind).strip().upper()
    try:
        kind = OrderKind(raw_kind)
    except ValueError as e:
        raise InvalidArgumentError(
            f"Unknown order kind {kind!r}. Expected STANDARD or SPECIAL."
        ) from e

    if kind is OrderKind.STANDARD:
        return Order(kind, customer_name, address, options=None)
    return Order(kind, customer_name, address, options=options or DeliveryOptions())


class OrderBuilder:
    def __init__(self, factory: OrderFactory = create_order) -> None:
        self._factory = factory
        self._kind = OrderKind.STANDARD
        self._customer_name = "Unknown"
        self._address = "Unknown"
        self._options: DeliveryOptions | None = None
        self._lines: list[tuple[CatalogItem, int]] = []

    def standard(self, customer_name: str, address: str) -> OrderBuilder:
        self._kind = OrderKind.STANDARD
        self._customer_name = customer_name
        self._address = address
        self._options = None
        return self

    def special(
        self,
        customer_name: str,
        address: str,
        *,
        express_requested: bool = False,
        note: str | None = None,
    ) -> OrderBuilder:
        self._kind = OrderKind.SPECIAL
        self._customer_name = customer_name
        self._address = address
        self._options = DeliveryOptions(express_requested=express_requested, note=note)
        return self

    def add(self, item: CatalogItem, quantity: int) -> OrderBuilder:
        self._lines.append((item, quantity))
        return self

    def build(self) -> Order:
        order = self._factory(self._kind, self._customer_name, self._address, self._options)
        for item, quantity in self._lines:
            order.add_line(item, quantity)
        return order
