from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field

from services.courier.app.domain.lifecycle import Order, OrderKind, OrderStatus


class OrderLineInput(BaseModel):
    item_id: str
    # Validated by Order.add_line (InvalidQuantity).
    quantity: int


class OrderCreateRequest(BaseModel):
    kind: OrderKind = OrderKind.STANDARD
    customer_name: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1)
    express_requested: bool = False
    note: str | None = None
    lines: list[OrderLineInput] = Field(default_factory=list)


class DeliveryOptionsOut(BaseModel):
    express_requested: bool
    note: str | None


class OrderLineOut(BaseModel):
    item_id: str
    name: str
    quantity: int
    unit_price: Decimal
    line_total: Decimal


class OrderOut(BaseModel):
    order_id: str
    kind: OrderKind
    customer_name: str
    address: str
    status: OrderStatus
    options: DeliveryOptionsOut | None
    lines: list[OrderLineOut]

    @classmethod
    def from_order(cls, order: Order) -> OrderOut:
        options = None
        if order.options is not None:
            options = DeliveryOptionsOut(
                express_requested=order.options.express_requested,
                note=order.options.note,
            )
        return cls(
            order_id=str(order.id),
            kind=order.kind,
            customer_name=order.customer_name,
            address=order.address,
            status=order.status,
            options=options,
            lines=[
                OrderLineOut(
                    item_id=line.item.id,
                    name=line.item.name,
                    quantity=line.quantity,
                    unit_price=line.item.unit_price,
                    line_total=line.line_total,
                )
                for line in order.lines
            ],
        )


class ObserverFailureOut(BaseModel):
    kind: str
    observer: str
    status: OrderStatus
    message: str


class OrderAdvanceResponse(BaseModel):
    order: OrderOut
    changed: bool
    observer_failures: list[ObserverFailureOut]


class OrderQuoteResponse(BaseModel):
    order_id: str
    subtotal: Decimal
    total: Decimal
