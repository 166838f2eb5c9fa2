"""Cost pipeline.

A pipeline is a chain of stages. `SubtotalStage` is the terminal stage; every other stage
wraps exactly one inner stage, calls it, and applies its own adjustment. Composition order
is the order in which adjustments apply and is the caller's responsibility:

    pipeline = DiscountStage(
        TaxStage(ExpressFeeStage(DeliveryFeeStage(SubtotalStage(), fee=3), fee=4), rate="0.20"),
        policy=ThresholdPercentDiscount(threshold=20, percent="0.10"),
    )
    total = pipeline.compute_total(order)

Parameters are validated when a stage is constructed, so `compute_total` cannot fail on a
chain that was built successfully.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from decimal import Decimal, localcontext
from typing import Protocol

from services.courier.app.domain.catalog import MONEY_CONTEXT, ZERO, round_cents, to_money
from services.courier.app.domain.discounts import DiscountPolicy
from services.courier.app.domain.errors import InvalidArgumentError, InvalidRateError
from services.courier.app.domain.lifecycle import Order


class CostStage(Protocol):
    def compute_total(self, order: Order) -> Decimal: ...


def order_subtotal(order: Order) -> Decimal:
    with localcontext(MONEY_CONTEXT):
        return sum((line.line_total for line in order.lines), ZERO)


def _non_negative_fee(fee: Decimal | int | str) -> Decimal:
    amount = to_money(fee, field="fee")
    if amount < ZERO:
        raise InvalidArgumentError(f"fee must be >= 0, got {amount}")
    return amount


class SubtotalStage:
    def compute_total(self, order: Order) -> Decimal:
        return order_subtotal(order)


@dataclass(frozen=True, slots=True)
class DeliveryFeeStage:
    inner: CostStage
    fee: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "fee", _non_negative_fee(self.fee))

    def compute_total(self, order: Order) -> Decimal:
        total = self.inner.compute_total(order)
        with localcontext(MONEY_CONTEXT):
            return total + self.fee


@dataclass(frozen=True, slots=True)
class ExpressFeeStage:
    """Charge `fee` only for orders whose delivery options request express delivery."""

    inner: CostStage
    fee: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "fee", _non_negative_fee(self.fee))

    def compute_total(self, order: Order) -> Decimal:
        total = self.inner.compute_total(order)
        if order.options is not None and order.options.express_requested:
            with localcontext(MONEY_CONTEXT):
                return total + self.fee
        return total


@dataclass(frozen=True, slots=True)
class TaxStage:
    inner: CostStage
    rate: Decimal

    def __post_init__(self) -> None:
        try:
            rate = to_money(self.rate, field="rate")
        except InvalidArgumentError as e:
            raise InvalidRateError(self.rate) from e
        if not ZERO <= rate <= 1:
            raise InvalidRateError(rate)
        object.__setattr__(self, "rate", rate)

    def compute_total(self, order: Order) -> Decimal:
        amount = self.inner.compute_total(order)
        with localcontext(MONEY_CONTEXT):
            return amount + round_cents(amount * self.rate)


@dataclass(frozen=True, slots=True)
class DiscountStage:
    """Subtract a policy discount from the accumulated amount, flooring at zero.

    The discount is always computed from the order's raw line subtotal, not from the inner
    amount, so fees and tax applied below this stage never change the discount itself.
    """

    inner: CostStage
    policy: DiscountPolicy

    def compute_total(self, order: Order) -> Decimal:
        subtotal = order_subtotal(order)
        total = self.inner.compute_total(order)
        discount = self.policy.discount_amount(subtotal)
        with localcontext(MONEY_CONTEXT):
            return max(ZERO, total - discount)


def compose_pipeline(
    base: CostStage, *layers: Callable[[CostStage], CostStage]
) -> CostStage:
    """Wrap `base` with each layer in turn; the first layer ends up innermost."""

    stage = base
    for layer in layers:
        stage = layer(stage)
    return stage
