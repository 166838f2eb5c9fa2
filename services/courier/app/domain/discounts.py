from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, localcontext
from typing import Protocol

from services.courier.app.domain.catalog import MONEY_CONTEXT, ZERO, round_cents, to_money
from services.courier.app.domain.errors import InvalidArgumentError


class DiscountPolicy(Protocol):
    def discount_amount(self, subtotal: Decimal) -> Decimal: ...


class NoDiscount:
    def discount_amount(self, subtotal: Decimal) -> Decimal:
        del subtotal
        return ZERO


@dataclass(frozen=True, slots=True)
class ThresholdPercentDiscount:
    """Take `percent` off the subtotal once it reaches `threshold` (inclusive)."""

    threshold: Decimal
    percent: Decimal

    def __post_init__(self) -> None:
        threshold = to_money(self.threshold, field="threshold")
        percent = to_money(self.percent, field="percent")
        if threshold < ZERO:
            raise InvalidArgumentError(f"threshold must be >= 0, got {threshold}")
        if not ZERO <= percent <= 1:
            raise InvalidArgumentError(f"percent must be within [0, 1], got {percent}")
        object.__setattr__(self, "threshold", threshold)
        object.__setattr__(self, "percent", percent)

    def discount_amount(self, subtotal: Decimal) -> Decimal:
        if subtotal < self.threshold:
            return ZERO
        # Rounding sub-cent prices up must not push the discount past the subtotal.
        with localcontext(MONEY_CONTEXT):
            return min(round_cents(subtotal * self.percent), subtotal)
