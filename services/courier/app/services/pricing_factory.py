from __future__ import annotations

import os
from decimal import Decimal, InvalidOperation

from services.courier.app.domain.discounts import (
    DiscountPolicy,
    NoDiscount,
    ThresholdPercentDiscount,
)
from services.courier.app.domain.pricing import (
    CostStage,
    DeliveryFeeStage,
    DiscountStage,
    ExpressFeeStage,
    SubtotalStage,
    TaxStage,
)


def _env_decimal(name: str, default: str) -> Decimal:
    raw = os.getenv(name, default).strip()
    try:
        return Decimal(raw)
    except InvalidOperation as e:
        raise ValueError(f"Invalid {name}={raw!r}. Expected a decimal number.") from e


def get_discount_policy() -> DiscountPolicy:
    policy = os.getenv("COURIER_DISCOUNT_POLICY", "threshold").strip().lower()

    if policy == "none":
        return NoDiscount()

    if policy == "threshold":
        return ThresholdPercentDiscount(
            threshold=_env_decimal("COURIER_DISCOUNT_THRESHOLD", "20"),
            percent=_env_decimal("COURIER_DISCOUNT_PERCENT", "0.10"),
        )

    raise ValueError(
        f"Unknown COURIER_DISCOUNT_POLICY={policy!r}. Expected threshold or none."
    )


def get_cost_pipeline() -> CostStage:
    """Build the configured pipeline: subtotal, delivery, express, tax, then discount.

    Env vars are read on every call so tests can override them with monkeypatch. Out of
    range values fail here with the stage's own validation error.
    """

    return DiscountStage(
        TaxStage(
            ExpressFeeStage(
                DeliveryFeeStage(
                    SubtotalStage(),
                    fee=_env_decimal("COURIER_DELIVERY_FEE", "3.00"),
                ),
                fee=_env_decimal("COURIER_EXPRESS_FEE", "4.00"),
            ),
            rate=_env_decimal("COURIER_TAX_RATE", "0.20"),
        ),
        policy=get_discount_policy(),
    )
