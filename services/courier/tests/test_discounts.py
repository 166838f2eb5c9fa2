from __future__ import annotations

from decimal import Decimal

import pytest
from services.courier.app.domain.discounts import NoDiscount, ThresholdPercentDiscount
from services.courier.app.domain.errors import InvalidArgumentError


def test_no_discount_is_always_zero() -> None:
    assert NoDiscount().discount_amount(Decimal("1000")) == 0


def test_threshold_is_inclusive() -> None:
    policy = ThresholdPercentDiscount(threshold=Decimal("20"), percent=Decimal("0.10"))

    assert policy.discount_amount(Decimal("20")) == Decimal("2.00")
    assert policy.discount_amount(Decimal("19")) == 0


def test_discount_rounds_to_cents() -> None:
    policy = ThresholdPercentDiscount(threshold=0, percent="0.15")

    assert policy.discount_amount(Decimal("10.33")) == Decimal("1.55")


def test_full_percent_never_exceeds_subtotal() -> None:
    policy = ThresholdPercentDiscount(threshold=0, percent=1)

    assert policy.discount_amount(Decimal("0.015")) == Decimal("0.015")


@pytest.mark.parametrize(
    ("threshold", "percent"),
    [("-1", "0.10"), ("20", "-0.01"), ("20", "1.01"), ("abc", "0.1"), ("20", "NaN")],
)
def test_rejects_out_of_range_arguments(threshold: str, percent: str) -> None:
    with pytest.raises(InvalidArgumentError):
        ThresholdPercentDiscount(threshold=threshold, percent=percent)
