from __future__ import annotations

from decimal import Decimal

import pytest
from services.courier.app.domain.discounts import NoDiscount, ThresholdPercentDiscount
from services.courier.app.domain.errors import CatalogItemNotFoundError, InvalidRateError
from services.courier.app.services.catalog_factory import get_catalog
from services.courier.app.services.pricing_factory import get_cost_pipeline, get_discount_policy


def test_get_catalog_defaults_to_mock(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("COURIER_CATALOG", raising=False)
    catalog = get_catalog()

    assert catalog.source == "MOCK"
    assert catalog.get(" Burger ").unit_price == Decimal("10.00")
    assert len(catalog.list_items()) >= 2


def test_mock_catalog_raises_for_unknown_item() -> None:
    with pytest.raises(CatalogItemNotFoundError):
        get_catalog().get("caviar")


def test_get_catalog_rejects_unknown(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COURIER_CATALOG", "nope")
    with pytest.raises(ValueError, match="Unknown COURIER_CATALOG"):
        get_catalog()


def test_get_discount_policy_modes(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COURIER_DISCOUNT_POLICY", "none")
    assert isinstance(get_discount_policy(), NoDiscount)

    monkeypatch.setenv("COURIER_DISCOUNT_POLICY", "threshold")
    monkeypatch.setenv("COURIER_DISCOUNT_THRESHOLD", "50")
    monkeypatch.setenv("COURIER_DISCOUNT_PERCENT", "0.05")
    policy = get_discount_policy()
    assert policy == ThresholdPercentDiscount(threshold=Decimal("50"), percent=Decimal("0.05"))


def test_get_discount_policy_rejects_unknown(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COURIER_DISCOUNT_POLICY", "bogo")
    with pytest.raises(ValueError, match="Unknown COURIER_DISCOUNT_POLICY"):
        get_discount_policy()


def test_get_cost_pipeline_rejects_unparseable_fee(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COURIER_DELIVERY_FEE", "three")
    with pytest.raises(ValueError, match="Invalid COURIER_DELIVERY_FEE"):
        get_cost_pipeline()


def test_get_cost_pipeline_validates_rate_eagerly(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COURIER_TAX_RATE", "1.2")
    with pytest.raises(InvalidRateError):
        get_cost_pipeline()
