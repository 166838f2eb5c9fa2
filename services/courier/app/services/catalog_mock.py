from __future__ import annotations

from services.courier.app.domain.catalog import CatalogItem
from services.courier.app.domain.errors import CatalogItemNotFoundError


class MockCatalog:
    source = "MOCK"

    def __init__(self) -> None:
        self._items = {
            item.id: item
            for item in (
                CatalogItem("burger", "Burger", "10.00"),
                CatalogItem("fries", "Fries", "5.00"),
                CatalogItem("pizza", "Pizza", "10.00"),
                CatalogItem("cola", "Cola", "2.00"),
                CatalogItem("salad", "Salad", "7.50"),
            )
        }

    def get(self, item_id: str) -> CatalogItem:
        item = self._items.get(item_id.strip().lower())
        if item is None:
            raise CatalogItemNotFoundError(item_id)
        return item

    def list_items(self) -> list[CatalogItem]:
        return list(self._items.values())
