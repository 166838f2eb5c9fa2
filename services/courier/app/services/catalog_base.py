from __future__ import annotations

from typing import Protocol

from services.courier.app.domain.catalog import CatalogItem


class CatalogLookup(Protocol):
    source: str

    def get(self, item_id: str) -> CatalogItem: ...

    def list_items(self) -> list[CatalogItem]: ...
