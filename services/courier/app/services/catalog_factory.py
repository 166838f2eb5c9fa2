from __future__ import annotations

import os

from services.courier.app.services.catalog_base import CatalogLookup
from services.courier.app.services.catalog_mock import MockCatalog


def get_catalog() -> CatalogLookup:
    """Select the catalog lookup based on env vars.

    The catalog is owned by an external service; the mock keeps tests and local dev
    deterministic.
    """

    mode = os.getenv("COURIER_CATALOG", "mock").strip().lower()

    if mode == "mock":
        return MockCatalog()

    raise ValueError(f"Unknown COURIER_CATALOG={mode!r}. Expected mock.")
