"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from storeorders.infrastructure.config import Settings
from storeorders.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from storeorders.infrastructure.persistence.json_saga_log_repository import (
    JsonSagaLogRepository,
)
from storeorders.infrastructure.persistence.sql_catalog_repository import (
    SqlCatalogRepository,
)


def catalog_repository(settings: Settings) -> SqlCatalogRepository:
    if settings.catalog_url.startswith("sqlite:///"):
        settings.data_dir.mkdir(parents=True, exist_ok=True)
    return SqlCatalogRepository.from_url(settings.catalog_url)


def order_repository(settings: Settings) -> JsonOrderRepository:
    return JsonOrderRepository(settings.orders_file)


def saga_log_repository(settings: Settings) -> JsonSagaLogRepository:
    return JsonSagaLogRepository(settings.saga_log_file)
