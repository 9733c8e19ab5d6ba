"""Application service: Remove Order use case.

Releases the order's stock, then removes the document. Whether the
document is physically deleted or only flagged ``is_deleted`` is a
deployment choice (``DeleteMode``); hard delete is the default.
"""

from __future__ import annotations

from enum import Enum

import structlog

from storeorders.domain.exceptions import EntityNotFoundError
from storeorders.domain.model.saga import SagaStatus, SagaStep
from storeorders.domain.repository.catalog_repository import CatalogRepository
from storeorders.domain.repository.order_repository import OrderRepository
from storeorders.domain.repository.saga_log_repository import SagaLogRepository
from storeorders.domain.service.stock_return_service import StockReturnService

logger = structlog.get_logger(__name__)


class DeleteMode(Enum):
    HARD = "hard"
    SOFT = "soft"


class RemoveOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        catalog_repo: CatalogRepository,
        saga_log: SagaLogRepository,
        delete_mode: DeleteMode = DeleteMode.HARD,
    ) -> None:
        self._order_repo = order_repo
        self._catalog_repo = catalog_repo
        self._saga_log = saga_log
        self._delete_mode = delete_mode

    def handle(self, order_id: str) -> None:
        logger.info("order_removing", order_id=order_id, mode=self._delete_mode.value)

        order = self._order_repo.get_by_id(order_id)
        if order is None or order.is_deleted:
            raise EntityNotFoundError(f"Order with id: {order_id} not found")

        StockReturnService(self._catalog_repo, self._saga_log).release(order)

        self._saga_log.record(order_id, SagaStep.DELETE, SagaStatus.STARTED)
        if self._delete_mode is DeleteMode.SOFT:
            order.mark_deleted()
            self._order_repo.update_by_id(order_id, order)
        else:
            self._order_repo.delete_by_id(order_id)
        self._saga_log.record(order_id, SagaStep.DELETE, SagaStatus.COMPLETED)

        logger.info("order_removed", order_id=order_id)
