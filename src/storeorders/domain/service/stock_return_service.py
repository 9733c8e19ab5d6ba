"""Domain service: Stock Return.

The inverse of a reservation: credits every line's quantity back to the
catalog. Used before an order is overwritten by an update and before an
order is removed.

Releasing is idempotent per reservation. If the saga log shows that the
order's most recent stock step is already a completed RELEASE, the call is
a no-op, so stock is never credited twice for the same reservation.
"""

from __future__ import annotations

import structlog

from storeorders.domain.exceptions import DomainException
from storeorders.domain.model.order import Order
from storeorders.domain.model.saga import SagaStatus, SagaStep
from storeorders.domain.repository.catalog_repository import CatalogRepository
from storeorders.domain.repository.saga_log_repository import SagaLogRepository

logger = structlog.get_logger(__name__)

_STOCK_STEPS = (SagaStep.RESERVE, SagaStep.RELEASE)


class StockReturnService:

    def __init__(
        self,
        catalog_repo: CatalogRepository,
        saga_log: SagaLogRepository,
    ) -> None:
        self._catalog_repo = catalog_repo
        self._saga_log = saga_log

    def is_released(self, order: Order) -> bool:
        if order.id is None:
            return False
        last = self._saga_log.last_completed(order.id, _STOCK_STEPS)
        return last is not None and last.step is SagaStep.RELEASE

    def release(self, order: Order) -> bool:
        """Credit the order's quantities back to the catalog.

        Returns False when the order's reservation was already released.
        """
        if order.id is None:
            raise ValueError("Cannot release stock for an order without an ID")

        if self.is_released(order):
            logger.warning("stock_release_skipped", order_id=order.id)
            return False

        deltas = order.quantities_by_product()

        self._saga_log.record(order.id, SagaStep.RELEASE, SagaStatus.STARTED)
        try:
            self._catalog_repo.apply_stock_deltas(deltas)
        except DomainException:
            self._saga_log.record(order.id, SagaStep.RELEASE, SagaStatus.FAILED)
            raise
        self._saga_log.record(order.id, SagaStep.RELEASE, SagaStatus.COMPLETED)

        logger.info("stock_released", order_id=order.id, deltas=deltas)
        return True
