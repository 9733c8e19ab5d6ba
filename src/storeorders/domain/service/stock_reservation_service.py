"""Domain service: Stock Reservation.

Applies a validated order to the catalog: computes the order totals and
decrements stock for every line. All decrements go to the catalog as a
single batch, which the catalog applies atomically, so a failure on one
product leaves every product untouched.

Each reservation is journalled STARTED / COMPLETED in the saga log so an
interrupted call can be detected.
"""

from __future__ import annotations

import structlog

from storeorders.domain.exceptions import DomainException
from storeorders.domain.model.order import Order
from storeorders.domain.model.saga import SagaStatus, SagaStep
from storeorders.domain.repository.catalog_repository import CatalogRepository
from storeorders.domain.repository.saga_log_repository import SagaLogRepository

logger = structlog.get_logger(__name__)


class StockReservationService:

    def __init__(
        self,
        catalog_repo: CatalogRepository,
        saga_log: SagaLogRepository,
    ) -> None:
        self._catalog_repo = catalog_repo
        self._saga_log = saga_log

    def reserve(self, order: Order) -> Order:
        """Reserve stock for every line and fill in the order totals.

        The order must already have passed validation and must have an ID.
        """
        if order.id is None:
            raise ValueError("Cannot reserve stock for an order without an ID")

        order.recalculate_totals()
        deltas = {
            product_id: -quantity
            for product_id, quantity in order.quantities_by_product().items()
        }

        self._saga_log.record(order.id, SagaStep.RESERVE, SagaStatus.STARTED)
        try:
            self._catalog_repo.apply_stock_deltas(deltas)
        except DomainException:
            # The batch was rolled back; nothing is left to reconcile.
            self._saga_log.record(order.id, SagaStep.RESERVE, SagaStatus.FAILED)
            raise
        self._saga_log.record(order.id, SagaStep.RESERVE, SagaStatus.COMPLETED)

        logger.info(
            "stock_reserved",
            order_id=order.id,
            deltas=deltas,
            total=str(order.total),
            total_items=order.total_items,
        )
        return order
