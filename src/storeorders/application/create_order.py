"""Application service: Create Order use case.

Orchestrates the flow between the catalog, the saga log and the order
store. Validation runs first, then stock is reserved, then the order
document is written. The two stores share no transaction: if the
document write fails after the reservation, the reservation stays in
place and the saga log keeps a STARTED PERSIST entry for reconciliation.
"""

from __future__ import annotations

import structlog

from storeorders.application.dto import OrderDTO, OrderSpec
from storeorders.application.order_mapper import OrderMapper
from storeorders.domain.model.saga import SagaStatus, SagaStep
from storeorders.domain.repository.catalog_repository import CatalogRepository
from storeorders.domain.repository.order_repository import OrderRepository
from storeorders.domain.repository.saga_log_repository import SagaLogRepository
from storeorders.domain.service.order_validator import OrderValidator
from storeorders.domain.service.stock_reservation_service import (
    StockReservationService,
)

logger = structlog.get_logger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        catalog_repo: CatalogRepository,
        saga_log: SagaLogRepository,
    ) -> None:
        self._order_repo = order_repo
        self._catalog_repo = catalog_repo
        self._saga_log = saga_log

    def handle(self, spec: OrderSpec) -> OrderDTO:
        """Create a new order.

        Steps:
        1. Map the spec to an Order (quantities and prices are checked here).
        2. Validate every line against the catalog.
        3. Assign an ID and reserve stock.
        4. Stamp timestamps and persist.
        """
        logger.info("order_creating", user_id=spec.user_id, lines=len(spec.order_lines))

        order = OrderMapper.to_entity(spec)
        OrderValidator(self._catalog_repo).validate(order)

        order.id = self._order_repo.next_id()
        StockReservationService(self._catalog_repo, self._saga_log).reserve(order)

        order.stamp_created()
        self._saga_log.record(order.id, SagaStep.PERSIST, SagaStatus.STARTED)
        saved = self._order_repo.insert(order)
        self._saga_log.record(order.id, SagaStep.PERSIST, SagaStatus.COMPLETED)

        logger.info("order_created", order_id=saved.id, total=str(saved.total))
        return OrderMapper.to_dto(saved)
