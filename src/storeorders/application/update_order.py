"""Application service: Update Order use case.

The existing reservation is released *before* the candidate is
validated; otherwise a same-quantity update would be checked against a
catalog that still holds the old reservation and be wrongly rejected.

If the candidate fails validation or reservation, the existing order's
reservation is applied again and the original error is re-raised, so the
stored order and the catalog are left as they were.
"""

from __future__ import annotations

import structlog

from storeorders.application.dto import OrderDTO, OrderSpec
from storeorders.application.order_mapper import OrderMapper
from storeorders.domain.exceptions import DomainException, EntityNotFoundError
from storeorders.domain.model.order import Order
from storeorders.domain.model.saga import SagaStatus, SagaStep
from storeorders.domain.repository.catalog_repository import CatalogRepository
from storeorders.domain.repository.order_repository import OrderRepository
from storeorders.domain.repository.saga_log_repository import SagaLogRepository
from storeorders.domain.service.order_validator import OrderValidator
from storeorders.domain.service.stock_reservation_service import (
    StockReservationService,
)
from storeorders.domain.service.stock_return_service import StockReturnService

logger = structlog.get_logger(__name__)


class UpdateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        catalog_repo: CatalogRepository,
        saga_log: SagaLogRepository,
    ) -> None:
        self._order_repo = order_repo
        self._catalog_repo = catalog_repo
        self._saga_log = saga_log

    def handle(self, order_id: str, spec: OrderSpec) -> OrderDTO:
        logger.info("order_updating", order_id=order_id, lines=len(spec.order_lines))

        existing = self._order_repo.get_by_id(order_id)
        if existing is None or existing.is_deleted:
            raise EntityNotFoundError(f"Order with id: {order_id} not found")

        candidate = OrderMapper.to_entity(spec)
        candidate.id = existing.id
        candidate.created_at = existing.created_at

        reservations = StockReservationService(self._catalog_repo, self._saga_log)
        released = StockReturnService(self._catalog_repo, self._saga_log).release(existing)

        try:
            OrderValidator(self._catalog_repo).validate(candidate)
            reservations.reserve(candidate)
        except DomainException:
            if released:
                self._restore(existing, reservations)
            raise

        candidate.stamp_updated()
        self._saga_log.record(order_id, SagaStep.PERSIST, SagaStatus.STARTED)
        saved = self._order_repo.update_by_id(order_id, candidate)
        if saved is None:
            raise EntityNotFoundError(f"Order with id: {order_id} not found")
        self._saga_log.record(order_id, SagaStep.PERSIST, SagaStatus.COMPLETED)

        logger.info("order_updated", order_id=order_id, total=str(saved.total))
        return OrderMapper.to_dto(saved)

    @staticmethod
    def _restore(existing: Order, reservations: StockReservationService) -> None:
        logger.warning("order_update_compensating", order_id=existing.id)
        reservations.reserve(existing)
