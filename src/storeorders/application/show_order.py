"""Application service: Show Order use case (query)."""

from __future__ import annotations

import structlog

from storeorders.application.dto import OrderDTO
from storeorders.application.order_mapper import OrderMapper
from storeorders.domain.exceptions import EntityNotFoundError
from storeorders.domain.repository.order_repository import OrderRepository

logger = structlog.get_logger(__name__)


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str) -> OrderDTO:
        logger.debug("order_searching", order_id=order_id)
        order = self._order_repo.get_by_id(order_id)
        if order is None or order.is_deleted:
            raise EntityNotFoundError(f"Order with id: {order_id} not found")
        return OrderMapper.to_dto(order)
