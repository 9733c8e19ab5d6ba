"""Application service: order listings (queries).

Sorting is restricted to an allow-list of fields and directions; an
omitted value falls back to the first allowed one, and anything else is
rejected before the store is queried.
"""

from __future__ import annotations

import structlog

from storeorders.application.dto import OrderDTO, PageDTO
from storeorders.application.order_mapper import OrderMapper
from storeorders.domain.exceptions import ValidationError
from storeorders.domain.repository.order_repository import OrderRepository

logger = structlog.get_logger(__name__)

ORDER_BY_VALUES = ("id", "user_id")
ORDER_VALUES = ("asc", "desc")
DEFAULT_PAGE_SIZE = 10


def _choose(value: str | None, allowed: tuple[str, ...], what: str) -> str:
    value = value or allowed[0]
    if value not in allowed:
        raise ValidationError(
            f"It does not specify a valid {what}. "
            f"Valid values are: {', '.join(allowed)}"
        )
    return value


class ListOrdersHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        default_limit: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        self._order_repo = order_repo
        self._default_limit = default_limit

    def by_user(self, user_id: int) -> list[OrderDTO]:
        logger.debug("orders_searching_by_user", user_id=user_id)
        return [
            OrderMapper.to_dto(order)
            for order in self._order_repo.find_by_user_id(user_id)
            if not order.is_deleted
        ]

    def page(
        self,
        page: int = 1,
        limit: int | None = None,
        order_by: str | None = None,
        direction: str | None = None,
    ) -> PageDTO:
        limit = self._default_limit if limit is None else limit
        if page < 1:
            raise ValidationError("Page must be 1 or greater")
        if limit < 1:
            raise ValidationError("Limit must be 1 or greater")
        sort = (
            _choose(order_by, ORDER_BY_VALUES, "order by"),
            _choose(direction, ORDER_VALUES, "order"),
        )

        logger.debug("orders_searching", page=page, limit=limit, sort=sort)
        result = self._order_repo.paginate({"is_deleted": False}, page, limit, sort)
        return OrderMapper.to_page_dto(result)
