"""Domain service: Order Validator.

Checks a candidate order against a point-in-time read of the catalog.
Nothing is mutated here; the catalog re-checks stock atomically when the
reservation is applied, so a concurrent order that wins the race is
reported by the reservation step instead.
"""

from __future__ import annotations

import structlog

from storeorders.domain.exceptions import EntityNotFoundError, ValidationError
from storeorders.domain.model.order import Order
from storeorders.domain.repository.catalog_repository import CatalogRepository

logger = structlog.get_logger(__name__)


class OrderValidator:

    def __init__(self, catalog_repo: CatalogRepository) -> None:
        self._catalog_repo = catalog_repo

    def validate(self, order: Order) -> None:
        """Raise on the first line that cannot be served as requested."""
        logger.debug("order_validating", order_id=order.id, lines=len(order.order_lines))
        if not order.order_lines:
            raise ValidationError(
                "No order lines have been added to the current order"
            )

        for line in order.order_lines:
            product = self._catalog_repo.get_by_id(line.product_id)
            if product is None or product.is_deleted:
                raise EntityNotFoundError(
                    f"Product with ID '{line.product_id}' not found"
                )
            if not product.has_stock_for(line.quantity.value):
                raise ValidationError(
                    f"Quantity of product {product.id} is not enough "
                    f"(need {line.quantity}, have {product.stock})"
                )
            if product.price != line.product_price:
                raise ValidationError(
                    f"Product price and order line price are not the same "
                    f"for product {product.id} ({product.price.amount} != {line.product_price.amount})"
                )
