"""Product aggregate.

Products live in the catalog and are owned by it. The order engine reads
their price and stock and asks the catalog to apply stock deltas; it never
creates or deletes products.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from storeorders.domain.exceptions import InsufficientStockError, ValidationError
from storeorders.domain.model.value_objects import Money

_CENTS = Decimal("0.01")


@dataclass
class Product:
    """A product in the catalog.

    Invariants: ``stock`` is never negative and ``price`` has at most two
    decimal places, the precision the catalog stores.
    """

    id: str
    name: str
    price: Money
    stock: int = 0
    is_deleted: bool = False

    def __post_init__(self) -> None:
        if self.stock < 0:
            raise ValidationError(f"Stock of product {self.id} cannot be negative")
        if self.price.amount != self.price.amount.quantize(_CENTS):
            raise ValidationError(
                f"Price of product {self.id} cannot have more than two decimal "
                f"places, got {self.price.amount}"
            )

    def has_stock_for(self, quantity: int) -> bool:
        return self.stock >= quantity

    def adjust_stock(self, delta: int) -> None:
        """Apply a signed stock delta (negative reserves, positive releases)."""
        if self.stock + delta < 0:
            raise InsufficientStockError(self.id, -delta, self.stock)
        self.stock += delta
