"""Abstract repository for the catalog (Product aggregate and its stock).

Defined in the domain layer so the domain never depends on
infrastructure. The catalog is a separate store from the orders; the
only write the order engine performs on it is a stock delta.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storeorders.domain.model.product import Product


class CatalogRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product (catalog provisioning)."""

    @abstractmethod
    def adjust_stock(self, product_id: str, delta: int) -> Product:
        """Apply a signed stock delta to one product and return it.

        Raises EntityNotFoundError if the product does not exist and
        InsufficientStockError if the stock would drop below zero; the
        check and the write are a single atomic operation.
        """

    @abstractmethod
    def apply_stock_deltas(self, deltas: dict[str, int]) -> list[Product]:
        """Apply several stock deltas as one unit.

        Either every delta is applied or none is. Raises the same errors
        as ``adjust_stock`` for the first product that fails.
        """
