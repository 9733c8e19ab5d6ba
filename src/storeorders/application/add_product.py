"""Application service: Add Product use case.

Catalog provisioning for operators. The order engine itself never
creates products; this exists so a catalog can be seeded from the CLI.
"""

from __future__ import annotations

from storeorders.domain.exceptions import ValidationError
from storeorders.domain.model.product import Product
from storeorders.domain.model.value_objects import Money
from storeorders.domain.repository.catalog_repository import CatalogRepository


class AddProductHandler:

    def __init__(self, catalog_repo: CatalogRepository) -> None:
        self._catalog_repo = catalog_repo

    def handle(self, product_id: str, name: str, price: str, stock: int) -> Product:
        """Add a new product to the catalog."""
        if not product_id or not product_id.strip():
            raise ValidationError("Product ID is required")
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if stock < 0:
            raise ValidationError("Stock cannot be negative")

        if self._catalog_repo.get_by_id(product_id.strip()) is not None:
            raise ValidationError(f"Product '{product_id}' already exists")

        product = Product(
            id=product_id.strip(),
            name=name.strip(),
            price=Money.of(price),
            stock=stock,
        )
        self._catalog_repo.save(product)
        return product
