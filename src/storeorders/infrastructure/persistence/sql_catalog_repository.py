"""SQLAlchemy-backed implementation of CatalogRepository.

The catalog is the relational store. Stock changes are conditional
updates (``stock = stock + :delta WHERE stock + :delta >= 0``), so the
check and the write happen in one statement and concurrent reservations
cannot oversell. A batch of deltas runs in one transaction and is rolled
back as a whole if any product refuses its delta.
"""

from __future__ import annotations

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    create_engine,
    insert,
    select,
    update,
)
from sqlalchemy.engine import Connection, Engine, Row

from storeorders.domain.exceptions import EntityNotFoundError, InsufficientStockError
from storeorders.domain.model.product import Product
from storeorders.domain.model.value_objects import Money
from storeorders.domain.repository.catalog_repository import CatalogRepository

metadata = MetaData()

products = Table(
    "products",
    metadata,
    Column("id", String(64), primary_key=True),
    Column("name", String(255), nullable=False),
    Column("price", Numeric(12, 2), nullable=False),
    Column("stock", Integer, nullable=False, default=0),
    Column("is_deleted", Boolean, nullable=False, default=False),
    CheckConstraint("stock >= 0", name="ck_products_stock_non_negative"),
)


class SqlCatalogRepository(CatalogRepository):

    def __init__(self, engine: Engine) -> None:
        self._engine = engine
        metadata.create_all(engine)

    @classmethod
    def from_url(cls, url: str) -> SqlCatalogRepository:
        return cls(create_engine(url))

    # --- CatalogRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        with self._engine.connect() as conn:
            row = conn.execute(
                select(products).where(products.c.id == product_id)
            ).first()
        return None if row is None else self._to_domain(row)

    def list_all(self) -> list[Product]:
        with self._engine.connect() as conn:
            rows = conn.execute(select(products).order_by(products.c.id)).all()
        return [self._to_domain(row) for row in rows]

    def save(self, product: Product) -> None:
        values = {
            "name": product.name,
            "price": product.price.amount,
            "stock": product.stock,
            "is_deleted": product.is_deleted,
        }
        with self._engine.begin() as conn:
            result = conn.execute(
                update(products).where(products.c.id == product.id).values(**values)
            )
            if result.rowcount == 0:
                conn.execute(insert(products).values(id=product.id, **values))

    def adjust_stock(self, product_id: str, delta: int) -> Product:
        return self.apply_stock_deltas({product_id: delta})[0]

    def apply_stock_deltas(self, deltas: dict[str, int]) -> list[Product]:
        with self._engine.begin() as conn:
            for product_id, delta in deltas.items():
                self._apply_delta(conn, product_id, delta)
            rows = conn.execute(
                select(products).where(products.c.id.in_(list(deltas)))
            ).all()

        by_id = {row.id: self._to_domain(row) for row in rows}
        return [by_id[product_id] for product_id in deltas]

    # --- Helpers --------------------------------------------------------------

    @staticmethod
    def _apply_delta(conn: Connection, product_id: str, delta: int) -> None:
        statement = (
            update(products)
            .where(products.c.id == product_id)
            .where(products.c.stock + delta >= 0)
            .values(stock=products.c.stock + delta)
        )
        if delta < 0:
            # Deleted products can take stock back but cannot be reserved.
            statement = statement.where(products.c.is_deleted.is_(False))
        result = conn.execute(statement)
        if result.rowcount == 1:
            return

        row = conn.execute(
            select(products.c.stock, products.c.is_deleted).where(
                products.c.id == product_id
            )
        ).first()
        if row is None or (row.is_deleted and delta < 0):
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        raise InsufficientStockError(product_id, -delta, row.stock)

    @staticmethod
    def _to_domain(row: Row) -> Product:
        return Product(
            id=row.id,
            name=row.name,
            price=Money.of(row.price),
            stock=row.stock,
            is_deleted=row.is_deleted,
        )
