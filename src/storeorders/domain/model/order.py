"""Order aggregate.

The Order is an aggregate root that owns its order lines and a snapshot of
the client it was placed for. Stock for its lines lives in the catalog, a
different store, so the aggregate itself never touches stock.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from storeorders.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class Address:
    street: str
    number: int
    city: str
    province: str
    country: str
    zip: int


@dataclass(frozen=True)
class Client:
    """Denormalised copy of the client at the time the order was placed."""

    name: str
    email: str
    phone: int
    address: Address


@dataclass
class OrderLine:
    """One product / quantity / price entry, the unit of reservation.

    ``product_price`` is the price the caller saw; it must match the
    catalog price when the order is validated.
    """

    product_id: str
    quantity: Quantity
    product_price: Money

    @property
    def total(self) -> Money:
        return self.product_price * self.quantity.value


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Order:
    """Aggregate root for customer orders.

    ``total`` and ``total_items`` are stored rather than derived so that a
    persisted document keeps the figures computed at reservation time;
    ``recalculate_totals`` refreshes them from the lines.
    """

    id: str | None
    user_id: int
    client: Client
    order_lines: list[OrderLine]
    total_items: int = 0
    total: Money = field(default_factory=Money.zero)
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)
    is_deleted: bool = False

    def recalculate_totals(self) -> None:
        result = Money.zero()
        for line in self.order_lines:
            result = result + line.total
        self.total = result
        self.total_items = sum(line.quantity.value for line in self.order_lines)

    def quantities_by_product(self) -> dict[str, int]:
        """Total quantity per product, lines on the same product summed."""
        quantities: dict[str, int] = {}
        for line in self.order_lines:
            quantities[line.product_id] = (
                quantities.get(line.product_id, 0) + line.quantity.value
            )
        return quantities

    def stamp_created(self, now: datetime | None = None) -> None:
        now = now or _utcnow()
        self.created_at = now
        self.updated_at = now

    def stamp_updated(self, now: datetime | None = None) -> None:
        self.updated_at = now or _utcnow()

    def mark_deleted(self) -> None:
        self.is_deleted = True
        self.stamp_updated()
