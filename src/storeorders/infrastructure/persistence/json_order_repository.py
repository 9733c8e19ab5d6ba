"""JSON-file-backed implementation of OrderRepository.

Each order is stored as one document in a JSON array. Field names follow
the published document shape (``userId``, ``orderLines``, ...), decimals
are written as strings and timestamps as ISO-8601.
"""

from __future__ import annotations

import json
import uuid
from datetime import datetime
from pathlib import Path

from storeorders.domain.model.order import Address, Client, Order, OrderLine
from storeorders.domain.model.value_objects import Money, Quantity
from storeorders.domain.repository.order_repository import OrderRepository, Page

# Domain attribute -> document field, for filtering and sorting.
_FIELDS = {
    "id": "id",
    "user_id": "userId",
    "is_deleted": "isDeleted",
    "created_at": "createdAt",
    "updated_at": "updatedAt",
}


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> str:
        return uuid.uuid4().hex

    def insert(self, order: Order) -> Order:
        if order.id is None:
            order.id = self.next_id()
        orders = self._load_raw()
        if any(raw["id"] == order.id for raw in orders):
            raise ValueError(f"Order {order.id} already exists")
        orders.append(self._to_raw(order))
        self._persist_raw(orders)
        return order

    def get_by_id(self, order_id: str) -> Order | None:
        for raw in self._load_raw():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def find_by_user_id(self, user_id: int) -> list[Order]:
        return [
            self._to_domain(raw)
            for raw in self._load_raw()
            if raw["userId"] == user_id
        ]

    def update_by_id(self, order_id: str, order: Order) -> Order | None:
        orders = self._load_raw()
        for i, raw in enumerate(orders):
            if raw["id"] == order_id:
                order.id = order_id
                orders[i] = self._to_raw(order)
                self._persist_raw(orders)
                return order
        return None

    def delete_by_id(self, order_id: str) -> None:
        orders = self._load_raw()
        remaining = [raw for raw in orders if raw["id"] != order_id]
        if len(remaining) != len(orders):
            self._persist_raw(remaining)

    def paginate(
        self,
        filters: dict[str, object],
        page: int,
        limit: int,
        sort: tuple[str, str],
    ) -> Page[Order]:
        sort_field, direction = sort
        matching = [
            raw
            for raw in self._load_raw()
            if all(raw.get(_FIELDS[name]) == value for name, value in filters.items())
        ]
        matching.sort(key=lambda raw: raw[_FIELDS[sort_field]], reverse=direction == "desc")

        start = (page - 1) * limit
        return Page(
            items=[self._to_domain(raw) for raw in matching[start:start + limit]],
            total_items=len(matching),
            page=page,
            limit=limit,
        )

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        address = order.client.address
        return {
            "id": order.id,
            "userId": order.user_id,
            "client": {
                "name": order.client.name,
                "email": order.client.email,
                "phone": order.client.phone,
                "address": {
                    "street": address.street,
                    "number": address.number,
                    "city": address.city,
                    "province": address.province,
                    "country": address.country,
                    "zip": address.zip,
                },
            },
            "orderLines": [
                {
                    "productId": line.product_id,
                    "quantity": line.quantity.value,
                    "productPrice": str(line.product_price.amount),
                    "total": str(line.total.amount),
                }
                for line in order.order_lines
            ],
            "totalItems": order.total_items,
            "total": str(order.total.amount),
            "createdAt": order.created_at.isoformat(),
            "updatedAt": order.updated_at.isoformat(),
            "isDeleted": order.is_deleted,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        client = raw["client"]
        address = client["address"]
        return Order(
            id=raw["id"],
            user_id=raw["userId"],
            client=Client(
                name=client["name"],
                email=client["email"],
                phone=client["phone"],
                address=Address(**address),
            ),
            order_lines=[
                OrderLine(
                    product_id=line["productId"],
                    quantity=Quantity(line["quantity"]),
                    product_price=Money.of(line["productPrice"]),
                )
                for line in raw["orderLines"]
            ],
            total_items=raw.get("totalItems", 0),
            total=Money.of(raw.get("total", "0")),
            created_at=datetime.fromisoformat(raw["createdAt"]),
            updated_at=datetime.fromisoformat(raw["updatedAt"]),
            is_deleted=raw.get("isDeleted", False),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, orders: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(orders, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
