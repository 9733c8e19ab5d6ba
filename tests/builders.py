"""Helpers that build orders and specs for tests."""

from __future__ import annotations

from storeorders.application.dto import AddressSpec, ClientSpec, OrderLineSpec, OrderSpec
from storeorders.domain.model.order import Address, Client, Order, OrderLine
from storeorders.domain.model.value_objects import Money, Quantity

ADDRESS = Address(
    street="Calle Mayor", number=10, city="Madrid",
    province="Madrid", country="Spain", zip=28013,
)
CLIENT = Client(name="Ana", email="ana@example.com", phone=600123123, address=ADDRESS)


def make_order(
    lines: list[tuple[str, int, str]],
    order_id: str | None = "order-1",
    user_id: int = 1,
) -> Order:
    """Create an order with (product_id, qty, price) tuples."""
    return Order(
        id=order_id,
        user_id=user_id,
        client=CLIENT,
        order_lines=[
            OrderLine(product_id=pid, quantity=Quantity(qty), product_price=Money.of(price))
            for pid, qty, price in lines
        ],
    )


def make_spec(lines: list[tuple[str, int, str]], user_id: int = 1) -> OrderSpec:
    """Create an input spec with (product_id, qty, price) tuples."""
    return OrderSpec(
        user_id=user_id,
        client=ClientSpec(
            name="Ana",
            email="ana@example.com",
            phone=600123123,
            address=AddressSpec(
                street="Calle Mayor", number=10, city="Madrid",
                province="Madrid", country="Spain", zip=28013,
            ),
        ),
        order_lines=[
            OrderLineSpec(product_id=pid, quantity=qty, product_price=price)
            for pid, qty, price in lines
        ],
    )
