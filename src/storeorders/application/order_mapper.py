"""Mapping between input specs, the Order aggregate and output DTOs."""

from __future__ import annotations

from storeorders.application.dto import (
    AddressSpec,
    ClientSpec,
    OrderDTO,
    OrderLineDTO,
    OrderSpec,
    PageDTO,
)
from storeorders.domain.model.order import Address, Client, Order, OrderLine
from storeorders.domain.model.value_objects import Money, Quantity
from storeorders.domain.repository.order_repository import Page


class OrderMapper:

    @staticmethod
    def to_entity(spec: OrderSpec) -> Order:
        """Build an unsaved Order; raises ValidationError on bad quantities or prices."""
        address = spec.client.address
        return Order(
            id=None,
            user_id=spec.user_id,
            client=Client(
                name=spec.client.name,
                email=spec.client.email,
                phone=spec.client.phone,
                address=Address(
                    street=address.street,
                    number=address.number,
                    city=address.city,
                    province=address.province,
                    country=address.country,
                    zip=address.zip,
                ),
            ),
            order_lines=[
                OrderLine(
                    product_id=line.product_id,
                    quantity=Quantity(line.quantity),
                    product_price=Money.of(line.product_price),
                )
                for line in spec.order_lines
            ],
        )

    @staticmethod
    def to_dto(order: Order) -> OrderDTO:
        address = order.client.address
        return OrderDTO(
            id=order.id,  # type: ignore[arg-type]
            user_id=order.user_id,
            client=ClientSpec(
                name=order.client.name,
                email=order.client.email,
                phone=order.client.phone,
                address=AddressSpec(
                    street=address.street,
                    number=address.number,
                    city=address.city,
                    province=address.province,
                    country=address.country,
                    zip=address.zip,
                ),
            ),
            order_lines=[
                OrderLineDTO(
                    product_id=line.product_id,
                    quantity=line.quantity.value,
                    product_price=str(line.product_price),
                    total=str(line.total),
                )
                for line in order.order_lines
            ],
            total_items=order.total_items,
            total=str(order.total),
            created_at=order.created_at.isoformat(),
            updated_at=order.updated_at.isoformat(),
            is_deleted=order.is_deleted,
        )

    @classmethod
    def to_page_dto(cls, page: Page[Order]) -> PageDTO:
        return PageDTO(
            items=[cls.to_dto(order) for order in page.items],
            total_items=page.total_items,
            page=page.page,
            limit=page.limit,
            total_pages=page.total_pages,
            has_next=page.has_next,
            has_prev=page.has_prev,
        )
