"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world. Input specs hold what
the caller sent; output DTOs mirror the persisted order document.
"""

from __future__ import annotations

from dataclasses import dataclass

# --- Input --------------------------------------------------------------------


@dataclass(frozen=True)
class AddressSpec:
    street: str
    number: int
    city: str
    province: str
    country: str
    zip: int


@dataclass(frozen=True)
class ClientSpec:
    name: str
    email: str
    phone: int
    address: AddressSpec


@dataclass(frozen=True)
class OrderLineSpec:
    """Input: one requested line (product, quantity, the price the caller saw)."""

    product_id: str
    quantity: int
    product_price: str


@dataclass(frozen=True)
class OrderSpec:
    """Input: a complete order as submitted for create or update."""

    user_id: int
    client: ClientSpec
    order_lines: list[OrderLineSpec]


# --- Output -------------------------------------------------------------------


@dataclass(frozen=True)
class OrderLineDTO:
    product_id: str
    quantity: int
    product_price: str
    total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: an order as returned to callers."""

    id: str
    user_id: int
    client: ClientSpec
    order_lines: list[OrderLineDTO]
    total_items: int
    total: str
    created_at: str
    updated_at: str
    is_deleted: bool


@dataclass(frozen=True)
class PageDTO:
    """Output: one page of an order listing."""

    items: list[OrderDTO]
    total_items: int
    page: int
    limit: int
    total_pages: int
    has_next: bool
    has_prev: bool
