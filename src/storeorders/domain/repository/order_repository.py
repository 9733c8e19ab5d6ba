"""Abstract repository for Order aggregate (the document store)."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, TypeVar

from storeorders.domain.model.order import Order

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of a sorted listing."""

    items: list[T]
    total_items: int
    page: int
    limit: int

    @property
    def total_pages(self) -> int:
        return max(1, math.ceil(self.total_items / self.limit))

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_prev(self) -> bool:
        return self.page > 1


class OrderRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate a new opaque order ID."""

    @abstractmethod
    def insert(self, order: Order) -> Order:
        """Persist a new order; assigns an ID if it has none."""

    @abstractmethod
    def get_by_id(self, order_id: str) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def find_by_user_id(self, user_id: int) -> list[Order]:
        """Return every order placed by a user, in insertion order."""

    @abstractmethod
    def update_by_id(self, order_id: str, order: Order) -> Order | None:
        """Replace the stored document; None if there was nothing to replace."""

    @abstractmethod
    def delete_by_id(self, order_id: str) -> None:
        """Physically remove the document. Missing IDs are ignored."""

    @abstractmethod
    def paginate(
        self,
        filters: dict[str, object],
        page: int,
        limit: int,
        sort: tuple[str, str],
    ) -> Page[Order]:
        """Return one page of orders matching ``filters`` (field equality).

        ``sort`` is ``(field, "asc" | "desc")``.
        """
