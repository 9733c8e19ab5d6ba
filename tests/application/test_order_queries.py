"""Integration tests for the read-side use cases."""

import pytest

from storeorders.application.create_order import CreateOrderHandler
from storeorders.application.list_orders import ListOrdersHandler
from storeorders.application.remove_order import DeleteMode, RemoveOrderHandler
from storeorders.application.show_order import ShowOrderHandler
from storeorders.domain.exceptions import EntityNotFoundError, ValidationError
from tests.builders import make_spec


@pytest.fixture
def seeded(order_repo, catalog, saga_log):
    create = CreateOrderHandler(order_repo, catalog, saga_log)
    return [
        create.handle(make_spec([("p1", 1, "5")], user_id=user_id))
        for user_id in (3, 1, 2, 1)
    ]


class TestShowOrder:

    def test_found(self, order_repo, seeded):
        dto = ShowOrderHandler(order_repo).handle(seeded[0].id)
        assert dto == seeded[0]

    def test_not_found(self, order_repo):
        with pytest.raises(EntityNotFoundError, match="Order with id: nope not found"):
            ShowOrderHandler(order_repo).handle("nope")


class TestByUser:

    def test_filters_by_user(self, order_repo, seeded):
        result = ListOrdersHandler(order_repo).by_user(1)
        assert [dto.id for dto in result] == [seeded[1].id, seeded[3].id]

    def test_no_orders(self, order_repo, seeded):
        assert ListOrdersHandler(order_repo).by_user(99) == []

    def test_has_no_side_effects(self, order_repo, catalog, seeded):
        ListOrdersHandler(order_repo).by_user(1)
        assert catalog.stock_of("p1") == 6


class TestPage:

    def test_defaults_sort_by_id_ascending(self, order_repo, seeded):
        result = ListOrdersHandler(order_repo).page()
        assert [dto.id for dto in result.items] == sorted(dto.id for dto in seeded)
        assert result.total_items == 4
        assert result.total_pages == 1

    def test_sort_by_user_descending(self, order_repo, seeded):
        result = ListOrdersHandler(order_repo).page(order_by="user_id", direction="desc")
        assert [dto.user_id for dto in result.items] == [3, 2, 1, 1]

    def test_paging(self, order_repo, seeded):
        handler = ListOrdersHandler(order_repo)
        first = handler.page(page=1, limit=3)
        second = handler.page(page=2, limit=3)

        assert len(first.items) == 3
        assert first.has_next and not first.has_prev
        assert len(second.items) == 1
        assert second.has_prev and not second.has_next
        assert second.total_pages == 2

    def test_default_limit(self, order_repo, seeded):
        result = ListOrdersHandler(order_repo, default_limit=2).page()
        assert result.limit == 2
        assert len(result.items) == 2

    def test_invalid_sort_field_rejected(self, order_repo, seeded):
        with pytest.raises(ValidationError, match="Valid values are: id, user_id"):
            ListOrdersHandler(order_repo).page(order_by="total")

    def test_invalid_direction_rejected(self, order_repo, seeded):
        with pytest.raises(ValidationError, match="asc, desc"):
            ListOrdersHandler(order_repo).page(direction="up")

    @pytest.mark.parametrize("page, limit", [(0, 10), (1, 0)])
    def test_invalid_paging_rejected(self, order_repo, page, limit):
        with pytest.raises(ValidationError, match="1 or greater"):
            ListOrdersHandler(order_repo).page(page=page, limit=limit)

    def test_soft_deleted_orders_excluded(self, order_repo, catalog, saga_log, seeded):
        RemoveOrderHandler(order_repo, catalog, saga_log, DeleteMode.SOFT).handle(seeded[1].id)
        handler = ListOrdersHandler(order_repo)

        assert handler.page().total_items == 3
        assert [dto.id for dto in handler.by_user(1)] == [seeded[3].id]
