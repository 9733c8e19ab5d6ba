"""Integration tests for the UpdateOrder use case."""

import pytest

from storeorders.application.create_order import CreateOrderHandler
from storeorders.application.update_order import UpdateOrderHandler
from storeorders.domain.exceptions import EntityNotFoundError, ValidationError
from tests.builders import make_spec


@pytest.fixture
def create(order_repo, catalog, saga_log) -> CreateOrderHandler:
    return CreateOrderHandler(order_repo, catalog, saga_log)


@pytest.fixture
def update(order_repo, catalog, saga_log) -> UpdateOrderHandler:
    return UpdateOrderHandler(order_repo, catalog, saga_log)


class TestUpdateOrder:

    def test_quantity_increase_nets_against_original_stock(self, create, update, catalog):
        dto = create.handle(make_spec([("p1", 3, "5")]))
        assert catalog.stock_of("p1") == 7

        updated = update.handle(dto.id, make_spec([("p1", 5, "5")]))

        assert catalog.stock_of("p1") == 5
        assert updated.total == "25.00"
        assert updated.total_items == 5

    def test_same_quantity_update_is_accepted(self, create, update, catalog):
        # Uses the whole stock; only passes because the old reservation is
        # released before validating.
        dto = create.handle(make_spec([("p2", 4, "12.50")]))
        update.handle(dto.id, make_spec([("p2", 4, "12.50")]))
        assert catalog.stock_of("p2") == 0

    def test_switch_product(self, create, update, catalog):
        dto = create.handle(make_spec([("p1", 3, "5")]))
        update.handle(dto.id, make_spec([("p2", 1, "12.50")]))
        assert catalog.stock_of("p1") == 10
        assert catalog.stock_of("p2") == 3

    def test_preserves_id_and_created_at(self, create, update, order_repo):
        dto = create.handle(make_spec([("p1", 3, "5")]))
        updated = update.handle(dto.id, make_spec([("p1", 1, "5")], user_id=9))

        assert updated.id == dto.id
        assert updated.created_at == dto.created_at
        assert updated.updated_at >= dto.updated_at
        assert order_repo.get_by_id(dto.id).user_id == 9

    def test_unknown_order_rejected(self, update, catalog):
        with pytest.raises(EntityNotFoundError, match="not found"):
            update.handle("missing", make_spec([("p1", 1, "5")]))
        assert catalog.stock_of("p1") == 10


class TestUpdateOrderCompensation:

    def test_invalid_candidate_restores_existing_reservation(self, create, update, catalog, order_repo):
        dto = create.handle(make_spec([("p1", 3, "5")]))

        with pytest.raises(ValidationError, match="price"):
            update.handle(dto.id, make_spec([("p1", 3, "4")]))

        assert catalog.stock_of("p1") == 7
        assert order_repo.get_by_id(dto.id).total_items == 3

    def test_insufficient_stock_restores_existing_reservation(self, create, update, catalog):
        dto = create.handle(make_spec([("p1", 3, "5")]))

        with pytest.raises(ValidationError, match="not enough"):
            update.handle(dto.id, make_spec([("p1", 11, "5")]))

        assert catalog.stock_of("p1") == 7

    def test_empty_candidate_rejected(self, create, update, catalog):
        dto = create.handle(make_spec([("p1", 3, "5")]))

        with pytest.raises(ValidationError, match="No order lines"):
            update.handle(dto.id, make_spec([]))

        assert catalog.stock_of("p1") == 7

    def test_no_pending_saga_after_compensation(self, create, update, saga_log):
        dto = create.handle(make_spec([("p1", 3, "5")]))
        with pytest.raises(ValidationError):
            update.handle(dto.id, make_spec([("p1", 3, "4")]))
        assert saga_log.pending() == []
