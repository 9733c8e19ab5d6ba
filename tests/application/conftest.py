import pytest

from storeorders.domain.model.product import Product
from storeorders.domain.model.value_objects import Money
from tests.fakes import FakeCatalogRepository, FakeOrderRepository, FakeSagaLogRepository


@pytest.fixture
def catalog() -> FakeCatalogRepository:
    return FakeCatalogRepository([
        Product(id="p1", name="Widget", price=Money.of("5"), stock=10),
        Product(id="p2", name="Gadget", price=Money.of("12.50"), stock=4),
    ])


@pytest.fixture
def order_repo() -> FakeOrderRepository:
    return FakeOrderRepository()


@pytest.fixture
def saga_log() -> FakeSagaLogRepository:
    return FakeSagaLogRepository()
