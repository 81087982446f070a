"""Tests for ProductService against the in-memory repository."""

import pytest

from product_api.domain.exceptions import NotFound, OperationFailed, ValidationError
from product_api.services.product_service import ProductService
from tests.fakes import FakeProductRepository, RacingDeleteRepository


@pytest.fixture
def repo():
    return FakeProductRepository()


@pytest.fixture
def service(repo):
    return ProductService(repo)


def create_laptop(service):
    return service.create_product("Laptop", "Gaming laptop", 1299.99, 5)


class TestCreateProduct:

    def test_returns_stored_product(self, service):
        product = create_laptop(service)

        assert product.id is not None
        assert product.name == "Laptop"
        assert product.description == "Gaming laptop"
        assert product.price == 1299.99
        assert product.stock == 5
        assert product.created_at == product.updated_at

    def test_assigns_distinct_ids(self, service):
        first = create_laptop(service)
        second = service.create_product("Mouse", "Wireless", 49.99, 50)

        assert first.id != second.id

    @pytest.mark.parametrize(
        "name, price, stock",
        [
            ("", 10.0, 1),
            ("   ", 10.0, 1),
            ("Valid", -1.0, 1),
            ("Valid", 10.0, -1),
            ("Valid", 10.0, 1.5),
        ],
    )
    def test_invalid_input_persists_nothing(self, service, repo, name, price, stock):
        with pytest.raises(ValidationError):
            service.create_product(name, "desc", price, stock)

        assert repo.find_all() == []


class TestGetProduct:

    def test_get_existing(self, service):
        created = create_laptop(service)

        assert service.get_product_by_id(created.id) == created

    def test_get_missing_raises_not_found(self, service):
        with pytest.raises(NotFound, match="Product with ID 42 not found"):
            service.get_product_by_id(42)

    def test_get_all_newest_first(self, service):
        a = service.create_product("A", "", 1, 1)
        b = service.create_product("B", "", 1, 1)
        c = service.create_product("C", "", 1, 1)

        assert [p.id for p in service.get_all_products()] == [c.id, b.id, a.id]

    def test_get_all_empty(self, service):
        assert service.get_all_products() == []


class TestUpdateProduct:

    def test_price_only_leaves_other_fields(self, service):
        created = create_laptop(service)

        updated = service.update_product(created.id, price=1499.99)

        assert updated.price == 1499.99
        assert updated.name == created.name
        assert updated.description == created.description
        assert updated.stock == created.stock
        assert updated.created_at == created.created_at
        assert updated.updated_at > created.updated_at

    def test_falsy_values_count_as_provided(self, service):
        created = create_laptop(service)

        updated = service.update_product(created.id, description="", price=0, stock=0)

        assert updated.description == ""
        assert updated.price == 0
        assert updated.stock == 0
        assert updated.name == "Laptop"

    def test_repository_receives_full_snapshot(self, service, repo):
        created = create_laptop(service)

        service.update_product(created.id, stock=7)

        saved = repo.update_calls[-1]
        assert saved.id == created.id
        assert saved.name == "Laptop"
        assert saved.description == "Gaming laptop"
        assert saved.price == 1299.99
        assert saved.stock == 7

    def test_missing_raises_not_found_before_validation(self, service, repo):
        with pytest.raises(NotFound):
            service.update_product(99, name="")

        assert repo.update_calls == []

    def test_invalid_merge_is_not_persisted(self, service, repo):
        created = create_laptop(service)

        with pytest.raises(ValidationError, match="price must be non-negative"):
            service.update_product(created.id, price=-5)

        assert repo.update_calls == []
        assert service.get_product_by_id(created.id).price == 1299.99

    def test_explicit_none_is_applied_and_rejected(self, service):
        created = create_laptop(service)

        with pytest.raises(ValidationError, match="name required"):
            service.update_product(created.id, name=None)

    def test_no_fields_still_refreshes_updated_at(self, service):
        created = create_laptop(service)

        updated = service.update_product(created.id)

        assert updated.name == created.name
        assert updated.updated_at > created.updated_at


class TestDeleteProduct:

    def test_delete_then_get_raises_not_found(self, service):
        created = create_laptop(service)

        service.delete_product(created.id)

        with pytest.raises(NotFound):
            service.get_product_by_id(created.id)

    def test_delete_missing_raises_not_found(self, service):
        with pytest.raises(NotFound, match="Product with ID 7 not found"):
            service.delete_product(7)

    def test_second_delete_fails(self, service):
        created = create_laptop(service)
        service.delete_product(created.id)

        with pytest.raises(NotFound):
            service.delete_product(created.id)

    def test_lost_delete_race_raises_operation_failed(self):
        service = ProductService(RacingDeleteRepository())
        created = create_laptop(service)

        with pytest.raises(OperationFailed, match=f"Failed to delete product with ID {created.id}"):
            service.delete_product(created.id)


def test_laptop_scenario(service):
    created = service.create_product("Laptop", "Gaming laptop", 1299.99, 5)
    assert created.id is not None
    assert created.created_at == created.updated_at

    updated = service.update_product(created.id, name="Gaming Laptop", price=1499.99)
    assert updated.stock == 5
    assert updated.name == "Gaming Laptop"
    assert updated.price == 1499.99
    assert updated.updated_at > created.updated_at

    service.delete_product(created.id)
    with pytest.raises(NotFound):
        service.get_product_by_id(created.id)
