"""Tests for InventoryService."""

from decimal import Decimal

import pytest

from retailpilot.domain.entities import ProductDraft, ValuationMethod
from retailpilot.domain.errors import ConflictError, NotFoundError
from retailpilot.domain.inventory import InventoryService


def test_create_product(inventory_service):
    product = inventory_service.create_product(
        ProductDraft(name="Desk Lamp", sku="LMP-01", unit_cost=Decimal("12"), current_stock=4)
    )
    assert product.id
    assert product.category == "Electronics"
    assert product.min_stock_level == 5
    assert inventory_service.list_products()[0].id == product.id


def test_create_product_duplicate_sku(inventory_service):
    with pytest.raises(ConflictError):
        inventory_service.create_product(ProductDraft(name="Copy", sku="KB-104"))


def test_update_and_delete_product(inventory_service):
    updated = inventory_service.update_product(
        "6", ProductDraft(name="Bluetooth Speaker Mini", sku="SPK-BT", current_stock=3)
    )
    assert updated.name == "Bluetooth Speaker Mini"
    assert updated.is_low_stock

    inventory_service.delete_product("6")
    assert inventory_service.get_product("6") is None


class TestListProducts:
    def test_all(self, inventory_service):
        assert len(inventory_service.list_products()) == 6

    def test_category_filter(self, inventory_service):
        products = inventory_service.list_products(category="Electronics")
        assert [p.id for p in products] == ["1", "3", "5", "6"]

    def test_all_category_means_no_filter(self, inventory_service):
        assert len(inventory_service.list_products(category="All")) == 6

    def test_search_matches_name_and_sku(self, inventory_service):
        assert [p.id for p in inventory_service.list_products(search="dock")] == ["4"]
        assert [p.id for p in inventory_service.list_products(search="kb-")] == ["3"]

    def test_search_and_category_combine(self, inventory_service):
        assert inventory_service.list_products(search="chair", category="Electronics") == []


def test_list_categories(inventory_service):
    assert inventory_service.list_categories() == ["Electronics", "Furniture", "Accessories"]


def test_low_stock_products(inventory_service):
    assert [p.id for p in inventory_service.low_stock_products()] == ["2", "3", "4"]


class TestValuation:
    def test_single_product(self, inventory_service):
        assert inventory_service.valuate_product("1", ValuationMethod.FIFO) == Decimal("3585")
        assert inventory_service.valuate_product("1", "lifo") == Decimal("3370")

    def test_product_without_batches(self, inventory_service):
        assert inventory_service.valuate_product("4", "FIFO") == Decimal("90")

    def test_missing_product(self, inventory_service):
        with pytest.raises(NotFoundError, match="Product 'nope' not found"):
            inventory_service.valuate_product("nope", "FIFO")

    def test_total_matches_report(self, inventory_service):
        report = inventory_service.valuation_report()
        assert inventory_service.total_valuation("FIFO") == report.total_fifo
        assert inventory_service.total_valuation("LIFO") == report.total_lifo
        assert inventory_service.total_valuation("AVG") == report.total_avg
        assert len(report.rows) == 6

    def test_empty_store(self, empty_store):
        service = InventoryService(empty_store)
        assert service.total_valuation("AVG") == 0
        assert service.valuation_report().rows == ()
