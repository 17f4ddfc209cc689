"""Shared pytest fixtures for retailpilot tests."""

import json
from datetime import date, datetime, UTC
from decimal import Decimal
from pathlib import Path

import pytest

from retailpilot.domain.entities import Product, StockBatch, Supplier
from retailpilot.domain.finance import FinanceService
from retailpilot.domain.inventory import InventoryService
from retailpilot.domain.supplier import SupplierService
from retailpilot.store.memory import InMemoryLedgerStore
from retailpilot.store.seed import seed_state

NOW = datetime(2024, 3, 10, 15, 30, tzinfo=UTC)


@pytest.fixture
def now():
    """Fixed reference time used across tests."""
    return NOW


@pytest.fixture
def store():
    """Create an in-memory store holding the demo dataset."""
    return InMemoryLedgerStore(seed_state(NOW))


@pytest.fixture
def empty_store():
    """Create an empty in-memory store."""
    return InMemoryLedgerStore()


@pytest.fixture
def inventory_service(store):
    """Create an InventoryService over the demo dataset."""
    return InventoryService(store)


@pytest.fixture
def supplier_service(store):
    """Create a SupplierService over the demo dataset."""
    return SupplierService(store)


@pytest.fixture
def finance_service(store):
    """Create a FinanceService over the demo dataset."""
    return FinanceService(store)


@pytest.fixture
def headset():
    """Product whose batches fully cover its stock."""
    return Product(
        id="p1",
        name="Headset",
        sku="WH-001",
        category="Electronics",
        selling_price=Decimal("149.99"),
        unit_cost=Decimal("82"),
        current_stock=30,
        min_stock_level=10,
        supplier_name="TechDistro Inc",
        batches=(
            StockBatch("b1", date(2023, 8, 1), 15, Decimal("70")),
            StockBatch("b2", date(2023, 9, 15), 20, Decimal("75")),
            StockBatch("b3", date(2023, 10, 20), 30, Decimal("82")),
        ),
    )


@pytest.fixture
def owing_supplier():
    """Supplier with an outstanding balance and no due date."""
    return Supplier(
        id="s1",
        name="KeyMasters",
        contact_phone="+1 555-0203",
        email="sales@keymasters.com",
        balance_due=Decimal("50"),
    )


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def dataset_path(fixtures_dir):
    """Path to the sample JSON dataset."""
    return fixtures_dir / "dataset.json"


@pytest.fixture
def bad_dataset_path(tmp_path):
    """A dataset file holding a JSON list instead of an object."""
    path = tmp_path / "bad.json"
    path.write_text(json.dumps([1, 2, 3]))
    return path
