"""Tests for dataset mappers and store factories."""

from datetime import date, datetime, UTC
from decimal import Decimal

import pytest

from retailpilot.domain.entities import PaymentMode, TransactionStatus, TransactionType
from retailpilot.domain.errors import ValidationError
from retailpilot.store.factories import create_memory_store, load_dataset
from retailpilot.store.mappers import (
    batch_to_domain,
    product_to_domain,
    state_from_dataset,
    supplier_to_domain,
    transaction_to_domain,
)


class TestRecordMappers:
    def test_batch_to_domain(self):
        batch = batch_to_domain(
            {"id": "b1", "acquisition_date": "2023-08-01", "quantity": "15", "unit_cost": 70.1}
        )
        assert batch.acquisition_date == date(2023, 8, 1)
        assert batch.quantity == 15
        assert batch.unit_cost == Decimal("70.1")

    def test_product_defaults(self):
        product = product_to_domain(
            {"id": 7, "name": "Cable", "sku": "CBL-1", "unit_cost": "$2.50", "current_stock": 9}
        )
        assert product.id == "7"
        assert product.unit_cost == Decimal("2.50")
        assert product.selling_price == 0
        assert product.min_stock_level == 0
        assert product.batches == ()

    def test_product_missing_required_field(self):
        with pytest.raises(ValidationError, match="missing required field 'sku'"):
            product_to_domain({"id": "1", "name": "Cable", "unit_cost": 1, "current_stock": 1})

    def test_supplier_optional_dates(self):
        supplier = supplier_to_domain({"id": "s9", "name": "Acme"})
        assert supplier.balance_due == 0
        assert supplier.due_date is None
        assert supplier.last_payment_date is None

    def test_transaction_defaults(self):
        txn = transaction_to_domain(
            {"id": "1", "date": "2024-03-01T10:00:00", "kind": "Sale", "amount": 5}
        )
        assert txn.date == datetime(2024, 3, 1, 10, tzinfo=UTC)
        assert txn.kind == TransactionType.SALE
        assert txn.payment_mode == PaymentMode.CASH
        assert txn.status == TransactionStatus.COMPLETED

    @pytest.mark.parametrize(
        "record",
        [
            {"id": "b1", "acquisition_date": "2023-08-01", "quantity": -1, "unit_cost": 70},
            {"id": "b1", "acquisition_date": "2023-08-01", "quantity": 1, "unit_cost": "-70"},
        ],
    )
    def test_batch_rejects_negative_values(self, record):
        with pytest.raises(ValidationError, match="Batch record has a negative"):
            batch_to_domain(record)

    def test_product_rejects_negative_stock(self):
        with pytest.raises(ValidationError, match="negative 'current_stock'"):
            product_to_domain(
                {"id": "1", "name": "Cable", "sku": "CBL-1", "unit_cost": 1, "current_stock": -3}
            )

    def test_supplier_rejects_negative_balance(self):
        with pytest.raises(ValidationError, match="negative 'balance_due'"):
            supplier_to_domain({"id": "s9", "name": "Acme", "balance_due": -25})

    def test_non_finite_amount(self):
        with pytest.raises(ValidationError, match="finite number"):
            supplier_to_domain({"id": "s9", "name": "Acme", "balance_due": float("nan")})

    def test_float_amount_keeps_written_digits(self):
        supplier = supplier_to_domain({"id": "s9", "name": "Acme", "balance_due": 0.1})
        assert supplier.balance_due == Decimal("0.1")

    def test_transaction_unknown_kind(self):
        with pytest.raises(ValueError):
            transaction_to_domain(
                {"id": "1", "date": "2024-03-01", "kind": "Refund", "amount": 5}
            )


class TestStateFromDataset:
    def test_loads_sample_dataset(self, dataset_path):
        state = state_from_dataset(load_dataset(dataset_path))

        assert [p.sku for p in state.products] == ["WH-001", "ACC-055"]
        assert len(state.require_product("p1").batches) == 3
        assert state.require_product("p2").selling_price == Decimal("89.99")
        assert state.require_supplier("s3").balance_due == Decimal("450.50")
        assert state.require_supplier("s1").due_date == date(2024, 3, 13)
        assert state.require_supplier("s1").last_payment_date == datetime(2024, 2, 24, 9, tzinfo=UTC)

    def test_transactions_are_newest_first(self, dataset_path):
        state = state_from_dataset(load_dataset(dataset_path))
        assert [t.id for t in state.transactions] == ["103", "101", "099"]

    def test_empty_dataset(self):
        state = state_from_dataset({})
        assert state.products == ()
        assert state.suppliers == ()
        assert state.transactions == ()


class TestCreateMemoryStore:
    def test_from_path(self, dataset_path):
        store = create_memory_store(data_path=str(dataset_path))
        assert store.get_supplier("s1").name == "TechDistro Inc"

    def test_from_environment(self, dataset_path, monkeypatch):
        monkeypatch.setenv("RETAILPILOT_DATA_PATH", str(dataset_path))
        store = create_memory_store()
        assert [p.id for p in store.list_products()] == ["p1", "p2"]

    def test_defaults_to_demo_data(self, monkeypatch, now):
        monkeypatch.delenv("RETAILPILOT_DATA_PATH", raising=False)
        store = create_memory_store(now=now)
        assert len(store.list_products()) == 6
        assert store.get_supplier("3").due_date == date(2024, 3, 15)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ValidationError, match="not found"):
            create_memory_store(data_path=str(tmp_path / "missing.json"))

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(ValidationError, match="not valid JSON"):
            load_dataset(path)

    def test_non_object(self, bad_dataset_path):
        with pytest.raises(ValidationError, match="JSON object"):
            load_dataset(bad_dataset_path)
