"""Mapper functions to convert dataset records into domain entities.

Datasets are plain JSON-style dicts with snake_case keys. This layer isolates
the conversion logic so the entities stay free of parsing concerns.
"""

from decimal import Decimal
from typing import Any

from retailpilot.domain import entities as domain
from retailpilot.domain.errors import ValidationError
from retailpilot.domain.ledger import to_amount
from retailpilot.store.state import LedgerState
from retailpilot.utils.amount_parser import parse_amount
from retailpilot.utils.date_parser import parse_date, parse_timestamp


def _require(record: dict[str, Any], key: str, kind: str) -> Any:
    if key not in record or record[key] is None:
        raise ValidationError(f"{kind} record is missing required field '{key}'")
    return record[key]


def _money(value: Any, kind: str) -> Decimal:
    if isinstance(value, str):
        value = parse_amount(value)
    return to_amount(value, kind)


def _non_negative(value, key: str, kind: str):
    if value < 0:
        raise ValidationError(f"{kind} record has a negative '{key}': {value}")
    return value


def batch_to_domain(record: dict[str, Any]) -> domain.StockBatch:
    """Convert a batch record to a StockBatch entity."""
    return domain.StockBatch(
        id=str(_require(record, "id", "Batch")),
        acquisition_date=parse_date(str(_require(record, "acquisition_date", "Batch"))),
        quantity=_non_negative(int(_require(record, "quantity", "Batch")), "quantity", "Batch"),
        unit_cost=_non_negative(
            _money(_require(record, "unit_cost", "Batch"), "Batch"), "unit_cost", "Batch"
        ),
    )


def product_to_domain(record: dict[str, Any]) -> domain.Product:
    """Convert a product record to a Product entity."""
    return domain.Product(
        id=str(_require(record, "id", "Product")),
        name=_require(record, "name", "Product"),
        sku=_require(record, "sku", "Product"),
        category=record.get("category", ""),
        selling_price=_money(record.get("selling_price", 0), "Product"),
        unit_cost=_money(_require(record, "unit_cost", "Product"), "Product"),
        current_stock=_non_negative(
            int(_require(record, "current_stock", "Product")), "current_stock", "Product"
        ),
        min_stock_level=int(record.get("min_stock_level", 0)),
        supplier_name=record.get("supplier_name", ""),
        batches=tuple(batch_to_domain(b) for b in record.get("batches") or ()),
    )


def supplier_to_domain(record: dict[str, Any]) -> domain.Supplier:
    """Convert a supplier record to a Supplier entity."""
    last_payment = record.get("last_payment_date")
    due = record.get("due_date")
    return domain.Supplier(
        id=str(_require(record, "id", "Supplier")),
        name=_require(record, "name", "Supplier"),
        contact_phone=record.get("contact_phone", ""),
        email=record.get("email", ""),
        balance_due=_non_negative(
            _money(record.get("balance_due", 0), "Supplier"), "balance_due", "Supplier"
        ),
        last_payment_date=parse_timestamp(last_payment) if last_payment else None,
        due_date=parse_date(due) if due else None,
    )


def transaction_to_domain(record: dict[str, Any]) -> domain.Transaction:
    """Convert a transaction record to a Transaction entity."""
    return domain.Transaction(
        id=str(_require(record, "id", "Transaction")),
        date=parse_timestamp(_require(record, "date", "Transaction")),
        kind=domain.TransactionType(_require(record, "kind", "Transaction")),
        amount=_money(_require(record, "amount", "Transaction"), "Transaction"),
        description=record.get("description", ""),
        payment_mode=domain.PaymentMode(record.get("payment_mode", domain.PaymentMode.CASH.value)),
        counterparty_name=record.get("counterparty_name"),
        category=record.get("category"),
        status=domain.TransactionStatus(
            record.get("status", domain.TransactionStatus.COMPLETED.value)
        ),
        receipt_ref=record.get("receipt_ref"),
    )


def state_from_dataset(dataset: dict[str, Any]) -> LedgerState:
    """Build a LedgerState from a dataset with products, suppliers and transactions."""
    transactions = [transaction_to_domain(t) for t in dataset.get("transactions", [])]
    # The log is kept newest first regardless of file order
    transactions.sort(key=lambda t: t.date, reverse=True)
    return LedgerState(
        products=tuple(product_to_domain(p) for p in dataset.get("products", [])),
        suppliers=tuple(supplier_to_domain(s) for s in dataset.get("suppliers", [])),
        transactions=tuple(transactions),
    )
