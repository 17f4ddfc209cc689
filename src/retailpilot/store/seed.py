"""Built-in demo dataset used when no dataset file is configured."""

from datetime import date, datetime, timedelta, UTC
from decimal import Decimal
from typing import Optional

from retailpilot.domain.entities import (
    PaymentMode,
    Product,
    StockBatch,
    Supplier,
    Transaction,
    TransactionType,
)
from retailpilot.store.state import LedgerState


def _batch(batch_id: str, acquired: str, quantity: int, unit_cost: str) -> StockBatch:
    return StockBatch(
        id=batch_id,
        acquisition_date=date.fromisoformat(acquired),
        quantity=quantity,
        unit_cost=Decimal(unit_cost),
    )


INITIAL_PRODUCTS = (
    Product(
        id="1",
        name="Premium Wireless Headset",
        sku="WH-001",
        category="Electronics",
        selling_price=Decimal("149.99"),
        unit_cost=Decimal("80.00"),
        current_stock=45,
        min_stock_level=10,
        supplier_name="TechDistro Inc",
        batches=(
            _batch("b1", "2023-08-01", 15, "70.00"),
            _batch("b2", "2023-09-15", 20, "75.00"),
            _batch("b3", "2023-10-20", 30, "82.00"),
        ),
    ),
    Product(
        id="2",
        name="Ergonomic Office Chair",
        sku="FUR-022",
        category="Furniture",
        selling_price=Decimal("299.99"),
        unit_cost=Decimal("150.00"),
        current_stock=5,
        min_stock_level=8,
        supplier_name="OfficeSupplies Co",
        batches=(
            _batch("b4", "2023-07-01", 10, "140.00"),
            _batch("b5", "2023-09-01", 10, "155.00"),
        ),
    ),
    Product(
        id="3",
        name="Mechanical Keyboard RGB",
        sku="KB-104",
        category="Electronics",
        selling_price=Decimal("129.50"),
        unit_cost=Decimal("75.00"),
        current_stock=12,
        min_stock_level=15,
        supplier_name="KeyMasters",
        batches=(_batch("b6", "2023-10-01", 50, "75.00"),),
    ),
    Product(
        id="4",
        name="USB-C Docking Station",
        sku="ACC-055",
        category="Accessories",
        selling_price=Decimal("89.99"),
        unit_cost=Decimal("45.00"),
        current_stock=2,
        min_stock_level=5,
        supplier_name="TechDistro Inc",
    ),
    Product(
        id="5",
        name="27-inch 4K Monitor",
        sku="MON-4K",
        category="Electronics",
        selling_price=Decimal("450.00"),
        unit_cost=Decimal("300.00"),
        current_stock=20,
        min_stock_level=5,
        supplier_name="ViewMax",
        batches=(
            _batch("b7", "2023-05-15", 10, "280.00"),
            _batch("b8", "2023-08-20", 15, "310.00"),
        ),
    ),
    Product(
        id="6",
        name="Bluetooth Speaker",
        sku="SPK-BT",
        category="Electronics",
        selling_price=Decimal("59.99"),
        unit_cost=Decimal("30.00"),
        current_stock=25,
        min_stock_level=8,
        supplier_name="TechDistro Inc",
    ),
)


def seed_state(now: Optional[datetime] = None) -> LedgerState:
    """Build the demo dataset with dates placed relative to ``now``."""
    if now is None:
        now = datetime.now(UTC)
    day = timedelta(days=1)

    suppliers = (
        Supplier(
            id="1",
            name="TechDistro Inc",
            contact_phone="+1 555-0201",
            email="accounts@techdistro.com",
            balance_due=Decimal("1500.00"),
            last_payment_date=now - 15 * day,
            due_date=(now + 15 * day).date(),
        ),
        Supplier(
            id="2",
            name="OfficeSupplies Co",
            contact_phone="+1 555-0202",
            email="billing@officesupplies.com",
            balance_due=Decimal("0"),
            last_payment_date=now - 45 * day,
        ),
        Supplier(
            id="3",
            name="KeyMasters",
            contact_phone="+1 555-0203",
            email="sales@keymasters.com",
            balance_due=Decimal("450.50"),
            due_date=(now + 5 * day).date(),
        ),
    )

    # Newest first, matching the order the log is kept in
    transactions = (
        Transaction(
            id="104",
            date=now,
            kind=TransactionType.SALE,
            amount=Decimal("450.00"),
            description="Sale: 4K Monitor",
            payment_mode=PaymentMode.CASH,
            counterparty_name="John Doe",
        ),
        Transaction(
            id="103",
            date=now,
            kind=TransactionType.EXPENSE,
            amount=Decimal("1200.00"),
            description="Monthly Shop Rent",
            payment_mode=PaymentMode.CREDIT,
            category="Rent",
        ),
        Transaction(
            id="102",
            date=now - day,
            kind=TransactionType.SALE,
            amount=Decimal("299.99"),
            description="Sale: Office Chair",
            payment_mode=PaymentMode.UPI,
            counterparty_name="Jane Smith",
        ),
        Transaction(
            id="101",
            date=now - 2 * day,
            kind=TransactionType.SALE,
            amount=Decimal("149.99"),
            description="Sale: Wireless Headset",
            payment_mode=PaymentMode.CARD,
            counterparty_name="John Doe",
        ),
    )

    return LedgerState(products=INITIAL_PRODUCTS, suppliers=suppliers, transactions=transactions)
