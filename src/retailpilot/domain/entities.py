"""Domain model entities for retailpilot.

These are pure data classes representing business concepts, independent of
how the hosting layer stores them. Every entity is frozen: a change to a
product, supplier or transaction is expressed as a new value that replaces
the old one in its collection.
"""

from dataclasses import dataclass, field
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional


class ValuationMethod(str, Enum):
    """Inventory costing policy."""

    FIFO = "FIFO"
    LIFO = "LIFO"
    AVG = "AVG"


class TransactionType(str, Enum):
    """Kind of entry in the transaction log."""

    SALE = "Sale"
    EXPENSE = "Expense"
    PURCHASE = "Purchase"


class PaymentMode(str, Enum):
    """How money changed hands."""

    CASH = "Cash"
    CARD = "Card"
    UPI = "UPI"
    CREDIT = "Credit"


class TransactionStatus(str, Enum):
    """Settlement status of a transaction."""

    COMPLETED = "Completed"
    PENDING = "Pending"


EXPENSE_CATEGORIES = (
    "Rent",
    "Utilities",
    "Salaries",
    "Inventory Purchase",
    "Marketing",
    "Maintenance",
    "Office Supplies",
    "Operational",
    "Other",
)

SUPPLIER_PAYMENT_CATEGORY = "Inventory Purchase"


@dataclass(frozen=True)
class StockBatch:
    """One historical stock intake with its own quantity and unit cost.

    ``quantity`` is the quantity originally received, not a running remainder.
    """

    id: str
    acquisition_date: date
    quantity: int
    unit_cost: Decimal


@dataclass(frozen=True)
class Product:
    """Product domain entity.

    ``current_stock`` is the single source of truth for units on hand. The
    batches are a cost history and may cover more or less than that.
    """

    id: str
    name: str
    sku: str
    category: str
    selling_price: Decimal
    unit_cost: Decimal
    current_stock: int
    min_stock_level: int
    supplier_name: str
    batches: tuple[StockBatch, ...] = ()

    @property
    def is_low_stock(self) -> bool:
        return self.current_stock <= self.min_stock_level


@dataclass(frozen=True)
class Supplier:
    """Supplier domain entity with its outstanding balance."""

    id: str
    name: str
    contact_phone: str
    email: str
    balance_due: Decimal = Decimal("0")
    last_payment_date: Optional[datetime] = None
    due_date: Optional[date] = None


@dataclass(frozen=True)
class Transaction:
    """Transaction log entry."""

    id: str
    date: datetime
    kind: TransactionType
    amount: Decimal
    description: str
    payment_mode: PaymentMode
    counterparty_name: Optional[str] = None
    category: Optional[str] = None
    status: TransactionStatus = TransactionStatus.COMPLETED
    receipt_ref: Optional[str] = None


@dataclass(frozen=True)
class ValuationRow:
    """Per-product valuation under all three costing policies."""

    product_id: str
    product_name: str
    current_stock: int
    fifo: Decimal
    lifo: Decimal
    avg: Decimal


@dataclass(frozen=True)
class ValuationReport:
    """Portfolio valuation report."""

    rows: tuple[ValuationRow, ...]
    total_fifo: Decimal
    total_lifo: Decimal
    total_avg: Decimal


@dataclass(frozen=True)
class ReceiptData:
    """Fields extracted from a receipt image."""

    merchant: str
    date: str
    total: Decimal
    line_items: tuple[str, ...] = ()


@dataclass(frozen=True)
class BusinessSnapshot:
    """Headline figures handed to the business-health narrative."""

    revenue_total: Decimal
    expense_total: Decimal
    net_profit: Decimal
    sale_count: int
    low_stock_item_names: tuple[str, ...] = ()


@dataclass(frozen=True)
class MonthlyCashflow:
    """Income and expense totals for one calendar month."""

    year: int
    month: int
    income: Decimal
    expense: Decimal

    @property
    def label(self) -> str:
        return date(self.year, self.month, 1).strftime("%b %Y")


@dataclass(frozen=True)
class ReminderNotice:
    """A payment reminder addressed to one supplier."""

    supplier_id: str
    supplier_name: str
    email: str
    balance_due: Decimal
    due_date: date
    overdue: bool


# Request structs: each mutator takes one of these instead of a loose record.


@dataclass(frozen=True)
class SupplierDraft:
    """Fields a user supplies when creating or editing a supplier."""

    name: str
    contact_phone: str = ""
    email: str = ""
    due_date: Optional[date] = None


@dataclass(frozen=True)
class BillRequest:
    """A supplier bill to add to the balance due."""

    supplier_id: str
    amount: Decimal
    due_date: Optional[date] = None


@dataclass(frozen=True)
class PaymentRequest:
    """A payment against a supplier's balance due."""

    supplier_id: str
    amount: Decimal
    mode: PaymentMode = PaymentMode.CASH


@dataclass(frozen=True)
class ProductDraft:
    """Fields a user supplies when creating or editing a product."""

    name: str
    sku: str
    category: str = "Electronics"
    selling_price: Decimal = Decimal("0")
    unit_cost: Decimal = Decimal("0")
    current_stock: int = 0
    min_stock_level: int = 5
    supplier_name: str = ""
    batches: tuple[StockBatch, ...] = field(default=())


@dataclass(frozen=True)
class ExpenseDraft:
    """A manually entered or receipt-derived expense."""

    description: str
    amount: Decimal
    date: datetime
    category: str = "Operational"
    payment_mode: PaymentMode = PaymentMode.CASH
    receipt_ref: Optional[str] = None
