"""Finance domain service: the transaction log and its summaries."""

import uuid
from collections import defaultdict
from datetime import date, datetime, timedelta, UTC
from decimal import Decimal
from typing import Optional

from retailpilot.domain.entities import (
    BusinessSnapshot,
    ExpenseDraft,
    MonthlyCashflow,
    Transaction,
    TransactionStatus,
    TransactionType,
)
from retailpilot.domain.errors import ValidationError
from retailpilot.store.base import LedgerStore
from retailpilot.store.operations import AddTransaction


class FinanceService:
    """Service for recording expenses and summarizing the transaction log."""

    def __init__(self, store: LedgerStore):
        """Initialize finance service.

        Args:
            store: Ledger store instance
        """
        self.store = store

    def list_transactions(self, kind: Optional[TransactionType] = None) -> list[Transaction]:
        """List transactions, newest first.

        Args:
            kind: Optional transaction type filter

        Returns:
            List of transaction entities
        """
        transactions = self.store.list_transactions()
        if kind is None:
            return transactions
        return [t for t in transactions if t.kind == kind]

    def add_expense(self, draft: ExpenseDraft) -> Transaction:
        """Log an expense.

        Args:
            draft: Expense fields

        Returns:
            The logged transaction

        Raises:
            ValidationError: If the description is blank or the amount not positive
        """
        if not draft.description or not draft.description.strip():
            raise ValidationError("Expense description is required")

        transaction = Transaction(
            id=uuid.uuid4().hex,
            date=draft.date,
            kind=TransactionType.EXPENSE,
            amount=draft.amount,
            description=draft.description,
            payment_mode=draft.payment_mode,
            category=draft.category,
            status=TransactionStatus.COMPLETED,
            receipt_ref=draft.receipt_ref,
        )
        self.store.apply(AddTransaction(transaction))
        return transaction

    def business_snapshot(self) -> BusinessSnapshot:
        """Headline revenue, expense and stock figures for the dashboard."""
        transactions = self.store.list_transactions()
        sales = [t for t in transactions if t.kind == TransactionType.SALE]
        expenses = [t for t in transactions if t.kind == TransactionType.EXPENSE]
        revenue = sum((t.amount for t in sales), Decimal("0"))
        spent = sum((t.amount for t in expenses), Decimal("0"))
        low_stock = tuple(p.name for p in self.store.list_products() if p.is_low_stock)
        return BusinessSnapshot(
            revenue_total=revenue,
            expense_total=spent,
            net_profit=revenue - spent,
            sale_count=len(sales),
            low_stock_item_names=low_stock,
        )

    def expenses_by_category(self) -> list[tuple[str, Decimal]]:
        """Expense totals per category, largest first.

        Expenses without a category are counted under "Other".
        """
        totals: dict[str, Decimal] = defaultdict(lambda: Decimal("0"))
        for txn in self.store.list_transactions():
            if txn.kind == TransactionType.EXPENSE:
                totals[txn.category or "Other"] += txn.amount
        return sorted(totals.items(), key=lambda item: item[1], reverse=True)

    def monthly_cashflow(self) -> list[MonthlyCashflow]:
        """Sales income and expenses per calendar month, oldest month first."""
        buckets: dict[tuple[int, int], dict[str, Decimal]] = defaultdict(
            lambda: {"income": Decimal("0"), "expense": Decimal("0")}
        )
        for txn in self.store.list_transactions():
            bucket = buckets[(txn.date.year, txn.date.month)]
            if txn.kind == TransactionType.SALE:
                bucket["income"] += txn.amount
            elif txn.kind == TransactionType.EXPENSE:
                bucket["expense"] += txn.amount

        return [
            MonthlyCashflow(year=year, month=month, income=data["income"], expense=data["expense"])
            for (year, month), data in sorted(buckets.items())
        ]

    def daily_sales(
        self, days: int = 7, as_of: Optional[date | datetime] = None
    ) -> list[tuple[date, Decimal]]:
        """Sales totals for each of the last ``days`` days, oldest first."""
        if as_of is None:
            as_of = datetime.now(UTC)
        end = as_of.date() if isinstance(as_of, datetime) else as_of

        totals: dict[date, Decimal] = defaultdict(lambda: Decimal("0"))
        for txn in self.store.list_transactions():
            if txn.kind == TransactionType.SALE:
                totals[txn.date.date()] += txn.amount

        window = [end - timedelta(days=offset) for offset in range(days - 1, -1, -1)]
        return [(day, totals[day]) for day in window]
