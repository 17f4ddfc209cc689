"""Tests for FinanceService."""

from datetime import date, timedelta
from decimal import Decimal

import pytest

from retailpilot.domain.entities import ExpenseDraft, PaymentMode, TransactionType
from retailpilot.domain.errors import ValidationError


def test_list_transactions_by_kind(finance_service):
    sales = finance_service.list_transactions(kind=TransactionType.SALE)
    assert [t.id for t in sales] == ["104", "102", "101"]
    assert finance_service.list_transactions(kind=TransactionType.PURCHASE) == []


class TestAddExpense:
    def test_logs_expense(self, finance_service, now):
        txn = finance_service.add_expense(
            ExpenseDraft(
                description="Electricity",
                amount=Decimal("85.40"),
                date=now,
                category="Utilities",
                payment_mode=PaymentMode.CARD,
            )
        )
        assert txn.kind == TransactionType.EXPENSE
        assert finance_service.list_transactions()[0] == txn

    def test_blank_description(self, finance_service, now):
        with pytest.raises(ValidationError, match="description is required"):
            finance_service.add_expense(ExpenseDraft(description=" ", amount=Decimal("1"), date=now))

    def test_zero_amount(self, finance_service, now):
        with pytest.raises(ValidationError, match="greater than zero"):
            finance_service.add_expense(ExpenseDraft(description="Tea", amount=Decimal("0"), date=now))


def test_business_snapshot(finance_service):
    snapshot = finance_service.business_snapshot()
    assert snapshot.revenue_total == Decimal("899.98")
    assert snapshot.expense_total == Decimal("1200.00")
    assert snapshot.net_profit == Decimal("-300.02")
    assert snapshot.sale_count == 3
    assert snapshot.low_stock_item_names == (
        "Ergonomic Office Chair",
        "Mechanical Keyboard RGB",
        "USB-C Docking Station",
    )


def test_expenses_by_category(finance_service, now):
    finance_service.add_expense(
        ExpenseDraft(description="Misc", amount=Decimal("20"), date=now, category="")
    )
    finance_service.add_expense(
        ExpenseDraft(description="Lunch", amount=Decimal("30"), date=now, category="Rent")
    )
    assert finance_service.expenses_by_category() == [
        ("Rent", Decimal("1230.00")),
        ("Other", Decimal("20")),
    ]


def test_monthly_cashflow(finance_service, now):
    finance_service.add_expense(
        ExpenseDraft(description="Stock", amount=Decimal("50"), date=now - timedelta(days=20))
    )
    months = finance_service.monthly_cashflow()

    assert [m.label for m in months] == ["Feb 2024", "Mar 2024"]
    assert months[0].income == 0
    assert months[0].expense == Decimal("50")
    assert months[1].income == Decimal("899.98")
    assert months[1].expense == Decimal("1200.00")


def test_daily_sales(finance_service, now):
    assert finance_service.daily_sales(days=4, as_of=now) == [
        (date(2024, 3, 7), Decimal("0")),
        (date(2024, 3, 8), Decimal("149.99")),
        (date(2024, 3, 9), Decimal("299.99")),
        (date(2024, 3, 10), Decimal("450.00")),
    ]
