"""Supplier ledger rules: bills, payments and payment reminders.

Every function is pure. Mutators return replacement values and never touch
the supplier they were given; the caller swaps the new value into its
collection. Time is always passed in as ``as_of``.
"""

import uuid
from dataclasses import replace
from datetime import date, datetime, time, timedelta, UTC
from decimal import Decimal, InvalidOperation
from typing import Iterable, Optional

from retailpilot.domain.entities import (
    SUPPLIER_PAYMENT_CATEGORY,
    PaymentMode,
    Supplier,
    Transaction,
    TransactionStatus,
    TransactionType,
)
from retailpilot.domain.errors import (
    ValidationError,
    non_finite_amount,
    non_positive_amount,
    payment_exceeds_balance,
)

REMINDER_WINDOW_DAYS = 7


def to_amount(amount: Decimal | int | float | str, kind: str) -> Decimal:
    """Convert a money amount to a finite Decimal.

    Non-Decimal input goes through str() first, so a float such as 0.1 keeps
    its written digits instead of its binary expansion.

    Raises:
        ValidationError: If the amount is not a number, or is NaN or infinite
    """
    if not isinstance(amount, Decimal):
        try:
            amount = Decimal(str(amount).strip())
        except InvalidOperation:
            raise ValidationError(non_finite_amount(kind, amount))
    if not amount.is_finite():
        raise ValidationError(non_finite_amount(kind, amount))
    return amount


def as_datetime(as_of: date | datetime) -> datetime:
    """Normalize a date or datetime reference point to a datetime.

    A bare date means midnight UTC at the start of that day.
    """
    if isinstance(as_of, datetime):
        return as_of
    return datetime.combine(as_of, time.min, tzinfo=UTC)


def _due_at(due_date: date, as_of: datetime) -> datetime:
    # A due date means midnight at the start of that day, in as_of's zone
    return datetime.combine(due_date, time.min, tzinfo=as_of.tzinfo)


def _ceil_days(delta: timedelta) -> int:
    # timedelta keeps seconds non-negative, so any leftover rounds up
    if delta.seconds or delta.microseconds:
        return delta.days + 1
    return delta.days


def days_until_due(supplier: Supplier, as_of: date | datetime) -> Optional[int]:
    """Whole days until the supplier's due date, rounded up.

    Negative values mean the due date has passed. Returns None when the
    supplier has no due date.
    """
    if supplier.due_date is None:
        return None
    as_of = as_datetime(as_of)
    return _ceil_days(_due_at(supplier.due_date, as_of) - as_of)


def coerce_payment_mode(mode: PaymentMode | str) -> PaymentMode:
    """Turn a payment mode name such as "upi" into a PaymentMode.

    Raises:
        ValidationError: If the name is not a known payment mode
    """
    if isinstance(mode, PaymentMode):
        return mode
    for candidate in PaymentMode:
        if candidate.value.lower() == str(mode).strip().lower():
            return candidate
    choices = ", ".join(m.value for m in PaymentMode)
    raise ValidationError(f"Unknown payment mode '{mode}'. Expected one of: {choices}")


def add_bill(supplier: Supplier, amount: Decimal, due_date: Optional[date] = None) -> Supplier:
    """Add a bill to a supplier's balance.

    Args:
        supplier: Supplier receiving the bill
        amount: Bill amount, must be positive
        due_date: New due date; the existing one is kept when omitted

    Returns:
        Replacement supplier value

    Raises:
        ValidationError: If amount is not a finite number, or is zero or negative
    """
    amount = to_amount(amount, "Bill")
    if amount <= 0:
        raise ValidationError(non_positive_amount("Bill", amount))

    return replace(
        supplier,
        balance_due=supplier.balance_due + amount,
        due_date=due_date if due_date is not None else supplier.due_date,
    )


def record_payment(
    supplier: Supplier,
    amount: Decimal,
    mode: PaymentMode,
    as_of: date | datetime,
    transaction_id: Optional[str] = None,
) -> tuple[Supplier, Transaction]:
    """Record a payment to a supplier.

    Args:
        supplier: Supplier being paid
        amount: Payment amount, must satisfy ``0 < amount <= balance_due``
        mode: Payment mode
        as_of: Payment timestamp, used for the transaction and last payment date
        transaction_id: Optional id for the emitted transaction

    Returns:
        Tuple of (replacement supplier, expense transaction to append)

    Raises:
        ValidationError: If amount is not a finite positive number or exceeds the
            balance due
    """
    amount = to_amount(amount, "Payment")
    mode = coerce_payment_mode(mode)
    if amount <= 0:
        raise ValidationError(non_positive_amount("Payment", amount))
    if amount > supplier.balance_due:
        raise ValidationError(payment_exceeds_balance(supplier.name, amount, supplier.balance_due))

    paid_at = as_datetime(as_of)
    updated = replace(
        supplier,
        balance_due=max(Decimal("0"), supplier.balance_due - amount),
        last_payment_date=paid_at,
    )
    transaction = Transaction(
        id=transaction_id or uuid.uuid4().hex,
        date=paid_at,
        kind=TransactionType.EXPENSE,
        amount=amount,
        description=f"Payment to {supplier.name}",
        payment_mode=mode,
        counterparty_name=supplier.name,
        category=SUPPLIER_PAYMENT_CATEGORY,
        status=TransactionStatus.COMPLETED,
    )
    return updated, transaction


def needs_reminder(supplier: Supplier, as_of: date | datetime) -> bool:
    """Whether a supplier owes money that is overdue or due within the window."""
    if supplier.due_date is None or supplier.balance_due <= 0:
        return False
    return days_until_due(supplier, as_of) <= REMINDER_WINDOW_DAYS


def suppliers_needing_reminder(
    suppliers: Iterable[Supplier], as_of: date | datetime
) -> list[Supplier]:
    """Select suppliers that need a payment reminder, keeping input order."""
    return [supplier for supplier in suppliers if needs_reminder(supplier, as_of)]


def is_overdue(supplier: Supplier, as_of: date | datetime) -> bool:
    """Whether a supplier's due date has passed with money still owed."""
    if supplier.due_date is None or supplier.balance_due <= 0:
        return False
    as_of = as_datetime(as_of)
    return _due_at(supplier.due_date, as_of) < as_of


def total_balance_due(suppliers: Iterable[Supplier]) -> Decimal:
    """Total outstanding payables across suppliers."""
    return sum((supplier.balance_due for supplier in suppliers), Decimal("0"))
