"""Supplier domain service."""

import logging
import uuid
from datetime import date, datetime, UTC
from decimal import Decimal
from typing import Optional

from retailpilot.domain import ledger
from retailpilot.domain.entities import (
    BillRequest,
    PaymentMode,
    PaymentRequest,
    ReminderNotice,
    Supplier,
    SupplierDraft,
    Transaction,
)
from retailpilot.store.base import LedgerStore
from retailpilot.store.operations import (
    AddBill,
    CreateSupplier,
    DeleteSupplier,
    RecordPayment,
    UpdateSupplier,
)

logger = logging.getLogger(__name__)


class SupplierService:
    """Service for managing suppliers and their balances."""

    def __init__(self, store: LedgerStore):
        """Initialize supplier service.

        Args:
            store: Ledger store instance
        """
        self.store = store

    def create_supplier(self, draft: SupplierDraft) -> Supplier:
        """Create a new supplier with nothing owed.

        Raises:
            ValidationError: If the name is blank
            ConflictError: If a supplier with the same name exists
        """
        supplier_id = uuid.uuid4().hex
        state = self.store.apply(CreateSupplier(supplier_id=supplier_id, draft=draft))
        return state.require_supplier(supplier_id)

    def update_supplier(self, supplier_id: str, draft: SupplierDraft) -> Supplier:
        """Edit a supplier's name, contact details and due date.

        Raises:
            NotFoundError: If the supplier does not exist
        """
        state = self.store.apply(UpdateSupplier(supplier_id=supplier_id, draft=draft))
        return state.require_supplier(supplier_id)

    def delete_supplier(self, supplier_id: str) -> None:
        """Delete a supplier.

        Raises:
            NotFoundError: If the supplier does not exist
        """
        self.store.apply(DeleteSupplier(supplier_id=supplier_id))

    def get_supplier(self, supplier_id: str) -> Optional[Supplier]:
        return self.store.get_supplier(supplier_id)

    def list_suppliers(self) -> list[Supplier]:
        return self.store.list_suppliers()

    def add_bill(
        self, supplier_id: str, amount: Decimal, due_date: Optional[date] = None
    ) -> Supplier:
        """Add a bill to a supplier's balance.

        Args:
            supplier_id: Supplier ID
            amount: Bill amount, must be positive
            due_date: Optional new due date

        Returns:
            Updated supplier

        Raises:
            ValidationError: If amount is not positive
            NotFoundError: If the supplier does not exist
        """
        request = BillRequest(supplier_id=supplier_id, amount=amount, due_date=due_date)
        state = self.store.apply(AddBill(request))
        return state.require_supplier(supplier_id)

    def record_payment(
        self,
        supplier_id: str,
        amount: Decimal,
        mode: PaymentMode = PaymentMode.CASH,
        as_of: Optional[datetime] = None,
    ) -> tuple[Supplier, Transaction]:
        """Pay a supplier and log the expense.

        Args:
            supplier_id: Supplier ID
            amount: Payment amount, positive and no more than the balance due
            mode: Payment mode
            as_of: Payment time (defaults to now)

        Returns:
            Tuple of (updated supplier, logged expense transaction)

        Raises:
            ValidationError: If amount is not positive or exceeds the balance
            NotFoundError: If the supplier does not exist
        """
        if as_of is None:
            as_of = datetime.now(UTC)
        transaction_id = uuid.uuid4().hex
        request = PaymentRequest(supplier_id=supplier_id, amount=amount, mode=mode)
        state = self.store.apply(
            RecordPayment(request=request, as_of=as_of, transaction_id=transaction_id)
        )
        supplier = state.require_supplier(supplier_id)
        transaction = next(t for t in state.transactions if t.id == transaction_id)
        return supplier, transaction

    def suppliers_needing_reminder(self, as_of: Optional[date | datetime] = None) -> list[Supplier]:
        """Suppliers that are overdue or due within the reminder window."""
        if as_of is None:
            as_of = datetime.now(UTC)
        return ledger.suppliers_needing_reminder(self.store.list_suppliers(), as_of)

    def overdue_suppliers(self, as_of: Optional[date | datetime] = None) -> list[Supplier]:
        """Suppliers whose due date has passed with money still owed."""
        if as_of is None:
            as_of = datetime.now(UTC)
        return [s for s in self.store.list_suppliers() if ledger.is_overdue(s, as_of)]

    def total_balance_due(self) -> Decimal:
        """Total outstanding payables."""
        return ledger.total_balance_due(self.store.list_suppliers())

    def send_reminders(self, as_of: Optional[date | datetime] = None) -> list[ReminderNotice]:
        """Build reminder notices for every supplier that needs one.

        No message leaves the process; delivering the notices is up to the
        caller.
        """
        if as_of is None:
            as_of = datetime.now(UTC)
        notices = [
            ReminderNotice(
                supplier_id=supplier.id,
                supplier_name=supplier.name,
                email=supplier.email,
                balance_due=supplier.balance_due,
                due_date=supplier.due_date,
                overdue=ledger.is_overdue(supplier, as_of),
            )
            for supplier in self.suppliers_needing_reminder(as_of)
        ]
        logger.info("Prepared %d payment reminder(s)", len(notices))
        return notices
