"""Tests for SupplierService."""

import logging
from datetime import date, timedelta
from decimal import Decimal

import pytest

from retailpilot.domain.entities import PaymentMode, SupplierDraft, TransactionType
from retailpilot.domain.errors import ConflictError, NotFoundError, ValidationError


def test_create_supplier(supplier_service):
    supplier = supplier_service.create_supplier(
        SupplierDraft(name="ViewMax", contact_phone="+1 555-0204", email="ar@viewmax.com")
    )
    assert supplier.balance_due == 0
    assert supplier_service.get_supplier(supplier.id) == supplier
    assert supplier_service.list_suppliers()[-1].name == "ViewMax"


def test_create_supplier_duplicate_name(supplier_service):
    with pytest.raises(ConflictError):
        supplier_service.create_supplier(SupplierDraft(name="TechDistro Inc"))


def test_update_supplier(supplier_service):
    updated = supplier_service.update_supplier(
        "2", SupplierDraft(name="OfficeSupplies Co", email="new@officesupplies.com")
    )
    assert updated.email == "new@officesupplies.com"


def test_delete_supplier(supplier_service):
    supplier_service.delete_supplier("2")
    assert supplier_service.get_supplier("2") is None
    with pytest.raises(NotFoundError):
        supplier_service.delete_supplier("2")


class TestBillsAndPayments:
    def test_add_bill(self, supplier_service):
        updated = supplier_service.add_bill("2", Decimal("80"), due_date=date(2024, 4, 1))
        assert updated.balance_due == Decimal("80")
        assert updated.due_date == date(2024, 4, 1)

    def test_add_bill_unknown_supplier(self, supplier_service):
        with pytest.raises(NotFoundError, match="Supplier 'x' not found"):
            supplier_service.add_bill("x", Decimal("10"))

    def test_record_payment(self, supplier_service, store, now):
        supplier, txn = supplier_service.record_payment(
            "1", Decimal("500"), mode=PaymentMode.UPI, as_of=now
        )
        assert supplier.balance_due == Decimal("1000.00")
        assert supplier.last_payment_date == now
        assert txn.kind == TransactionType.EXPENSE
        assert txn.payment_mode == PaymentMode.UPI
        assert store.list_transactions()[0] == txn

    def test_overpayment_is_rejected(self, supplier_service, store, now):
        before = store.state
        with pytest.raises(ValidationError, match="exceeds balance due"):
            supplier_service.record_payment("3", Decimal("500"), as_of=now)
        assert store.state is before

    def test_total_balance_due(self, supplier_service):
        assert supplier_service.total_balance_due() == Decimal("1950.50")


class TestReminders:
    def test_only_suppliers_inside_window(self, supplier_service, now):
        assert [s.id for s in supplier_service.suppliers_needing_reminder(now)] == ["3"]

    def test_nothing_is_overdue_yet(self, supplier_service, now):
        assert supplier_service.overdue_suppliers(now) == []

    def test_overdue_after_due_date(self, supplier_service, now):
        later = now + timedelta(days=6)
        assert [s.id for s in supplier_service.overdue_suppliers(later)] == ["3"]

    def test_send_reminders(self, supplier_service, now, caplog):
        with caplog.at_level(logging.INFO, logger="retailpilot.domain.supplier"):
            notices = supplier_service.send_reminders(now)

        assert len(notices) == 1
        notice = notices[0]
        assert notice.supplier_name == "KeyMasters"
        assert notice.email == "sales@keymasters.com"
        assert notice.balance_due == Decimal("450.50")
        assert not notice.overdue
        assert "Prepared 1 payment reminder(s)" in caplog.text

    def test_paid_supplier_drops_out(self, supplier_service, now):
        supplier_service.record_payment("3", Decimal("450.50"), as_of=now)
        assert supplier_service.suppliers_needing_reminder(now) == []
