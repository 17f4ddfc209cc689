"""Operations applied to a LedgerState.

Each operation is a small frozen value with ``apply(state) -> LedgerState``.
Validation happens before any new state is built, so a rejected operation
never produces a partial result.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from retailpilot.domain import ledger
from retailpilot.domain.entities import (
    BillRequest,
    PaymentRequest,
    Product,
    ProductDraft,
    Supplier,
    SupplierDraft,
    Transaction,
)
from retailpilot.domain.errors import (
    ConflictError,
    ValidationError,
    duplicate_product_sku,
    duplicate_supplier_name,
)
from retailpilot.store.state import LedgerState


class Operation(ABC):
    """A change to the ledger expressed as a state transition."""

    @abstractmethod
    def apply(self, state: LedgerState) -> LedgerState:
        """Return the state that results from this operation."""
        pass


def _validate_supplier_draft(
    state: LedgerState, draft: SupplierDraft, supplier_id: Optional[str] = None
) -> None:
    if not draft.name or not draft.name.strip():
        raise ValidationError("Supplier name is required")
    for supplier in state.suppliers:
        if supplier.id != supplier_id and supplier.name == draft.name:
            raise ConflictError(duplicate_supplier_name(draft.name))


def _validate_product_draft(
    state: LedgerState, draft: ProductDraft, product_id: Optional[str] = None
) -> None:
    if not draft.name or not draft.name.strip():
        raise ValidationError("Product name is required")
    if not draft.sku or not draft.sku.strip():
        raise ValidationError("Product SKU is required")
    if draft.current_stock < 0:
        raise ValidationError(f"Stock cannot be negative, got {draft.current_stock}")
    if draft.min_stock_level < 0:
        raise ValidationError(f"Minimum stock level cannot be negative, got {draft.min_stock_level}")
    if draft.unit_cost < 0 or draft.selling_price < 0:
        raise ValidationError("Prices cannot be negative")
    for batch in draft.batches:
        if batch.quantity < 0 or batch.unit_cost < 0:
            raise ValidationError(f"Batch '{batch.id}' has a negative quantity or cost")
    for product in state.products:
        if product.id != product_id and product.sku == draft.sku:
            raise ConflictError(duplicate_product_sku(draft.sku))


@dataclass(frozen=True)
class CreateSupplier(Operation):
    supplier_id: str
    draft: SupplierDraft

    def apply(self, state: LedgerState) -> LedgerState:
        _validate_supplier_draft(state, self.draft)
        if state.find_supplier(self.supplier_id) is not None:
            raise ConflictError(f"Supplier id '{self.supplier_id}' already exists")
        supplier = Supplier(
            id=self.supplier_id,
            name=self.draft.name,
            contact_phone=self.draft.contact_phone,
            email=self.draft.email,
            due_date=self.draft.due_date,
        )
        return state.with_supplier(supplier)


@dataclass(frozen=True)
class UpdateSupplier(Operation):
    """Edit contact details and due date; the balance is left alone."""

    supplier_id: str
    draft: SupplierDraft

    def apply(self, state: LedgerState) -> LedgerState:
        current = state.require_supplier(self.supplier_id)
        _validate_supplier_draft(state, self.draft, supplier_id=self.supplier_id)
        supplier = Supplier(
            id=current.id,
            name=self.draft.name,
            contact_phone=self.draft.contact_phone,
            email=self.draft.email,
            balance_due=current.balance_due,
            last_payment_date=current.last_payment_date,
            due_date=self.draft.due_date,
        )
        return state.with_supplier(supplier)


@dataclass(frozen=True)
class DeleteSupplier(Operation):
    supplier_id: str

    def apply(self, state: LedgerState) -> LedgerState:
        return state.without_supplier(self.supplier_id)


@dataclass(frozen=True)
class AddBill(Operation):
    request: BillRequest

    def apply(self, state: LedgerState) -> LedgerState:
        supplier = state.require_supplier(self.request.supplier_id)
        updated = ledger.add_bill(supplier, self.request.amount, due_date=self.request.due_date)
        return state.with_supplier(updated)


@dataclass(frozen=True)
class RecordPayment(Operation):
    """Pay a supplier and log the paired expense transaction."""

    request: PaymentRequest
    as_of: date | datetime
    transaction_id: Optional[str] = None

    def apply(self, state: LedgerState) -> LedgerState:
        supplier = state.require_supplier(self.request.supplier_id)
        updated, transaction = ledger.record_payment(
            supplier,
            self.request.amount,
            self.request.mode,
            as_of=self.as_of,
            transaction_id=self.transaction_id,
        )
        return state.with_supplier(updated).with_transaction(transaction)


@dataclass(frozen=True)
class CreateProduct(Operation):
    product_id: str
    draft: ProductDraft

    def apply(self, state: LedgerState) -> LedgerState:
        _validate_product_draft(state, self.draft)
        if state.find_product(self.product_id) is not None:
            raise ConflictError(f"Product id '{self.product_id}' already exists")
        product = Product(
            id=self.product_id,
            name=self.draft.name,
            sku=self.draft.sku,
            category=self.draft.category,
            selling_price=self.draft.selling_price,
            unit_cost=self.draft.unit_cost,
            current_stock=self.draft.current_stock,
            min_stock_level=self.draft.min_stock_level,
            supplier_name=self.draft.supplier_name,
            batches=tuple(self.draft.batches),
        )
        return state.with_product(product)


@dataclass(frozen=True)
class UpdateProduct(Operation):
    """Replace a product's editable fields.

    The batch history is kept unless the draft carries batches of its own.
    """

    product_id: str
    draft: ProductDraft

    def apply(self, state: LedgerState) -> LedgerState:
        current = state.require_product(self.product_id)
        _validate_product_draft(state, self.draft, product_id=self.product_id)
        product = Product(
            id=current.id,
            name=self.draft.name,
            sku=self.draft.sku,
            category=self.draft.category,
            selling_price=self.draft.selling_price,
            unit_cost=self.draft.unit_cost,
            current_stock=self.draft.current_stock,
            min_stock_level=self.draft.min_stock_level,
            supplier_name=self.draft.supplier_name,
            batches=tuple(self.draft.batches) or current.batches,
        )
        return state.with_product(product)


@dataclass(frozen=True)
class DeleteProduct(Operation):
    product_id: str

    def apply(self, state: LedgerState) -> LedgerState:
        return state.without_product(self.product_id)


@dataclass(frozen=True)
class AddTransaction(Operation):
    transaction: Transaction

    def apply(self, state: LedgerState) -> LedgerState:
        amount = ledger.to_amount(self.transaction.amount, "Transaction")
        if amount <= 0:
            raise ValidationError(
                f"Transaction amount must be greater than zero, got {self.transaction.amount}"
            )
        return state.with_transaction(self.transaction)
