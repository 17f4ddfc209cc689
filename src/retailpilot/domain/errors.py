"""Shared domain error messages and error types."""

from decimal import Decimal


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class ExternalServiceError(DomainError):
    """An external collaborator failed or returned unusable content."""


def supplier_not_found(supplier_ref: str) -> str:
    """Return message for missing supplier."""
    return f"Supplier '{supplier_ref}' not found"


def product_not_found(product_ref: str) -> str:
    """Return message for missing product."""
    return f"Product '{product_ref}' not found"


def non_finite_amount(kind: str, amount: object) -> str:
    """Return message for an amount that is not a finite number."""
    return f"{kind} amount must be a finite number, got {amount}"


def non_positive_amount(kind: str, amount: Decimal) -> str:
    """Return message for a bill or payment amount that is zero or negative."""
    return f"{kind} amount must be greater than zero, got {amount}"


def payment_exceeds_balance(supplier_name: str, amount: Decimal, balance_due: Decimal) -> str:
    """Return message when a payment is larger than what is owed."""
    return (
        f"Payment of {amount} to '{supplier_name}' exceeds balance due of {balance_due}"
    )


def duplicate_supplier_name(name: str) -> str:
    """Return message for duplicate supplier name."""
    return f"Supplier with name '{name}' already exists"


def duplicate_product_sku(sku: str) -> str:
    """Return message for duplicate product SKU."""
    return f"Product with SKU '{sku}' already exists"
