"""Utility for resolving supplier references to IDs."""

from retailpilot.domain.errors import NotFoundError, supplier_not_found
from retailpilot.store.base import LedgerStore


def resolve_supplier(store: LedgerStore, supplier: str) -> str:
    """Resolve a supplier name or ID to a supplier ID.

    IDs win over names when a value matches both.

    Args:
        store: Ledger store to search
        supplier: Supplier ID or exact name

    Returns:
        Supplier ID

    Raises:
        NotFoundError: If no supplier matches
    """
    if store.get_supplier(supplier) is not None:
        return supplier

    by_name = store.get_supplier_by_name(supplier)
    if by_name is not None:
        return by_name.id

    # Case-insensitive match as a last resort, only when it is unambiguous
    matches = [s for s in store.list_suppliers() if s.name.lower() == supplier.strip().lower()]
    if len(matches) == 1:
        return matches[0].id

    raise NotFoundError(supplier_not_found(supplier))
