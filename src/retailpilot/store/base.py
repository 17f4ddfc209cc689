"""Abstract ledger store interface."""

from abc import ABC, abstractmethod
from typing import Optional

# Import entities directly to avoid pulling in the domain services
from retailpilot.domain.entities import Product, Supplier, Transaction
from retailpilot.store.operations import Operation
from retailpilot.store.state import LedgerState


class LedgerStore(ABC):
    """Abstract store holding the current LedgerState for retailpilot."""

    @property
    @abstractmethod
    def state(self) -> LedgerState:
        """Current snapshot."""
        pass

    @abstractmethod
    def apply(self, operation: Operation) -> LedgerState:
        """Apply an operation, swap in the resulting state and return it.

        A rejected operation raises and leaves the current state in place.
        """
        pass

    # Product lookups
    def list_products(self) -> list[Product]:
        """List all products."""
        return list(self.state.products)

    def get_product(self, product_id: str) -> Optional[Product]:
        """Get product by ID."""
        return self.state.find_product(product_id)

    # Supplier lookups
    def list_suppliers(self) -> list[Supplier]:
        """List all suppliers."""
        return list(self.state.suppliers)

    def get_supplier(self, supplier_id: str) -> Optional[Supplier]:
        """Get supplier by ID."""
        return self.state.find_supplier(supplier_id)

    def get_supplier_by_name(self, name: str) -> Optional[Supplier]:
        """Get supplier by exact name."""
        for supplier in self.state.suppliers:
            if supplier.name == name:
                return supplier
        return None

    # Transaction lookups
    def list_transactions(self) -> list[Transaction]:
        """List transactions, newest first."""
        return list(self.state.transactions)
