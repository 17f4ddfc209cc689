"""Immutable snapshot of every collection the ledger works over."""

from dataclasses import dataclass, replace
from typing import Optional

from retailpilot.domain.entities import Product, Supplier, Transaction
from retailpilot.domain.errors import (
    NotFoundError,
    product_not_found,
    supplier_not_found,
)


@dataclass(frozen=True)
class LedgerState:
    """Products, suppliers and the transaction log at one point in time.

    Transactions are kept newest first. Every ``with_*``/``without_*`` method
    returns a new state and leaves this one untouched.
    """

    products: tuple[Product, ...] = ()
    suppliers: tuple[Supplier, ...] = ()
    transactions: tuple[Transaction, ...] = ()

    def find_product(self, product_id: str) -> Optional[Product]:
        for product in self.products:
            if product.id == product_id:
                return product
        return None

    def find_supplier(self, supplier_id: str) -> Optional[Supplier]:
        for supplier in self.suppliers:
            if supplier.id == supplier_id:
                return supplier
        return None

    def require_product(self, product_id: str) -> Product:
        product = self.find_product(product_id)
        if product is None:
            raise NotFoundError(product_not_found(product_id))
        return product

    def require_supplier(self, supplier_id: str) -> Supplier:
        supplier = self.find_supplier(supplier_id)
        if supplier is None:
            raise NotFoundError(supplier_not_found(supplier_id))
        return supplier

    def with_product(self, product: Product) -> "LedgerState":
        """Replace the product with the same id, or prepend it if new."""
        if self.find_product(product.id) is None:
            return replace(self, products=(product,) + self.products)
        return replace(
            self,
            products=tuple(product if p.id == product.id else p for p in self.products),
        )

    def without_product(self, product_id: str) -> "LedgerState":
        self.require_product(product_id)
        return replace(self, products=tuple(p for p in self.products if p.id != product_id))

    def with_supplier(self, supplier: Supplier) -> "LedgerState":
        """Replace the supplier with the same id, or append it if new."""
        if self.find_supplier(supplier.id) is None:
            return replace(self, suppliers=self.suppliers + (supplier,))
        return replace(
            self,
            suppliers=tuple(supplier if s.id == supplier.id else s for s in self.suppliers),
        )

    def without_supplier(self, supplier_id: str) -> "LedgerState":
        self.require_supplier(supplier_id)
        return replace(self, suppliers=tuple(s for s in self.suppliers if s.id != supplier_id))

    def with_transaction(self, transaction: Transaction) -> "LedgerState":
        return replace(self, transactions=(transaction,) + self.transactions)
