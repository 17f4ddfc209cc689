"""Inventory domain service."""

import uuid
from decimal import Decimal
from typing import Optional

from retailpilot.domain import valuation
from retailpilot.domain.entities import (
    Product,
    ProductDraft,
    ValuationMethod,
    ValuationReport,
)
from retailpilot.domain.errors import NotFoundError, product_not_found
from retailpilot.store.base import LedgerStore
from retailpilot.store.operations import CreateProduct, DeleteProduct, UpdateProduct


class InventoryService:
    """Service for managing products and valuing stock."""

    def __init__(self, store: LedgerStore):
        """Initialize inventory service.

        Args:
            store: Ledger store instance
        """
        self.store = store

    def create_product(self, draft: ProductDraft) -> Product:
        """Create a product.

        Raises:
            ValidationError: If a required field is blank or a number is negative
            ConflictError: If the SKU is already in use
        """
        product_id = uuid.uuid4().hex
        state = self.store.apply(CreateProduct(product_id=product_id, draft=draft))
        return state.require_product(product_id)

    def update_product(self, product_id: str, draft: ProductDraft) -> Product:
        """Replace a product's editable fields, keeping its batch history."""
        state = self.store.apply(UpdateProduct(product_id=product_id, draft=draft))
        return state.require_product(product_id)

    def delete_product(self, product_id: str) -> None:
        self.store.apply(DeleteProduct(product_id=product_id))

    def get_product(self, product_id: str) -> Optional[Product]:
        return self.store.get_product(product_id)

    def list_products(
        self, search: Optional[str] = None, category: Optional[str] = None
    ) -> list[Product]:
        """List products with filters.

        Args:
            search: Case-insensitive substring matched against name and SKU
            category: Exact category name; None or "All" means every category

        Returns:
            Matching products in store order
        """
        products = self.store.list_products()
        if category is not None and category != "All":
            products = [p for p in products if p.category == category]
        if search:
            needle = search.lower()
            products = [
                p for p in products if needle in p.name.lower() or needle in p.sku.lower()
            ]
        return products

    def list_categories(self) -> list[str]:
        """Distinct product categories in first-seen order."""
        return list(dict.fromkeys(p.category for p in self.store.list_products()))

    def low_stock_products(self) -> list[Product]:
        """Products at or below their minimum stock level."""
        return [p for p in self.store.list_products() if p.is_low_stock]

    def valuate_product(self, product_id: str, method: ValuationMethod | str) -> Decimal:
        """Value one product's stock.

        Raises:
            NotFoundError: If the product does not exist
        """
        product = self.store.get_product(product_id)
        if product is None:
            raise NotFoundError(product_not_found(product_id))
        return valuation.valuate(product, method)

    def total_valuation(self, method: ValuationMethod | str) -> Decimal:
        return valuation.aggregate_valuation(self.store.list_products(), method)

    def valuation_report(self) -> ValuationReport:
        return valuation.valuation_report(self.store.list_products())
