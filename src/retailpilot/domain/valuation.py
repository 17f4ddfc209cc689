"""Inventory valuation under FIFO, LIFO and weighted-average costing.

All functions here are pure: they read products and return values without
touching any store. Nothing is rounded; rounding to cents belongs to display
code.
"""

from decimal import Decimal
from typing import Iterable

from retailpilot.domain.entities import (
    Product,
    StockBatch,
    ValuationMethod,
    ValuationReport,
    ValuationRow,
)
from retailpilot.domain.errors import ValidationError


def coerce_method(method: ValuationMethod | str) -> ValuationMethod:
    """Turn a method name such as "fifo" into a ValuationMethod.

    Raises:
        ValidationError: If the name is not a known costing policy
    """
    if isinstance(method, ValuationMethod):
        return method
    try:
        return ValuationMethod(str(method).strip().upper())
    except ValueError:
        choices = ", ".join(m.value for m in ValuationMethod)
        raise ValidationError(f"Unknown valuation method '{method}'. Expected one of: {choices}")


def weighted_average_cost(product: Product) -> Decimal:
    """Average unit cost over every recorded batch of a product.

    Falls back to the product's unit cost when the batches hold no units.
    """
    total_quantity = sum(batch.quantity for batch in product.batches)
    if total_quantity == 0:
        return product.unit_cost
    total_cost = sum((batch.quantity * batch.unit_cost for batch in product.batches), Decimal("0"))
    return total_cost / total_quantity


def _ordered_batches(batches: Iterable[StockBatch], newest_first: bool) -> list[StockBatch]:
    # sorted() stays stable with reverse=True, so batches sharing a date
    # keep their input order in both directions.
    return sorted(batches, key=lambda batch: batch.acquisition_date, reverse=newest_first)


def _consume(product: Product, newest_first: bool) -> Decimal:
    remaining = product.current_stock
    total = Decimal("0")

    for batch in _ordered_batches(product.batches, newest_first):
        if remaining <= 0:
            break
        take = min(remaining, batch.quantity)
        total += take * batch.unit_cost
        remaining -= take

    # Stock that predates any recorded batch is valued at the flat unit cost
    if remaining > 0:
        total += remaining * product.unit_cost

    return total


def valuate(product: Product, method: ValuationMethod | str) -> Decimal:
    """Value a product's current stock under a costing policy.

    FIFO assumes the oldest units were sold first, so what remains on the
    shelf is valued from the newest batches backwards. LIFO is the mirror
    image: remaining stock is valued from the oldest batches forwards. AVG
    values every remaining unit at the weighted average cost of all batches.

    A product without batches is valued at ``current_stock * unit_cost``
    whatever the method.

    Args:
        product: Product to value
        method: FIFO, LIFO or AVG

    Returns:
        Inventory value, unrounded
    """
    method = coerce_method(method)

    if not product.batches:
        return product.current_stock * product.unit_cost

    if method is ValuationMethod.AVG:
        return product.current_stock * weighted_average_cost(product)

    return _consume(product, newest_first=method is ValuationMethod.FIFO)


def aggregate_valuation(products: Iterable[Product], method: ValuationMethod | str) -> Decimal:
    """Sum the valuation of every product under one costing policy."""
    method = coerce_method(method)
    return sum((valuate(product, method) for product in products), Decimal("0"))


def valuation_report(products: Iterable[Product]) -> ValuationReport:
    """Build a per-product report with FIFO, LIFO and AVG values and totals."""
    rows = tuple(
        ValuationRow(
            product_id=product.id,
            product_name=product.name,
            current_stock=product.current_stock,
            fifo=valuate(product, ValuationMethod.FIFO),
            lifo=valuate(product, ValuationMethod.LIFO),
            avg=valuate(product, ValuationMethod.AVG),
        )
        for product in products
    )
    return ValuationReport(
        rows=rows,
        total_fifo=sum((row.fifo for row in rows), Decimal("0")),
        total_lifo=sum((row.lifo for row in rows), Decimal("0")),
        total_avg=sum((row.avg for row in rows), Decimal("0")),
    )
