"""Inventory commands."""

import click

from retailpilot.cli.error_handling import format_money, handle_domain_error
from retailpilot.domain.entities import ValuationMethod
from retailpilot.domain.errors import DomainError
from retailpilot.domain.inventory import InventoryService


@click.group()
def inventory_group():
    """View stock and inventory valuation."""
    pass


@inventory_group.command("list")
@click.option("--search", help="Match against product name or SKU (case-insensitive)")
@click.option("--category", help="Only show products in this category")
@click.pass_context
def list_products(ctx, search: str | None, category: str | None):
    """List products with their stock levels."""
    service = InventoryService(ctx.obj["store"])

    products = service.list_products(search=search, category=category)
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"\nFound {len(products)} product(s):")
    click.echo("-" * 100)
    click.echo(
        f"{'SKU':<10} {'Name':<30} {'Category':<14} {'Price':>10} {'Cost':>10} {'Stock':>6}  {'Supplier':<20}"
    )
    click.echo("-" * 100)
    for p in products:
        flag = " !" if p.is_low_stock else ""
        click.echo(
            f"{p.sku:<10} {p.name[:30]:<30} {p.category[:14]:<14} "
            f"{format_money(p.selling_price):>10} {format_money(p.unit_cost):>10} "
            f"{p.current_stock:>6}{flag:<2}{p.supplier_name:<20}"
        )


@inventory_group.command("low-stock")
@click.pass_context
def low_stock(ctx):
    """List products at or below their minimum stock level."""
    service = InventoryService(ctx.obj["store"])

    products = service.low_stock_products()
    if not products:
        click.echo("No low stock products.")
        return

    click.echo(f"\n{len(products)} product(s) at or below minimum stock:")
    for p in products:
        click.echo(f"  {p.name} ({p.sku}): {p.current_stock} in stock, minimum {p.min_stock_level}")


@inventory_group.command("valuation")
@click.option(
    "--method",
    type=click.Choice([m.value for m in ValuationMethod], case_sensitive=False),
    help="Only show one costing method (default: all three)",
)
@click.pass_context
def valuation(ctx, method: str | None):
    """Show the inventory valuation report.

    FIFO values remaining stock from the newest batches, LIFO from the
    oldest, and AVG at the weighted average cost of all batches.

    Examples:
        retailpilot inventory valuation
        retailpilot inventory valuation --method fifo
    """
    service = InventoryService(ctx.obj["store"])

    if method is not None:
        try:
            total = service.total_valuation(method)
        except DomainError as e:
            handle_domain_error(ctx, e)
        click.echo(f"{method.upper()} valuation: {format_money(total)}")
        return

    report = service.valuation_report()
    click.echo(f"\nFIFO valuation: {format_money(report.total_fifo)}")
    click.echo(f"LIFO valuation: {format_money(report.total_lifo)}")
    click.echo(f"Weighted average: {format_money(report.total_avg)}")

    if not report.rows:
        return

    click.echo("\nProduct Valuation Report")
    click.echo("-" * 90)
    click.echo(f"{'Product':<30} {'Stock':>6} {'FIFO':>16} {'LIFO':>16} {'AVG':>16}")
    click.echo("-" * 90)
    for row in report.rows:
        click.echo(
            f"{row.product_name[:30]:<30} {row.current_stock:>6} "
            f"{format_money(row.fifo):>16} {format_money(row.lifo):>16} {format_money(row.avg):>16}"
        )


def register_commands(cli):
    """Register inventory commands with main CLI."""
    cli.add_command(inventory_group, name="inventory")
