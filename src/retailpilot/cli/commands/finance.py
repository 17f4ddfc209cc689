"""Finance commands."""

import click

from retailpilot.cli.error_handling import format_money
from retailpilot.domain.entities import TransactionType
from retailpilot.domain.finance import FinanceService


@click.group()
def finance_group():
    """View transactions and financial summaries."""
    pass


@finance_group.command("transactions")
@click.option(
    "--kind",
    type=click.Choice([t.value for t in TransactionType], case_sensitive=False),
    help="Only show one transaction type",
)
@click.pass_context
def list_transactions(ctx, kind: str | None):
    """List transactions, newest first."""
    service = FinanceService(ctx.obj["store"])

    txn_kind = None
    if kind is not None:
        txn_kind = next(t for t in TransactionType if t.value.lower() == kind.lower())

    transactions = service.list_transactions(kind=txn_kind)
    if not transactions:
        click.echo("No transactions found.")
        return

    click.echo(f"\nFound {len(transactions)} transaction(s):")
    click.echo("-" * 100)
    click.echo(
        f"{'Date':<12} {'Type':<9} {'Amount':>12} {'Mode':<7} {'Party':<18} {'Description':<40}"
    )
    click.echo("-" * 100)
    for txn in transactions:
        click.echo(
            f"{txn.date.date()!s:<12} {txn.kind.value:<9} {format_money(txn.amount):>12} "
            f"{txn.payment_mode.value:<7} {(txn.counterparty_name or '')[:18]:<18} "
            f"{txn.description[:40]:<40}"
        )


@finance_group.command("summary")
@click.pass_context
def summary(ctx):
    """Show revenue, expenses, net profit and low stock alerts."""
    service = FinanceService(ctx.obj["store"])
    snapshot = service.business_snapshot()

    click.echo(f"\nTotal revenue:  {format_money(snapshot.revenue_total):>14}")
    click.echo(f"Total expenses: {format_money(snapshot.expense_total):>14}")
    click.echo(f"Net profit:     {format_money(snapshot.net_profit):>14}")
    click.echo(f"Sales count:    {snapshot.sale_count:>14}")
    if snapshot.low_stock_item_names:
        click.echo(f"Low stock items: {', '.join(snapshot.low_stock_item_names)}")
    else:
        click.echo("Low stock items: None")


@finance_group.command("expenses-by-category")
@click.pass_context
def expenses_by_category(ctx):
    """Show expense totals per category, largest first."""
    service = FinanceService(ctx.obj["store"])

    rows = service.expenses_by_category()
    if not rows:
        click.echo("No expenses found.")
        return

    for category, total in rows:
        click.echo(f"{category:<30} {format_money(total):>14}")


@finance_group.command("cashflow")
@click.pass_context
def cashflow(ctx):
    """Show monthly income versus expenses."""
    service = FinanceService(ctx.obj["store"])

    months = service.monthly_cashflow()
    if not months:
        click.echo("No transactions found.")
        return

    click.echo(f"{'Month':<10} {'Income':>14} {'Expense':>14}")
    for month in months:
        click.echo(
            f"{month.label:<10} {format_money(month.income):>14} {format_money(month.expense):>14}"
        )


def register_commands(cli):
    """Register finance commands with main CLI."""
    cli.add_command(finance_group, name="finance")
