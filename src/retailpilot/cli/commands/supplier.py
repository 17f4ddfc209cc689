"""Supplier ledger commands."""

import click

from retailpilot.cli.error_handling import format_money, handle_domain_error
from retailpilot.cli.supplier_resolution import resolve_supplier_or_exit
from retailpilot.domain import ledger
from retailpilot.domain.entities import PaymentMode
from retailpilot.domain.errors import DomainError
from retailpilot.domain.supplier import SupplierService
from retailpilot.utils.amount_parser import parse_amount
from retailpilot.utils.date_parser import parse_date


@click.group()
def supplier_group():
    """Manage supplier balances and payment reminders."""
    pass


@supplier_group.command("list")
@click.pass_context
def list_suppliers(ctx):
    """List suppliers with their balances and due dates."""
    service = SupplierService(ctx.obj["store"])
    as_of = ctx.obj["as_of"]

    suppliers = service.list_suppliers()
    if not suppliers:
        click.echo("No suppliers found.")
        return

    click.echo("\nSuppliers:")
    click.echo("-" * 80)
    for s in suppliers:
        due = str(s.due_date) if s.due_date else "-"
        if ledger.is_overdue(s, as_of):
            due = f"{due} (Overdue)"
        click.echo(
            f"ID: {s.id:<4} | {s.name:<20} | Due: {format_money(s.balance_due):>12} | Date: {due}"
        )
    click.echo("-" * 80)
    click.echo(f"Total payables: {format_money(service.total_balance_due())}")


@supplier_group.command("bill")
@click.argument("supplier", metavar="SUPPLIER")
@click.argument("amount")
@click.option("--due-date", help="New due date (YYYY-MM-DD or relative like '+30d')")
@click.pass_context
def add_bill(ctx, supplier: str, amount: str, due_date: str | None):
    """Add a bill to a supplier's balance.

    SUPPLIER can be a supplier name or ID. The existing due date is kept
    unless --due-date is given.

    Examples:
        retailpilot supplier bill "KeyMasters" 250.00
        retailpilot supplier bill 1 1200 --due-date 2024-12-31
    """
    store = ctx.obj["store"]
    service = SupplierService(store)
    supplier_id = resolve_supplier_or_exit(ctx, store, supplier)

    try:
        bill_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    new_due_date = None
    if due_date:
        try:
            new_due_date = parse_date(due_date, today=ctx.obj["as_of"].date())
        except ValueError as e:
            click.echo(f"Error: Invalid due date: {e}", err=True)
            ctx.exit(1)

    try:
        updated = service.add_bill(supplier_id, bill_amount, due_date=new_due_date)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Added bill of {format_money(bill_amount)} for '{updated.name}'")
    click.echo(f"  Balance due: {format_money(updated.balance_due)}")
    if updated.due_date:
        click.echo(f"  Due date: {updated.due_date}")


@supplier_group.command("pay")
@click.argument("supplier", metavar="SUPPLIER")
@click.argument("amount")
@click.option(
    "--mode",
    type=click.Choice([m.value for m in PaymentMode], case_sensitive=False),
    default=PaymentMode.CASH.value,
    show_default=True,
    help="Payment mode",
)
@click.pass_context
def pay_supplier(ctx, supplier: str, amount: str, mode: str):
    """Record a payment to a supplier.

    The payment must not exceed the balance due. An expense transaction
    is logged alongside the new balance.

    Examples:
        retailpilot supplier pay "TechDistro Inc" 500
        retailpilot supplier pay 3 450.50 --mode upi
    """
    store = ctx.obj["store"]
    service = SupplierService(store)
    supplier_id = resolve_supplier_or_exit(ctx, store, supplier)

    try:
        pay_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    try:
        updated, transaction = service.record_payment(
            supplier_id, pay_amount, mode=ledger.coerce_payment_mode(mode), as_of=ctx.obj["as_of"]
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Paid {format_money(pay_amount)} to '{updated.name}'")
    click.echo(f"  Balance due: {format_money(updated.balance_due)}")
    click.echo(f"  Logged expense {transaction.id}: {transaction.description} ({transaction.payment_mode.value})")


@supplier_group.command("reminders")
@click.option("--send", is_flag=True, help="Prepare reminder notices for every listed supplier")
@click.pass_context
def reminders(ctx, send: bool):
    """List suppliers that are overdue or due within the next 7 days."""
    service = SupplierService(ctx.obj["store"])
    as_of = ctx.obj["as_of"]

    due_soon = service.suppliers_needing_reminder(as_of)
    if not due_soon:
        click.echo("No payment reminders needed.")
        return

    click.echo(f"\n{len(due_soon)} supplier(s) have payments due soon or overdue:")
    for s in due_soon:
        days = ledger.days_until_due(s, as_of)
        when = f"overdue by {-days} day(s)" if days < 0 else f"due in {days} day(s)"
        click.echo(f"  {s.name}: {format_money(s.balance_due)} {when} ({s.due_date})")

    if send:
        notices = service.send_reminders(as_of)
        names = ", ".join(n.supplier_name for n in notices)
        click.echo(f"\nReminders prepared for {len(notices)} supplier(s): {names}.")
        for notice in notices:
            click.echo(f"  -> {notice.email or '(no email)'}")


def register_commands(cli):
    """Register supplier commands with main CLI."""
    cli.add_command(supplier_group, name="supplier")
