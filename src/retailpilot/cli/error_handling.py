"""CLI error handling helpers."""

from decimal import Decimal

import click

from retailpilot.domain.errors import DomainError


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def format_money(amount: Decimal) -> str:
    """Format an amount for display, rounded to cents."""
    return f"${amount:,.2f}"
