"""CLI helpers for supplier resolution and error handling."""

from __future__ import annotations

import click

from retailpilot.domain.errors import DomainError
from retailpilot.store.base import LedgerStore
from retailpilot.utils.supplier_resolver import resolve_supplier


def resolve_supplier_or_exit(ctx: click.Context, store: LedgerStore, supplier: str) -> str:
    """Resolve supplier name or ID, or exit with a CLI error.

    This keeps error messaging and exit behavior consistent across commands.
    """
    try:
        return resolve_supplier(store, supplier)
    except DomainError as exc:
        click.echo(f"Error: {exc}", err=True)
        ctx.exit(1)
