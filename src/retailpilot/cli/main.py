"""Main CLI entry point."""

import logging
from datetime import datetime, UTC

import click

from retailpilot.cli.error_handling import handle_domain_error
from retailpilot.domain.errors import DomainError
from retailpilot.domain.ledger import as_datetime
from retailpilot.store.factories import create_memory_store
from retailpilot.utils.date_parser import parse_date

# Import and register all commands at module level
from retailpilot.cli.commands import finance, inventory, supplier


@click.group()
@click.option(
    "--data-path",
    type=click.Path(),
    help="Path to a JSON dataset (overrides RETAILPILOT_DATA_PATH; demo data when unset)",
    envvar="RETAILPILOT_DATA_PATH",
)
@click.option(
    "--as-of",
    help="Reference date for due dates and payments (YYYY-MM-DD or relative like 'today', '+3d')",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, data_path: str | None, as_of: str | None, verbose: bool):
    """RetailPilot - Small-business inventory and supplier ledger.

    Value stock under FIFO, LIFO and weighted-average costing, track what
    you owe suppliers, and see who needs a payment reminder. All changes
    live in memory for the duration of one command.
    """
    ctx.ensure_object(dict)

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Load data only when actually running a command (not when showing help)
    if ctx.invoked_subcommand is None:
        return

    if as_of:
        try:
            reference = as_datetime(parse_date(as_of))
        except ValueError as e:
            click.echo(f"Error: Invalid --as-of date: {e}", err=True)
            ctx.exit(1)
    else:
        reference = datetime.now(UTC)

    try:
        store = create_memory_store(data_path=data_path, now=reference)
    except (DomainError, ValueError) as e:
        handle_domain_error(ctx, e)

    ctx.obj["store"] = store
    ctx.obj["as_of"] = reference


# Register all commands
inventory.register_commands(cli)
supplier.register_commands(cli)
finance.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
