"""Summary commands."""

from datetime import datetime, UTC

import click
from spendtracker.cli.error_handling import format_amount
from spendtracker.domain.transaction import TransactionService


@click.command("summary")
@click.option("--year", type=int, help="Calendar year (default: current year)")
@click.pass_context
def summary(ctx, year: int | None):
    """Show spending per month and category for a year."""
    db = ctx.obj["db"]
    service = TransactionService(db)

    if year is None:
        year = datetime.now(UTC).year

    monthly = service.monthly_spending_summary(year)
    if not monthly:
        click.echo(f"No categorized spending found for {year}.")
        return

    click.echo(f"\nSpending summary for {year}:")
    click.echo(f"\n{'Month - Category':<50} {'Spending':>14}")
    click.echo("-" * 65)
    for key, total in monthly.items():
        click.echo(f"{key:<50} {format_amount(total):>14}")
    click.echo("-" * 65)
    click.echo(f"{'Total':<50} {format_amount(sum(monthly.values())):>14}")


def register_commands(cli):
    """Register summary command with main CLI."""
    cli.add_command(summary)
