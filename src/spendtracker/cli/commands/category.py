"""Category management commands."""

from datetime import datetime, UTC

import click
from spendtracker.cli.error_handling import format_amount, handle_domain_error
from spendtracker.domain.category import CategoryService
from spendtracker.domain.errors import DomainError
from spendtracker.domain.ledger import CategoryLedger


@click.group()
def category_group():
    """Manage categories."""
    pass


@category_group.command("list")
@click.pass_context
def list_categories(ctx):
    """List all categories with transaction counts and spending."""
    db = ctx.obj["db"]
    service = CategoryService(db)

    summaries = service.list_category_summaries()
    if not summaries:
        click.echo("No categories found. Use 'category create' to add one.")
        return

    click.echo(f"\n{'ID':<6} {'Name':<30} {'Transactions':>12} {'Spending':>14}")
    click.echo("-" * 65)
    for cat in summaries:
        click.echo(
            f"{cat.id:<6} {cat.name:<30} {cat.transaction_count:>12} "
            f"{format_amount(cat.total_spending):>14}"
        )


@category_group.command("create")
@click.argument("name")
@click.option("--description", help="Optional category description")
@click.pass_context
def create_category(ctx, name: str, description: str | None):
    """Create a new category."""
    db = ctx.obj["db"]
    service = CategoryService(db)

    try:
        category_id = service.create_category(name=name, description=description)
        click.echo(f"Created category '{name.strip()}' (ID: {category_id})")
    except DomainError as e:
        handle_domain_error(ctx, e)


@category_group.command("update")
@click.argument("category_id", type=int)
@click.argument("name")
@click.option("--description", help="New description (omit to clear)")
@click.pass_context
def update_category(ctx, category_id: int, name: str, description: str | None):
    """Rename a category and set its description."""
    db = ctx.obj["db"]
    service = CategoryService(db)

    try:
        service.update_category(category_id, name=name, description=description)
        click.echo(f"Updated category {category_id}")
    except DomainError as e:
        handle_domain_error(ctx, e)


@category_group.command("delete")
@click.argument("category_id", type=int)
@click.pass_context
def delete_category(ctx, category_id: int):
    """Delete a category that has no transactions."""
    db = ctx.obj["db"]
    service = CategoryService(db)

    try:
        service.delete_category(category_id)
        click.echo(f"Deleted category {category_id}")
    except DomainError as e:
        handle_domain_error(ctx, e)


@category_group.command("spending")
@click.argument("category_id", type=int)
@click.option("--year", type=int, help="Year for the monthly breakdown (default: current year)")
@click.pass_context
def category_spending(ctx, category_id: int, year: int | None):
    """Show total and monthly spending of a category."""
    db = ctx.obj["db"]
    ledger = CategoryLedger(db)

    if year is None:
        year = datetime.now(UTC).year

    try:
        spending = ledger.category_spending(category_id, year)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"\n{spending.category_name}")
    click.echo(f"  Transactions: {spending.transaction_count}")
    click.echo(f"  Total spending: {format_amount(spending.total_spending)}")

    if not spending.monthly_breakdown:
        click.echo(f"\nNo spending in {year}.")
        return

    click.echo(f"\n{year}:")
    for month in spending.monthly_breakdown:
        click.echo(
            f"  {month.month_name:<12} {format_amount(month.total_spending):>14} "
            f"({month.transaction_count} transaction{'s' if month.transaction_count != 1 else ''})"
        )


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(category_group, name="category")
