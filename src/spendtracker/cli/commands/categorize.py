"""Category assignment commands."""

import click
from spendtracker.cli.error_handling import handle_domain_error
from spendtracker.domain.category import CategoryService
from spendtracker.domain.errors import DomainError
from spendtracker.domain.transaction import TransactionService


@click.command("categorize")
@click.argument("transaction_ids", nargs=-1, required=True, type=int)
@click.argument("category_name", nargs=1)
@click.pass_context
def categorize_transactions(ctx, transaction_ids: tuple[int, ...], category_name: str):
    """Assign a category to one or more transactions.

    Examples:
        spendtracker categorize 1 "Groceries"
        spendtracker categorize 1 2 3 4 5 "Groceries"
    """
    db = ctx.obj["db"]
    service = TransactionService(db)
    category_service = CategoryService(db)

    # Validate category exists before processing any transactions
    category = category_service.get_category_by_name(category_name)
    if category is None:
        click.echo(f"Error: Category '{category_name}' not found", err=True)
        ctx.exit(1)

    try:
        result = service.bulk_categorize(list(transaction_ids), category.id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Categorized {result.processed} transaction{'s' if result.processed != 1 else ''} as '{category_name}'")
    if result.errors:
        for error in result.errors:
            click.echo(f"✗ {error}", err=True)
        click.echo(f"\nResults: {result.processed} succeeded, {result.failed} failed")
        ctx.exit(1)


@click.command("uncategorize")
@click.argument("transaction_id", type=int)
@click.pass_context
def uncategorize_transaction(ctx, transaction_id: int):
    """Remove the category from a transaction."""
    db = ctx.obj["db"]
    service = TransactionService(db)

    try:
        service.remove_category(transaction_id)
        click.echo(f"Removed category from transaction {transaction_id}")
    except DomainError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register categorize commands with main CLI."""
    cli.add_command(categorize_transactions)
    cli.add_command(uncategorize_transaction)
