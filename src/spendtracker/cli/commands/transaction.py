"""Transaction management commands."""

import click
from spendtracker.cli.date_filters import date_range_options, resolve_cli_date_range
from spendtracker.cli.error_handling import format_amount, handle_domain_error
from spendtracker.domain.category import CategoryService
from spendtracker.domain.entities import Transaction
from spendtracker.domain.errors import DomainError
from spendtracker.domain.transaction import TransactionService
from spendtracker.utils.amount_parser import parse_amount
from spendtracker.utils.date_parser import parse_date


def print_transaction_table(transactions: list[Transaction]) -> None:
    """Print transactions as a fixed-width table."""
    click.echo(
        f"\n{'ID':<6} {'Date':<12} {'Description':<32} {'Debit':>12} {'Credit':>12} "
        f"{'Balance':>12} {'Category':<20}"
    )
    click.echo("-" * 112)
    for txn in transactions:
        description = txn.description if len(txn.description) <= 32 else txn.description[:29] + "..."
        click.echo(
            f"{txn.id:<6} {txn.date.isoformat():<12} {description:<32} "
            f"{format_amount(txn.debit):>12} {format_amount(txn.credit):>12} "
            f"{format_amount(txn.balance):>12} {txn.category_name or '':<20}"
        )
    click.echo(f"\nTotal: {len(transactions)} transaction{'s' if len(transactions) != 1 else ''}")


@click.group()
def transaction_group():
    """Manage transactions."""
    pass


@transaction_group.command("list")
@date_range_options
@click.option("--category", help="Category name")
@click.option("--uncategorized", is_flag=True, help="Show only uncategorized transactions")
@click.pass_context
def list_transactions(
    ctx,
    start_date: str | None,
    end_date: str | None,
    this_month: bool,
    this_year: bool,
    last_month: bool,
    last_year: bool,
    category: str | None,
    uncategorized: bool,
):
    """View transactions with optional filters."""
    db = ctx.obj["db"]
    service = TransactionService(db)
    category_service = CategoryService(db)

    start, end = resolve_cli_date_range(
        start_date,
        end_date,
        this_month=this_month,
        this_year=this_year,
        last_month=last_month,
        last_year=last_year,
    )

    category_id = None
    if category is not None:
        category_obj = category_service.get_category_by_name(category)
        if category_obj is None:
            click.echo(f"Error: Category '{category}' not found", err=True)
            ctx.exit(1)
        category_id = category_obj.id

    transactions = service.list_transactions(
        start_date=start, end_date=end, category_id=category_id, uncategorized=uncategorized
    )

    if not transactions:
        click.echo("No transactions found.")
        return

    print_transaction_table(transactions)


@transaction_group.command("show")
@click.argument("transaction_id", type=int)
@click.pass_context
def show_transaction(ctx, transaction_id: int):
    """Show all fields of a transaction."""
    db = ctx.obj["db"]
    service = TransactionService(db)

    txn = service.get_transaction(transaction_id)
    if txn is None:
        click.echo(f"Error: Transaction with ID {transaction_id} not found", err=True)
        ctx.exit(1)

    click.echo(f"\nTransaction {txn.id}")
    click.echo(f"  Date:        {txn.date.isoformat()}")
    click.echo(f"  Description: {txn.description}")
    click.echo(f"  Debit:       {format_amount(txn.debit)}")
    click.echo(f"  Credit:      {format_amount(txn.credit)}")
    click.echo(f"  Balance:     {format_amount(txn.balance)}")
    click.echo(f"  Category:    {txn.category_name or 'Uncategorized'}")
    click.echo(f"  Batch:       {txn.upload_batch_id}")
    click.echo(f"  Created:     {txn.created_date}")


@transaction_group.command("add")
@click.option("--date", "date_str", required=True, help="Transaction date (e.g. 2024-01-15)")
@click.option("--description", help="Transaction description")
@click.option("--debit", help="Money spent (e.g. 45.99)")
@click.option("--credit", help="Money received (e.g. 1,200.00)")
@click.option("--balance", help="Account balance after the transaction")
@click.option("--category", help="Category name")
@click.pass_context
def add_transaction(
    ctx,
    date_str: str,
    description: str | None,
    debit: str | None,
    credit: str | None,
    balance: str | None,
    category: str | None,
):
    """Add a transaction manually."""
    db = ctx.obj["db"]
    service = TransactionService(db)
    category_service = CategoryService(db)

    try:
        txn_date = parse_date(date_str)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    amounts = {}
    for field, value in (("debit", debit), ("credit", credit), ("balance", balance)):
        if value is None:
            amounts[field] = None
            continue
        try:
            amounts[field] = parse_amount(value)
        except ValueError as e:
            click.echo(f"Error: Invalid {field} amount: {e}", err=True)
            ctx.exit(1)

    category_id = None
    if category is not None:
        category_obj = category_service.get_category_by_name(category)
        if category_obj is None:
            click.echo(f"Error: Category '{category}' not found", err=True)
            ctx.exit(1)
        category_id = category_obj.id

    try:
        transaction_id = service.create_transaction(
            date=txn_date,
            description=description,
            category_id=category_id,
            **amounts,
        )
        click.echo(f"Created transaction {transaction_id}")
    except DomainError as e:
        handle_domain_error(ctx, e)


@transaction_group.command("delete")
@click.argument("transaction_id", type=int)
@click.pass_context
def delete_transaction(ctx, transaction_id: int):
    """Delete a transaction."""
    db = ctx.obj["db"]
    service = TransactionService(db)

    try:
        service.delete_transaction(transaction_id)
        click.echo(f"Deleted transaction {transaction_id}")
    except DomainError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
