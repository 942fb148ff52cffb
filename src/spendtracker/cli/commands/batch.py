"""Import batch commands."""

import click
from spendtracker.cli.commands.transaction import print_transaction_table
from spendtracker.cli.error_handling import handle_domain_error
from spendtracker.domain.errors import DomainError
from spendtracker.domain.transaction import TransactionService


@click.group()
def batch_group():
    """Inspect or roll back import batches."""
    pass


@batch_group.command("show")
@click.argument("batch_id")
@click.pass_context
def show_batch(ctx, batch_id: str):
    """List the transactions created by one import."""
    db = ctx.obj["db"]
    service = TransactionService(db)

    transactions = service.list_batch(batch_id)
    if not transactions:
        click.echo(f"No transactions found for batch {batch_id}.")
        return

    print_transaction_table(transactions)


@batch_group.command("rollback")
@click.argument("batch_id")
@click.confirmation_option(prompt="Delete every transaction of this batch?")
@click.pass_context
def rollback_batch(ctx, batch_id: str):
    """Delete every transaction created by one import."""
    db = ctx.obj["db"]
    service = TransactionService(db)

    try:
        deleted = service.delete_batch(batch_id)
        click.echo(f"Deleted {deleted} transaction{'s' if deleted != 1 else ''} from batch {batch_id}")
    except DomainError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register batch commands with main CLI."""
    cli.add_command(batch_group, name="batch")
