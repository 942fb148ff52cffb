"""CSV statement import command."""

import click
from spendtracker.cli.error_handling import handle_domain_error
from spendtracker.domain.csv_import import StatementImportService
from spendtracker.domain.errors import PersistenceError


@click.command("import")
@click.argument("csv_file", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def import_csv(ctx, csv_file: str):
    """Import a bank statement CSV file as one batch.

    Expected columns: Transaction Date, Description, Debits, Credits, Balance.
    Rows with an invalid date are skipped and reported.
    """
    db = ctx.obj["db"]
    service = StatementImportService(db)

    try:
        outcome = service.import_csv(csv_file_path=csv_file)
    except PersistenceError as e:
        handle_domain_error(ctx, e)
        return

    click.echo("\nImport complete:")
    click.echo(f"  Batch: {outcome.upload_batch_id}")
    click.echo(f"  Total records: {outcome.total_records}")
    click.echo(f"  Imported: {outcome.successful_imports} transactions")
    click.echo(f"  Failed: {outcome.failed_imports}")
    if outcome.errors:
        click.echo(f"  Errors: {len(outcome.errors)}")
        for error in outcome.errors:
            click.echo(f"    {error}", err=True)

    if outcome.successful_imports == 0:
        click.echo("Error: No transactions were imported", err=True)
        ctx.exit(1)


def register_commands(cli):
    """Register import command with main CLI."""
    cli.add_command(import_csv)
