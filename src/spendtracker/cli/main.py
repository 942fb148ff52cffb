"""Main CLI entry point."""

import logging

import click
from spendtracker.database.factories import create_sqlite_database, create_database

# Import and register all commands at module level
from spendtracker.cli.commands import (
    import_cmd,
    category,
    categorize,
    transaction,
    batch,
    summary,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help=(
        "Path to SQLite database file. Without it, SPENDTRACKER_DATABASE_URL is used, "
        "then SPENDTRACKER_DB_PATH, then ~/.spendtracker/spendtracker.db"
    ),
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging verbosity",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str):
    """SpendTracker - personal spending tracker.

    Import bank statement CSV files, categorize transactions and review
    spending per category.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        if db_path is not None:
            db = create_sqlite_database(database_path=db_path)
        else:
            # Same environment precedence as the HTTP API
            db = create_database()
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
import_cmd.register_commands(cli)
category.register_commands(cli)
categorize.register_commands(cli)
transaction.register_commands(cli)
batch.register_commands(cli)
summary.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
