"""Date range options shared by listing commands."""

from datetime import date

import click

from spendtracker.utils.date_parser import get_date_range, parse_date

PERIODS = ("this-month", "this-year", "last-month", "last-year")


def date_range_options(command):
    """Add --start-date, --end-date and one flag per named period to a command."""
    options = [
        click.option("--start-date", help="Start date (e.g. 2024-01-15)"),
        click.option("--end-date", help="End date (e.g. 2024-01-31)"),
    ]
    options += [
        click.option(f"--{period}", is_flag=True, help=f"Filter to {period.replace('-', ' ')}")
        for period in PERIODS
    ]
    for option in reversed(options):
        command = option(command)
    return command


def _parse_bound(value: str | None, option_name: str) -> date | None:
    if not value:
        return None
    try:
        return parse_date(value)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint=option_name)


def resolve_cli_date_range(
    start_date: str | None, end_date: str | None, **period_flags: bool
) -> tuple[date | None, date | None]:
    """Turn the values of date_range_options into a (start, end) pair.

    Period flags arrive as keyword arguments named like the command
    parameters (this_month=True, ...). At most one may be set, and not
    together with explicit dates.

    Raises:
        click.UsageError: If the options conflict
        click.BadParameter: If an explicit date cannot be parsed
    """
    chosen = [name.replace("_", "-") for name, is_set in period_flags.items() if is_set]

    if len(chosen) > 1:
        raise click.UsageError(
            "Only one period option can be given, got " + ", ".join(f"--{p}" for p in chosen)
        )

    if chosen:
        if start_date or end_date:
            raise click.UsageError(
                f"--{chosen[0]} cannot be combined with --start-date or --end-date"
            )
        return get_date_range(chosen[0])

    return _parse_bound(start_date, "--start-date"), _parse_bound(end_date, "--end-date")
