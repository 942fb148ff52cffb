"""Tests for CLI date filter helper."""

from datetime import date

import click
import pytest

from spendtracker.cli.date_filters import date_range_options, resolve_cli_date_range
from spendtracker.utils.date_parser import get_date_range


def test_resolve_cli_date_range_rejects_multiple_periods():
    with pytest.raises(click.UsageError, match="Only one period option"):
        resolve_cli_date_range(None, None, this_month=True, last_month=True)


def test_resolve_cli_date_range_rejects_period_with_start_end():
    with pytest.raises(click.UsageError, match="cannot be combined"):
        resolve_cli_date_range("2024-01-01", None, this_year=True)


def test_resolve_cli_date_range_returns_period_range():
    start, end = resolve_cli_date_range(None, None, this_month=True, last_month=False)

    assert (start, end) == get_date_range("this-month")


def test_resolve_cli_date_range_parses_explicit_dates():
    start, end = resolve_cli_date_range("2024-01-01", "01/31/2024", this_month=False)

    assert start == date(2024, 1, 1)
    assert end == date(2024, 1, 31)


def test_resolve_cli_date_range_open_ended():
    assert resolve_cli_date_range(None, "2024-02-01") == (None, date(2024, 2, 1))
    assert resolve_cli_date_range(None, None) == (None, None)


def test_resolve_cli_date_range_invalid_date():
    with pytest.raises(click.BadParameter):
        resolve_cli_date_range("someday", None)


def test_date_range_options_through_command(cli_runner):
    """The options decorator wires every flag into the command."""

    @click.command()
    @date_range_options
    def show(start_date, end_date, this_month, this_year, last_month, last_year):
        start, end = resolve_cli_date_range(
            start_date,
            end_date,
            this_month=this_month,
            this_year=this_year,
            last_month=last_month,
            last_year=last_year,
        )
        click.echo(f"{start}..{end}")

    result = cli_runner.invoke(show, ["--start-date", "2024-03-01"])
    assert result.exit_code == 0
    assert "2024-03-01..None" in result.output

    result = cli_runner.invoke(show, ["--last-year", "--this-month"])
    assert result.exit_code == 2
    assert "Only one period option" in result.output

    result = cli_runner.invoke(show, ["--end-date", "nonsense"])
    assert result.exit_code == 2
    assert "--end-date" in result.output
