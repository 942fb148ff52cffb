"""CLI error handling and output helpers."""

from decimal import Decimal
from typing import Optional

import click

from spendtracker.domain.errors import DomainError


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def format_amount(amount: Optional[Decimal]) -> str:
    """Format an optional amount for table output."""
    if amount is None:
        return ""
    if amount < 0:
        return f"-${-amount:,.2f}"
    return f"${amount:,.2f}"
