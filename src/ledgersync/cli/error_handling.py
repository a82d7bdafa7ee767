"""CLI error handling helpers."""

import csv

import click

from ledgersync.domain.errors import DomainError

# Everything a run can fail with that should end as a one-line message
RUN_ERRORS = (DomainError, ValueError, OSError, csv.Error)


def handle_domain_error(ctx: click.Context, error: Exception) -> None:
    """Render a run error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
