"""Ledger reconciliation command."""

import click

from ledgersync.cli.error_handling import RUN_ERRORS, handle_domain_error
from ledgersync.domain.reconcile import ReconcileService
from ledgersync.utils.run_log import open_run_log


@click.command("process")
@click.pass_context
def process_ledger(ctx):
    """Merge new bill exports into the ledger and refresh the JSON snapshot."""
    config = ctx.obj["config"]

    try:
        with open_run_log(config.log_path, ctx.obj["log_level"]) as log:
            try:
                result = ReconcileService(config, log).run()
            except RUN_ERRORS:
                log.exception("--- ERROR ---")
                raise
    except RUN_ERRORS as e:
        handle_domain_error(ctx, e)
        return

    if result["exports"] == 0:
        click.echo("No new bill files to process.")
        click.echo(f"  {result['ledger'].name} is unchanged.")
        click.echo(f"  Snapshot: {config.output_path.name} ({result['total']} records)")
        return

    click.echo("\nProcessing complete:")
    click.echo(f"  Added: {result['added']} new transactions")
    click.echo(f"  Skipped: {result['skipped']} duplicates")
    if result["ledger_rewritten"]:
        click.echo(f"  {result['ledger'].name} has been updated and sorted.")
    else:
        click.echo(f"  {result['ledger'].name} is unchanged.")
    click.echo(f"  Total records: {result['total']}")


def register_commands(cli):
    """Register process command with main CLI."""
    cli.add_command(process_ledger)
