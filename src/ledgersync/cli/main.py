"""Main CLI entry point."""

import click

from ledgersync.config import load_config
from ledgersync.cli.commands import classify, process

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.option(
    "--dir",
    "work_dir",
    type=click.Path(file_okay=False),
    help="Directory holding the ledger and bill exports (overrides LEDGERSYNC_DIR)",
    envvar="LEDGERSYNC_DIR",
)
@click.option("--rules", help="Rules file (overrides LEDGERSYNC_RULES)", envvar="LEDGERSYNC_RULES")
@click.option(
    "--output", help="JSON snapshot file (overrides LEDGERSYNC_OUTPUT)", envvar="LEDGERSYNC_OUTPUT"
)
@click.option("--log-file", help="Run log file (overrides LEDGERSYNC_LOG)", envvar="LEDGERSYNC_LOG")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="INFO",
    show_default=True,
    envvar="LEDGERSYNC_LOG_LEVEL",
    help="Run log verbosity",
)
@click.pass_context
def cli(
    ctx,
    work_dir: str | None,
    rules: str | None,
    output: str | None,
    log_file: str | None,
    log_level: str,
):
    """Ledgersync - household ledger reconciliation.

    Merge WeChat Pay bill exports into the household ledger, skipping
    transactions that are already recorded and classifying new ones with
    keyword rules.
    """
    ctx.ensure_object(dict)
    ctx.obj["config"] = load_config(
        work_dir=work_dir, rules_file=rules, output_file=output, log_file=log_file
    )
    ctx.obj["log_level"] = log_level.upper()


# Register all commands
process.register_commands(cli)
classify.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
