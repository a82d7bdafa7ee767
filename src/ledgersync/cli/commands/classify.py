"""Rule preview and fingerprint commands."""

import click

from ledgersync.cli.error_handling import RUN_ERRORS, handle_domain_error
from ledgersync.domain import schema
from ledgersync.domain.classifier import classify, find_rule, load_rules
from ledgersync.domain.fingerprint import fingerprint


@click.command("classify")
@click.argument("merchant")
@click.option("--product", default=schema.UNKNOWN_PRODUCT, help="Product kept when no rule matches")
@click.pass_context
def classify_merchant(ctx, merchant: str, product: str):
    """Show how a merchant would be classified by the rules file.

    Examples:
        ledgersync classify "星巴克(国贸店)"
    """
    config = ctx.obj["config"]

    try:
        rules = load_rules(config.rules_path)
    except RUN_ERRORS as e:
        handle_domain_error(ctx, e)
        return

    rule = find_rule(rules, merchant)
    result = classify(rules, merchant, default_product=product)

    if rule is None:
        click.echo("No rule matched.")
    else:
        click.echo(f"Matched rule: {', '.join(rule.keywords)}")
    click.echo(f"  Category: {result.category}")
    click.echo(f"  Product: {result.product}")
    click.echo(f"  Platform: {result.platform}")


@click.command("fingerprint")
@click.argument("date")
@click.argument("amount")
@click.argument("merchant", required=False, default="")
@click.pass_context
def show_fingerprint(ctx, date: str, amount: str, merchant: str):
    """Print the duplicate-detection key for a transaction.

    Examples:
        ledgersync fingerprint 2024年3月1日 ¥50.00 "CoffeeShop(Downtown)"
    """
    try:
        click.echo(fingerprint(date, amount, merchant))
    except RUN_ERRORS as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register classify and fingerprint commands with main CLI."""
    cli.add_command(classify_merchant)
    cli.add_command(show_fingerprint)
