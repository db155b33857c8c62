"""Command-line entry point for the betting calculators."""

import sys

import click

from kellycalc.formatting import (
    format_currency,
    format_implied,
    format_kelly,
    kelly_interpretation,
    suggested_wager_percentage,
)
from kellycalc.probability import compute_implied_probabilities
from kellycalc.schema import ValidationFailure, to_json
from kellycalc.sizing import compute_kelly, compute_wager
from kellycalc.validation import parse_number


def report_failure(failure: ValidationFailure) -> None:
    """Print a validation failure to stderr and exit with status 1."""
    click.echo(f"Error: {failure.message}", err=True)
    sys.exit(1)


@click.group()
def cli() -> None:
    """Kelly criterion, wager and implied probability calculators."""


@cli.command()
@click.option(
    "--probability",
    "-p",
    required=True,
    help="Probability of winning, between 0 and 1",
)
@click.option(
    "--odds",
    "-o",
    required=True,
    help="Decimal odds, must be greater than 1",
)
@click.option(
    "--multiplier",
    "-m",
    default="1",
    show_default=True,
    help="Fractional Kelly multiplier (0.5 = half Kelly)",
)
@click.option(
    "--bankroll",
    help="Optional bankroll; prints the stake for the suggested percentage",
)
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
def kelly(
    probability: str,
    odds: str,
    multiplier: str,
    bankroll: str | None = None,
    as_json: bool = False,  # noqa: FBT001, FBT002
) -> None:
    """Optimal fraction of bankroll to wager using the Kelly criterion."""
    result = compute_kelly(
        parse_number(probability),
        parse_number(odds),
        parse_number(multiplier),
    )
    if isinstance(result, ValidationFailure):
        report_failure(result)
        return

    if as_json:
        click.echo(to_json(result))
    else:
        click.echo(format_kelly(result))
        click.echo(kelly_interpretation(result))

    if bankroll is None:
        return

    # Carry the suggested percentage into the wager calculator
    wager_result = compute_wager(
        parse_number(bankroll),
        suggested_wager_percentage(result),
    )
    if isinstance(wager_result, ValidationFailure):
        report_failure(wager_result)
        return

    if as_json:
        click.echo(to_json(wager_result))
    else:
        click.echo(f"Stake: {format_currency(wager_result.amount)}")


@cli.command()
@click.option("--bankroll", "-b", required=True, help="Total bankroll")
@click.option(
    "--percentage",
    "-w",
    required=True,
    help="Percentage of bankroll to wager",
)
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
def wager(
    bankroll: str,
    percentage: str,
    as_json: bool = False,  # noqa: FBT001, FBT002
) -> None:
    """Wager amount for a percentage of bankroll."""
    result = compute_wager(parse_number(bankroll), parse_number(percentage))
    if isinstance(result, ValidationFailure):
        report_failure(result)
        return

    if as_json:
        click.echo(to_json(result))
    else:
        click.echo(format_currency(result.amount))


@cli.command()
@click.argument("odds", nargs=-1, required=True)
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
def implied(
    odds: tuple[str, ...],
    as_json: bool = False,  # noqa: FBT001, FBT002
) -> None:
    """Implied probabilities and overround for 2 or 3 decimal ODDS."""
    try:
        result = compute_implied_probabilities([parse_number(o) for o in odds])
    except ValueError as e:
        click.echo(f"Value error: {e}", err=True)
        sys.exit(1)

    if isinstance(result, ValidationFailure):
        report_failure(result)
        return

    if as_json:
        click.echo(to_json(result))
        return

    for line in format_implied(result):
        click.echo(line)


if __name__ == "__main__":
    cli()
