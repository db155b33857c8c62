"""Kelly criterion and wager amount calculations for bet sizing."""

from decimal import Decimal

from kellycalc.schema import HUNDRED, ONE, KellyResult, ValidationFailure, WagerResult
from kellycalc.validation import Number, to_decimal, validate_kelly, validate_wager


def kelly_fraction(
    win_probability: Decimal,
    decimal_odds: Decimal,
    kelly_multiplier: Decimal = ONE,
) -> Decimal:
    """Return the scaled Kelly fraction for a single bet.

    Args:
        win_probability: Probability of winning (0-1)
        decimal_odds: Total return per unit staked, must be > 1
        kelly_multiplier: Fractional Kelly scale (1 = full Kelly)

    Returns:
        The bankroll fraction to stake. Not clamped: a value <= 0 means
        there is no edge.

    """
    # Kelly formula: f* = (b * p - q) / b
    b = decimal_odds - ONE
    q = ONE - win_probability
    f = (b * win_probability - q) / b
    return f * kelly_multiplier


def wager_amount(bankroll: Decimal, wager_percentage: Decimal) -> Decimal:
    """Return the stake for a percentage of bankroll."""
    return bankroll * wager_percentage / HUNDRED


def compute_kelly(
    win_probability: Number,
    decimal_odds: Number,
    kelly_multiplier: Number = ONE,
) -> KellyResult | ValidationFailure:
    """Validate inputs and compute the scaled Kelly fraction.

    Returns:
        A KellyResult, or the first ValidationFailure found. Nothing is
        computed for invalid input.

    """
    p = to_decimal(win_probability)
    odds = to_decimal(decimal_odds)
    multiplier = to_decimal(kelly_multiplier)

    failure = validate_kelly(p, odds, multiplier)
    if failure is not None:
        return failure

    return KellyResult(
        win_probability=p,
        decimal_odds=odds,
        kelly_multiplier=multiplier,
        fraction=kelly_fraction(p, odds, multiplier),
    )


def compute_wager(
    bankroll: Number,
    wager_percentage: Number,
) -> WagerResult | ValidationFailure:
    """Validate inputs and compute the wager amount."""
    funds = to_decimal(bankroll)
    pct = to_decimal(wager_percentage)

    failure = validate_wager(funds, pct)
    if failure is not None:
        return failure

    return WagerResult(
        bankroll=funds,
        wager_percentage=pct,
        amount=wager_amount(funds, pct),
    )
