"""Input parsing and validation for the calculators.

Validators return a ``ValidationFailure`` for the first problem found, or
``None`` when the inputs can be computed on.
"""

from collections.abc import Sequence
from decimal import Decimal, InvalidOperation

from kellycalc.config import SETTINGS, Settings
from kellycalc.schema import ZERO, ValidationFailure

NAN = Decimal("NaN")

# Inputs beyond 1e100 or below 1e-100 cannot be computed on reliably
MAX_EXPONENT = 100

Number = Decimal | float | int | str


def parse_number(raw: str | None) -> Decimal:
    """Parse user input into a Decimal.

    Empty or non-numeric input becomes NaN so that it fails validation
    instead of raising.
    """
    if raw is None:
        return NAN
    try:
        return Decimal(raw.strip())
    except InvalidOperation:
        return NAN


def to_decimal(value: Number) -> Decimal:
    """Convert a caller-supplied number to Decimal.

    Floats go through ``str`` so ``0.55`` stays ``Decimal("0.55")``.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, str):
        return parse_number(value)
    return Decimal(str(value))


def _all_representable(*values: Decimal) -> bool:
    """Finite, and within MAX_EXPONENT orders of magnitude of 1 unless zero."""
    return all(
        v.is_finite() and (v.is_zero() or abs(v.adjusted()) <= MAX_EXPONENT)
        for v in values
    )


def validate_kelly(
    win_probability: Decimal,
    decimal_odds: Decimal,
    kelly_multiplier: Decimal,
    settings: Settings = SETTINGS,
) -> ValidationFailure | None:
    """Validate Kelly calculator inputs."""
    if not _all_representable(win_probability, decimal_odds, kelly_multiplier):
        return ValidationFailure(
            "NonNumericInput",
            "Please enter valid numbers for both fields.",
        )
    lo, hi = settings.min_probability, settings.max_probability
    if win_probability < lo or win_probability > hi:
        return ValidationFailure(
            "ProbabilityOutOfRange",
            f"Probability of winning must be between {lo} and {hi}.",
        )
    if decimal_odds <= settings.min_odds:
        return ValidationFailure(
            "OddsTooLow",
            f"Decimal odds must be greater than {settings.min_odds} "
            "to have a potential for profit.",
        )
    if kelly_multiplier < ZERO:
        return ValidationFailure(
            "NegativeKellyMultiplier",
            "Kelly multiplier cannot be negative.",
        )
    return None


def validate_wager(
    bankroll: Decimal,
    wager_percentage: Decimal,
) -> ValidationFailure | None:
    """Validate wager calculator inputs.

    Percentages above 100 are allowed and yield a stake above the bankroll.
    """
    if not _all_representable(bankroll, wager_percentage):
        return ValidationFailure(
            "NonNumericInput",
            "Please enter valid numbers for bankroll and wager percentage.",
        )
    if bankroll < ZERO:
        return ValidationFailure("NegativeBankroll", "Bankroll cannot be negative.")
    if wager_percentage < ZERO:
        return ValidationFailure(
            "NegativeWagerPercentage",
            "Wager percentage cannot be negative.",
        )
    return None


def validate_odds_set(
    odds: Sequence[Decimal],
    settings: Settings = SETTINGS,
) -> ValidationFailure | None:
    """Validate a market's odds as a whole; one message covers every entry."""
    if not _all_representable(*odds):
        return ValidationFailure(
            "NonNumericInput",
            "Please enter valid decimal odds for all outcomes.",
        )
    if any(o <= settings.min_odds for o in odds):
        return ValidationFailure(
            "OddsTooLow",
            f"All decimal odds must be greater than {settings.min_odds}.",
        )
    return None
