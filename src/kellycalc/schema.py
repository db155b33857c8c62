"""Value records returned by the calculators."""

import json
from dataclasses import asdict, dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Literal

from kellycalc.config import SETTINGS

ErrorKind = Literal[
    "NonNumericInput",
    "ProbabilityOutOfRange",
    "OddsTooLow",
    "NegativeBankroll",
    "NegativeWagerPercentage",
    "NegativeKellyMultiplier",
]

ZERO = Decimal("0")
ONE = Decimal("1")
HUNDRED = Decimal("100")


def round_display(value: Decimal, places: int | None = None) -> Decimal:
    """Round a value half-up to the display precision."""
    if places is None:
        places = SETTINGS.decimal_places
    with localcontext() as ctx:
        # quantize needs room for every digit left of the rounding point
        ctx.prec = max(ctx.prec, value.adjusted() + places + 2)
        return value.quantize(ONE.scaleb(-places), rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class ValidationFailure:
    """Rejected input. Returned in place of a result, never raised."""

    kind: ErrorKind
    message: str


@dataclass(frozen=True)
class KellyResult:
    """Scaled Kelly fraction for a single bet."""

    win_probability: Decimal
    decimal_odds: Decimal
    kelly_multiplier: Decimal
    fraction: Decimal  # full precision, may be <= 0

    @property
    def net_odds(self) -> Decimal:
        """Profit per unit staked (b in the Kelly formula)."""
        return self.decimal_odds - ONE

    @property
    def full_fraction(self) -> Decimal:
        """Unscaled Kelly fraction."""
        q = ONE - self.win_probability
        return (self.net_odds * self.win_probability - q) / self.net_odds

    @property
    def has_edge(self) -> bool:
        """Whether the bet has a positive expected growth rate."""
        return self.fraction > ZERO

    @property
    def percentage(self) -> Decimal:
        """Stake as a rounded percentage of bankroll, 0 when there is no edge."""
        if not self.has_edge:
            return ZERO
        return round_display(self.fraction * HUNDRED)


@dataclass(frozen=True)
class WagerResult:
    """Stake derived from a bankroll and a percentage."""

    bankroll: Decimal
    wager_percentage: Decimal
    amount: Decimal

    @property
    def display_amount(self) -> Decimal:
        """Amount rounded for display."""
        return round_display(self.amount)


@dataclass(frozen=True)
class ImpliedProbabilities:
    """Normalized outcome probabilities for a market.

    ``probabilities[i]`` belongs to ``odds[i]``. Both the probabilities and the
    overround are percentages at full precision.
    """

    odds: tuple[Decimal, ...]
    probabilities: tuple[Decimal, ...]
    overround: Decimal

    @property
    def margin(self) -> Decimal:
        """Bookmaker margin: overround above 100%."""
        return self.overround - HUNDRED

    @property
    def rounded_probabilities(self) -> tuple[Decimal, ...]:
        """Probabilities rounded for display."""
        return tuple(round_display(p) for p in self.probabilities)

    @property
    def rounded_overround(self) -> Decimal:
        """Overround rounded for display."""
        return round_display(self.overround)


# Serialization helpers
class DecimalJSONEncoder(json.JSONEncoder):
    """Custom JSON encoder that handles Decimal objects."""

    def default(self, obj: object) -> object:
        """Convert Decimal objects to strings."""
        if isinstance(obj, Decimal):
            return str(obj)
        return super().default(obj)


def to_json(obj: object) -> str:
    """Convert a result or failure dataclass to a JSON string."""
    return json.dumps(asdict(obj), cls=DecimalJSONEncoder)
