"""Implied probability and overround from a market's decimal odds.

Inverse odds are normalized so the probabilities always sum to 100%. The raw
inverse sum is reported separately as the overround.
"""

from collections.abc import Sequence
from decimal import Decimal

from kellycalc.schema import HUNDRED, ONE, ImpliedProbabilities, ValidationFailure
from kellycalc.validation import Number, to_decimal, validate_odds_set

MARKET_SIZES = (2, 3)


def implied_probabilities(
    odds: Sequence[Decimal],
) -> tuple[tuple[Decimal, ...], Decimal]:
    """Normalize inverse odds.

    Args:
        odds: Decimal odds per outcome, each > 1

    Returns:
        Probabilities as percentages in input order, and the total of the
        inverse odds (1.0 for a market with no margin)

    Raises:
        ValueError: If every inverse odd underflows to zero

    """
    inverses = [ONE / o for o in odds]
    total_inverse = sum(inverses, Decimal("0"))
    if total_inverse == 0:
        error_msg = "Inverse odds underflow to zero; odds are too large"
        raise ValueError(error_msg)
    probs = tuple(inv / total_inverse * HUNDRED for inv in inverses)
    return probs, total_inverse


def compute_implied_probabilities(
    odds_set: Sequence[Number],
) -> ImpliedProbabilities | ValidationFailure:
    """Validate a 2- or 3-outcome market and compute implied probabilities.

    Raises:
        ValueError: If the market does not have 2 or 3 outcomes

    """
    if len(odds_set) not in MARKET_SIZES:
        error_msg = f"Market must have 2 or 3 outcomes, got {len(odds_set)}"
        raise ValueError(error_msg)

    odds = tuple(to_decimal(o) for o in odds_set)
    failure = validate_odds_set(odds)
    if failure is not None:
        return failure

    probs, total_inverse = implied_probabilities(odds)
    return ImpliedProbabilities(
        odds=odds,
        probabilities=probs,
        overround=total_inverse * HUNDRED,
    )
