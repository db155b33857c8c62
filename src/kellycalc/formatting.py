"""Display formatting shared by the CLI and the dashboard."""

from decimal import Decimal

from kellycalc.config import SETTINGS, Settings
from kellycalc.schema import ONE, ZERO, ImpliedProbabilities, KellyResult, round_display

TWO_WAY_LABELS = ("Outcome 1", "Outcome 2")
THREE_WAY_LABELS = ("Home Win", "Draw", "Away Win")

NO_EDGE_MESSAGE = (
    "You do not have an edge. The Kelly Criterion suggests you should not bet."
)
KELLY_FORMULA_LATEX = r"f^* = \frac{bp - q}{b}"


def format_percent(value: Decimal) -> str:
    """Format a percentage value with the display precision."""
    return f"{round_display(value)}%"


def format_currency(value: Decimal) -> str:
    """Format a currency amount, e.g. $75.00."""
    return f"${round_display(value)}"


def format_kelly(result: KellyResult) -> str:
    """Headline figure for a Kelly result."""
    if not result.has_edge:
        return "0%"
    return f"{result.percentage}%"


def strategy_label(multiplier: Decimal, settings: Settings = SETTINGS) -> str:
    """Name of the fractional Kelly strategy for a multiplier."""
    name = settings.strategy_name(multiplier)
    if name is not None:
        return name
    return f"{multiplier.normalize()}x Kelly"


def kelly_interpretation(result: KellyResult, settings: Settings = SETTINGS) -> str:
    """Explain a Kelly result in one or two sentences."""
    if not result.has_edge:
        return NO_EDGE_MESSAGE

    text = (
        f"The formula suggests you should wager {result.percentage}% "
        "of your bankroll."
    )
    if result.kelly_multiplier < ONE:
        name = strategy_label(result.kelly_multiplier, settings)
        text += f" (This is based on a {name} strategy)."
    return text


def suggested_wager_percentage(result: KellyResult) -> Decimal:
    """Percentage to carry from a Kelly result into the wager calculator."""
    if not result.has_edge:
        return ZERO
    return result.percentage


def outcome_labels(size: int) -> tuple[str, ...]:
    """Positional outcome labels for a 2- or 3-outcome market."""
    if size == len(TWO_WAY_LABELS):
        return TWO_WAY_LABELS
    if size == len(THREE_WAY_LABELS):
        return THREE_WAY_LABELS
    error_msg = f"No outcome labels for a market of size {size}"
    raise ValueError(error_msg)


def format_implied(result: ImpliedProbabilities) -> list[str]:
    """Labelled probability lines followed by the overround line."""
    labels = outcome_labels(len(result.probabilities))
    lines = [
        f"{label}: {format_percent(prob)}"
        for label, prob in zip(labels, result.probabilities, strict=True)
    ]
    lines.append(f"Total (Overround): {format_percent(result.overround)}")
    return lines
