"""Streamlit dashboard for the betting calculators.

Three forms: Kelly fraction, wager amount and implied probability. A Kelly
result fills in the wager form's percentage field.
"""

import streamlit as st

from kellycalc.config import SETTINGS
from kellycalc.formatting import (
    KELLY_FORMULA_LATEX,
    format_currency,
    format_implied,
    format_kelly,
    kelly_interpretation,
    outcome_labels,
    suggested_wager_percentage,
)
from kellycalc.probability import MARKET_SIZES, compute_implied_probabilities
from kellycalc.schema import ValidationFailure
from kellycalc.sizing import compute_kelly, compute_wager
from kellycalc.validation import parse_number

WAGER_PERCENTAGE_KEY = "wager_percentage"

# Configure page
st.set_page_config(
    page_title="Kelly Calculator",
    page_icon="🎯",
    layout="centered",
)


def strategy_options() -> list[str]:
    """Strategy select labels, e.g. 'Half Kelly (0.5)'."""
    return [
        f"{name} ({multiplier})"
        for name, multiplier in SETTINGS.kelly_strategies.items()
    ]


def multiplier_for(option: str) -> str:
    """Multiplier text for a strategy select label."""
    name = option.split("(")[0].strip()
    return str(SETTINGS.kelly_strategies[name])


def kelly_section() -> None:
    """Kelly criterion form."""
    st.header("Kelly Criterion")
    st.latex(KELLY_FORMULA_LATEX)

    probability = st.text_input(
        "Probability of winning (0-1)",
        key="probability",
        placeholder="0.55",
    )
    odds = st.text_input("Decimal odds", key="odds", placeholder="2.00")
    strategy = st.selectbox("Kelly strategy", strategy_options(), key="kelly_strategy")

    if not st.button("Calculate", key="calculate_kelly"):
        return

    result = compute_kelly(
        parse_number(probability),
        parse_number(odds),
        parse_number(multiplier_for(strategy)),
    )
    if isinstance(result, ValidationFailure):
        st.error(result.message)
        return

    st.metric("Optimal bet", format_kelly(result))
    st.write(kelly_interpretation(result))

    # Runs before the wager widget is created, so the field can be updated
    st.session_state[WAGER_PERCENTAGE_KEY] = str(suggested_wager_percentage(result))


def wager_section() -> None:
    """Wager amount form."""
    st.header("Wager Amount")

    bankroll = st.text_input("Bankroll", key="bankroll", placeholder="1000")
    percentage = st.text_input("Wager percentage", key=WAGER_PERCENTAGE_KEY)

    if not st.button("Calculate wager", key="calculate_wager"):
        return

    result = compute_wager(parse_number(bankroll), parse_number(percentage))
    if isinstance(result, ValidationFailure):
        st.error(result.message)
        return

    st.metric("Wager", format_currency(result.amount))


def implied_section() -> None:
    """Implied probability form."""
    st.header("Implied Probability")

    size = st.selectbox(
        "Market type",
        MARKET_SIZES,
        key="market_type",
        format_func=lambda n: f"{n}-way market",
    )
    labels = outcome_labels(size)
    odds = [
        st.text_input(f"{label} Odds", key=f"prob_odds_{i}", placeholder="1.80")
        for i, label in enumerate(labels)
    ]

    if not st.button("Calculate probabilities", key="calculate_prob"):
        return

    result = compute_implied_probabilities([parse_number(o) for o in odds])
    if isinstance(result, ValidationFailure):
        st.error(result.message)
        return

    *prob_lines, overround_line = format_implied(result)
    for line in prob_lines:
        st.markdown(f"- {line}")
    st.caption(overround_line)


def main() -> None:
    """Run the Streamlit dashboard application."""
    st.title("Betting Calculators")
    kelly_section()
    wager_section()
    implied_section()


if __name__ == "__main__":
    main()
