"""Tests for the dashboard forms, driven through Streamlit's AppTest."""

import pytest
from streamlit.testing.v1 import AppTest

from kellycalc.run_dashboard import DASHBOARD_PATH


@pytest.fixture
def app():
    """Dashboard after its first run."""
    at = AppTest.from_file(str(DASHBOARD_PATH), default_timeout=30)
    at.run()
    assert not at.exception
    return at


def run_kelly(at, probability, odds):
    """Fill in and submit the Kelly form."""
    at.text_input(key="probability").input(probability)
    at.text_input(key="odds").input(odds)
    at.button(key="calculate_kelly").click().run()
    assert not at.exception


def test_kelly_result_fills_wager_percentage(app):
    """A Kelly result is copied into the wager percentage field."""
    run_kelly(app, "0.55", "2.0")

    assert [m.value for m in app.metric] == ["10.00%"]
    assert app.text_input(key="wager_percentage").value == "10.00"


def test_kelly_result_does_not_compute_wager(app):
    """Filling the wager field leaves the wager itself uncomputed."""
    app.text_input(key="bankroll").input("1000")
    run_kelly(app, "0.55", "2.0")

    assert [m.label for m in app.metric] == ["Optimal bet"]


def test_wager_uses_filled_percentage(app):
    """The copied percentage is used once the wager is calculated."""
    run_kelly(app, "0.55", "2.0")
    app.text_input(key="bankroll").input("1000")
    app.button(key="calculate_wager").click().run()

    assert not app.exception
    assert [m.value for m in app.metric] == ["$100.00"]


def test_no_edge_fills_zero(app):
    """No edge shows 0% and sets the wager percentage to 0."""
    run_kelly(app, "0.4", "2.0")

    assert [m.value for m in app.metric] == ["0%"]
    assert app.text_input(key="wager_percentage").value == "0"


def test_kelly_validation_error(app):
    """Invalid input is shown as an error and nothing is copied."""
    run_kelly(app, "abc", "2.0")

    assert [e.value for e in app.error] == [
        "Please enter valid numbers for both fields.",
    ]
    assert not app.metric
    assert app.text_input(key="wager_percentage").value == ""


def test_market_size_controls_odds_inputs(app):
    """The market select creates one labelled odds input per outcome."""
    odds_keys = [f"prob_odds_{i}" for i in range(3)]

    labels = [t.label for t in app.text_input if t.key in odds_keys]
    assert labels == ["Outcome 1 Odds", "Outcome 2 Odds"]

    app.selectbox(key="market_type").select_index(1).run()

    assert not app.exception
    labels = [t.label for t in app.text_input if t.key in odds_keys]
    assert labels == ["Home Win Odds", "Draw Odds", "Away Win Odds"]


def test_three_way_probabilities(app):
    """A 3-way market shows labelled probabilities and the overround."""
    app.selectbox(key="market_type").select_index(1).run()
    for key, odds in zip(
        ["prob_odds_0", "prob_odds_1", "prob_odds_2"],
        ["1.5", "2.5", "4.0"],
        strict=True,
    ):
        app.text_input(key=key).input(odds)
    app.button(key="calculate_prob").click().run()

    assert not app.exception
    markdown = [m.value for m in app.markdown]
    assert "- Home Win: 50.63%" in markdown
    assert "- Draw: 30.38%" in markdown
    assert "- Away Win: 18.99%" in markdown
    assert [c.value for c in app.caption] == ["Total (Overround): 131.67%"]
