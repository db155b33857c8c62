"""Basic import test for the dashboard module."""

from kellycalc.run_dashboard import DASHBOARD_PATH, streamlit_argv


def test_dashboard_module_imports():
    """Test that the dashboard module can be imported."""
    # This will fail if there are any import errors at module level
    import kellycalc.dashboard

    # Verify main entry point function exists
    assert callable(kellycalc.dashboard.main)
    assert callable(kellycalc.dashboard.kelly_section)
    assert callable(kellycalc.dashboard.wager_section)
    assert callable(kellycalc.dashboard.implied_section)


def test_strategy_options_round_trip():
    """Each strategy label maps back to its multiplier."""
    from kellycalc.dashboard import multiplier_for, strategy_options

    options = strategy_options()
    assert options == [
        "Full Kelly (1)",
        "Half Kelly (0.5)",
        "Quarter Kelly (0.25)",
    ]
    assert [multiplier_for(o) for o in options] == ["1", "0.5", "0.25"]


def test_streamlit_argv_default_port(monkeypatch):
    """The launcher runs the dashboard script headless."""
    monkeypatch.delenv("KELLYCALC_DASHBOARD_PORT", raising=False)

    argv = streamlit_argv()

    assert argv[:3] == ["streamlit", "run", str(DASHBOARD_PATH)]
    assert DASHBOARD_PATH.name == "dashboard.py"
    assert argv[argv.index("--server.port") + 1] == "8501"
    assert argv[argv.index("--server.headless") + 1] == "true"


def test_streamlit_argv_port_override(monkeypatch):
    """The port can come from the environment or an argument."""
    monkeypatch.setenv("KELLYCALC_DASHBOARD_PORT", "9000")
    assert streamlit_argv()[-1] == "9000"
    assert streamlit_argv("8600")[-1] == "8600"
