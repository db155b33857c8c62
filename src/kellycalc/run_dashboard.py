"""Launch the calculators dashboard with Streamlit."""

import os
import sys
from pathlib import Path

import streamlit.web.cli as stcli

DASHBOARD_PATH = Path(__file__).parent / "dashboard.py"
DEFAULT_PORT = "8501"


def streamlit_argv(port: str | None = None) -> list[str]:
    """Build the ``streamlit run`` argument list for the dashboard.

    Args:
        port: Server port. Defaults to ``KELLYCALC_DASHBOARD_PORT`` or 8501.

    """
    if port is None:
        port = os.environ.get("KELLYCALC_DASHBOARD_PORT", DEFAULT_PORT)
    return [
        "streamlit",
        "run",
        str(DASHBOARD_PATH),
        "--browser.gatherUsageStats",
        "false",
        "--server.headless",
        "true",
        "--server.port",
        port,
    ]


def main() -> None:
    """Run the dashboard script with Streamlit."""
    sys.argv = streamlit_argv()
    sys.exit(stcli.main())


if __name__ == "__main__":
    main()
