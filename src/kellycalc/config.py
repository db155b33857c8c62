"""Calculator settings loaded from settings.yaml.

The bundled file sits next to this module. Set ``KELLYCALC_SETTINGS_PATH`` to
load a different file.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

SETTINGS_PATH = Path(__file__).parent / "settings.yaml"

DEFAULT_STRATEGIES: Mapping[str, Decimal] = MappingProxyType(
    {
        "Full Kelly": Decimal("1"),
        "Half Kelly": Decimal("0.5"),
        "Quarter Kelly": Decimal("0.25"),
    },
)


@dataclass(frozen=True)
class Settings:
    """Read-only constants shared by the calculators."""

    decimal_places: int = 2
    min_probability: Decimal = Decimal("0")
    max_probability: Decimal = Decimal("1")
    min_odds: Decimal = Decimal("1")  # exclusive lower bound
    kelly_strategies: Mapping[str, Decimal] = field(
        default_factory=lambda: MappingProxyType(dict(DEFAULT_STRATEGIES)),
    )

    def strategy_name(self, multiplier: Decimal) -> str | None:
        """Return the configured strategy name for a multiplier, if any."""
        for name, value in self.kelly_strategies.items():
            if value == multiplier:
                return name
        return None


def _read_yaml(path: Path) -> dict[str, Any]:
    with path.open() as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        error_msg = f"Settings file {path} must contain a mapping"
        raise TypeError(error_msg)
    return data


def _from_mapping(data: dict[str, Any]) -> Settings:
    defaults = Settings()
    strategies = data.get("kelly_strategies")
    return Settings(
        decimal_places=int(data.get("decimal_places", defaults.decimal_places)),
        min_probability=Decimal(
            str(data.get("min_probability", defaults.min_probability)),
        ),
        max_probability=Decimal(
            str(data.get("max_probability", defaults.max_probability)),
        ),
        min_odds=Decimal(str(data.get("min_odds", defaults.min_odds))),
        kelly_strategies=(
            MappingProxyType(
                {str(k): Decimal(str(v)) for k, v in strategies.items()},
            )
            if strategies
            else MappingProxyType(dict(DEFAULT_STRATEGIES))
        ),
    )


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from YAML.

    Args:
        path: Explicit settings file. Defaults to ``KELLYCALC_SETTINGS_PATH``
            when set, otherwise the bundled settings.yaml.

    Returns:
        Parsed settings, or the built-in defaults if the file is missing or
        invalid.

    """
    if path is None:
        path_env = os.environ.get("KELLYCALC_SETTINGS_PATH")
        path = Path(path_env) if path_env else SETTINGS_PATH

    try:
        return _from_mapping(_read_yaml(path))
    except (
        FileNotFoundError,
        yaml.YAMLError,
        AttributeError,
        TypeError,
        ValueError,
        ArithmeticError,
    ):
        # Fallback to built-in defaults
        return Settings()


SETTINGS = load_settings()
