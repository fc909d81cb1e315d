"""
Configuration management for rosin-units.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from rosin_units.exceptions import ConfigurationError, UnitConversionError
from rosin_units.preferences import DEFAULT_STORAGE_KEY, UnitPreferences
from rosin_units.storage import JsonFileStorage
from rosin_units.units import UnitSystem, to_unit_system


# Expanded when a config is built, not at import time
DEFAULT_PREFS_PATH = Path("~") / ".rosin-units" / "preferences.json"


@dataclass
class RosinUnitsConfig:
    """Configuration for the unit preference store."""

    prefs_path: Path = DEFAULT_PREFS_PATH
    default_system: UnitSystem = UnitSystem.METRIC
    storage_key: str = DEFAULT_STORAGE_KEY

    def __post_init__(self):
        # Expand user paths
        self.prefs_path = Path(self.prefs_path).expanduser()


def get_config() -> RosinUnitsConfig:
    """
    Get configuration from environment.

    Environment variables:
        ROSIN_UNITS_PREFS_PATH: JSON file the unit preference is saved in
        ROSIN_UNITS_DEFAULT_SYSTEM: "metric" or "imperial" (default metric)
        ROSIN_UNITS_PREFS_KEY: Key the preference is stored under

    Returns:
        RosinUnitsConfig instance

    Raises:
        ConfigurationError: If ROSIN_UNITS_DEFAULT_SYSTEM is not a unit system
    """
    prefs_path = os.environ.get("ROSIN_UNITS_PREFS_PATH")
    default_system = os.environ.get("ROSIN_UNITS_DEFAULT_SYSTEM")
    storage_key = os.environ.get("ROSIN_UNITS_PREFS_KEY")

    system = UnitSystem.METRIC
    if default_system:
        try:
            system = to_unit_system(default_system)
        except UnitConversionError as e:
            raise ConfigurationError(
                f"ROSIN_UNITS_DEFAULT_SYSTEM must be 'metric' or 'imperial', "
                f"got {default_system!r}"
            ) from e

    return RosinUnitsConfig(
        prefs_path=Path(prefs_path) if prefs_path else DEFAULT_PREFS_PATH,
        default_system=system,
        storage_key=storage_key or DEFAULT_STORAGE_KEY,
    )


def load_preferences(config: RosinUnitsConfig | None = None) -> UnitPreferences:
    """
    Create a UnitPreferences store backed by the configured JSON file.

    Args:
        config: Configuration to use (read from the environment when omitted)
    """
    config = config or get_config()
    return UnitPreferences(
        storage=JsonFileStorage(config.prefs_path),
        key=config.storage_key,
        default=config.default_system,
    )
