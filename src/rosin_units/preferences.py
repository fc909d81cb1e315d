"""
Session-scoped unit system preference.

One UnitPreferences instance is created per user session and passed to
everything that renders measurements, so all views share a single display
system. The preference is read from storage once, on creation, and only
changes through toggle().
"""

import logging
from typing import Any

from rosin_units import units
from rosin_units.bags import format_micron_bags
from rosin_units.exceptions import StorageError
from rosin_units.formatting import format_pressure, format_temperature, format_weight
from rosin_units.protocols import PreferenceStorage
from rosin_units.storage import MemoryStorage
from rosin_units.units import Measurement, UnitSystem


logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "unitSystem"


class UnitPreferences:
    """
    The user's chosen display system, plus converters bound to it.

    Args:
        storage: Durable storage backend (in-memory when omitted)
        key: Storage key the preference is kept under
        default: System used when nothing valid is stored
    """

    def __init__(
        self,
        storage: PreferenceStorage | None = None,
        key: str = DEFAULT_STORAGE_KEY,
        default: UnitSystem | str = UnitSystem.METRIC,
    ):
        self.storage = storage if storage is not None else MemoryStorage()
        self.key = key
        self.default = units.to_unit_system(default)
        self._system = self._load()

    def _load(self) -> UnitSystem:
        try:
            saved = self.storage.get(self.key)
        except StorageError as e:
            logger.warning("Could not read unit preference, using %s: %s", self.default.value, e)
            return self.default

        if saved in (UnitSystem.METRIC.value, UnitSystem.IMPERIAL.value):
            return UnitSystem(saved)
        if saved is not None:
            logger.info("Ignoring invalid stored unit system %r", saved)
        return self.default

    def __repr__(self) -> str:
        return f"UnitPreferences(system={self._system.value!r}, key={self.key!r})"

    @property
    def system(self) -> UnitSystem:
        """Current display system."""
        return self._system

    @property
    def is_metric(self) -> bool:
        return self._system == UnitSystem.METRIC

    @property
    def is_imperial(self) -> bool:
        return self._system == UnitSystem.IMPERIAL

    def toggle(self) -> UnitSystem:
        """
        Switch between metric and imperial and persist the choice.

        A storage failure is logged; the new system still applies for the
        rest of the session.

        Returns:
            The new display system
        """
        new_system = UnitSystem.IMPERIAL if self.is_metric else UnitSystem.METRIC
        self._system = new_system
        try:
            self.storage.set(self.key, new_system.value)
        except StorageError as e:
            logger.warning("Could not persist unit preference: %s", e)
        return new_system

    # Converters bound to the current preference

    def convert(
        self,
        value: float,
        kind: Measurement | str,
        from_system: UnitSystem | str = UnitSystem.METRIC,
    ) -> float:
        """Convert a value from from_system into the current display system."""
        return units.convert(value, kind, from_system, self._system)

    def convert_temperature(
        self, value: float, from_system: UnitSystem | str = UnitSystem.METRIC
    ) -> float:
        return self.convert(value, Measurement.TEMPERATURE, from_system)

    def convert_weight(
        self, value: float, from_system: UnitSystem | str = UnitSystem.METRIC
    ) -> float:
        return self.convert(value, Measurement.WEIGHT, from_system)

    def convert_pressure(
        self, value: float, from_system: UnitSystem | str = UnitSystem.METRIC
    ) -> float:
        return self.convert(value, Measurement.PRESSURE, from_system)

    def convert_length(
        self, value: float, from_system: UnitSystem | str = UnitSystem.METRIC
    ) -> float:
        return self.convert(value, Measurement.LENGTH, from_system)

    # Labels

    @property
    def temperature_unit(self) -> str:
        return units.unit_label(Measurement.TEMPERATURE, self._system)

    @property
    def weight_unit(self) -> str:
        return units.unit_label(Measurement.WEIGHT, self._system)

    @property
    def pressure_unit(self) -> str:
        return units.unit_label(Measurement.PRESSURE, self._system)

    @property
    def bag_size_label(self) -> str:
        return units.bag_size_label(self._system)

    # Display helpers

    def display_temperature(
        self,
        value: float,
        from_system: UnitSystem | str = UnitSystem.METRIC,
        decimals: int = 0,
    ) -> str:
        """Convert and format a temperature, e.g. '194°F'."""
        return format_temperature(
            self.convert_temperature(value, from_system), self.temperature_unit, decimals
        )

    def display_weight(
        self,
        value: float,
        from_system: UnitSystem | str = UnitSystem.METRIC,
        decimals: int = 2,
    ) -> str:
        """Convert and format a weight, e.g. '0.35oz'."""
        return format_weight(
            self.convert_weight(value, from_system), self.weight_unit, decimals
        )

    def display_pressure(
        self,
        value: float,
        from_system: UnitSystem | str = UnitSystem.METRIC,
        decimals: int = 0,
    ) -> str:
        """Convert and format a pressure, e.g. '1450 PSI'."""
        return format_pressure(
            self.convert_pressure(value, from_system), self.pressure_unit, decimals
        )

    def format_bags(self, bags: Any) -> str:
        """Render stored filter bags in the current display system."""
        return format_micron_bags(bags, self._system)
