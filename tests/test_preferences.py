"""
Tests for the session unit preference store.
"""

import json
import logging

from rosin_units.exceptions import StorageError
from rosin_units.preferences import UnitPreferences
from rosin_units.protocols import PreferenceStorage
from rosin_units.storage import JsonFileStorage, MemoryStorage
from rosin_units.units import UnitSystem


class FailingStorage:
    """Storage whose reads and writes always fail."""

    def get(self, key):
        raise StorageError("read failed")

    def set(self, key, value):
        raise StorageError("write failed")


class TestInitialisation:
    """Tests for loading the stored preference."""

    def test_defaults_to_metric(self):
        prefs = UnitPreferences()
        assert prefs.system == UnitSystem.METRIC
        assert prefs.is_metric

    def test_loads_stored_value(self):
        prefs = UnitPreferences(storage=MemoryStorage({"unitSystem": "imperial"}))
        assert prefs.system == UnitSystem.IMPERIAL

    def test_invalid_stored_value(self):
        prefs = UnitPreferences(storage=MemoryStorage({"unitSystem": "furlongs"}))
        assert prefs.system == UnitSystem.METRIC

    def test_custom_key(self):
        storage = MemoryStorage({"units": "imperial"})
        assert UnitPreferences(storage=storage, key="units").is_imperial

    def test_custom_default(self):
        assert UnitPreferences(default="imperial").is_imperial

    def test_storage_read_failure(self, caplog):
        with caplog.at_level(logging.WARNING, logger="rosin_units.preferences"):
            prefs = UnitPreferences(storage=FailingStorage())
        assert prefs.system == UnitSystem.METRIC
        assert "Could not read unit preference" in caplog.text


class TestToggle:
    """Tests for toggling the display system."""

    def test_toggle(self):
        prefs = UnitPreferences()
        assert prefs.toggle() == UnitSystem.IMPERIAL
        assert prefs.is_imperial
        assert prefs.toggle() == UnitSystem.METRIC

    def test_toggle_persists(self):
        storage = MemoryStorage()
        UnitPreferences(storage=storage).toggle()
        assert storage.get("unitSystem") == "imperial"
        assert UnitPreferences(storage=storage).is_imperial

    def test_toggle_survives_storage_failure(self):
        prefs = UnitPreferences(storage=FailingStorage())
        assert prefs.toggle() == UnitSystem.IMPERIAL
        assert prefs.is_imperial

    def test_sessions_are_independent(self):
        first = UnitPreferences()
        second = UnitPreferences()
        first.toggle()
        assert first.is_imperial
        assert second.is_metric

    def test_toggle_changes_formatted_bags(self):
        bags = json.dumps([{"micron": 90, "size": "2x4", "layer": 1}])
        prefs = UnitPreferences()
        assert prefs.format_bags(bags) == "L1: 90μ (51x102mm)"
        prefs.toggle()
        assert prefs.format_bags(bags) == 'L1: 90μ (2x4")'


class TestBoundConverters:
    """Tests for converters bound to the preference."""

    def test_metric_is_identity(self):
        prefs = UnitPreferences()
        assert prefs.convert_temperature(90.0) == 90.0
        assert prefs.convert_weight(12.5) == 12.5
        assert prefs.convert_pressure(68.9) == 68.9
        assert prefs.convert_length(90.0) == 90.0

    def test_imperial(self):
        prefs = UnitPreferences(default=UnitSystem.IMPERIAL)
        assert abs(prefs.convert_temperature(100.0) - 212.0) < 0.01
        assert abs(prefs.convert_weight(100.0) - 3.5274) < 0.0001
        assert abs(prefs.convert_pressure(1.0) - 14.5038) < 0.0001
        assert abs(prefs.convert_length(50.8) - 2.0) < 0.0001

    def test_from_imperial_source(self):
        prefs = UnitPreferences()
        assert abs(prefs.convert_temperature(212.0, "imperial") - 100.0) < 0.01
        prefs.toggle()
        assert prefs.convert_temperature(212.0, "imperial") == 212.0

    def test_labels(self):
        prefs = UnitPreferences()
        assert (prefs.temperature_unit, prefs.weight_unit, prefs.pressure_unit) == ("°C", "g", "bar")
        assert prefs.bag_size_label == "mm"
        prefs.toggle()
        assert (prefs.temperature_unit, prefs.weight_unit, prefs.pressure_unit) == ("°F", "oz", "PSI")
        assert prefs.bag_size_label == '"'

    def test_display_helpers(self):
        prefs = UnitPreferences(default="imperial")
        assert prefs.display_temperature(90) == "194°F"
        assert prefs.display_weight(10) == "0.35oz"
        assert prefs.display_pressure(100) == "1450 PSI"


class TestStorage:
    """Tests for storage backends."""

    def test_backends_satisfy_protocol(self, tmp_path):
        assert isinstance(MemoryStorage(), PreferenceStorage)
        assert isinstance(JsonFileStorage(tmp_path / "prefs.json"), PreferenceStorage)

    def test_json_missing_file(self, tmp_path):
        assert JsonFileStorage(tmp_path / "prefs.json").get("unitSystem") is None

    def test_json_roundtrip(self, tmp_path):
        path = tmp_path / "nested" / "prefs.json"
        storage = JsonFileStorage(path)
        storage.set("unitSystem", "imperial")
        storage.set("other", "value")
        assert JsonFileStorage(path).get("unitSystem") == "imperial"
        assert json.loads(path.read_text()) == {"unitSystem": "imperial", "other": "value"}

    def test_json_corrupt_file(self, tmp_path):
        path = tmp_path / "prefs.json"
        path.write_text("{broken")
        storage = JsonFileStorage(path)
        assert storage.get("unitSystem") is None
        storage.set("unitSystem", "metric")
        assert storage.get("unitSystem") == "metric"

    def test_json_not_utf8(self, tmp_path):
        path = tmp_path / "prefs.json"
        path.write_bytes(b'{"unitSystem": "\xff\xfe"}')
        assert JsonFileStorage(path).get("unitSystem") is None
        prefs = UnitPreferences(storage=JsonFileStorage(path))
        assert prefs.system == UnitSystem.METRIC
        assert prefs.toggle() == UnitSystem.IMPERIAL
        assert UnitPreferences(storage=JsonFileStorage(path)).is_imperial

    def test_json_not_an_object(self, tmp_path):
        path = tmp_path / "prefs.json"
        path.write_text('["imperial"]')
        assert JsonFileStorage(path).get("unitSystem") is None

    def test_preferences_with_file(self, tmp_path):
        path = tmp_path / "prefs.json"
        UnitPreferences(storage=JsonFileStorage(path)).toggle()
        assert UnitPreferences(storage=JsonFileStorage(path)).is_imperial
