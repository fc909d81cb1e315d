"""
Tests for rosin-units unit conversion.
"""

import pytest
from rosin_units.units import (
    convert,
    convert_temperature,
    convert_weight,
    convert_pressure,
    convert_length,
    celsius_to_fahrenheit,
    fahrenheit_to_celsius,
    grams_to_ounces,
    ounces_to_grams,
    bar_to_psi,
    psi_to_bar,
    inches_to_mm,
    mm_to_inches,
    unit_label,
    bag_size_label,
    bag_size_unit_name,
    to_unit_system,
    Measurement,
    UnitSystem,
)
from rosin_units.exceptions import UnitConversionError


class TestTemperatureConversion:
    """Tests for temperature conversion."""

    def test_c_to_f(self):
        assert abs(celsius_to_fahrenheit(100.0) - 212.0) < 0.01

    def test_f_to_c(self):
        assert abs(fahrenheit_to_celsius(32.0) - 0.0) < 0.01

    def test_convert_to_imperial(self):
        result = convert_temperature(90.0, UnitSystem.METRIC, UnitSystem.IMPERIAL)
        assert abs(result - 194.0) < 0.01

    def test_convert_to_metric(self):
        result = convert_temperature(212.0, "imperial", "metric")
        assert abs(result - 100.0) < 0.01


class TestWeightConversion:
    """Tests for weight conversion."""

    def test_g_to_oz(self):
        assert abs(grams_to_ounces(100.0) - 3.5274) < 0.0001

    def test_oz_to_g(self):
        assert abs(ounces_to_grams(1.0) - 28.3495) < 0.001

    def test_convert(self):
        result = convert_weight(10.0, "metric", "imperial")
        assert abs(result - 0.35274) < 0.00001


class TestPressureConversion:
    """Tests for pressure conversion."""

    def test_bar_to_psi(self):
        assert abs(bar_to_psi(1.0) - 14.5038) < 0.0001

    def test_psi_to_bar(self):
        assert abs(psi_to_bar(1000.0) - 68.9476) < 0.001
        assert psi_to_bar(1000.0) == 1000.0 / 14.5038

    def test_convert(self):
        result = convert_pressure(100.0, UnitSystem.METRIC, UnitSystem.IMPERIAL)
        assert abs(result - 1450.38) < 0.01


class TestLengthConversion:
    """Tests for bag dimension conversion."""

    def test_inches_to_mm(self):
        assert abs(inches_to_mm(2.0) - 50.8) < 0.0001

    def test_mm_to_inches(self):
        assert abs(mm_to_inches(254.0) - 10.0) < 0.0001

    def test_convert(self):
        result = convert_length(3.5, "imperial", "metric")
        assert abs(result - 88.9) < 0.0001


class TestConvert:
    """Tests for the generic converter."""

    @pytest.mark.parametrize("kind", list(Measurement))
    @pytest.mark.parametrize("system", list(UnitSystem))
    def test_same_system_is_identity(self, kind, system):
        for value in (0.0, 1.1, 37.77, -40.0, 1e-9, 123456.789):
            assert convert(value, kind, system, system) == value

    @pytest.mark.parametrize("kind", list(Measurement))
    def test_roundtrip(self, kind):
        for value in (1.0, 37.5, 180.0, 1000.0):
            imperial = convert(value, kind, UnitSystem.METRIC, UnitSystem.IMPERIAL)
            back = convert(imperial, kind, UnitSystem.IMPERIAL, UnitSystem.METRIC)
            assert abs(back - value) <= 1e-6 * abs(value)

    def test_string_arguments(self):
        result = convert(0.0, "Temperature", "METRIC", "imperial")
        assert abs(result - 32.0) < 0.01

    def test_invalid_system(self):
        with pytest.raises(UnitConversionError):
            convert(1.0, Measurement.WEIGHT, "kelvin", UnitSystem.METRIC)

    def test_invalid_kind(self):
        with pytest.raises(UnitConversionError):
            convert(1.0, "volume", UnitSystem.METRIC, UnitSystem.IMPERIAL)

    def test_non_string_system(self):
        with pytest.raises(UnitConversionError):
            to_unit_system(1)


class TestLabels:
    """Tests for unit labels."""

    def test_metric_labels(self):
        assert unit_label("temperature", "metric") == "°C"
        assert unit_label("weight", "metric") == "g"
        assert unit_label("pressure", "metric") == "bar"

    def test_imperial_labels(self):
        assert unit_label(Measurement.TEMPERATURE, UnitSystem.IMPERIAL) == "°F"
        assert unit_label(Measurement.WEIGHT, UnitSystem.IMPERIAL) == "oz"
        assert unit_label(Measurement.PRESSURE, UnitSystem.IMPERIAL) == "PSI"

    def test_bag_size_labels(self):
        assert bag_size_label("metric") == "mm"
        assert bag_size_label("imperial") == '"'
        assert bag_size_unit_name("imperial") == "inches"
