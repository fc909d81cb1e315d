"""
Unit conversion utilities for rosin press measurements.

Supports temperature, weight, pressure and linear (filter bag) conversions
between the two display systems:
- Metric: Celsius, grams, bar, millimetres
- Imperial: Fahrenheit, ounces, PSI, inches
"""

from enum import Enum
from typing import Callable

from rosin_units.exceptions import UnitConversionError


class UnitSystem(str, Enum):
    """Display unit systems."""

    METRIC = "metric"
    IMPERIAL = "imperial"


class Measurement(str, Enum):
    """Kinds of measurement the engine knows how to convert."""

    TEMPERATURE = "temperature"
    WEIGHT = "weight"
    PRESSURE = "pressure"
    LENGTH = "length"


# Conversion constants
GRAMS_TO_OUNCES = 0.035274
BAR_TO_PSI = 14.5038
PSI_TO_BAR = 1 / BAR_TO_PSI  # 0.0689476
MM_PER_INCH = 25.4


def celsius_to_fahrenheit(celsius: float) -> float:
    """Convert Celsius to Fahrenheit."""
    return celsius * 9 / 5 + 32


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    """Convert Fahrenheit to Celsius."""
    return (fahrenheit - 32) * 5 / 9


def grams_to_ounces(grams: float) -> float:
    """Convert grams to ounces."""
    return grams * GRAMS_TO_OUNCES


def ounces_to_grams(ounces: float) -> float:
    """Convert ounces to grams."""
    return ounces / GRAMS_TO_OUNCES


def bar_to_psi(bar: float) -> float:
    """Convert bar to PSI."""
    return bar * BAR_TO_PSI


def psi_to_bar(psi: float) -> float:
    """Convert PSI to bar."""
    return psi / BAR_TO_PSI


def inches_to_mm(inches: float) -> float:
    """Convert inches to millimetres."""
    return inches * MM_PER_INCH


def mm_to_inches(mm: float) -> float:
    """Convert millimetres to inches."""
    return mm / MM_PER_INCH


TO_IMPERIAL: dict[Measurement, Callable[[float], float]] = {
    Measurement.TEMPERATURE: celsius_to_fahrenheit,
    Measurement.WEIGHT: grams_to_ounces,
    Measurement.PRESSURE: bar_to_psi,
    Measurement.LENGTH: mm_to_inches,
}

TO_METRIC: dict[Measurement, Callable[[float], float]] = {
    Measurement.TEMPERATURE: fahrenheit_to_celsius,
    Measurement.WEIGHT: ounces_to_grams,
    Measurement.PRESSURE: psi_to_bar,
    Measurement.LENGTH: inches_to_mm,
}

UNIT_LABELS: dict[Measurement, dict[UnitSystem, str]] = {
    Measurement.TEMPERATURE: {UnitSystem.METRIC: "°C", UnitSystem.IMPERIAL: "°F"},
    Measurement.WEIGHT: {UnitSystem.METRIC: "g", UnitSystem.IMPERIAL: "oz"},
    Measurement.PRESSURE: {UnitSystem.METRIC: "bar", UnitSystem.IMPERIAL: "PSI"},
    Measurement.LENGTH: {UnitSystem.METRIC: "mm", UnitSystem.IMPERIAL: '"'},
}


def to_unit_system(system: UnitSystem | str) -> UnitSystem:
    """
    Coerce a unit system name to a UnitSystem.

    Args:
        system: UnitSystem or its name ("metric"/"imperial", any case)

    Returns:
        The matching UnitSystem

    Raises:
        UnitConversionError: If the name is not a known unit system
    """
    if isinstance(system, UnitSystem):
        return system
    if isinstance(system, str):
        try:
            return UnitSystem(system.strip().lower())
        except ValueError as e:
            raise UnitConversionError(f"Unknown unit system: {system}") from e
    raise UnitConversionError(f"Unknown unit system: {system!r}")


def to_measurement(kind: Measurement | str) -> Measurement:
    """Coerce a measurement kind name to a Measurement."""
    if isinstance(kind, Measurement):
        return kind
    try:
        return Measurement(str(kind).strip().lower())
    except ValueError as e:
        raise UnitConversionError(f"Unknown measurement kind: {kind}") from e


def convert(
    value: float,
    kind: Measurement | str,
    from_system: UnitSystem | str,
    to_system: UnitSystem | str,
) -> float:
    """
    Convert a measurement between unit systems.

    When the source and target systems are the same the value is returned
    untouched, so no-op conversions never drift.

    Args:
        value: The value to convert
        kind: Measurement kind (temperature, weight, pressure, length)
        from_system: System the value is expressed in
        to_system: System to convert to

    Returns:
        Converted value

    Raises:
        UnitConversionError: If the kind or a system is invalid
    """
    kind = to_measurement(kind)
    from_system = to_unit_system(from_system)
    to_system = to_unit_system(to_system)

    if from_system == to_system:
        return value

    if to_system == UnitSystem.IMPERIAL:
        return TO_IMPERIAL[kind](value)
    return TO_METRIC[kind](value)


def convert_temperature(
    value: float,
    from_system: UnitSystem | str,
    to_system: UnitSystem | str,
) -> float:
    """Convert a temperature (Celsius/Fahrenheit) between systems."""
    return convert(value, Measurement.TEMPERATURE, from_system, to_system)


def convert_weight(
    value: float,
    from_system: UnitSystem | str,
    to_system: UnitSystem | str,
) -> float:
    """Convert a weight (grams/ounces) between systems."""
    return convert(value, Measurement.WEIGHT, from_system, to_system)


def convert_pressure(
    value: float,
    from_system: UnitSystem | str,
    to_system: UnitSystem | str,
) -> float:
    """Convert a pressure (bar/PSI) between systems."""
    return convert(value, Measurement.PRESSURE, from_system, to_system)


def convert_length(
    value: float,
    from_system: UnitSystem | str,
    to_system: UnitSystem | str,
) -> float:
    """Convert a bag dimension (millimetres/inches) between systems."""
    return convert(value, Measurement.LENGTH, from_system, to_system)


def unit_label(kind: Measurement | str, system: UnitSystem | str) -> str:
    """
    Get the display label for a measurement in a unit system.

    Example:
        >>> unit_label("pressure", "imperial")
        'PSI'
    """
    return UNIT_LABELS[to_measurement(kind)][to_unit_system(system)]


def bag_size_label(system: UnitSystem | str) -> str:
    """Suffix appended to rendered bag sizes: 'mm' or '"'."""
    return unit_label(Measurement.LENGTH, system)


def bag_size_unit_name(system: UnitSystem | str) -> str:
    """Long unit name for bag size prompts: 'mm' or 'inches'."""
    return "mm" if to_unit_system(system) == UnitSystem.METRIC else "inches"
