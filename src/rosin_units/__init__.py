"""
rosin-units: Measurement normalisation and conversion for rosin press data.

Provides metric/imperial conversion, unit system detection for stored
filter bag sizes, layer-ordered bag formatting, and a session-scoped
unit preference store.
"""

from rosin_units.units import (
    UnitSystem,
    Measurement,
    convert,
    convert_temperature,
    convert_weight,
    convert_pressure,
    convert_length,
    unit_label,
    bag_size_label,
)
from rosin_units.detection import (
    SizeFormat,
    SizeClassification,
    classify_size,
    detect_size_format,
    parse_dimensions,
)
from rosin_units.models import (
    FilterBag,
    BagParseResult,
)
from rosin_units.bags import (
    parse_bags,
    format_micron_bags,
    convert_bag_size,
    clean_bag_size,
    normalize_bag_size,
    add_bag,
    remove_bag,
)
from rosin_units.preferences import UnitPreferences
from rosin_units.storage import MemoryStorage, JsonFileStorage
from rosin_units.config import RosinUnitsConfig, get_config, load_preferences
from rosin_units.usage import FrequentlyUsed
from rosin_units.exceptions import (
    RosinUnitsError,
    UnitConversionError,
    ValidationError,
    ConfigurationError,
    StorageError,
)

__version__ = "0.1.0"

__all__ = [
    # Units
    "UnitSystem",
    "Measurement",
    "convert",
    "convert_temperature",
    "convert_weight",
    "convert_pressure",
    "convert_length",
    "unit_label",
    "bag_size_label",
    # Detection
    "SizeFormat",
    "SizeClassification",
    "classify_size",
    "detect_size_format",
    "parse_dimensions",
    # Models
    "FilterBag",
    "BagParseResult",
    # Bags
    "parse_bags",
    "format_micron_bags",
    "convert_bag_size",
    "clean_bag_size",
    "normalize_bag_size",
    "add_bag",
    "remove_bag",
    # Preferences
    "UnitPreferences",
    "MemoryStorage",
    "JsonFileStorage",
    "RosinUnitsConfig",
    "get_config",
    "load_preferences",
    # Usage
    "FrequentlyUsed",
    # Exceptions
    "RosinUnitsError",
    "UnitConversionError",
    "ValidationError",
    "ConfigurationError",
    "StorageError",
]
