"""
Filter bag formatting.

Turns stored bag data (a list of records or the JSON text it was saved as)
into a one-line, layer-ordered description in the caller's display system,
e.g. 'L1: 120μ (3.5x7.5"), L2: 90μ (3.5x7.5")'.
"""

import json
import logging
import re
from typing import Any, Sequence

from pydantic import ValidationError as PydanticValidationError

from rosin_units.detection import SizeClassification, classify_size, parse_dimensions
from rosin_units.exceptions import ValidationError
from rosin_units.models import BagParseResult, FilterBag
from rosin_units.units import (
    UnitSystem,
    bag_size_label,
    convert_length,
    to_unit_system,
)


logger = logging.getLogger(__name__)

NO_BAGS = "None"
INVALID_DATA = "Invalid data"
CORRUPTED_SIZE = "size data corrupted"

UNIT_MARKERS = re.compile(r'mm|"|inches|inch', re.IGNORECASE)

# Decimal places for converted dimensions
DISPLAY_DECIMALS: dict[UnitSystem, int] = {
    UnitSystem.METRIC: 0,
    UnitSystem.IMPERIAL: 1,
}


def parse_bags(data: Any) -> BagParseResult:
    """
    Deserialise stored bag data into FilterBag records.

    Accepts a list of dicts/FilterBags or the JSON text of one. Missing data
    and non-list payloads give an empty result; undecodable JSON or records
    that fail validation give a failed result. Never raises.

    Args:
        data: Stored bag data (list, JSON string, or None)

    Returns:
        BagParseResult
    """
    if data is None:
        return BagParseResult.success([])

    if isinstance(data, (str, bytes, bytearray)):
        if not data.strip():
            return BagParseResult.success([])
        try:
            data = json.loads(data)
        except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as e:
            logger.warning("Failed to parse micron bags: %s", e)
            return BagParseResult.failure(f"Invalid JSON: {e}")

    if not isinstance(data, (list, tuple)):
        return BagParseResult.success([])

    try:
        bags = [
            item if isinstance(item, FilterBag) else FilterBag.model_validate(item)
            for item in data
        ]
    except PydanticValidationError as e:
        logger.warning("Invalid micron bag record: %s", e)
        return BagParseResult.failure(f"Invalid bag record: {e.error_count()} error(s)")

    return BagParseResult.success(bags)


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def _format_dimensions(width: float, height: float, system: UnitSystem) -> str:
    decimals = DISPLAY_DECIMALS[system]
    return f"{width:.{decimals}f}x{height:.{decimals}f}"


def display_bag_size(
    classification: SizeClassification,
    raw_size: str | None,
    display_system: UnitSystem | str,
) -> str:
    """
    Render the dimensions part of a bag size (no unit label).

    Sizes already in the display system are shown as written, without any
    unit marker; others are converted. Unparseable sizes come back as the
    raw string.
    """
    system = to_unit_system(display_system)
    source = classification.system
    if not classification.parsed or source is None:
        return raw_size or ""

    if source == system:
        return f"{classification.width_text}x{classification.height_text}"

    width = convert_length(classification.width, source, system)
    height = convert_length(classification.height, source, system)
    return _format_dimensions(width, height, system)


def convert_bag_size(
    size: str | None,
    from_system: UnitSystem | str,
    to_system: UnitSystem | str,
) -> str | None:
    """
    Convert a bag size string between millimetres and inches.

    Returns the size unchanged when no conversion is needed or no
    width x height pair is found.

    Example:
        >>> convert_bag_size("2x4", "imperial", "metric")
        '51x102'
    """
    from_system = to_unit_system(from_system)
    to_system = to_unit_system(to_system)
    if from_system == to_system or not size:
        return size

    dims = parse_dimensions(size)
    if not dims:
        return size

    width = convert_length(dims[0], from_system, to_system)
    height = convert_length(dims[1], from_system, to_system)
    return _format_dimensions(width, height, to_system)


def clean_bag_size(size: str | None) -> str:
    """Strip unit markers (mm, ", inch, inches) to get the stored form."""
    if not size:
        return ""
    return UNIT_MARKERS.sub("", size).strip()


def normalize_bag_size(size: str | None, display_system: UnitSystem | str) -> str:
    """
    Canonical display form of a bag size, used to de-duplicate sizes.

    Imperial sizes become '3.5x7.5"', metric sizes '90x190mm'. Sizes that
    can't be parsed, or are corrupted, are returned trimmed but otherwise
    untouched.
    """
    if not size:
        return ""
    system = to_unit_system(display_system)
    classification = classify_size(size)
    source = classification.system
    if not classification.parsed or source is None:
        return size.strip()

    width = convert_length(classification.width, source, system)
    height = convert_length(classification.height, source, system)
    if system == UnitSystem.IMPERIAL:
        return f"{width:.1f}x{height:.1f}\""
    return f"{width:.0f}x{height:.0f}mm"


def format_bag(bag: FilterBag, layer: int, display_system: UnitSystem | str) -> str:
    """
    Render a single bag entry, e.g. 'L1: 90μ (3.5x7.5")'.

    Corrupted sizes are never converted; they render a marker instead.
    """
    system = to_unit_system(display_system)
    micron = _format_number(bag.micron)
    classification = classify_size(bag.size)
    if classification.corrupted:
        return f"L{layer}: {micron}μ ({CORRUPTED_SIZE})"

    size = display_bag_size(classification, bag.size, system)
    return f"L{layer}: {micron}μ ({size}{bag_size_label(system)})"


def format_micron_bags(
    bags: Any,
    display_system: Any = UnitSystem.IMPERIAL,
) -> str:
    """
    Format stored filter bags as a single display string.

    Args:
        bags: List of bag records, their JSON text, or None
        display_system: UnitSystem, its name, or a UnitPreferences store

    Returns:
        "None" for missing or empty data, "Invalid data" for data that can't
        be deserialised, otherwise the layer-ordered entries joined by ", "

    Raises:
        UnitConversionError: If there are bags to render and display_system
            is not a known unit system

    Example:
        >>> format_micron_bags([{"micron": 90, "size": "90x190mm", "layer": 1}], "imperial")
        'L1: 90μ (3.5x7.5")'
    """
    if bags is None:
        return NO_BAGS

    result = parse_bags(bags)
    if not result.ok:
        return INVALID_DATA
    if not result.bags:
        return NO_BAGS

    system = to_unit_system(getattr(display_system, "system", display_system))

    # Stable sort; bags without a layer keep their input order at the front
    ordered = sorted(enumerate(result.bags), key=lambda item: item[1].layer or 0)

    return ", ".join(
        format_bag(bag, bag.layer or position + 1, system)
        for position, bag in ordered
    )


def add_bag(
    bags: Sequence[FilterBag],
    micron: float,
    size: str,
) -> list[FilterBag]:
    """
    Append a bag as the next layer.

    The size is stored without unit markers.

    Raises:
        ValidationError: If micron is not positive or size is empty
    """
    if micron is None or micron <= 0:
        raise ValidationError(f"Micron rating must be positive, got {micron!r}")
    cleaned = clean_bag_size(size)
    if not cleaned:
        raise ValidationError("Bag size is required")

    return [*bags, FilterBag(micron=micron, size=cleaned, layer=len(bags) + 1)]


def remove_bag(bags: Sequence[FilterBag], index: int) -> list[FilterBag]:
    """
    Remove the bag at index and renumber the remaining layers from 1.

    Raises:
        ValidationError: If index is out of range
    """
    if index < 0 or index >= len(bags):
        raise ValidationError(f"No bag at index {index}")

    remaining = [bag for i, bag in enumerate(bags) if i != index]
    return [
        bag.model_copy(update={"layer": i + 1})
        for i, bag in enumerate(remaining)
    ]
