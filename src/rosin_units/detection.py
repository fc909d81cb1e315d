"""
Unit system detection for stored filter bag sizes.

Bag sizes were historically saved as bare "WIDTHxHEIGHT" strings with no
unit, so the system they were entered in has to be inferred from the
numbers themselves. Detection is an ordered list of rules; the first rule
whose predicate matches decides the outcome.
"""

import logging
import re
from enum import Enum
from typing import Callable, NamedTuple

from pydantic import BaseModel, ConfigDict, Field

from rosin_units.units import UnitSystem


logger = logging.getLogger(__name__)

DIMENSION_PATTERN = re.compile(r"(\d+(?:\.\d+)?)\s*[xX×]\s*(\d+(?:\.\d+)?)")

# No real bag dimension, in mm or inches, gets anywhere near this.
CORRUPTION_THRESHOLD = 500.0


class SizeFormat(str, Enum):
    """Outcome of classifying a stored bag size."""

    METRIC = "metric"
    IMPERIAL = "imperial"
    CORRUPTED = "corrupted"
    UNPARSEABLE = "unparseable"


class SizeClassification(BaseModel):
    """
    Result of classifying a bag size string.

    width/height hold the parsed numbers (None when the string could not be
    parsed); width_text/height_text keep them exactly as written.
    """

    model_config = ConfigDict(frozen=True)

    format: SizeFormat = Field(..., description="Detected size format")
    width: float | None = Field(default=None, description="Parsed width")
    height: float | None = Field(default=None, description="Parsed height")
    width_text: str | None = Field(default=None, description="Width as written")
    height_text: str | None = Field(default=None, description="Height as written")

    @property
    def corrupted(self) -> bool:
        """True when the dimensions are implausibly large."""
        return self.format == SizeFormat.CORRUPTED

    @property
    def parsed(self) -> bool:
        """True when a width x height pair was found."""
        return self.width is not None and self.height is not None

    @property
    def system(self) -> UnitSystem | None:
        """
        Unit system the size should be treated as.

        Unparseable sizes are treated as imperial; corrupted sizes have no
        system and must not be converted.
        """
        if self.format == SizeFormat.METRIC:
            return UnitSystem.METRIC
        if self.format == SizeFormat.CORRUPTED:
            return None
        return UnitSystem.IMPERIAL


Dimensions = tuple[float, float]


class DetectionRule(NamedTuple):
    """A (predicate, outcome) pair in the detection ladder."""

    name: str
    predicate: Callable[[str, Dimensions | None], bool]
    outcome: SizeFormat


def _is_half_multiple(value: float) -> bool:
    return value % 0.5 == 0


def _is_whole(value: float) -> bool:
    return float(value).is_integer()


def _both(dims: Dimensions | None, check: Callable[[float], bool]) -> bool:
    return dims is not None and check(dims[0]) and check(dims[1])


# Order matters: boundary values such as "20x20" classify differently if
# these are rearranged.
DETECTION_RULES: list[DetectionRule] = [
    DetectionRule(
        "corrupted",
        lambda text, dims: dims is not None and max(dims) > CORRUPTION_THRESHOLD,
        SizeFormat.CORRUPTED,
    ),
    DetectionRule(
        "mm marker",
        lambda text, dims: "mm" in text.lower(),
        SizeFormat.METRIC,
    ),
    DetectionRule(
        "quote marker",
        lambda text, dims: '"' in text or "'" in text,
        SizeFormat.IMPERIAL,
    ),
    DetectionRule(
        "unparseable",
        lambda text, dims: dims is None,
        SizeFormat.UNPARSEABLE,
    ),
    DetectionRule(
        "fractional inches",
        lambda text, dims: _both(dims, lambda v: v <= 10)
        and (_is_half_multiple(dims[0]) or _is_half_multiple(dims[1])),
        SizeFormat.IMPERIAL,
    ),
    DetectionRule(
        "whole millimetres",
        lambda text, dims: _both(dims, lambda v: v >= 20) and _both(dims, _is_whole),
        SizeFormat.METRIC,
    ),
    DetectionRule(
        "small range",
        lambda text, dims: _both(dims, lambda v: v <= 15),
        SizeFormat.IMPERIAL,
    ),
    DetectionRule(
        "large range",
        lambda text, dims: _both(dims, lambda v: v >= 20),
        SizeFormat.METRIC,
    ),
]

# Ambiguous band (one side between 15 and 20)
FALLBACK_FORMAT = SizeFormat.IMPERIAL


def match_dimensions(size: str | None) -> re.Match | None:
    """Find the first width x height pair in a size string."""
    if not size:
        return None
    return DIMENSION_PATTERN.search(size)


def parse_dimensions(size: str | None) -> Dimensions | None:
    """
    Parse the width and height out of a bag size string.

    Args:
        size: Size string such as "90x190", '3.5x7.5"' or "90 x 190mm"

    Returns:
        (width, height) tuple, or None if no pair was found

    Example:
        >>> parse_dimensions("3.5x7.5\\"")
        (3.5, 7.5)
    """
    match = match_dimensions(size)
    if not match:
        return None
    return float(match.group(1)), float(match.group(2))


def classify_size(size: str | None) -> SizeClassification:
    """
    Classify a stored bag size as metric, imperial, corrupted or unparseable.

    Never raises; anything that cannot be read is reported as unparseable.

    Args:
        size: Raw stored size string (may be None or empty)

    Returns:
        SizeClassification with the detected format and parsed dimensions
    """
    if not size or not isinstance(size, str):
        return SizeClassification(format=SizeFormat.UNPARSEABLE)

    match = match_dimensions(size)
    dims: Dimensions | None = None
    extra: dict[str, object] = {}
    if match:
        dims = (float(match.group(1)), float(match.group(2)))
        extra = {
            "width": dims[0],
            "height": dims[1],
            "width_text": match.group(1),
            "height_text": match.group(2),
        }

    outcome = FALLBACK_FORMAT
    for rule in DETECTION_RULES:
        if rule.predicate(size, dims):
            outcome = rule.outcome
            break

    if outcome == SizeFormat.CORRUPTED:
        logger.warning(
            "Unusually large filter bag dimensions %r, treating as corrupted data",
            size,
        )

    return SizeClassification(format=outcome, **extra)


def detect_size_format(size: str | None) -> SizeFormat:
    """Return just the detected SizeFormat for a size string."""
    return classify_size(size).format
