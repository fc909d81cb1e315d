"""
Exception types for rosin-units.

All exceptions inherit from RosinUnitsError for easy catching
of any library-related errors.
"""


class RosinUnitsError(Exception):
    """Base exception for all rosin-units errors."""

    pass


class UnitConversionError(RosinUnitsError):
    """Raised when a unit system or measurement kind is not recognised."""

    pass


class ValidationError(RosinUnitsError):
    """Raised when filter bag data fails validation."""

    pass


class ConfigurationError(RosinUnitsError):
    """Raised when configuration is invalid."""

    pass


class StorageError(RosinUnitsError):
    """Raised when the preference storage cannot be read or written."""

    pass
