"""
Frequently used micron ratings and bag sizes.

Counts how often each micron rating and bag size is entered so the most
common ones can be offered as quick picks. Bag sizes are normalised to the
display system before counting, so "90x190" and '3.5x7.5"' entered under
imperial count as the same size.
"""

import logging

from pydantic import BaseModel, Field, ValidationError as PydanticValidationError

from rosin_units.bags import normalize_bag_size
from rosin_units.protocols import PreferenceStorage
from rosin_units.units import UnitSystem


logger = logging.getLogger(__name__)

FREQUENTLY_USED_KEY = "micron-bag-frequently-used"
MAX_ENTRIES = 10


class MicronCount(BaseModel):
    """Usage count for a micron rating."""

    value: float = Field(..., gt=0)
    count: int = Field(default=1, ge=0)


class SizeCount(BaseModel):
    """Usage count for a normalised bag size."""

    value: str
    count: int = Field(default=1, ge=0)


def _top(entries: list, limit: int = MAX_ENTRIES) -> list:
    return sorted(entries, key=lambda e: e.count, reverse=True)[:limit]


class FrequentlyUsed(BaseModel):
    """Most frequently used micron ratings and bag sizes."""

    micron_sizes: list[MicronCount] = Field(default_factory=list)
    bag_sizes: list[SizeCount] = Field(default_factory=list)

    def record(
        self,
        micron: float,
        size: str,
        display_system: UnitSystem | str,
    ) -> None:
        """Count one use of a micron rating and bag size."""
        for entry in self.micron_sizes:
            if entry.value == micron:
                entry.count += 1
                break
        else:
            self.micron_sizes.append(MicronCount(value=micron))

        normalized = normalize_bag_size(size, display_system)
        if normalized:
            for entry in self.bag_sizes:
                if entry.value == normalized:
                    entry.count += 1
                    break
            else:
                self.bag_sizes.append(SizeCount(value=normalized))

        self.micron_sizes = _top(self.micron_sizes)
        self.bag_sizes = _top(self.bag_sizes)

    def consolidate(self, display_system: UnitSystem | str) -> "FrequentlyUsed":
        """
        Re-normalise bag sizes to display_system and merge duplicates.

        Returns:
            A new FrequentlyUsed with counts of merged sizes summed
        """
        merged: dict[str, SizeCount] = {}
        for entry in self.bag_sizes:
            normalized = normalize_bag_size(entry.value, display_system)
            if normalized in merged:
                merged[normalized].count += entry.count
            else:
                merged[normalized] = SizeCount(value=normalized, count=entry.count)

        return FrequentlyUsed(
            micron_sizes=_top([m.model_copy() for m in self.micron_sizes]),
            bag_sizes=_top(list(merged.values())),
        )

    @classmethod
    def from_json(cls, text: str | None) -> "FrequentlyUsed":
        """Load from JSON; missing or invalid data gives an empty tracker."""
        if not text:
            return cls()
        try:
            return cls.model_validate_json(text)
        except PydanticValidationError as e:
            logger.warning("Discarding invalid frequently used data: %s", e)
            return cls()

    @classmethod
    def load(
        cls,
        storage: PreferenceStorage,
        key: str = FREQUENTLY_USED_KEY,
    ) -> "FrequentlyUsed":
        """Load from a storage backend."""
        return cls.from_json(storage.get(key))

    def save(
        self,
        storage: PreferenceStorage,
        key: str = FREQUENTLY_USED_KEY,
    ) -> None:
        """Save to a storage backend."""
        storage.set(key, self.model_dump_json())
