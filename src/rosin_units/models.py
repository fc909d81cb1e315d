"""
Data models for stored filter bag records.

All models use Pydantic v2 for validation and serialisation. Bags are
read-only: helpers that edit a bag list build new instances.
"""

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class FilterBag(BaseModel):
    """
    A micron filter bag as stored with a press batch.

    The size is kept exactly as it was entered; the unit system it was
    entered in is not stored and has to be detected.
    """

    model_config = ConfigDict(frozen=True)

    micron: float = Field(
        ...,
        gt=0,
        description="Mesh rating in microns",
        validation_alias=AliasChoices("micron", "micron_rating", "micronRating"),
    )
    size: str | None = Field(
        default=None,
        description='Raw size string, e.g. "90x190" or \'3.5x7.5"\'',
        validation_alias=AliasChoices("size", "raw_size", "rawSize"),
    )
    layer: int | None = Field(
        default=None,
        description="1-based stacking order, None when not recorded",
    )

    @field_validator("size", mode="before")
    @classmethod
    def coerce_size(cls, v: Any) -> Any:
        if v is None or isinstance(v, str):
            return v
        if isinstance(v, (int, float)):
            return str(v)
        return v

    @field_validator("layer", mode="before")
    @classmethod
    def blank_layer(cls, v: Any) -> Any:
        # Older records store 0 or "" for "no layer"
        if v is None or v == "" or v == 0:
            return None
        return v

    @field_validator("layer")
    @classmethod
    def positive_layer(cls, v: int | None) -> int | None:
        if v is not None and v < 1:
            raise ValueError("layer must be a positive integer")
        return v


class BagParseResult(BaseModel):
    """
    Outcome of deserialising stored bag data.

    Either ok with a (possibly empty) list of bags, or failed with a reason.
    """

    model_config = ConfigDict(frozen=True)

    bags: list[FilterBag] = Field(default_factory=list)
    error: str | None = Field(default=None, description="Why parsing failed")

    @property
    def ok(self) -> bool:
        """True when the data deserialised cleanly."""
        return self.error is None

    @classmethod
    def success(cls, bags: list[FilterBag]) -> "BagParseResult":
        return cls(bags=bags)

    @classmethod
    def failure(cls, reason: str) -> "BagParseResult":
        return cls(error=reason)
