"""Pydantic models for garden plan files.

A garden plan lists the beds to fill, the fill level of each, and the
bag size and price used for the estimate. Beds either reference the
catalog by id or carry their own dimensions.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from soilcalc.domain import (
    ALLOWED_FILL_FACTORS,
    DEFAULT_BAG_SIZE,
    BedShape,
    CircularDimensions,
    LengthUnit,
    RectangularDimensions,
    VolumeUnit,
)
from soilcalc.domain.services import parse_length_unit

# Version 1.0: Initial plan schema
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

# Upper bound on beds after expanding each item by its quantity
MAX_PLAN_BEDS = 1000


class BedShapeConfig(str, Enum):
    RECTANGULAR = BedShape.RECTANGULAR.value
    CIRCULAR = BedShape.CIRCULAR.value


class PriceConfig(BaseModel):
    """Soil price used for the cost estimate."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    per_unit: float = Field(..., ge=0, description="Price per volume unit")
    unit: VolumeUnit = Field(
        default=VolumeUnit.CUBIC_FEET, description="Volume unit the price applies to"
    )


class BedPlanItem(BaseModel):
    """One bed in a garden plan.

    Exactly one of ``catalog_id`` or ``shape`` must be given. Shape items
    need ``length``/``width``/``height`` (rectangular) or
    ``diameter``/``height`` (circular). Positivity and size limits are
    checked by the volume calculator so plan errors read the same as
    interactive ones.
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    catalog_id: str | None = Field(default=None, min_length=1)
    shape: BedShapeConfig | None = None
    name: str | None = Field(default=None, min_length=1, max_length=100)
    length: float | None = None
    width: float | None = None
    diameter: float | None = None
    height: float | None = None
    length_width_unit: LengthUnit = LengthUnit.FEET
    diameter_unit: LengthUnit = LengthUnit.FEET
    height_unit: LengthUnit = LengthUnit.FEET
    fill_factor: float = 1.0
    quantity: int = Field(default=1, ge=1, le=100)

    @field_validator("length_width_unit", "diameter_unit", "height_unit", mode="before")
    @classmethod
    def resolve_unit_alias(cls, v: object) -> object:
        """Accept aliases such as 'in', 'ft' or 'centimeters'."""
        if isinstance(v, str):
            resolved = parse_length_unit(v)
            if resolved is not None:
                return resolved
        return v

    @field_validator("fill_factor")
    @classmethod
    def validate_fill_factor(cls, v: float) -> float:
        if v not in ALLOWED_FILL_FACTORS:
            allowed = ", ".join(f"{f:g}" for f in ALLOWED_FILL_FACTORS)
            raise ValueError(f"fill_factor must be one of: {allowed}")
        return v

    @model_validator(mode="after")
    def validate_source(self) -> "BedPlanItem":
        """Require either a catalog id or a shape with its dimensions."""
        if (self.catalog_id is None) == (self.shape is None):
            raise ValueError("Bed must specify exactly one of 'catalog_id' or 'shape'")
        if self.shape == BedShapeConfig.RECTANGULAR:
            missing = [
                f for f in ("length", "width", "height") if getattr(self, f) is None
            ]
            if missing:
                raise ValueError(
                    f"Rectangular bed requires: {', '.join(missing)}"
                )
            if self.diameter is not None:
                raise ValueError("Rectangular bed cannot have a diameter")
        elif self.shape == BedShapeConfig.CIRCULAR:
            missing = [f for f in ("diameter", "height") if getattr(self, f) is None]
            if missing:
                raise ValueError(f"Circular bed requires: {', '.join(missing)}")
            if self.length is not None or self.width is not None:
                raise ValueError("Circular bed cannot have length or width")
        return self

    def to_dimensions(self) -> RectangularDimensions | CircularDimensions:
        """Build domain dimensions for a shape item."""
        if self.shape == BedShapeConfig.RECTANGULAR:
            return RectangularDimensions(
                length=self.length,  # type: ignore[arg-type]
                width=self.width,  # type: ignore[arg-type]
                height=self.height,  # type: ignore[arg-type]
                length_width_unit=self.length_width_unit,
                height_unit=self.height_unit,
            )
        if self.shape == BedShapeConfig.CIRCULAR:
            return CircularDimensions(
                diameter=self.diameter,  # type: ignore[arg-type]
                height=self.height,  # type: ignore[arg-type]
                diameter_unit=self.diameter_unit,
                height_unit=self.height_unit,
            )
        raise ValueError("Catalog beds have no inline dimensions")


class GardenPlanConfig(BaseModel):
    """Root model of a garden plan file."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    schema_version: str = Field(default="1.0")
    display_unit: VolumeUnit = VolumeUnit.CUBIC_FEET
    bag_size: float = Field(default=DEFAULT_BAG_SIZE, gt=0, le=1000)
    price: PriceConfig | None = None
    beds: list[BedPlanItem] = Field(default_factory=list, max_length=500)

    @field_validator("schema_version")
    @classmethod
    def validate_version(cls, v: str) -> str:
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema version: {v}. Supported versions: {supported}"
            )
        return v

    @field_validator("beds")
    @classmethod
    def validate_bed_count(cls, v: list[BedPlanItem]) -> list[BedPlanItem]:
        total = sum(item.quantity for item in v)
        if total > MAX_PLAN_BEDS:
            raise ValueError(
                f"Plan expands to {total} beds; at most {MAX_PLAN_BEDS} are allowed"
            )
        return v
