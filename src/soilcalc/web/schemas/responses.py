"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from soilcalc.web.schemas.common import BedSchema, VolumeResultSchema


class VolumeResponseSchema(BaseModel):
    """Response for a single bed volume."""

    volume: VolumeResultSchema = Field(..., description="Full bed volume")
    fill_factor: float = Field(..., description="Fill level applied")
    filled_volume: VolumeResultSchema = Field(..., description="Volume at the fill level")
    formatted: str = Field(..., description="Filled volume in the display unit")


class CatalogBedSchema(BedSchema):
    """Catalog bed with its calculated volume."""

    volume: VolumeResultSchema = Field(..., description="Full bed volume")
    nominal_cubic_feet: float | None = Field(
        default=None, description="Published reference volume"
    )


class BedListSchema(BaseModel):
    """Response for the bed catalog listing."""

    beds: list[CatalogBedSchema] = Field(..., description="Catalog beds")


class BedEntrySchema(BaseModel):
    """Bed entry in a calculated plan."""

    id: str = Field(..., description="Entry instance id")
    bed: BedSchema = Field(..., description="Bed definition")
    fill_factor: float = Field(..., description="Fill level captured for this entry")
    volume: VolumeResultSchema = Field(..., description="Full bed volume")
    filled_volume: VolumeResultSchema = Field(..., description="Volume at the fill level")


class PlanOutputSchema(BaseModel):
    """Response for plan calculation."""

    is_valid: bool = Field(..., description="Whether every bed was calculated")
    errors: list[str] = Field(default_factory=list, description="Per-bed error messages")
    entries: list[BedEntrySchema] = Field(default_factory=list, description="Bed entries")
    total: VolumeResultSchema | None = Field(
        default=None, description="Total volume, absent when no beds were added"
    )
    formatted_total: str = Field(..., description="Total in the display unit")
    bag_size: float = Field(..., description="Bag size in cubic feet")
    bags_required: int = Field(..., description="Bags needed for the total")
    cost: float | None = Field(default=None, description="Estimated soil cost")


class PlanValidationSchema(BaseModel):
    """Response for plan validation."""

    is_valid: bool = Field(..., description="Whether the plan is valid")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )


class BagsResponseSchema(BaseModel):
    """Response for a bag count."""

    total_cubic_feet: float = Field(..., description="Volume to fill in cubic feet")
    bag_size: float = Field(..., description="Bag size in cubic feet")
    bags_required: int = Field(..., description="Bags needed")


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
