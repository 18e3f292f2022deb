"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from soilcalc.domain import VolumeUnit
from soilcalc.web.schemas.common import (
    CircularDimensionsSchema,
    RectangularDimensionsSchema,
)


class RectangularVolumeRequest(RectangularDimensionsSchema):
    """Request for a rectangular bed volume."""

    display_unit: VolumeUnit = Field(
        default=VolumeUnit.CUBIC_FEET, description="Unit for the formatted volume"
    )
    fill_factor: float = Field(default=1.0, description="Fill level (0.25, 0.5, 0.75, 1)")


class CircularVolumeRequest(CircularDimensionsSchema):
    """Request for a circular bed volume."""

    display_unit: VolumeUnit = Field(
        default=VolumeUnit.CUBIC_FEET, description="Unit for the formatted volume"
    )
    fill_factor: float = Field(default=1.0, description="Fill level (0.25, 0.5, 0.75, 1)")


class BagsRequest(BaseModel):
    """Request for a bag count."""

    model_config = ConfigDict(allow_inf_nan=False)

    total_cubic_feet: float = Field(..., ge=0, description="Volume to fill in cubic feet")
    bag_size: float = Field(..., gt=0, description="Bag size in cubic feet")


class PlanValidateRequest(BaseModel):
    """Request for validating a garden plan."""

    plan: dict[str, Any] = Field(..., description="Garden plan JSON")
