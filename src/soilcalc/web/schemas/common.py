"""Common Pydantic schemas shared across requests and responses."""

from pydantic import BaseModel, ConfigDict, Field

from soilcalc.domain import (
    BedDefinition,
    BedShape,
    LengthUnit,
    RectangularDimensions,
    VolumeResult,
    VolumeUnit,
)
from soilcalc.infrastructure import format_bed_dimensions


class VolumeResultSchema(BaseModel):
    """Volume in all five units."""

    cubic_feet: float = Field(..., description="Volume in cubic feet")
    cubic_yards: float = Field(..., description="Volume in cubic yards")
    cubic_meters: float = Field(..., description="Volume in cubic meters")
    liters: float = Field(..., description="Volume in liters")
    gallons: float = Field(..., description="Volume in US gallons")
    display_unit: VolumeUnit = Field(..., description="Unit shown by default")

    @classmethod
    def from_domain(cls, volume: VolumeResult) -> "VolumeResultSchema":
        return cls(
            cubic_feet=volume.cubic_feet,
            cubic_yards=volume.cubic_yards,
            cubic_meters=volume.cubic_meters,
            liters=volume.liters,
            gallons=volume.gallons,
            display_unit=volume.display_unit,
        )


class RectangularDimensionsSchema(BaseModel):
    """Rectangular bed dimensions.

    Positivity and size limits are enforced by the volume calculator so
    they surface as calculation errors.
    """

    model_config = ConfigDict(allow_inf_nan=False)

    length: float = Field(..., description="Bed length")
    width: float = Field(..., description="Bed width")
    height: float = Field(..., description="Soil depth")
    length_width_unit: LengthUnit = Field(
        default=LengthUnit.FEET, description="Unit for length and width"
    )
    height_unit: LengthUnit = Field(default=LengthUnit.FEET, description="Unit for height")


class CircularDimensionsSchema(BaseModel):
    """Circular bed dimensions."""

    model_config = ConfigDict(allow_inf_nan=False)

    diameter: float = Field(..., description="Bed diameter")
    height: float = Field(..., description="Soil depth")
    diameter_unit: LengthUnit = Field(
        default=LengthUnit.FEET, description="Unit for diameter"
    )
    height_unit: LengthUnit = Field(default=LengthUnit.FEET, description="Unit for height")


class BedSchema(BaseModel):
    """A catalog or custom garden bed."""

    id: str = Field(..., description="Bed id")
    name: str = Field(..., description="Display name")
    shape: BedShape = Field(..., description="Bed shape")
    description: str | None = Field(default=None, description="Bed description")
    dimensions: RectangularDimensionsSchema | CircularDimensionsSchema = Field(
        ..., description="Bed dimensions"
    )
    dimensions_text: str = Field(..., description="Dimensions rendered for display")

    @classmethod
    def from_domain(cls, bed: BedDefinition) -> "BedSchema":
        dims = bed.dimensions
        if isinstance(dims, RectangularDimensions):
            dimensions: RectangularDimensionsSchema | CircularDimensionsSchema = (
                RectangularDimensionsSchema(
                    length=dims.length,
                    width=dims.width,
                    height=dims.height,
                    length_width_unit=dims.length_width_unit,
                    height_unit=dims.height_unit,
                )
            )
        else:
            dimensions = CircularDimensionsSchema(
                diameter=dims.diameter,
                height=dims.height,
                diameter_unit=dims.diameter_unit,
                height_unit=dims.height_unit,
            )
        return cls(
            id=bed.id,
            name=bed.name,
            shape=bed.shape,
            description=bed.description,
            dimensions=dimensions,
            dimensions_text=format_bed_dimensions(bed),
        )
