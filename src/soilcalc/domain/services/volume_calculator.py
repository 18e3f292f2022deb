"""Volume calculation for rectangular and circular garden beds."""

from __future__ import annotations

import logging
import math

from ..errors import CalculationError, DimensionTooLarge, InvalidDimension, InvalidInput
from ..value_objects import (
    BedDefinition,
    BedDimensions,
    BedShape,
    CircularDimensions,
    LengthUnit,
    RectangularDimensions,
    VolumeResult,
    VolumeUnit,
)
from .unit_converter import to_feet

__all__ = [
    "CUBIC_FEET_PER_CUBIC_YARD",
    "CUBIC_METERS_PER_CUBIC_FOOT",
    "GALLONS_PER_CUBIC_FOOT",
    "LITERS_PER_CUBIC_METER",
    "MAX_DIMENSION_FEET",
    "calculate_bed_volume",
    "circular_volume",
    "rectangular_volume",
    "safe_calculate_volume",
    "validate_dimensions",
    "volume_from_cubic_feet",
]

logger = logging.getLogger(__name__)

MAX_DIMENSION_FEET = 1000

CUBIC_FEET_PER_CUBIC_YARD = 27
CUBIC_METERS_PER_CUBIC_FOOT = 0.0283168
LITERS_PER_CUBIC_METER = 1000
GALLONS_PER_CUBIC_FOOT = 7.48052


def _named_lengths(
    dimensions: BedDimensions,
) -> list[tuple[str, float | None, LengthUnit]]:
    """List (field, value, unit) in validation order."""
    if isinstance(dimensions, RectangularDimensions):
        return [
            ("length", dimensions.length, dimensions.length_width_unit),
            ("width", dimensions.width, dimensions.length_width_unit),
            ("height", dimensions.height, dimensions.height_unit),
        ]
    return [
        ("diameter", dimensions.diameter, dimensions.diameter_unit),
        ("height", dimensions.height, dimensions.height_unit),
    ]


def validate_dimensions(dimensions: BedDimensions) -> None:
    """Check every dimension before anything is computed.

    Raises:
        InvalidInput: A dimension is missing.
        InvalidDimension: A dimension is zero, negative or not finite.
        DimensionTooLarge: A dimension exceeds MAX_DIMENSION_FEET in feet.
    """
    fields = _named_lengths(dimensions)

    for name, value, _ in fields:
        if value is None:
            raise InvalidInput(f"{name.capitalize()} is required", name)

    # NaN and infinity count as invalid dimensions.
    for name, value, _ in fields:
        if not math.isfinite(value) or value <= 0:
            raise InvalidDimension(name)

    for name, value, unit in fields:
        if to_feet(value, unit) > MAX_DIMENSION_FEET:
            raise DimensionTooLarge(name, MAX_DIMENSION_FEET)


def volume_from_cubic_feet(
    cubic_feet: float,
    display_unit: VolumeUnit = VolumeUnit.CUBIC_FEET,
) -> VolumeResult:
    """Derive all five unit fields from an unrounded cubic feet value.

    Each field is computed from ``cubic_feet`` and rounded on its own;
    liters go through cubic meters.
    """
    cubic_meters = cubic_feet * CUBIC_METERS_PER_CUBIC_FOOT
    return VolumeResult(
        cubic_feet=round(cubic_feet, 2),
        cubic_yards=round(cubic_feet / CUBIC_FEET_PER_CUBIC_YARD, 2),
        cubic_meters=round(cubic_meters, 2),
        liters=round(cubic_meters * LITERS_PER_CUBIC_METER, 2),
        gallons=round(cubic_feet * GALLONS_PER_CUBIC_FOOT, 2),
        display_unit=display_unit,
    )


def rectangular_volume(dimensions: RectangularDimensions) -> VolumeResult:
    """Volume of a rectangular bed (length x width x height)."""
    validate_dimensions(dimensions)

    length_ft = to_feet(dimensions.length, dimensions.length_width_unit)
    width_ft = to_feet(dimensions.width, dimensions.length_width_unit)
    height_ft = to_feet(dimensions.height, dimensions.height_unit)

    return volume_from_cubic_feet(length_ft * width_ft * height_ft)


def circular_volume(dimensions: CircularDimensions) -> VolumeResult:
    """Volume of a round bed (pi r^2 h)."""
    validate_dimensions(dimensions)

    diameter_ft = to_feet(dimensions.diameter, dimensions.diameter_unit)
    height_ft = to_feet(dimensions.height, dimensions.height_unit)
    radius_ft = diameter_ft / 2

    return volume_from_cubic_feet(math.pi * radius_ft**2 * height_ft)


def calculate_bed_volume(bed: BedDefinition) -> VolumeResult:
    """Calculate the full volume of a bed definition."""
    if bed.shape == BedShape.RECTANGULAR:
        return rectangular_volume(bed.dimensions)  # type: ignore[arg-type]
    return circular_volume(bed.dimensions)  # type: ignore[arg-type]


def safe_calculate_volume(
    dimensions: BedDimensions,
    shape: BedShape | str,
) -> VolumeResult | None:
    """Calculate a volume, returning None instead of raising.

    Used where a preview is shown while the user is still typing.
    """
    try:
        shape = BedShape(shape)
    except ValueError:
        logger.error(f"Unknown shape type: {shape}")
        return None

    if shape == BedShape.RECTANGULAR and isinstance(dimensions, RectangularDimensions):
        calculate = rectangular_volume
    elif shape == BedShape.CIRCULAR and isinstance(dimensions, CircularDimensions):
        calculate = circular_volume
    else:
        logger.error(f"Mismatch between shape type ({shape.value}) and dimensions")
        return None

    try:
        return calculate(dimensions)  # type: ignore[arg-type]
    except CalculationError as e:
        logger.error(f"Calculation error: {e}")
        return None
