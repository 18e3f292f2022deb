"""Predefined garden bed catalog.

Dimensions mirror common retail raised beds. ``nominal_cubic_feet`` is the
volume published alongside each bed; for beds listed in inches it was
computed from the exact inch values, so it can differ from the calculated
volume of the rounded feet dimensions by a few hundredths.
"""

from __future__ import annotations

from .errors import BedNotFoundError
from .value_objects import (
    BedDefinition,
    BedShape,
    CircularDimensions,
    LengthUnit,
    RectangularDimensions,
    ShapeTab,
)

__all__ = [
    "ALL_BEDS",
    "CIRCULAR_BEDS",
    "RECTANGULAR_BEDS",
    "bed_exists",
    "beds_by_shape",
    "beds_for_tab",
    "get_bed",
]

FT = LengthUnit.FEET
IN = LengthUnit.INCHES


def _rect(
    bed_id: str,
    name: str,
    description: str,
    length: float,
    width: float,
    height: float,
    height_unit: LengthUnit,
    nominal: float,
) -> BedDefinition:
    return BedDefinition(
        id=bed_id,
        name=name,
        shape=BedShape.RECTANGULAR,
        dimensions=RectangularDimensions(
            length=length,
            width=width,
            height=height,
            length_width_unit=FT,
            height_unit=height_unit,
        ),
        description=description,
        nominal_cubic_feet=nominal,
    )


def _round(
    bed_id: str,
    name: str,
    description: str,
    diameter: float,
    height: float,
    height_unit: LengthUnit,
    nominal: float,
) -> BedDefinition:
    return BedDefinition(
        id=bed_id,
        name=name,
        shape=BedShape.CIRCULAR,
        dimensions=CircularDimensions(
            diameter=diameter,
            height=height,
            diameter_unit=FT,
            height_unit=height_unit,
        ),
        description=description,
        nominal_cubic_feet=nominal,
    )


RECTANGULAR_BEDS: tuple[BedDefinition, ...] = (
    _rect("classic-large", "Classic Large",
          "Standard 4' x 8' raised bed commonly used in home gardens",
          8, 4, 1, FT, 32),
    _rect("medium-rectangle", "Medium Rectangle",
          "Medium 4' x 6' raised bed good for limited spaces",
          6, 4, 1, FT, 24),
    _rect("small-square", "Small Square",
          "Compact 4' x 4' raised bed ideal for small gardens",
          4, 4, 1, FT, 16),
    _rect("long-narrow", "Long Narrow",
          "Narrow 2' x 8' raised bed perfect for along fences or pathways",
          8, 2, 1, FT, 16),
    _rect("birdies-large", "Birdies Large",
          'Birdies brand 83" x 43" x 15" raised garden bed',
          6.92, 3.58, 15, IN, 30.98),
    _rect("birdies-mid-rectangular", "Birdies Mid Rectangular",
          'Birdies brand 73" x 51" x 15" raised garden bed',
          6.08, 4.25, 15, IN, 32.32),
    _rect("birdies-square", "Birdies Square",
          'Birdies brand 51" x 51" x 15" raised garden bed',
          4.25, 4.25, 15, IN, 22.58),
    _rect("shallow-square", "Shallow Square",
          "Shallow 4' x 4' x 6\" raised bed for shallow-rooted plants",
          4, 4, 6, IN, 8),
    _rect("compact-square", "Compact Square",
          "Small 3' x 3' raised bed for limited spaces",
          3, 3, 1, FT, 9),
    _rect("large-square", "Large Square",
          "Spacious 5' x 5' raised bed for larger gardens",
          5, 5, 1, FT, 25),
    _rect("accessible-square", "Accessible Square",
          "Tall 4' x 4' x 24\" raised bed for accessible gardening",
          4, 4, 24, IN, 32),
    _rect("birdies-medium-tall", "Birdies Medium Tall",
          "Birdies brand 5' x 3' x 29\" raised garden bed",
          5, 3, 29, IN, 36.25),
    _rect("long-thin", "Long Thin",
          "Narrow 6' x 2' raised bed for borders",
          6, 2, 1, FT, 12),
    _rect("standard-rectangle", "Standard Rectangle",
          "Common 3' x 6' raised bed size",
          6, 3, 1, FT, 18),
    _rect("extra-long-rectangle", "Extra-Long Rectangle",
          "Extended 4' x 10' raised bed for larger gardens",
          10, 4, 1, FT, 40),
    _rect("small-balcony-bed", "Small Balcony Bed",
          "Compact 2' x 6' raised bed for balconies or small spaces",
          6, 2, 1, FT, 12),
    _rect("birdies-narrow-xl", "Birdies Narrow XL",
          'Birdies brand 102" x 24" x 15" raised garden bed',
          8.5, 2, 15, IN, 21.25),
    _rect("birdies-narrow-medium", "Birdies Narrow Medium",
          'Birdies brand 65" x 24" x 15" raised garden bed',
          5.42, 2, 15, IN, 13.54),
    _rect("birdies-large-tall", "Birdies Large Tall",
          "Large Birdies brand 6' x 6' x 30\" raised garden bed",
          6, 6, 30, IN, 90),
    _rect("patio-narrow", "Patio Narrow",
          "Long narrow 8' x 2' raised bed for patios",
          8, 2, 1, FT, 16),
)

CIRCULAR_BEDS: tuple[BedDefinition, ...] = (
    _round("round-small", "Round Small",
           'Small 36" diameter circular raised bed',
           3, 12, IN, 7.07),
    _round("birdies-round-small", "Birdies Round Small",
           'Birdies brand 38" diameter x 15" tall raised bed',
           3.17, 15, IN, 9.85),
    _round("round-medium", "Round Medium",
           'Medium 48" diameter circular raised bed',
           4, 12, IN, 12.57),
)

ALL_BEDS: tuple[BedDefinition, ...] = RECTANGULAR_BEDS + CIRCULAR_BEDS

_BEDS_BY_ID: dict[str, BedDefinition] = {bed.id: bed for bed in ALL_BEDS}


def get_bed(bed_id: str) -> BedDefinition:
    """Look up a catalog bed by id.

    Raises:
        BedNotFoundError: If no bed has that id.
    """
    try:
        return _BEDS_BY_ID[bed_id]
    except KeyError:
        raise BedNotFoundError(bed_id) from None


def bed_exists(bed_id: str) -> bool:
    return bed_id in _BEDS_BY_ID


def beds_by_shape() -> dict[BedShape, tuple[BedDefinition, ...]]:
    """Group catalog beds by shape for display."""
    return {
        BedShape.RECTANGULAR: RECTANGULAR_BEDS,
        BedShape.CIRCULAR: CIRCULAR_BEDS,
    }


def beds_for_tab(tab: ShapeTab) -> tuple[BedDefinition, ...]:
    """Catalog subset offered under a shape tab (none for custom)."""
    if tab == ShapeTab.CUSTOM:
        return ()
    return beds_by_shape()[BedShape(tab.value)]
