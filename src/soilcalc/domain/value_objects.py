"""Value objects for the soil calculator domain."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Union


class LengthUnit(str, Enum):
    """Units accepted for bed dimensions."""

    INCHES = "inches"
    FEET = "feet"
    CENTIMETERS = "cm"
    METERS = "meters"

    @property
    def abbreviation(self) -> str:
        """Short label used when rendering dimensions."""
        return _LENGTH_ABBREVIATIONS[self]


_LENGTH_ABBREVIATIONS: dict[LengthUnit, str] = {
    LengthUnit.INCHES: "in",
    LengthUnit.FEET: "ft",
    LengthUnit.CENTIMETERS: "cm",
    LengthUnit.METERS: "m",
}


class VolumeUnit(str, Enum):
    """Units a volume result can be displayed in."""

    CUBIC_FEET = "cubic_feet"
    CUBIC_YARDS = "cubic_yards"
    CUBIC_METERS = "cubic_meters"
    LITERS = "liters"
    GALLONS = "gallons"

    @property
    def symbol(self) -> str:
        """Conventional symbol for the unit (ft³, yd³, m³, L, gal)."""
        return _VOLUME_SYMBOLS[self]


_VOLUME_SYMBOLS: dict[VolumeUnit, str] = {
    VolumeUnit.CUBIC_FEET: "ft³",
    VolumeUnit.CUBIC_YARDS: "yd³",
    VolumeUnit.CUBIC_METERS: "m³",
    VolumeUnit.LITERS: "L",
    VolumeUnit.GALLONS: "gal",
}


class BedShape(str, Enum):
    """Supported garden bed geometries."""

    RECTANGULAR = "rectangular"
    CIRCULAR = "circular"


class ShapeTab(str, Enum):
    """Shape selector shown above the bed picker."""

    RECTANGULAR = "rectangular"
    CIRCULAR = "circular"
    CUSTOM = "custom"


@dataclass(frozen=True)
class RectangularDimensions:
    """Length and width share a unit; height may use a different one."""

    length: float
    width: float
    height: float
    length_width_unit: LengthUnit = LengthUnit.FEET
    height_unit: LengthUnit = LengthUnit.FEET


@dataclass(frozen=True)
class CircularDimensions:
    """Diameter and height of a round bed, each with its own unit."""

    diameter: float
    height: float
    diameter_unit: LengthUnit = LengthUnit.FEET
    height_unit: LengthUnit = LengthUnit.FEET


BedDimensions = Union[RectangularDimensions, CircularDimensions]


@dataclass(frozen=True)
class VolumeResult:
    """A volume expressed in five units at once.

    All fields derive from the unrounded cubic feet value and are rounded
    to two decimals independently, so the units may disagree slightly in
    the second decimal place.
    """

    cubic_feet: float
    cubic_yards: float
    cubic_meters: float
    liters: float
    gallons: float
    display_unit: VolumeUnit = VolumeUnit.CUBIC_FEET

    def __post_init__(self) -> None:
        values = (
            self.cubic_feet,
            self.cubic_yards,
            self.cubic_meters,
            self.liters,
            self.gallons,
        )
        if not all(math.isfinite(v) for v in values):
            raise ValueError("Volume values must be finite")
        if min(values) < 0:
            raise ValueError("Volume values must be non-negative")

    def value_in(self, unit: VolumeUnit) -> float:
        """Return the field that corresponds to ``unit``."""
        return {
            VolumeUnit.CUBIC_FEET: self.cubic_feet,
            VolumeUnit.CUBIC_YARDS: self.cubic_yards,
            VolumeUnit.CUBIC_METERS: self.cubic_meters,
            VolumeUnit.LITERS: self.liters,
            VolumeUnit.GALLONS: self.gallons,
        }[unit]

    def to_dict(self) -> dict[str, float | str]:
        return {
            "cubic_feet": self.cubic_feet,
            "cubic_yards": self.cubic_yards,
            "cubic_meters": self.cubic_meters,
            "liters": self.liters,
            "gallons": self.gallons,
            "display_unit": self.display_unit.value,
        }


@dataclass(frozen=True)
class BedDefinition:
    """A named bed geometry, either from the catalog or entered by the user.

    Attributes:
        id: Catalog id, or ``custom-<timestamp>`` for user-defined beds.
        name: Display name.
        shape: Geometry tag; selects which dimensions type applies.
        dimensions: Dimensions matching ``shape``.
        description: Optional longer description for catalog entries.
        nominal_cubic_feet: Reference volume published with catalog beds.
    """

    id: str
    name: str
    shape: BedShape
    dimensions: BedDimensions
    description: str | None = None
    nominal_cubic_feet: float | None = None

    def __post_init__(self) -> None:
        expected = (
            RectangularDimensions
            if self.shape == BedShape.RECTANGULAR
            else CircularDimensions
        )
        if not isinstance(self.dimensions, expected):
            raise ValueError(
                f"Bed '{self.id}' is {self.shape.value} but has "
                f"{type(self.dimensions).__name__}"
            )

    @property
    def is_custom(self) -> bool:
        return self.id.startswith("custom-")
