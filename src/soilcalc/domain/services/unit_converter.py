"""Length conversion to and from feet."""

from __future__ import annotations

import logging

from ..errors import InvalidInput
from ..value_objects import LengthUnit

__all__ = [
    "CM_PER_FOOT",
    "FEET_PER_METER",
    "INCHES_PER_FOOT",
    "from_feet",
    "parse_length_unit",
    "to_feet",
    "unit_abbreviation",
]

logger = logging.getLogger(__name__)

INCHES_PER_FOOT = 12
CM_PER_FOOT = 30.48
FEET_PER_METER = 3.28084

_UNIT_ALIASES: dict[str, LengthUnit] = {
    "in": LengthUnit.INCHES,
    "inch": LengthUnit.INCHES,
    "ft": LengthUnit.FEET,
    "foot": LengthUnit.FEET,
    "centimeters": LengthUnit.CENTIMETERS,
    "centimetres": LengthUnit.CENTIMETERS,
    "m": LengthUnit.METERS,
    "metres": LengthUnit.METERS,
}


def parse_length_unit(unit: LengthUnit | str | None) -> LengthUnit | None:
    """Resolve a unit tag or alias, returning None when unrecognized."""
    if isinstance(unit, LengthUnit):
        return unit
    if unit is None:
        return None
    tag = str(unit).strip().lower()
    try:
        return LengthUnit(tag)
    except ValueError:
        return _UNIT_ALIASES.get(tag)


def to_feet(value: float | None, unit: LengthUnit | str) -> float:
    """Convert ``value`` expressed in ``unit`` to feet.

    An unrecognized unit is treated as feet and logged as a warning
    rather than raised.

    Raises:
        InvalidInput: If ``value`` is None.
    """
    if value is None:
        raise InvalidInput("Dimension value cannot be null or undefined")

    resolved = parse_length_unit(unit)
    if resolved == LengthUnit.INCHES:
        return value / INCHES_PER_FOOT
    if resolved == LengthUnit.FEET:
        return value
    if resolved == LengthUnit.CENTIMETERS:
        return value / CM_PER_FOOT
    if resolved == LengthUnit.METERS:
        return value * FEET_PER_METER

    logger.warning(f"Unknown unit: {unit}, defaulting to feet")
    return value


def from_feet(value: float | None, unit: LengthUnit | str) -> float:
    """Convert a length in feet back to ``unit`` (inverse of :func:`to_feet`)."""
    if value is None:
        raise InvalidInput("Dimension value cannot be null or undefined")

    resolved = parse_length_unit(unit)
    if resolved == LengthUnit.INCHES:
        return value * INCHES_PER_FOOT
    if resolved == LengthUnit.FEET:
        return value
    if resolved == LengthUnit.CENTIMETERS:
        return value * CM_PER_FOOT
    if resolved == LengthUnit.METERS:
        return value / FEET_PER_METER

    logger.warning(f"Unknown unit: {unit}, defaulting to feet")
    return value


def unit_abbreviation(unit: LengthUnit | str) -> str:
    """Short label for ``unit`` (``ft``, ``in``...); unknown tags render as given."""
    resolved = parse_length_unit(unit)
    if resolved is None:
        return str(unit)
    return resolved.abbreviation
