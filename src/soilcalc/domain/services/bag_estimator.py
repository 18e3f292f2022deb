"""Bag count and cost estimation."""

from __future__ import annotations

import logging
import math

from ..errors import InvalidInput
from ..value_objects import VolumeResult, VolumeUnit

__all__ = ["DEFAULT_BAG_SIZE", "bags_required", "soil_cost"]

logger = logging.getLogger(__name__)

DEFAULT_BAG_SIZE = 1.0  # cubic feet


def bags_required(total_cubic_feet: float | None, bag_size_cubic_feet: float) -> int:
    """Number of bags needed to hold ``total_cubic_feet``.

    A partially used bag still counts as a whole bag.

    Raises:
        InvalidInput: If the bag size is not a finite positive number, or
            the total is not finite.
    """
    if (
        bag_size_cubic_feet is None
        or not math.isfinite(bag_size_cubic_feet)
        or bag_size_cubic_feet <= 0
    ):
        raise InvalidInput("Bag size must be a positive number", "bag_size")
    if not total_cubic_feet:
        return 0
    if not math.isfinite(total_cubic_feet):
        raise InvalidInput("Total volume must be a finite number", "total_cubic_feet")
    bags = total_cubic_feet / bag_size_cubic_feet
    if not math.isfinite(bags):
        raise InvalidInput("Bag count is too large to compute", "bag_size")
    return math.ceil(bags)


def soil_cost(
    volume: VolumeResult | None,
    price_per_unit: float,
    unit: VolumeUnit | str = VolumeUnit.CUBIC_FEET,
) -> float:
    """Price of ``volume`` when soil is sold at ``price_per_unit`` per ``unit``."""
    if volume is None:
        raise InvalidInput("Volume result cannot be null or undefined")
    if not math.isfinite(price_per_unit) or price_per_unit < 0:
        raise InvalidInput(
            "Price per unit must be a finite, non-negative number", "price_per_unit"
        )

    try:
        unit = VolumeUnit(unit)
    except ValueError:
        logger.warning(f"Unknown volume unit: {unit}, defaulting to cubic feet")
        unit = VolumeUnit.CUBIC_FEET

    return round(volume.value_in(unit) * price_per_unit, 2)
