"""Domain services - unit conversion, volume calculation and aggregation."""

from .bag_estimator import DEFAULT_BAG_SIZE, bags_required, soil_cost
from .selection import (
    ALLOWED_FILL_FACTORS,
    FILL_FACTOR_LABELS,
    BedEntry,
    Selection,
    add_entry,
    apply_fill_factor,
    make_custom_bed,
    recompute_total,
    remove_entry,
    validate_fill_factor,
)
from .unit_converter import from_feet, parse_length_unit, to_feet, unit_abbreviation
from .volume_calculator import (
    MAX_DIMENSION_FEET,
    calculate_bed_volume,
    circular_volume,
    rectangular_volume,
    safe_calculate_volume,
    validate_dimensions,
    volume_from_cubic_feet,
)

__all__ = [
    "ALLOWED_FILL_FACTORS",
    "DEFAULT_BAG_SIZE",
    "FILL_FACTOR_LABELS",
    "MAX_DIMENSION_FEET",
    "BedEntry",
    "Selection",
    "add_entry",
    "apply_fill_factor",
    "bags_required",
    "calculate_bed_volume",
    "circular_volume",
    "from_feet",
    "make_custom_bed",
    "parse_length_unit",
    "recompute_total",
    "rectangular_volume",
    "remove_entry",
    "safe_calculate_volume",
    "soil_cost",
    "to_feet",
    "unit_abbreviation",
    "validate_dimensions",
    "validate_fill_factor",
    "volume_from_cubic_feet",
]
