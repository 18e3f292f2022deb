"""Domain layer - core calculation logic."""

from .catalog import (
    ALL_BEDS,
    CIRCULAR_BEDS,
    RECTANGULAR_BEDS,
    bed_exists,
    beds_by_shape,
    beds_for_tab,
    get_bed,
)
from .errors import (
    BedNotFoundError,
    CalculationError,
    DimensionTooLarge,
    InvalidDimension,
    InvalidInput,
)
from .services import (
    ALLOWED_FILL_FACTORS,
    DEFAULT_BAG_SIZE,
    FILL_FACTOR_LABELS,
    MAX_DIMENSION_FEET,
    BedEntry,
    Selection,
    add_entry,
    apply_fill_factor,
    bags_required,
    calculate_bed_volume,
    circular_volume,
    from_feet,
    make_custom_bed,
    parse_length_unit,
    recompute_total,
    rectangular_volume,
    remove_entry,
    safe_calculate_volume,
    soil_cost,
    to_feet,
    unit_abbreviation,
    validate_dimensions,
    validate_fill_factor,
    volume_from_cubic_feet,
)
from .value_objects import (
    BedDefinition,
    BedDimensions,
    BedShape,
    CircularDimensions,
    LengthUnit,
    RectangularDimensions,
    ShapeTab,
    VolumeResult,
    VolumeUnit,
)

__all__ = [
    "ALLOWED_FILL_FACTORS",
    "ALL_BEDS",
    "CIRCULAR_BEDS",
    "DEFAULT_BAG_SIZE",
    "FILL_FACTOR_LABELS",
    "MAX_DIMENSION_FEET",
    "RECTANGULAR_BEDS",
    "BedDefinition",
    "BedDimensions",
    "BedEntry",
    "BedNotFoundError",
    "BedShape",
    "CalculationError",
    "CircularDimensions",
    "DimensionTooLarge",
    "InvalidDimension",
    "InvalidInput",
    "LengthUnit",
    "RectangularDimensions",
    "Selection",
    "ShapeTab",
    "VolumeResult",
    "VolumeUnit",
    "add_entry",
    "apply_fill_factor",
    "bags_required",
    "bed_exists",
    "beds_by_shape",
    "beds_for_tab",
    "calculate_bed_volume",
    "circular_volume",
    "from_feet",
    "get_bed",
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
