"""Garden plan configuration - schema and loading."""

from soilcalc.application.config.loader import (
    ConfigError,
    format_json_path,
    load_plan,
    load_plan_from_dict,
)
from soilcalc.application.config.schema import (
    MAX_PLAN_BEDS,
    SUPPORTED_VERSIONS,
    BedPlanItem,
    BedShapeConfig,
    GardenPlanConfig,
    PriceConfig,
)

__all__ = [
    "MAX_PLAN_BEDS",
    "SUPPORTED_VERSIONS",
    "BedPlanItem",
    "BedShapeConfig",
    "ConfigError",
    "GardenPlanConfig",
    "PriceConfig",
    "format_json_path",
    "load_plan",
    "load_plan_from_dict",
]
