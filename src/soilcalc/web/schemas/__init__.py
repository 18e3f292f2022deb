"""Pydantic schemas for the REST API."""

from soilcalc.web.schemas.common import (
    BedSchema,
    CircularDimensionsSchema,
    RectangularDimensionsSchema,
    VolumeResultSchema,
)
from soilcalc.web.schemas.requests import (
    BagsRequest,
    CircularVolumeRequest,
    PlanValidateRequest,
    RectangularVolumeRequest,
)
from soilcalc.web.schemas.responses import (
    BagsResponseSchema,
    BedEntrySchema,
    BedListSchema,
    CatalogBedSchema,
    ErrorResponseSchema,
    PlanOutputSchema,
    PlanValidationSchema,
    VolumeResponseSchema,
)

__all__ = [
    # Common
    "BedSchema",
    "CircularDimensionsSchema",
    "RectangularDimensionsSchema",
    "VolumeResultSchema",
    # Requests
    "BagsRequest",
    "CircularVolumeRequest",
    "PlanValidateRequest",
    "RectangularVolumeRequest",
    # Responses
    "BagsResponseSchema",
    "BedEntrySchema",
    "BedListSchema",
    "CatalogBedSchema",
    "ErrorResponseSchema",
    "PlanOutputSchema",
    "PlanValidationSchema",
    "VolumeResponseSchema",
]
