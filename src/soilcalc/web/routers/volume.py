"""Single bed volume endpoints."""

from fastapi import APIRouter

from soilcalc.domain import (
    CircularDimensions,
    RectangularDimensions,
    VolumeResult,
    VolumeUnit,
    apply_fill_factor,
    circular_volume,
    rectangular_volume,
    validate_fill_factor,
)
from soilcalc.infrastructure import format_volume
from soilcalc.web.schemas.common import VolumeResultSchema
from soilcalc.web.schemas.requests import CircularVolumeRequest, RectangularVolumeRequest
from soilcalc.web.schemas.responses import ErrorResponseSchema, VolumeResponseSchema

router = APIRouter(prefix="/volume", tags=["volume"])


def _volume_response(
    volume: VolumeResult, fill_factor: float, display_unit: VolumeUnit
) -> VolumeResponseSchema:
    filled = apply_fill_factor(volume, fill_factor)
    return VolumeResponseSchema(
        volume=VolumeResultSchema.from_domain(volume),
        fill_factor=fill_factor,
        filled_volume=VolumeResultSchema.from_domain(filled),
        formatted=format_volume(filled, display_unit),
    )


@router.post(
    "/rectangular",
    response_model=VolumeResponseSchema,
    responses={422: {"model": ErrorResponseSchema}},
)
async def calculate_rectangular(
    request: RectangularVolumeRequest,
) -> VolumeResponseSchema:
    """Calculate the soil volume of a rectangular bed.

    Raises:
        CalculationError: For missing, non-positive or oversized dimensions
            or an unsupported fill factor (handled by exception handler).
    """
    fill_factor = validate_fill_factor(request.fill_factor)
    volume = rectangular_volume(
        RectangularDimensions(
            length=request.length,
            width=request.width,
            height=request.height,
            length_width_unit=request.length_width_unit,
            height_unit=request.height_unit,
        )
    )
    return _volume_response(volume, fill_factor, request.display_unit)


@router.post(
    "/circular",
    response_model=VolumeResponseSchema,
    responses={422: {"model": ErrorResponseSchema}},
)
async def calculate_circular(
    request: CircularVolumeRequest,
) -> VolumeResponseSchema:
    """Calculate the soil volume of a circular bed."""
    fill_factor = validate_fill_factor(request.fill_factor)
    volume = circular_volume(
        CircularDimensions(
            diameter=request.diameter,
            height=request.height,
            diameter_unit=request.diameter_unit,
            height_unit=request.height_unit,
        )
    )
    return _volume_response(volume, fill_factor, request.display_unit)
