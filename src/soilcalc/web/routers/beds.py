"""Garden bed catalog endpoints."""

from fastapi import APIRouter

from soilcalc.domain import (
    ALL_BEDS,
    BedDefinition,
    BedShape,
    beds_by_shape,
    calculate_bed_volume,
    get_bed,
)
from soilcalc.web.schemas.common import BedSchema, VolumeResultSchema
from soilcalc.web.schemas.responses import (
    BedListSchema,
    CatalogBedSchema,
    ErrorResponseSchema,
)

router = APIRouter(prefix="/beds", tags=["beds"])


def _catalog_bed_to_schema(bed: BedDefinition) -> CatalogBedSchema:
    base = BedSchema.from_domain(bed)
    return CatalogBedSchema(
        **base.model_dump(exclude={"dimensions"}),
        dimensions=base.dimensions,
        volume=VolumeResultSchema.from_domain(calculate_bed_volume(bed)),
        nominal_cubic_feet=bed.nominal_cubic_feet,
    )


@router.get("", response_model=BedListSchema)
async def list_beds(shape: BedShape | None = None) -> BedListSchema:
    """List catalog beds, optionally filtered by shape.

    Args:
        shape: Only return beds of this shape.

    Returns:
        Catalog beds with their calculated volumes.
    """
    beds = beds_by_shape()[shape] if shape is not None else ALL_BEDS
    return BedListSchema(beds=[_catalog_bed_to_schema(bed) for bed in beds])


@router.get(
    "/{bed_id}",
    response_model=CatalogBedSchema,
    responses={404: {"model": ErrorResponseSchema}},
)
async def get_catalog_bed(bed_id: str) -> CatalogBedSchema:
    """Get a single catalog bed.

    Raises:
        BedNotFoundError: If the id is unknown (handled by exception handler).
    """
    return _catalog_bed_to_schema(get_bed(bed_id))
