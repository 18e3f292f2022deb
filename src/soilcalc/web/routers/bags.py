"""Bag estimate endpoint."""

from fastapi import APIRouter

from soilcalc.domain import bags_required
from soilcalc.web.schemas.requests import BagsRequest
from soilcalc.web.schemas.responses import BagsResponseSchema

router = APIRouter(prefix="/bags", tags=["bags"])


@router.post("", response_model=BagsResponseSchema)
async def estimate_bags(request: BagsRequest) -> BagsResponseSchema:
    """Number of bags of ``bag_size`` cubic feet needed for the volume."""
    return BagsResponseSchema(
        total_cubic_feet=request.total_cubic_feet,
        bag_size=request.bag_size,
        bags_required=bags_required(request.total_cubic_feet, request.bag_size),
    )
