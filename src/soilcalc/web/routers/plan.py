"""Garden plan endpoints."""

from fastapi import APIRouter

from soilcalc.application.config import ConfigError, GardenPlanConfig, load_plan_from_dict
from soilcalc.application.dtos import PlanOutput
from soilcalc.infrastructure import format_volume
from soilcalc.web.dependencies import PlanCommandDep
from soilcalc.web.schemas.common import BedSchema, VolumeResultSchema
from soilcalc.web.schemas.requests import PlanValidateRequest
from soilcalc.web.schemas.responses import (
    BedEntrySchema,
    PlanOutputSchema,
    PlanValidationSchema,
)

router = APIRouter(prefix="/plan", tags=["plan"])


def _plan_output_to_schema(output: PlanOutput) -> PlanOutputSchema:
    """Convert PlanOutput to response schema."""
    selection = output.selection
    total = selection.total

    entries = [
        BedEntrySchema(
            id=entry.id,
            bed=BedSchema.from_domain(entry.bed),
            fill_factor=entry.fill_factor,
            volume=VolumeResultSchema.from_domain(entry.volume),
            filled_volume=VolumeResultSchema.from_domain(entry.filled_volume),
        )
        for entry in selection.entries
    ]

    return PlanOutputSchema(
        is_valid=output.is_valid,
        errors=output.errors,
        entries=entries,
        total=VolumeResultSchema.from_domain(total) if total else None,
        formatted_total=format_volume(total, selection.display_unit),
        bag_size=selection.bag_size,
        bags_required=selection.bags_required,
        cost=output.cost,
    )


def _bed_error_detail(error: str) -> dict[str, str]:
    """Split a ``beds[i]: message`` plan error into path and message."""
    path, _, message = error.partition(": ")
    return {"path": path, "message": message, "error_type": "bed"}


@router.post("", response_model=PlanOutputSchema)
async def calculate_plan(
    plan: GardenPlanConfig,
    command: PlanCommandDep,
) -> PlanOutputSchema:
    """Calculate total soil volume and bags for a garden plan.

    Beds that fail are listed in ``errors``; the rest are still totalled.
    """
    return _plan_output_to_schema(command.execute(plan))


@router.post("/validate", response_model=PlanValidationSchema)
async def validate_plan(
    request: PlanValidateRequest,
    command: PlanCommandDep,
) -> PlanValidationSchema:
    """Validate a garden plan.

    Checks the schema, then that every bed resolves and can be calculated,
    the same checks as ``soilcalc validate``.
    """
    try:
        plan = load_plan_from_dict(request.plan)
    except ConfigError as e:
        return PlanValidationSchema(is_valid=False, errors=e.details)

    output = command.execute(plan)
    return PlanValidationSchema(
        is_valid=output.is_valid,
        errors=[_bed_error_detail(error) for error in output.errors],
    )
