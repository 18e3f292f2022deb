"""Application commands (use cases) for soil calculation."""

from __future__ import annotations

import logging
from dataclasses import replace

from soilcalc.domain import (
    BedDefinition,
    BedNotFoundError,
    CalculationError,
    Selection,
    calculate_bed_volume,
    get_bed,
    make_custom_bed,
    soil_cost,
)

from .config.schema import BedPlanItem, GardenPlanConfig
from .dtos import PlanOutput

logger = logging.getLogger(__name__)


class CalculatePlanCommand:
    """Command to turn a garden plan into a filled selection.

    Beds that cannot be resolved or calculated are reported in
    ``PlanOutput.errors``; the remaining beds are still totalled.
    """

    def execute(self, plan: GardenPlanConfig) -> PlanOutput:
        selection = Selection(display_unit=plan.display_unit).with_bag_size(
            plan.bag_size
        )
        errors: list[str] = []

        for index, item in enumerate(plan.beds):
            try:
                bed = self._resolve_bed(item)
                volume = calculate_bed_volume(bed)
                selection = selection.with_fill_factor(item.fill_factor)
                selection = selection.add_bed(bed, volume, quantity=item.quantity)
            except BedNotFoundError as e:
                errors.append(f"beds[{index}]: {e}")
            except CalculationError as e:
                errors.append(f"beds[{index}]: {e.message}")

        if errors:
            logger.info(f"Plan calculated with {len(errors)} bed error(s)")

        cost = None
        total = selection.total
        if plan.price is not None and total is not None:
            cost = soil_cost(total, plan.price.per_unit, plan.price.unit)

        return PlanOutput(selection=selection, errors=errors, cost=cost)

    def _resolve_bed(self, item: BedPlanItem) -> BedDefinition:
        if item.catalog_id is not None:
            bed = get_bed(item.catalog_id)
            if item.name:
                bed = replace(bed, name=item.name)
            return bed
        return make_custom_bed(item.shape.value, item.to_dimensions(), item.name)
