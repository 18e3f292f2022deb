"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from soilcalc.domain import Selection, VolumeResult


@dataclass
class PlanOutput:
    """Result of running a garden plan.

    Attributes:
        selection: Selection holding every bed that could be calculated.
        errors: One message per plan bed that failed, prefixed with its
            position in the plan (``beds[2]: ...``).
        cost: Estimated soil cost when the plan includes a price.
    """

    selection: Selection
    errors: list[str] = field(default_factory=list)
    cost: float | None = None

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def total(self) -> VolumeResult | None:
        return self.selection.total

    @property
    def bags_required(self) -> int:
        return self.selection.bags_required
