"""Application layer - use cases and orchestration."""

from .commands import CalculatePlanCommand
from .dtos import PlanOutput

__all__ = [
    "CalculatePlanCommand",
    "PlanOutput",
]
