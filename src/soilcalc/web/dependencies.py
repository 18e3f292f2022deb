"""FastAPI dependency injection for soil calculator services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from soilcalc.application.commands import CalculatePlanCommand


@lru_cache(maxsize=1)
def get_plan_command() -> CalculatePlanCommand:
    """Cached CalculatePlanCommand instance."""
    return CalculatePlanCommand()


PlanCommandDep = Annotated[CalculatePlanCommand, Depends(get_plan_command)]
