"""API routers for the REST API."""

from soilcalc.web.routers.bags import router as bags_router
from soilcalc.web.routers.beds import router as beds_router
from soilcalc.web.routers.plan import router as plan_router
from soilcalc.web.routers.volume import router as volume_router

__all__ = [
    "bags_router",
    "beds_router",
    "plan_router",
    "volume_router",
]
