"""FastAPI application factory."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from soilcalc import __version__
from soilcalc.web.exceptions import register_exception_handlers
from soilcalc.web.routers import (
    bags_router,
    beds_router,
    plan_router,
    volume_router,
)


def create_app(allowed_origins: list[str] | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        allowed_origins: Browser origins allowed to call the API with
            credentials. When omitted any origin may call it, but
            without cookies or auth headers.

    Returns:
        Configured FastAPI application instance.
    """
    app = FastAPI(
        title="Garden Soil Calculator API",
        description="REST API for calculating soil volumes and bag counts for garden beds",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins or ["*"],
        allow_credentials=bool(allowed_origins),
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type"],
    )

    register_exception_handlers(app)

    app.include_router(beds_router, prefix="/api/v1")
    app.include_router(volume_router, prefix="/api/v1")
    app.include_router(plan_router, prefix="/api/v1")
    app.include_router(bags_router, prefix="/api/v1")

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


# Application instance for ASGI servers (uvicorn)
app = create_app()
