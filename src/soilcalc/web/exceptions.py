"""Error handlers for the REST API."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from soilcalc.application.config import format_json_path
from soilcalc.domain import BedNotFoundError, CalculationError

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(CalculationError)
    async def calculation_error_handler(
        request: Request, exc: CalculationError
    ) -> JSONResponse:
        logger.debug(f"Calculation error on {request.url.path}: {exc.message}")
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": {"field": exc.field} if exc.field else None,
            },
        )

    @app.exception_handler(BedNotFoundError)
    async def bed_not_found_handler(
        request: Request, exc: BedNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": f"Garden bed not found: {exc.bed_id}",
                "error_type": "not_found",
                "details": None,
            },
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        # Raw inputs are left out: they may hold NaN, which is not valid JSON.
        details = [
            {
                "path": format_json_path(tuple(err["loc"][1:])) or "(root)",
                "message": err["msg"],
                "error_type": err["type"],
            }
            for err in exc.errors()
        ]
        logger.debug(f"Request validation failed on {request.url.path}: {details}")
        return JSONResponse(
            status_code=422,
            content={
                "error": "Request validation failed",
                "error_type": "validation",
                "details": details,
            },
        )
