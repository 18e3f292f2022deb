"""FastAPI REST API for the soil calculator.

Usage:
    uvicorn soilcalc.web:app --reload
"""

from soilcalc.web.app import app, create_app

__all__ = ["app", "create_app"]
