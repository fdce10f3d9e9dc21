"""
Main entrypoint for the Day Booking API.

This module assembles the FastAPI application: it sets up logging,
enables CORS, attaches the database and includes the versioned
routers.  ``create_app`` builds and configures the app, which is then
instantiated at module import time as ``app`` so it can be served
with uvicorn, e.g.::

    uvicorn day_booking_api.app.main:app --reload

Tests call ``create_app`` with their own ``Database``.
"""

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import Database
from .core.logging_config import setup_logging


def create_app(database: Optional[Database] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    database : Optional[Database]
        Store to serve.  Defaults to ``Database()``, which uses
        ``settings.database_url``.

    Returns
    -------
    FastAPI
        A configured application instance.
    """
    # Initialise logging before anything else so that startup can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.database = database or Database()

    app.include_router(v1_router, prefix="/api/v1")

    @app.on_event("startup")
    def startup_event() -> None:
        # Creates the database file if needed and applies migrations.
        app.state.database.init_db()

    return app


app = create_app()
