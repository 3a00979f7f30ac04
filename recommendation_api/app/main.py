"""
Main entrypoint for the Recommendation API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  The ``create_app`` function builds
and configures the app, which is then instantiated at module
import time as ``app``.  Run it with uvicorn or another ASGI server,
e.g.::

    uvicorn recommendation_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

from fastapi import FastAPI

from .core.config import settings
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router, testing_router
from .core.db import init_db


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Configures logging, mounts the recommendation routes at the root
    path and, when ``settings.enable_test_routes`` is set, the ``/e2e``
    helpers.  The database schema is migrated on startup.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    app.include_router(v1_router)
    if settings.enable_test_routes:
        app.include_router(testing_router)

    @app.on_event("startup")
    async def startup_event() -> None:
        # Creates the database file if needed and brings the schema up to date.
        init_db()

    return app


app = create_app()
