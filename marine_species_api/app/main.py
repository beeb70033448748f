"""
Main entrypoint for the Marine Species Database API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  ``create_app`` builds the app together
with its record stores, which live on ``app.state`` for as long as the
application does.  A module-level ``app`` is created at import time so
that it can be served directly, e.g.::

    uvicorn marine_species_api.app.main:app --reload
"""

import logging
import time
from typing import Callable, Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .services.dispatcher import build_dispatcher


def create_app(settings: Optional[Settings] = None, clock: Callable[[], int] = time.time_ns) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use instead of the ones read from the environment.
    clock : Callable[[], int]
        Source of record timestamps in nanoseconds.

    Returns
    -------
    FastAPI
        A configured application with empty taxonomy and species stores.
    """
    settings = settings or default_settings
    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.settings = settings
    app.state.dispatcher = build_dispatcher(settings, clock=clock)

    app.include_router(v1_router, prefix="/api/v1")

    logging.getLogger(__name__).info("%s %s ready", settings.project_name, settings.api_version)
    return app


app = create_app()
