"""
Main entrypoint for the CRUD Demo API.

This module assembles the FastAPI application: it sets up logging,
creates the per‑application services (one in‑memory store per
resource kind), installs CORS, mounts the API router under ``/api``
and registers the error handlers that produce the uniform response
envelope.  ``create_app`` builds a fresh, isolated application; the
module‑level ``app`` is the instance served by uvicorn, e.g.::

    uvicorn crud_demo_api.app.main:app --reload
"""

import logging
import os
from datetime import datetime
from typing import Callable, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from .api.error_handlers import register_error_handlers
from .api.router import router as api_router
from .core.config import Settings, settings
from .core.logging_config import setup_logging
from .core.store import utcnow
from .services.registry import build_services


logger = logging.getLogger(__name__)


def create_app(
    app_settings: Optional[Settings] = None,
    *,
    seed: Optional[bool] = None,
    clock: Callable[[], datetime] = utcnow,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use; defaults to the module‑level ``settings``.
    seed : Optional[bool]
        Whether to load the demo records.  ``None`` defers to
        ``app_settings.seed_demo_data``.
    clock : Callable[[], datetime]
        Timestamp source shared by all stores.

    Returns
    -------
    FastAPI
        A configured application with its own empty (or seeded) stores.
    """
    app_settings = app_settings or settings
    # Initialise logging before anything else so that the steps below
    # can log.
    setup_logging(app_settings.log_level, app_settings.log_file or None)

    app = FastAPI(title=app_settings.app_name, version=app_settings.api_version)
    app.state.settings = app_settings
    app.state.services = build_services(
        seed=app_settings.seed_demo_data if seed is None else seed,
        clock=clock,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix="/api")
    register_error_handlers(app)

    # Static frontend, mounted after the API routes so /api/* takes
    # precedence.
    if app_settings.static_dir and os.path.isdir(app_settings.static_dir):
        app.mount("/", StaticFiles(directory=app_settings.static_dir, html=True), name="static")

    logger.info("%s configured (%s)", app_settings.app_name, app_settings.environment)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
