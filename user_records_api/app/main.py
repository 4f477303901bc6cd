"""
Main entrypoint for the User Records API.

This module assembles the FastAPI application: it sets up logging,
creates the record store and user service, registers the JSON error
handlers and includes the routers.  ``create_app`` builds a fresh
application; an instance is also created at import time as ``app`` so
it can be served directly, e.g.::

    uvicorn user_records_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.router import router
from .core.config import Settings, settings as default_settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.store import RecordStore
from .services.user_service import UserService


logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, store: Optional[RecordStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the settings read from the
        environment at import time.
    store : Optional[RecordStore]
        Record store backing the user service.  A freshly seeded store
        is created when omitted, so every application owns its state.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file, settings.log_file_level)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    app.state.store = store if store is not None else RecordStore()
    app.state.user_service = UserService(app.state.store, latency=settings.service_latency)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app, debug=settings.debug)
    app.include_router(router)

    logger.debug(
        "Application configured (environment=%s, latency=%sms)",
        settings.environment,
        settings.service_latency_ms,
    )
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
