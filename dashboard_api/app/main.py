"""
Main entrypoint for the Daily Dashboard API.

This module assembles the FastAPI application, sets up logging,
builds the in‑memory store and service façade, and includes the
versioned routers.  The ``create_app`` function builds and configures
the app, which is then instantiated at module import time as ``app``
so it can be served directly, e.g.::

    uvicorn dashboard_api.app.main:app --reload

Tests call ``create_app(store=DashboardStore())`` to get an isolated,
empty application.
"""

import logging
from typing import Optional

import httpx
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.exceptions import NotFoundError, UpstreamIntegrationError
from .core.logging_config import setup_logging
from .core.seed import seed_demo_data
from .core.store import DashboardStore
from .services import DashboardServices


logger = logging.getLogger(__name__)


def create_app(
    store: Optional[DashboardStore] = None,
    config: Optional[Settings] = None,
    http_transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : DashboardStore, optional
        Store to serve.  When omitted a new store is created and, if
        ``SEED_DEMO_DATA`` is enabled, filled with demo rows.  A store
        passed in is used as is.
    config : Settings, optional
        Overrides the environment‑derived settings.
    http_transport : httpx.AsyncBaseTransport, optional
        Transport for the quote and weather clients (tests pass a mock).

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    config = config or default_settings
    setup_logging(config.log_level, config.log_file or None)

    if store is None:
        store = DashboardStore()
        if config.seed_demo_data:
            seed_demo_data(store, config.default_user_id)

    app = FastAPI(title=config.project_name, version=config.api_version, debug=config.debug)
    app.state.store = store
    app.state.services = DashboardServices(store, config.default_user_id, config, http_transport)

    app.include_router(v1_router, prefix=config.api_prefix)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("Rejected %s %s: invalid request data", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": "Invalid request data", "errors": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": exc.detail})

    @app.exception_handler(UpstreamIntegrationError)
    async def upstream_error_handler(request: Request, exc: UpstreamIntegrationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={"detail": "Weather data unavailable", "message": str(exc)},
        )

    @app.get("/health", tags=["health"])
    async def health() -> dict:
        return {"status": "ok"}

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
