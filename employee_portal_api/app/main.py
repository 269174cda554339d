"""
Main entrypoint for the Employee Portal demo API.

This module assembles the FastAPI application, sets up logging,
error handlers, CORS and the seed data, and includes the routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn employee_portal_api.app.main:app --port 8080
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.router import router
from .core.config import Settings, settings as default_settings
from .core.errors import register_error_handlers
from .core.logging_config import setup_logging
from .core.paths import PathNormalizationMiddleware
from .core.seed import SeedData, default_seed_data


logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, seed_data: Optional[SeedData] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to run with.  Defaults to the module‑level settings
        read from the environment.
    seed_data : Optional[SeedData]
        Accounts and products to serve.  Defaults to the built‑in demo
        records.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    # API docs are only exposed in debug mode; otherwise their paths
    # fall through to the catch‑all 404 like any other unknown path.
    docs_enabled = settings.debug
    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        # Trailing slashes are handled by PathNormalizationMiddleware.
        redirect_slashes=False,
    )

    app.state.settings = settings
    app.state.seed_data = seed_data or default_seed_data()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(PathNormalizationMiddleware)
    register_error_handlers(app)
    app.include_router(router)

    @app.on_event("startup")
    async def startup_event() -> None:
        logger.info("🚀 %s v%s 已啟動於 Port %s", settings.project_name, settings.api_version, settings.port)
        logger.debug(
            "Serving %d accounts and %d products",
            len(app.state.seed_data.accounts),
            len(app.state.seed_data.products),
        )

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
