"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers, error handlers and
observability middleware, and configures the uvicorn server.

Dependencies: fastapi, uvicorn, vaccine_registry.api.routers, vaccine_registry.boundary
System role: API entry point with router assembly and server launch
"""

from contextlib import asynccontextmanager
import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from vaccine_registry import __version__
from vaccine_registry.boundary.db.connection import (
    get_async_engine,
    get_async_session_factory,
)
from vaccine_registry.boundary.db.create_tables import create_all_tables
from vaccine_registry.configs import Settings, get_settings
from vaccine_registry.observability.logger import configure_logging
from vaccine_registry.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)
from .routers import health_router, vaccines_router
from .routers.vaccines import register_vaccine_error_handlers

logger = logging.getLogger(__name__)

# h11 drops any body on a 204; httptools honours an explicit Content-Length
HTTP_PROTOCOL = "httptools"


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Args:
        settings: Application settings (defaults to the cached environment settings)

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan context manager.

        Builds the engine and session factory once, optionally creates
        tables, and disposes the engine on shutdown.
        """
        configure_logging(settings.log_level)

        engine = get_async_engine(settings.database)
        app.state.engine = engine
        app.state.session_factory = get_async_session_factory(engine)
        logger.info(
            "Database engine initialized",
            extra={"dialect": engine.dialect.name, "environment": settings.environment},
        )

        if settings.database.create_tables:
            await create_all_tables(engine)

        yield

        await engine.dispose()
        logger.info("Database engine disposed")

    app = FastAPI(
        title=settings.api.title,
        description="Vaccine catalog with create/read/update/delete/exists operations",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )

    # Added first = innermost; correlation ID must wrap request logging
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_vaccine_error_handlers(app)

    app.include_router(health_router, prefix=settings.api.prefix)
    app.include_router(vaccines_router, prefix=settings.api.prefix)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "vaccine_registry.api.main:app",
        host="0.0.0.0",
        port=8000,
        http=HTTP_PROTOCOL,
    )
