"""FastAPI application."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from threadline.config import Settings
from threadline.interface.api.routes import comments, health
from threadline.interface.error import register_error_handlers
from threadline.util.di.container import create_container, setup_di
from threadline.util.observability import SERVICE_VERSION, instrument_fastapi


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Close the DI container (and with it the database engine) on shutdown."""
    yield
    await app.state.dishka_container.close()


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use; the production container is built
            when omitted (tests pass a container with in-memory persistence)
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Threadline API",
        description="Threaded comments with cascading soft deletes and paginated listings",
        version=SERVICE_VERSION,
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allow_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    register_error_handlers(app_instance)

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(comments.router)

    return app_instance
