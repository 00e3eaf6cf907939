"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from resdir.config import Settings
from resdir.interface.api.routes import (
    admin,
    categories,
    health,
    resources,
    subcategories,
    suggestions,
    tags,
)
from resdir.util.di.container import create_container, setup_di
from resdir.util.observability import instrument_fastapi, instrument_httpx


def register_routes(app_instance: FastAPI) -> None:
    """Attach every router to the application."""
    app_instance.include_router(health.router)
    app_instance.include_router(tags.router)
    app_instance.include_router(categories.router)
    app_instance.include_router(subcategories.router)
    app_instance.include_router(resources.router)
    app_instance.include_router(admin.router)
    app_instance.include_router(suggestions.router)


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use instead of the production one
    """
    settings = Settings()

    # Outbound classifier calls
    instrument_httpx()

    app_instance = FastAPI(
        title="Resource Directory API",
        description=(
            "Browse, search and submit resources tagged against a "
            "category / subcategory / tag taxonomy"
        ),
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Settings are loaded from environment automatically
    if container is None:
        container = create_container()
    setup_di(app_instance, container)

    register_routes(app_instance)

    return app_instance
