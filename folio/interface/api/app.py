"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from folio.config import Settings
from folio.interface.api.routes import (
    auth,
    health,
    notifications,
    projects,
    snippets,
    users,
)
from folio.interface.error import register_exception_handlers
from folio.util.di.container import create_container, setup_di
from folio.util.observability import instrument_fastapi


def create_app(
    settings: Settings | None = None, container: AsyncContainer | None = None
) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        settings: Settings override; loaded from the environment if omitted
        container: DI container override; tests pass one with mock providers
    """
    settings = settings or Settings()

    app_instance = FastAPI(
        title="Folio API",
        description="Backend API for Folio - a developer portfolio for projects and code snippets",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "User-Agent",
            "Cache-Control",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container or create_container())
    register_exception_handlers(app_instance)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    if settings.environment != "production":
        app_instance.include_router(auth.dev_router)
    app_instance.include_router(users.router)
    app_instance.include_router(projects.router)
    app_instance.include_router(snippets.router)
    app_instance.include_router(notifications.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
