"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from atrium.config import Settings
from atrium.interface.api.routes import auth, config, health, settings
from atrium.util.di.container import create_container, setup_di
from atrium.util.observability import instrument_fastapi, instrument_httpx


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to serve requests from. Defaults to the
            production container; tests pass one built with mocks.
    """
    app_settings = Settings()

    # Provider token and user-info calls go through httpx
    instrument_httpx()

    app_instance = FastAPI(
        title="Atrium API",
        description="Account service with OAuth login, registration and timezone settings",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    # Frontend lives on its own host and sends the session cookie
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            app_settings.api.frontend_url,
            "http://localhost:3000",  # Local development
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(config.router)
    app_instance.include_router(settings.router)

    return app_instance
