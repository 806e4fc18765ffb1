"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from verisart.config import Settings
from verisart.interface.api.errors import register_error_handlers
from verisart.interface.api.routes import certificates, health, users
from verisart.util.di.container import create_container, setup_di
from verisart.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py does.

    Args:
        container: DI container to use; the production container if None
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Verisart API",
        description="Certificates of ownership for artworks, and their transfer between users",
        version="0.1.0",
    )

    # Request tracing doubles as the access log
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allow_origins,
        allow_methods=settings.cors.allow_methods,
        allow_headers=settings.cors.allow_headers,
        max_age=settings.cors.max_age,
    )

    register_error_handlers(app_instance)

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(users.router)
    app_instance.include_router(certificates.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
