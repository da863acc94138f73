"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from poeaa_registry.apps.api.middleware import registry_request_logging
from poeaa_registry.core.config import settings
from poeaa_registry.core.logging import get_logger
from poeaa_registry.services.registry import Registry

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):  # pylint: disable=unused-argument
    """Log the registry wiring at startup."""
    logger.info(
        "starting people lookup API",
        extra={
            "person_finder": settings.PERSON_FINDER,
            "global_finder": type(Registry.get_instance().person_finder).__name__,
        },
    )
    yield
    logger.info("people lookup API stopped")


def create_app() -> FastAPI:
    """Build the FastAPI application with configured routers."""
    app = FastAPI(title="poeaa-registry", lifespan=lifespan)
    app.middleware("http")(registry_request_logging)

    # Import lazily to avoid potential circular imports when routers grow.
    from .routes import health, people, registry  # pylint: disable=import-outside-toplevel

    app.include_router(health.router)
    app.include_router(people.router)
    app.include_router(registry.router)
    return app


__all__ = ["create_app", "lifespan"]
