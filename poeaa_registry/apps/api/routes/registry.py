"""Registry management endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Response

from poeaa_registry.apps.api.middleware import REGISTRY_TAG_HEADER
from poeaa_registry.core.api_models import ReinitializeResponse
from poeaa_registry.core.logging import get_logger
from poeaa_registry.services.people import (
    RegistryScope,
    registry_tag,
    reinitialize,
    resolve_person_finder,
)

router = APIRouter(prefix="/api/v1/registry", tags=["registry"])
logger = get_logger(__name__)


@router.post("/reinitialize", response_model=ReinitializeResponse)
def reinitialize_registry(
    response: Response, scope: RegistryScope = RegistryScope.GLOBAL
) -> ReinitializeResponse:
    """Replace the selected registry with a fresh default instance.

    Thread scope only affects the worker thread serving this request.
    """
    reinitialize(scope)
    finder = resolve_person_finder(scope)
    tag = registry_tag(scope)
    if tag is not None:
        response.headers[REGISTRY_TAG_HEADER] = tag
    logger.info("registry reinitialized via API", extra={"scope": scope.value})
    return ReinitializeResponse(
        scope=scope.value,
        person_finder=type(finder).__name__,
        registry_tag=tag,
    )


__all__ = ["router"]
