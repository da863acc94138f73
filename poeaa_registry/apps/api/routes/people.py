"""People lookup API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Response, status

from poeaa_registry.apps.api.middleware import REGISTRY_TAG_HEADER
from poeaa_registry.core.api_models import PersonResponse
from poeaa_registry.core.logging import get_logger
from poeaa_registry.services.people import RegistryScope, find_person, registry_tag

router = APIRouter(prefix="/api/v1/people", tags=["people"])
logger = get_logger(__name__)


# Sync handler: runs on a worker thread, so thread scope resolves that thread's registry.
@router.get("/{last_name}", response_model=PersonResponse)
def get_person(
    last_name: str, response: Response, scope: RegistryScope = RegistryScope.THREAD
) -> PersonResponse:
    """Find a person by last name through the selected registry."""
    tag = registry_tag(scope)
    if tag is not None:
        response.headers[REGISTRY_TAG_HEADER] = tag

    try:
        result = find_person(last_name, scope)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    if not result.found or result.person is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No person found with last name '{result.last_name}'",
        )

    return PersonResponse(
        first_name=result.person.first_name,
        last_name=result.person.last_name,
        scope=scope.value,
        registry_tag=tag,
    )


__all__ = ["router"]
