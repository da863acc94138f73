"""API request/response models for the people lookup REST API."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class PersonResponse(BaseModel):
    """Response model for GET /api/v1/people/{last_name}."""

    first_name: str = Field(..., description="Given name of the found person")
    last_name: str = Field(..., description="Surname of the found person")
    scope: Literal["global", "thread"] = Field(
        ..., description="Registry the finder was resolved from"
    )
    registry_tag: str | None = Field(
        default=None, description="Thread registry tag (thread scope only)"
    )


class ReinitializeResponse(BaseModel):
    """Response model for POST /api/v1/registry/reinitialize."""

    scope: Literal["global", "thread"] = Field(..., description="Registry that was replaced")
    person_finder: str = Field(..., description="Finder type held by the fresh registry")
    registry_tag: str | None = Field(
        default=None, description="Thread registry tag (thread scope only)"
    )


__all__ = ["PersonResponse", "ReinitializeResponse"]
