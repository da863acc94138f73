"""Health and readiness routes."""

from fastapi import APIRouter

router = APIRouter()


@router.get("/")
def read_root() -> dict[str, str]:
    """Info endpoint with a short usage message."""
    return {"message": "People lookup registry demo. Refer to /docs for available endpoints."}


@router.get("/alive")
async def alive_check() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "ok"}


__all__ = ["router"]
