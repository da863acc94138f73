"""HTTP middleware tying each request to the registry that served it."""

from __future__ import annotations

import time
import uuid
from typing import Awaitable, Callable

from fastapi import Request, Response

from poeaa_registry.core.logging import correlation_id_context, get_logger

REQUEST_ID_HEADER = "X-Request-ID"
# Set by thread-scoped handlers; names the worker thread's registry instance.
REGISTRY_TAG_HEADER = "X-Registry-Tag"

logger = get_logger(__name__)


async def registry_request_logging(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Bind a request id for logging and record which registry served the request."""
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
    with correlation_id_context(request_id):
        started = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "registry request served",
            extra={
                "event": "registry_request",
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "registry_tag": response.headers.get(REGISTRY_TAG_HEADER, "-"),
                "duration_ms": round((time.perf_counter() - started) * 1000.0, 2),
            },
        )
    response.headers[REQUEST_ID_HEADER] = request_id
    return response


__all__ = ["REGISTRY_TAG_HEADER", "REQUEST_ID_HEADER", "registry_request_logging"]
