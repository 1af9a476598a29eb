"""
Request logging and last-resort error handling for the HTTP app
"""

import logging
import time
import uuid
from typing import Callable

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
SLOW_REQUEST_SECONDS = 1.0


def request_id_for(request: Request) -> str:
    """Caller supplied id, else a short generated one; cached on request.state"""
    request_id = getattr(request.state, "request_id", None)
    if request_id is None:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:12]
        request.state.request_id = request_id
    return request_id


async def log_requests(request: Request, call_next: Callable):
    """Log slow or failed tool calls and tag every response with its request id"""
    started = time.perf_counter()
    request_id = request_id_for(request)

    try:
        response = await call_next(request)
    except Exception:
        logger.error(
            "[%s] %s %s failed after %.2fs",
            request_id,
            request.method,
            request.url.path,
            time.perf_counter() - started,
        )
        raise

    elapsed = time.perf_counter() - started
    if response.status_code >= 500:
        level = logging.ERROR
    elif response.status_code >= 400:
        level = logging.WARNING
    elif elapsed > SLOW_REQUEST_SECONDS:
        level = logging.INFO
    else:
        level = logging.DEBUG
    logger.log(
        level,
        "[%s] %s %s -> %d in %.2fs",
        request_id,
        request.method,
        request.url.path,
        response.status_code,
        elapsed,
    )
    response.headers[REQUEST_ID_HEADER] = request_id
    return response


async def global_exception_handler(request: Request, exc: Exception):
    request_id = request_id_for(request)
    logger.error(
        "[%s] Unhandled %s in %s %s: %s",
        request_id,
        type(exc).__name__,
        request.method,
        request.url.path,
        exc,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"},
        headers={REQUEST_ID_HEADER: request_id},
    )
