"""
Request id tracing for the onboarding API.
"""
import time
import uuid
from typing import Callable

from fastapi import Request, Response
from structlog.contextvars import bind_contextvars, clear_contextvars

from gardenswap.logging_config import get_logger

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


async def request_id_middleware(request: Request, call_next: Callable) -> Response:
    """
    Tag every log line of a request with its id, and echo the id back.
    A caller-supplied X-Request-ID is reused.
    """
    request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
    request.state.request_id = request_id

    clear_contextvars()
    bind_contextvars(request_id=request_id, method=request.method, path=request.url.path)
    logger.info("request_started")

    started = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception as exc:
        logger.error("request_failed", exc_info=exc, duration_ms=_elapsed_ms(started))
        raise
    else:
        logger.info(
            "request_completed",
            status_code=response.status_code,
            duration_ms=_elapsed_ms(started),
        )
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
    finally:
        clear_contextvars()


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)
