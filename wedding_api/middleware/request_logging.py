import time
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from wedding_api.core.logging import logger


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and duration of every request."""

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            elapsed_ms = (time.perf_counter() - start) * 1000
            logger.error(f"{request.method} {request.url.path} failed after {elapsed_ms:.1f}ms")
            raise
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(f"{request.method} {request.url.path} {response.status_code} {elapsed_ms:.1f}ms")
        return response
