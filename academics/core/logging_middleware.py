import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger(__name__)


class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start = time.monotonic()

        try:
            response = await call_next(request)
        except Exception:
            logger.exception("%s %s -> unhandled error", request.method, request.url.path)
            raise

        duration_ms = (time.monotonic() - start) * 1000
        path = request.url.path
        if request.url.query:
            path = f"{path}?{request.url.query}"

        level = logging.ERROR if response.status_code >= 500 else logging.INFO
        logger.log(
            level,
            "%s %s -> %s (%.1fms)",
            request.method,
            path,
            response.status_code,
            duration_ms,
        )

        return response
