import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request


logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id

        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = int((time.perf_counter() - start) * 1000)
            logger.error(
                "%s %s failed request_id=%s duration_ms=%s err=%r",
                request.method,
                request.url.path,
                request_id,
                duration_ms,
                e,
            )
            raise

        duration_ms = int((time.perf_counter() - start) * 1000)
        logger.info(
            "%s %s %s %sms request_id=%s",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
            request_id,
        )

        response.headers["x-request-id"] = request_id
        return response
