import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from config.settings import settings

logger = logging.getLogger(__name__)


class TimingMiddleware(BaseHTTPMiddleware):
    """응답 헤더 X-Latency-Ms 추가 + 느린 요청 경고 로그"""

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        request.state.started_ms = start * 1000
        response = await call_next(request)
        latency_ms = int((time.perf_counter() - start) * 1000)
        response.headers["X-Latency-Ms"] = str(latency_ms)
        if latency_ms >= settings.SLOW_REQUEST_MS:
            logger.warning(f"Slow request: {request.method} {request.url.path} took {latency_ms}ms")
        return response
