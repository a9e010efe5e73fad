import logging
import time

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from schemas.common import ErrorDetail, ErrorResponse
from utils.errors import GradebookError, ReferentialIntegrityError

logger = logging.getLogger(__name__)


def _latency_ms(request: Request) -> int:
    # TimingMiddleware가 기록해 둔 시작 시각이 있으면 사용
    started = getattr(request.state, "started_ms", None)
    return 0 if started is None else max(0, int(time.perf_counter() * 1000 - started))


def _error_json(status_code: int, detail: ErrorDetail, request: Request) -> JSONResponse:
    body = ErrorResponse(error=detail, latency_ms=_latency_ms(request))
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json", exclude_none=True))


def add_error_handlers(app: FastAPI):
    # ✅ 도메인 예외 (NotFound / 참조 무결성 / 중복)
    @app.exception_handler(GradebookError)
    async def gradebook_exception_handler(request: Request, exc: GradebookError):
        logger.warning(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")
        detail = ErrorDetail(code=exc.code, message=exc.message)
        if isinstance(exc, ReferentialIntegrityError):
            detail.missing_ids = exc.missing_ids
        return _error_json(exc.status_code, detail, request)

    # ✅ 그 외 처리되지 않은 예외
    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return _error_json(500, ErrorDetail(code="INTERNAL_ERROR", message=str(exc)), request)
