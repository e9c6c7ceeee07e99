"""Error Handlers — map every failure to the reporting error envelope.

Invariants:
    - ReportingError → its own status (404 / 503 / 504) and to_response() body
    - Unknown routes and disallowed methods → same envelope shape, not Starlette's
    - RequestValidationError (e.g. non-numeric order id) → 400 with field details
    - Anything else → 500 INTERNAL_ERROR, no internal details
    - Every envelope carries the request id
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from reporting.core.errors import ErrorCategory, ErrorSeverity, ReportingError
from reporting.infrastructure.observability import request_id_var

logger = logging.getLogger(__name__)


def _envelope(
    http_status: int, body: dict, headers: dict[str, str] | None = None,
) -> JSONResponse:
    body["error"]["request_id"] = request_id_var.get()
    return JSONResponse(status_code=http_status, content=body, headers=headers)


def _plain_error(
    code: str, message: str, category: str, severity: ErrorSeverity, **extra,
) -> dict:
    return {
        "error": {
            "code": code,
            "message": message,
            "category": category,
            "severity": severity.value,
            **extra,
        },
    }


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(ReportingError)
    async def reporting_error_handler(request: Request, exc: ReportingError):
        log = logger.warning if exc.http_status < 500 else logger.error
        log(
            f"{exc.code} on {request.url.path}: {exc.message}",
            extra={
                "error_code": exc.code,
                "operation": exc.context.operation,
                "path": request.url.path,
            },
        )
        headers = None
        if exc.category in (ErrorCategory.DATABASE, ErrorCategory.CANCELLED):
            headers = {"Retry-After": "5"}
        return _envelope(exc.http_status, exc.to_response(), headers)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        code = {
            status.HTTP_404_NOT_FOUND: "ROUTE_NOT_FOUND",
            status.HTTP_405_METHOD_NOT_ALLOWED: "METHOD_NOT_ALLOWED",
        }.get(exc.status_code, "HTTP_ERROR")
        return _envelope(
            exc.status_code,
            _plain_error(code, str(exc.detail), "http", ErrorSeverity.WARNING),
            getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        details = [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ]
        return _envelope(
            status.HTTP_400_BAD_REQUEST,
            _plain_error(
                "VALIDATION_ERROR", "Invalid request parameters", "validation",
                ErrorSeverity.ERROR, details=details,
            ),
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path},
        )
        return _envelope(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            _plain_error(
                "INTERNAL_ERROR", "An unexpected error occurred",
                ErrorCategory.INTERNAL.value, ErrorSeverity.CRITICAL,
            ),
        )
