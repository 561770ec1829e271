"""Exception handlers rendering the API error envelope."""

from typing import Any

import structlog
from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.exceptions import AppException

logger = structlog.get_logger(__name__)


def error_response(
    request: Request,
    status_code: int,
    error: str,
    message: Any,
    **extra: Any,
) -> JSONResponse:
    """Build ``{"error", "message", "path"}`` with optional extra fields."""
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(
            {"error": error, "message": message, **extra, "path": str(request.url)}
        ),
    )


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """
    Handle application exceptions.

    Domain rejections (validation, slot conflicts, immutability) are logged
    at info level; storage failures at error level.
    """
    log = logger.error if exc.status_code >= 500 else logger.info
    log(
        "request_rejected",
        error=exc.__class__.__name__,
        message=exc.message,
        status_code=exc.status_code,
        path=request.url.path,
    )
    return error_response(request, exc.status_code, exc.__class__.__name__, exc.message)


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> JSONResponse:
    response = error_response(request, exc.status_code, "HTTPException", exc.detail)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """
    Handle request validation errors.

    Returns:
        JSON error response with validation details
    """
    return error_response(
        request,
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "ValidationError",
        "Request validation failed",
        details=exc.errors(),
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions with a generic 500."""
    logger.exception("unhandled_exception", path=request.url.path, error=str(exc))
    return error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "InternalServerError",
        "An unexpected error occurred",
    )
