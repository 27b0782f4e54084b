"""
Description:
Centralized exception handlers. Every failure leaves the service in the same envelope:
{"success": false, "message": ..., "error"?: ...}. Raw error detail is only included
when ENVIRONMENT=development.

Dependencies:
- fastapi: For request/response types and HTTPException
- slowapi: For the rate limit exception and its response headers
- loguru: For logging unexpected errors
"""
from fastapi import Request, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from slowapi.errors import RateLimitExceeded
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_429_TOO_MANY_REQUESTS, HTTP_500_INTERNAL_SERVER_ERROR

from virtual_panel.core.config import settings
from virtual_panel.schemas.error_response import ErrorResponse

GENERIC_ERROR = "Internal server error"


def error_envelope(status_code: int, message: str, error: str = None) -> JSONResponse:
    body = ErrorResponse(message=message, error=error).model_dump(exclude_none=True)
    return JSONResponse(status_code=status_code, content=body)


def http_exception_handler(request: Request, exc: HTTPException):
    error = None
    if exc.status_code >= HTTP_500_INTERNAL_SERVER_ERROR:
        cause = getattr(exc, "error", None)
        error = cause if settings.is_development and cause else GENERIC_ERROR
    return error_envelope(exc.status_code, str(exc.detail), error)


def validation_exception_handler(request: Request, exc: RequestValidationError):
    error = str(exc.errors()) if settings.is_development else None
    return error_envelope(HTTP_400_BAD_REQUEST, "Invalid request payload", error)


def generic_exception_handler(request: Request, exc: Exception):
    logger.error(f"Server Error on {request.url.path}: {exc}")
    error = str(exc) if settings.is_development else "Something went wrong"
    return error_envelope(HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR, error)


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    logger.warning(f"Rate limit exceeded on {request.url.path}: {exc.detail}")
    response = error_envelope(HTTP_429_TOO_MANY_REQUESTS, "Too many requests")
    # Set by the limiter before it raises; carries the data for the X-RateLimit headers.
    view_rate_limit = getattr(request.state, "view_rate_limit", None)
    if view_rate_limit is not None:
        response = request.app.state.limiter._inject_headers(response, view_rate_limit)
    return response
