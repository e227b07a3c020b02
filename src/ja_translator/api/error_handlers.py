"""
FastAPI exception handlers for structured error responses.

Maps the public translation error taxonomy to HTTP status codes. Every
body has the same shape: {error, message, hint, details, timestamp}.
"""

from datetime import datetime, timezone

import structlog
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from ja_translator.exceptions import (
    AuthError,
    EmptyResponseError,
    InvalidApiKeyError,
    InvalidModelError,
    NoTextAvailableError,
    PermissionDeniedError,
    ProviderRequestError,
    QuotaExceededError,
    TranslationError,
    TranslationTimeoutError,
    ValidationError,
)

logger = structlog.get_logger(__name__)


# Most specific class first; the first isinstance() match wins.
ERROR_STATUS: tuple[tuple[type[TranslationError], int, str], ...] = (
    (NoTextAvailableError, status.HTTP_400_BAD_REQUEST, "no_text"),
    (ValidationError, status.HTTP_422_UNPROCESSABLE_ENTITY, "validation_failed"),
    (InvalidApiKeyError, status.HTTP_401_UNAUTHORIZED, "invalid_api_key"),
    (PermissionDeniedError, status.HTTP_403_FORBIDDEN, "permission_denied"),
    (AuthError, status.HTTP_401_UNAUTHORIZED, "auth_failed"),
    (InvalidModelError, status.HTTP_400_BAD_REQUEST, "invalid_model"),
    (QuotaExceededError, status.HTTP_429_TOO_MANY_REQUESTS, "quota_exceeded"),
    (TranslationTimeoutError, status.HTTP_504_GATEWAY_TIMEOUT, "timeout"),
    (EmptyResponseError, status.HTTP_502_BAD_GATEWAY, "empty_response"),
    (ProviderRequestError, status.HTTP_502_BAD_GATEWAY, "provider_error"),
)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def status_for(exc: TranslationError) -> tuple[int, str]:
    """HTTP status and error code for a translation error."""
    for error_class, status_code, code in ERROR_STATUS:
        if isinstance(exc, error_class):
            return status_code, code
    return status.HTTP_500_INTERNAL_SERVER_ERROR, "translation_failed"


async def translation_error_handler(request: Request, exc: TranslationError) -> JSONResponse:
    """
    Handle every error of the public taxonomy.

    Args:
        request: FastAPI request
        exc: TranslationError instance

    Returns:
        JSON error response
    """
    status_code, code = status_for(exc)
    logger.warning(
        "Translation error",
        error_type=type(exc).__name__,
        status_code=status_code,
        details=exc.details,
    )

    return JSONResponse(
        status_code=status_code,
        content={
            "error": code,
            "message": exc.message,
            "hint": exc.hint,
            "details": exc.details,
            "timestamp": _now(),
        },
    )


async def request_validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle invalid request bodies (FastAPI RequestValidationError and
    pydantic errors raised while building the TranslationRequest).

    Maps to 400 Bad Request (client error).
    """
    errors = exc.errors() if hasattr(exc, "errors") else []
    logger.warning("Invalid request format", errors=errors)

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "invalid_request",
            "message": "Request validation failed",
            "hint": "Check the request body against the API documentation at /docs.",
            "details": {"errors": [_safe_error(e) for e in errors]},
            "timestamp": _now(),
        },
    )


def _safe_error(error: dict) -> dict:
    # "input" may hold the API key, "ctx" may hold non-serializable exceptions
    return {"loc": list(error.get("loc", ())), "msg": error.get("msg", ""), "type": error.get("type", "")}


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle unexpected errors.

    Maps to 500 Internal Server Error.
    """
    logger.exception("Unexpected error", error_type=type(exc).__name__)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "internal_error",
            "message": "An unexpected error occurred",
            "hint": "",
            "details": {},
            "timestamp": _now(),
        },
    )


# Exception handler mapping for FastAPI app.add_exception_handler()
EXCEPTION_HANDLERS = {
    TranslationError: translation_error_handler,
    RequestValidationError: request_validation_error_handler,
    PydanticValidationError: request_validation_error_handler,
    Exception: generic_error_handler,
}
