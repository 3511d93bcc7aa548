"""
Standardized error response helpers for the journal service.

Provides consistent error formatting across all API endpoints with
correlation ID tracking, plus the domain exceptions raised by features
and the handlers that translate them into responses.

Usage:
    from app.shared.errors import (
        ErrorCode, NotFoundError, error_response, validation_error
    )

    # In a route:
    return validation_error(
        message="Situation is required",
        details={"field": "situation"},
        correlation_id=get_correlation_id(request),
    )

    # In a feature:
    raise NotFoundError("Prayer not found", resource_type="prayer", resource_id=prayer_id)
"""

import logging
from enum import Enum
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger("Scrolls.Errors")


class ErrorCode(str, Enum):
    """Standard error codes used across the service."""

    # Client errors (4xx)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    UNAUTHORIZED = "UNAUTHORIZED"
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"
    CONFLICT = "CONFLICT"
    BAD_REQUEST = "BAD_REQUEST"

    # Server errors (5xx)
    INTERNAL_ERROR = "INTERNAL_ERROR"
    EXTERNAL_SERVICE_ERROR = "EXTERNAL_SERVICE_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"

    # Domain-specific errors
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    TRANSCRIPTION_ERROR = "TRANSCRIPTION_ERROR"


class ErrorDetail(BaseModel):
    """Structured error detail model."""
    code: str
    message: str
    details: Optional[dict[str, Any]] = None
    correlation_id: Optional[str] = None


class ErrorResponse(BaseModel):
    """Standard error response wrapper."""
    error: ErrorDetail


# =============================================================================
# DOMAIN EXCEPTIONS
# =============================================================================

class ServiceError(Exception):
    """Base class for errors that map onto a standard error response."""

    code: ErrorCode = ErrorCode.INTERNAL_ERROR
    status_code: int = 500

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class InvalidRequestError(ServiceError):
    """Client input that passed schema validation but is still unusable."""

    code = ErrorCode.VALIDATION_ERROR
    status_code = 400


class NotFoundError(ServiceError):
    """A user-scoped resource does not exist (or belongs to someone else)."""

    code = ErrorCode.NOT_FOUND
    status_code = 404

    def __init__(
        self,
        message: str,
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
    ):
        details = {}
        if resource_type:
            details["resource_type"] = resource_type
        if resource_id:
            details["resource_id"] = resource_id
        super().__init__(message, details or None)


class ConflictError(ServiceError):
    """The requested state transition is not allowed."""

    code = ErrorCode.CONFLICT
    status_code = 409


class AuthenticationError(ServiceError):
    """Missing or invalid access token."""

    code = ErrorCode.UNAUTHORIZED
    status_code = 401


class ConfigurationError(ServiceError):
    """A required upstream credential is missing."""

    code = ErrorCode.CONFIGURATION_ERROR
    status_code = 500

    def __init__(self, message: str, service: Optional[str] = None):
        super().__init__(message, {"service": service} if service else None)


class TranscriptionError(ServiceError):
    """The speech-to-text call failed; there is no fallback transcript."""

    code = ErrorCode.TRANSCRIPTION_ERROR
    status_code = 500


# =============================================================================
# RESPONSE HELPERS
# =============================================================================

def get_correlation_id(request: Optional[Request] = None) -> Optional[str]:
    """
    Extract correlation ID from request state.

    Args:
        request: FastAPI request object (optional)

    Returns:
        Correlation ID string or None if not available
    """
    if request is None:
        return None
    return getattr(request.state, "correlation_id", None)


def error_response(
    code: ErrorCode,
    message: str,
    status_code: int,
    details: Optional[dict[str, Any]] = None,
    correlation_id: Optional[str] = None,
) -> JSONResponse:
    """
    Create a standardized JSON error response.

    Args:
        code: Error code from ErrorCode enum
        message: Human-readable error message
        status_code: HTTP status code
        details: Optional additional error details
        correlation_id: Request correlation ID for tracing

    Returns:
        JSONResponse with standardized error format
    """
    error_detail = ErrorDetail(
        code=code.value,
        message=message,
        details=details,
        correlation_id=correlation_id,
    )
    return JSONResponse(
        status_code=status_code,
        content={"error": error_detail.model_dump(exclude_none=True)},
    )


def validation_error(
    message: str,
    details: Optional[dict[str, Any]] = None,
    correlation_id: Optional[str] = None,
) -> JSONResponse:
    """
    Create a 400 validation error response.

    Args:
        message: Description of what validation failed
        details: Field-level validation errors
        correlation_id: Request correlation ID

    Returns:
        JSONResponse with 400 status
    """
    return error_response(
        code=ErrorCode.VALIDATION_ERROR,
        message=message,
        status_code=400,
        details=details,
        correlation_id=correlation_id,
    )


def configuration_error(
    message: str,
    service: Optional[str] = None,
    correlation_id: Optional[str] = None,
) -> JSONResponse:
    """
    Create a 500 response for a missing upstream credential.

    Args:
        message: Which configuration is missing
        service: Upstream service name (e.g., "anthropic")
        correlation_id: Request correlation ID

    Returns:
        JSONResponse with 500 status
    """
    return error_response(
        code=ErrorCode.CONFIGURATION_ERROR,
        message=message,
        status_code=500,
        details={"service": service} if service else None,
        correlation_id=correlation_id,
    )


def internal_error(
    message: str = "Internal server error",
    details: Optional[dict[str, Any]] = None,
    correlation_id: Optional[str] = None,
) -> JSONResponse:
    """
    Create a 500 internal error response.

    Note: Be careful not to expose sensitive internal details to clients.
    """
    return error_response(
        code=ErrorCode.INTERNAL_ERROR,
        message=message,
        status_code=500,
        details=details,
        correlation_id=correlation_id,
    )


_HTTP_STATUS_CODES = {
    400: ErrorCode.BAD_REQUEST,
    401: ErrorCode.UNAUTHORIZED,
    404: ErrorCode.NOT_FOUND,
    405: ErrorCode.METHOD_NOT_ALLOWED,
    409: ErrorCode.CONFLICT,
}


# =============================================================================
# EXCEPTION HANDLERS
# =============================================================================

async def _service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s: %s", exc.code.value, exc.message)
    else:
        logger.info("%s: %s", exc.code.value, exc.message)
    return error_response(
        code=exc.code,
        message=exc.message,
        status_code=exc.status_code,
        details=exc.details,
        correlation_id=get_correlation_id(request),
    )


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    fields = {}
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        fields[location or "body"] = err.get("msg", "invalid")
    return validation_error(
        message="Invalid request",
        details={"fields": fields},
        correlation_id=get_correlation_id(request),
    )


async def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    code = _HTTP_STATUS_CODES.get(exc.status_code, ErrorCode.INTERNAL_ERROR)
    response = error_response(
        code=code,
        message=str(exc.detail),
        status_code=exc.status_code,
        correlation_id=get_correlation_id(request),
    )
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return internal_error(correlation_id=get_correlation_id(request))


def register_exception_handlers(app: FastAPI) -> None:
    """Install the standard error envelope for domain, validation and HTTP errors."""
    app.add_exception_handler(ServiceError, _service_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)
