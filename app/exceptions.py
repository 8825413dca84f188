# =============================================================================
# app/exceptions.py - Custom Exceptions and Handlers
# =============================================================================
# Centralized exception handling for the API.
# Errors raised by the store layer are converted to HTTP responses here.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse, Response

from app.config import PUBLIC_CORS_HEADERS

logger = logging.getLogger(__name__)


class UsersApiException(Exception):
    """
    Base exception for the Users API.

    All custom exceptions inherit from this class.
    Carries an error code, HTTP status and an optional hint on how to fix it.
    """

    def __init__(
        self,
        message: str,
        code: str = "USERS_API_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Store Exceptions
# =============================================================================

class DatabaseConnectionError(UsersApiException):
    """Raised when the store is unreachable or rejects the handshake."""

    def __init__(self, error: str, url: str | None = None):
        super().__init__(
            message=f"Failed to connect to database: {error}",
            code="DATABASE_CONNECTION_ERROR",
            status_code=503,
            suggestion="Check DATABASE_URL and that the database server is running",
            details={"url": url} if url else None,
        )
        self.error = error


class QueryError(UsersApiException):
    """
    Raised when the users query fails to start or a row fails to scan.

    The message is the bare driver error text; it is what the client sees.
    """

    def __init__(self, error: str):
        super().__init__(
            message=error,
            code="QUERY_ERROR",
            status_code=500,
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def users_api_exception_handler(
    request: Request,
    exc: UsersApiException
) -> JSONResponse:
    """
    Convert UsersApiException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    logger.error(f"{exc.code} on {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
        headers=PUBLIC_CORS_HEADERS,
    )


async def query_exception_handler(
    request: Request,
    exc: QueryError
) -> Response:
    """
    Convert QueryError to a 500 carrying the error text as the body.

    The content type stays application/json so clients see the same
    headers on success and failure.
    """
    return Response(
        content=exc.message,
        status_code=exc.status_code,
        media_type="application/json",
        headers=PUBLIC_CORS_HEADERS,
    )


async def unexpected_exception_handler(
    request: Request,
    exc: Exception
) -> Response:
    """
    Handle exceptions nothing else caught.

    Runs outside the CORS middleware, so the allow-origin header is set here.
    The body is the error text, as for query failures.
    """
    logger.exception(f"Unexpected error on {request.url.path}: {exc}")
    return Response(
        content=str(exc) or exc.__class__.__name__,
        status_code=500,
        media_type="application/json",
        headers=PUBLIC_CORS_HEADERS,
    )
