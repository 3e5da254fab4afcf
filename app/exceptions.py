# =============================================================================
# app/exceptions.py - Custom Exceptions and Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every error reaches the client as {"error": <message>, "code": <CODE>}.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.cors import CORS_HEADERS

logger = logging.getLogger(__name__)


class TodoApiException(Exception):
    """
    Base exception for the Todo API.

    All custom exceptions inherit from this class and carry the HTTP
    status they map to.
    """

    def __init__(
        self,
        message: str,
        code: str = "TODO_API_ERROR",
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result: dict[str, Any] = {
            "error": self.message,
            "code": self.code,
        }
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Client Errors
# =============================================================================

class UnauthorizedError(TodoApiException):
    """Raised when the bearer credential is missing or rejected."""

    def __init__(self, message: str = "Invalid token"):
        super().__init__(
            message=message,
            code="UNAUTHORIZED",
            status_code=401,
        )


class BadRequestError(TodoApiException):
    """Raised when the request cannot be served as sent."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            message=message,
            code="BAD_REQUEST",
            status_code=400,
            details=details,
        )


class WebhookNotConfiguredError(TodoApiException):
    """Raised when a summary is requested but no Slack webhook is saved."""

    def __init__(self):
        super().__init__(
            message="Slack webhook URL not configured. Please add it in your profile settings.",
            code="WEBHOOK_NOT_CONFIGURED",
            status_code=400,
        )


class TodoNotFoundError(TodoApiException):
    """
    Raised when no todo matches both the ID and the caller.

    A todo owned by someone else is reported exactly like a missing one.
    """

    def __init__(self, todo_id: str):
        super().__init__(
            message="Todo not found or permission denied",
            code="TODO_NOT_FOUND",
            status_code=404,
            details={"todo_id": todo_id},
        )


class ProfileNotFoundError(TodoApiException):
    """Raised when the caller has no profile row yet."""

    def __init__(self):
        super().__init__(
            message="Profile not found",
            code="PROFILE_NOT_FOUND",
            status_code=404,
        )


class RouteNotFoundError(TodoApiException):
    """Raised for an unsupported method/path combination under /todos."""

    def __init__(self):
        super().__init__(
            message="Not found",
            code="NOT_FOUND",
            status_code=404,
        )


# =============================================================================
# Upstream Errors
# =============================================================================

class UpstreamError(TodoApiException):
    """A dependency (database, LLM, webhook) failed; its message is passed on."""

    def __init__(
        self,
        message: str,
        code: str = "UPSTREAM_ERROR",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(
            message=message,
            code=code,
            status_code=500,
            details=details,
        )


class StoreError(UpstreamError):
    """Raised when a Supabase query fails."""

    def __init__(self, error: str):
        super().__init__(message=error, code="STORE_ERROR")


class SummaryGenerationError(UpstreamError):
    """Raised when the LLM call fails or returns nothing."""

    def __init__(self, error: str):
        super().__init__(
            message=f"Failed to generate summary: {error}",
            code="SUMMARY_GENERATION_FAILED",
        )


class DeliveryFailedError(UpstreamError):
    """Raised when the Slack webhook does not accept the summary."""

    def __init__(self, body: str, status_code: int | None = None):
        details: dict[str, Any] = {"response_body": body}
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(
            message=f"Failed to send to Slack: {body}",
            code="DELIVERY_FAILED",
            details=details,
        )
        self.response_body = body


# =============================================================================
# Exception Handlers
# =============================================================================

async def todo_api_exception_handler(
    request: Request,
    exc: TodoApiException
) -> JSONResponse:
    """Convert TodoApiException to JSON response."""
    if exc.status_code >= 500:
        logger.error(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> JSONResponse:
    """
    Reshape routing errors (unknown path, wrong method) into the
    {"error": ...} body used everywhere else.
    """
    if exc.status_code == 405:
        message, code = "Method not allowed", "METHOD_NOT_ALLOWED"
    elif exc.status_code == 404:
        message, code = "Not found", "NOT_FOUND"
    else:
        message, code = str(exc.detail), "HTTP_ERROR"
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": message, "code": code},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle Pydantic validation errors.

    FastAPI decodes the body before resolving dependencies, so the
    credential is checked here first: a request without a valid token
    gets 401 even when its body is broken. Otherwise 400.
    """
    from app.auth.dependencies import get_current_user, security

    credentials = await security(request)
    try:
        await run_in_threadpool(get_current_user, credentials)
    except UnauthorizedError as auth_error:
        return JSONResponse(
            status_code=auth_error.status_code,
            content=auth_error.to_dict()
        )

    errors = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ())[1:]),
            "message": err.get("msg", ""),
        }
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={
            "error": "Validation error",
            "code": "VALIDATION_ERROR",
            "details": {"errors": errors},
        }
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Last-resort handler.

    Runs outside the CORS middleware, so the headers are attached here.
    """
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={"error": str(exc) or "An unexpected error occurred", "code": "INTERNAL_ERROR"},
        headers=CORS_HEADERS,
    )
