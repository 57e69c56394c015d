"""Error handling and exception handlers for aicad-py.

Every error leaves the API as the same JSON shape, carrying the request's
correlation ID so that it can be matched with the server logs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import structlog
from litestar import Response
from litestar.status_codes import (
    HTTP_404_NOT_FOUND,
    HTTP_422_UNPROCESSABLE_ENTITY,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

if TYPE_CHECKING:
    from litestar import Request
    from litestar.exceptions import HTTPException, ValidationException

logger = structlog.get_logger(__name__)

_STATUS_CODES = {
    400: "bad_request",
    404: "not_found",
    405: "method_not_allowed",
    409: "conflict",
    422: "validation_error",
    500: "internal_error",
}


@dataclass
class ErrorDetail:
    """Details about a specific error."""

    field: str | None = None
    message: str = ""
    code: str = "error"


@dataclass
class ErrorResponse:
    """Structured error response format."""

    status: str = "error"
    message: str = ""
    code: str = "internal_error"
    correlation_id: str | None = None
    details: list[ErrorDetail] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON response."""
        result: dict[str, Any] = {
            "status": self.status,
            "message": self.message,
            "code": self.code,
        }
        if self.correlation_id:
            result["correlation_id"] = self.correlation_id
        if self.details:
            result["details"] = [{"field": d.field, "message": d.message, "code": d.code} for d in self.details]
        return result

    def to_response(self, status_code: int) -> Response[dict[str, Any]]:
        """Wrap the error in a JSON response."""
        return Response(content=self.to_dict(), status_code=status_code, media_type="application/json")


def get_correlation_id(request: Request) -> str | None:
    """Extract the correlation ID from request state or headers."""
    correlation_id = request.scope.get("state", {}).get("correlation_id")
    return correlation_id or request.headers.get("X-Correlation-ID")


def validation_exception_handler(request: Request, exc: ValidationException) -> Response[dict[str, Any]]:
    """Handle request body/parameter validation errors with per-field details."""
    correlation_id = get_correlation_id(request)

    details: list[ErrorDetail] = []
    for error in exc.extra or []:
        if isinstance(error, dict):
            details.append(
                ErrorDetail(
                    field=error.get("key") or error.get("source"),
                    message=str(error.get("message", error)),
                    code="validation_error",
                )
            )
        else:
            details.append(ErrorDetail(message=str(error), code="validation_error"))
    if not details:
        details.append(ErrorDetail(message=str(exc.detail), code="validation_error"))

    logger.warning("Validation error", correlation_id=correlation_id, path=request.url.path, error_count=len(details))
    return ErrorResponse(
        message="Validation failed",
        code="validation_error",
        correlation_id=correlation_id,
        details=details,
    ).to_response(HTTP_422_UNPROCESSABLE_ENTITY)


def http_exception_handler(request: Request, exc: HTTPException) -> Response[dict[str, Any]]:
    """Handle HTTP exceptions raised by Litestar or route handlers."""
    correlation_id = get_correlation_id(request)
    error_code = _STATUS_CODES.get(exc.status_code, "error")

    log_method = logger.warning if exc.status_code < 500 else logger.error
    log_method(
        "HTTP exception",
        correlation_id=correlation_id,
        path=request.url.path,
        status_code=exc.status_code,
        error_code=error_code,
    )
    return ErrorResponse(
        message=exc.detail if isinstance(exc.detail, str) else str(exc.detail),
        code=error_code,
        correlation_id=correlation_id,
    ).to_response(exc.status_code)


def tool_not_found_handler(request: Request, exc: Exception) -> Response[dict[str, Any]]:
    """Handle ToolNotFoundError exceptions."""
    correlation_id = get_correlation_id(request)
    tool_name = getattr(exc, "tool_name", "unknown")

    logger.warning("Tool not found", correlation_id=correlation_id, tool=tool_name)
    return ErrorResponse(
        message=str(exc),
        code="tool_not_found",
        correlation_id=correlation_id,
        details=[ErrorDetail(field="name", message=f"Unknown tool: {tool_name}", code="not_found")],
    ).to_response(HTTP_404_NOT_FOUND)


def invalid_tool_arguments_handler(request: Request, exc: Exception) -> Response[dict[str, Any]]:
    """Handle InvalidToolArgumentsError exceptions."""
    correlation_id = get_correlation_id(request)
    parameter = getattr(exc, "parameter", None)

    logger.warning(
        "Invalid tool arguments",
        correlation_id=correlation_id,
        tool=getattr(exc, "tool_name", "unknown"),
        parameter=parameter,
    )
    return ErrorResponse(
        message=str(exc),
        code="invalid_tool_arguments",
        correlation_id=correlation_id,
        details=[ErrorDetail(field=parameter, message=str(exc), code="invalid")],
    ).to_response(HTTP_422_UNPROCESSABLE_ENTITY)


def generic_exception_handler(request: Request, exc: Exception) -> Response[dict[str, Any]]:
    """Handle unexpected exceptions with a generic error response.

    Logs the full exception but returns a safe message to the client.
    """
    correlation_id = get_correlation_id(request)

    logger.exception(
        "Unhandled exception",
        correlation_id=correlation_id,
        path=request.url.path,
        method=request.method,
        exc_info=exc,
    )
    return ErrorResponse(
        message="An unexpected error occurred. Please try again later.",
        code="internal_error",
        correlation_id=correlation_id,
    ).to_response(HTTP_500_INTERNAL_SERVER_ERROR)


def get_exception_handlers(*, include_generic: bool = True) -> dict:
    """Get the exception handlers for the application.

    Args:
        include_generic: Also map bare ``Exception`` to the generic handler.

    Returns:
        Dictionary mapping exception types to handler functions.

    Note:
        Uses deferred imports to avoid circular dependencies.
    """
    from litestar.exceptions import HTTPException, ValidationException

    from aicad_py.exceptions import InvalidToolArgumentsError, ToolNotFoundError

    handlers: dict = {
        ValidationException: validation_exception_handler,
        HTTPException: http_exception_handler,
        ToolNotFoundError: tool_not_found_handler,
        InvalidToolArgumentsError: invalid_tool_arguments_handler,
    }
    if include_generic:
        handlers[Exception] = generic_exception_handler
    return handlers
