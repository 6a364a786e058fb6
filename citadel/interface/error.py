"""Interface layer error handling.

Maps domain errors to HTTP responses of the form
``{"error": <message>, "kind": <kind>}``. Unexpected exceptions become a
generic 500 without internal details.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from citadel.domain.error import DomainError, ErrorKind

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.INVALID_ARGUMENT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.UNAUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_response(kind: ErrorKind, message: str) -> JSONResponse:
    """Build the JSON error body for an error kind."""
    return JSONResponse(
        status_code=STATUS_BY_KIND[kind],
        content={"error": message, "kind": kind.value},
    )


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Translate a DomainError raised by a use case."""
    if exc.kind is ErrorKind.INTERNAL:
        logfire.error("Domain error", path=request.url.path, error=str(exc))
        return error_response(ErrorKind.INTERNAL, "Internal server error")

    logfire.warn(
        "Request rejected",
        path=request.url.path,
        kind=exc.kind.value,
        error=str(exc),
    )
    return error_response(exc.kind, str(exc))


async def handle_value_validation_error(
    request: Request, exc: ValidationError
) -> JSONResponse:
    """Translate a value object rejecting its input (e.g. an overlong username)."""
    messages = "; ".join(err["msg"] for err in exc.errors())
    logfire.warn("Invalid value", path=request.url.path, error=messages)
    return error_response(ErrorKind.INVALID_ARGUMENT, messages)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for persistence failures and bugs."""
    logfire.error(
        "Unhandled error",
        path=request.url.path,
        error_type=type(exc).__name__,
        _exc_info=exc,
    )
    return error_response(ErrorKind.INTERNAL, "Internal server error")


def register_error_handlers(app: FastAPI) -> None:
    """Register exception handlers on the application.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(ValidationError, handle_value_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
