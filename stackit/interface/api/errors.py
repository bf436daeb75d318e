"""Global exception handlers.

Domain errors raised anywhere below the routes are mapped to HTTP status
codes here, so routes only translate authentication failures themselves.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from stackit.domain.error import (
    AlreadyAcceptedError,
    ConflictError,
    DomainError,
    ForbiddenError,
    InvalidInputError,
    NotFoundError,
    ReferentialMismatchError,
)

# Checked in order; first match wins
STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (InvalidInputError, status.HTTP_400_BAD_REQUEST),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ReferentialMismatchError, status.HTTP_404_NOT_FOUND),
    (AlreadyAcceptedError, status.HTTP_409_CONFLICT),
    (ConflictError, status.HTTP_409_CONFLICT),
]


def status_for(error: DomainError) -> int:
    """Map a domain error to its HTTP status code."""
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        status_code = status_for(exc)
        logfire.warn(
            "Domain error",
            path=request.url.path,
            error_type=type(exc).__name__,
            error=str(exc),
            status_code=status_code,
        )
        if status_code == status.HTTP_500_INTERNAL_SERVER_ERROR:
            return JSONResponse(
                status_code=status_code,
                content={"detail": "Internal server error"},
            )
        return JSONResponse(status_code=status_code, content={"detail": str(exc)})

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(
        request: Request, exc: RequestValidationError
    ):
        logfire.warn("Request validation failed", path=request.url.path)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": _format_errors(exc.errors())},
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all; never leaks internal details."""
        logfire.error(
            "Unhandled exception",
            path=request.url.path,
            error_type=type(exc).__name__,
            error=str(exc),
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )


def _format_errors(errors) -> list[dict[str, str]]:
    return [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
        }
        for e in errors
    ]
