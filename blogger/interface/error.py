"""Mapping of domain errors to HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from blogger.domain.error import (
    BusinessRuleViolationError,
    DomainError,
    ForbiddenError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)

ERROR_STATUS_CODES: dict[type[DomainError], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ForbiddenError: status.HTTP_403_FORBIDDEN,
    UnauthorizedError: status.HTTP_401_UNAUTHORIZED,
    BusinessRuleViolationError: status.HTTP_400_BAD_REQUEST,
    ValidationError: status.HTTP_400_BAD_REQUEST,
}


async def domain_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render a domain error raised by a use case.

    Errors without a dedicated status are treated as bad requests.
    """
    status_code = next(
        (
            code
            for error_type, code in ERROR_STATUS_CODES.items()
            if isinstance(exc, error_type)
        ),
        status.HTTP_400_BAD_REQUEST,
    )
    logfire.info(
        "Domain error",
        error_type=type(exc).__name__,
        error=str(exc),
        status_code=status_code,
        path=request.url.path,
    )
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


def register_error_handlers(app: FastAPI) -> None:
    """Install the domain error handler on the app."""
    app.add_exception_handler(DomainError, domain_error_handler)
