"""Mapping of domain errors onto HTTP responses."""

import logfire
import pydantic
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from folio.domain.error import (
    AuthorizationError,
    DomainError,
    NotFoundError,
    SelfReferenceError,
    StoreUnavailableError,
    ValidationError,
)
from folio.util.jwt import JWTError

# Most specific first; the first matching class wins.
STATUS_BY_ERROR: list[tuple[type[Exception], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (SelfReferenceError, status.HTTP_400_BAD_REQUEST),
    (AuthorizationError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (StoreUnavailableError, status.HTTP_503_SERVICE_UNAVAILABLE),
    (pydantic.ValidationError, status.HTTP_400_BAD_REQUEST),
    (JWTError, status.HTTP_401_UNAUTHORIZED),
]


def status_for(exc: Exception) -> int:
    """HTTP status code for an error raised below the route layer."""
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def _handle(request: Request, exc: Exception) -> JSONResponse:
    status_code = status_for(exc)
    if status_code == status.HTTP_503_SERVICE_UNAVAILABLE:
        logfire.error(
            "Store unavailable", path=request.url.path, error=str(exc)
        )
    else:
        logfire.info(
            "Request rejected",
            path=request.url.path,
            status_code=status_code,
            error_type=type(exc).__name__,
        )

    if isinstance(exc, pydantic.ValidationError):
        detail = [
            {"loc": list(err["loc"]), "msg": err["msg"]} for err in exc.errors()
        ]
    elif isinstance(exc, JWTError):
        detail = "Authentication required"
    else:
        detail = str(exc)

    return JSONResponse(status_code=status_code, content={"detail": detail})


def register_exception_handlers(app: FastAPI) -> None:
    """Install handlers translating domain errors into status codes.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(DomainError, _handle)
    app.add_exception_handler(pydantic.ValidationError, _handle)
    app.add_exception_handler(JWTError, _handle)
