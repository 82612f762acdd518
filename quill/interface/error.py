"""Mapping of domain errors onto HTTP responses.

Every error response has the body ``{"error": "<message>"}``.
"""

import logfire
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from quill.domain.error import (
    ConflictError,
    DomainError,
    InvalidOperationError,
    NotFoundError,
    TransientStoreError,
    UnauthorizedError,
)

STATUS_BY_ERROR: dict[type[DomainError], int] = {
    UnauthorizedError: status.HTTP_401_UNAUTHORIZED,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    InvalidOperationError: status.HTTP_400_BAD_REQUEST,
    ConflictError: status.HTTP_409_CONFLICT,
    TransientStoreError: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def to_http_exception(error: DomainError) -> HTTPException:
    """Convert a domain error into the matching HTTPException."""
    code = next(
        (
            code
            for error_type, code in STATUS_BY_ERROR.items()
            if isinstance(error, error_type)
        ),
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )

    if code >= 500:
        logfire.error(
            "Request failed", error=str(error), error_type=type(error).__name__
        )
        detail = (
            "Service temporarily unavailable"
            if code == status.HTTP_503_SERVICE_UNAVAILABLE
            else "Internal server error"
        )
    else:
        logfire.warn(
            "Request rejected", error=str(error), error_type=type(error).__name__
        )
        detail = str(error)

    return HTTPException(status_code=code, detail=detail)


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return _error_response(exc.status_code, str(exc.detail))


async def _domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    http_exc = to_http_exception(exc)
    return _error_response(http_exc.status_code, str(http_exc.detail))


async def _validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    first = exc.errors()[0] if exc.errors() else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid request")
    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        f"{location}: {message}" if location else message,
    )


async def _unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logfire.error(
        "Unhandled error",
        error=str(exc),
        error_type=type(exc).__name__,
        path=request.url.path,
    )
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"
    )


def register_error_handlers(app: FastAPI) -> None:
    """Render all errors as ``{"error": ...}``."""
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(DomainError, _domain_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(Exception, _unexpected_error_handler)
