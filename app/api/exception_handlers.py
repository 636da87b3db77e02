"""Global exception handlers that map domain exceptions to HTTP responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse

from app.errors import (
    GENERIC_ERROR,
    NOT_FOUND,
    VALIDATION_ERROR,
    DomainError,
    DomainValidationError,
    GenericError,
    NotFoundError,
)

logger = logging.getLogger(__name__)

ERROR_CODE_HEADER = "X-Error-Code"

# Closed mapping from error kind to (HTTP status, machine-readable code).
ERROR_STATUS_CODES: dict[type[DomainError], tuple[int, str]] = {
    NotFoundError: (status.HTTP_404_NOT_FOUND, NOT_FOUND),
    DomainValidationError: (status.HTTP_400_BAD_REQUEST, VALIDATION_ERROR),
    GenericError: (status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR),
}

_FALLBACK = (status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR)


def _lookup(exc: DomainError) -> tuple[int, str]:
    for cls in type(exc).__mro__:
        if cls in ERROR_STATUS_CODES:
            return ERROR_STATUS_CODES[cls]
    return _FALLBACK


def translate_error(exc: DomainError) -> tuple[int, str]:
    """Return the (status code, body) pair for a domain error.

    The body is the error's message, unchanged.
    """
    status_code, _code = _lookup(exc)
    return status_code, str(exc)


def _error_response(status_code: int, detail: str, code: str) -> PlainTextResponse:
    """Return the message as a plain-text body, with the code in a header."""
    return PlainTextResponse(
        content=detail,
        status_code=status_code,
        headers={ERROR_CODE_HEADER: code},
    )


def domain_error_handler(request: Request, exc: DomainError) -> PlainTextResponse:
    status_code, detail = translate_error(exc)
    _, code = _lookup(exc)

    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("%s on %s: %s", code, request.url.path, detail)
    else:
        logger.warning("%s on %s: %s", code, request.url.path, detail)

    return _error_response(status_code, detail, code)


def register_exception_handlers(app: FastAPI) -> None:
    """Register domain exception handlers on the FastAPI app."""
    app.add_exception_handler(DomainError, domain_error_handler)
