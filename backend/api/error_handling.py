"""
Exception handlers.

Translates domain exceptions into HTTP responses. Every error body has the
same shape: {"success": false, "error": <code>, "message": <text>}.
Exception details are logged, never returned.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shared.exceptions import (
    DabotError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ExternalServiceError,
)

from .models.errors import ErrorResponse

logger = logging.getLogger(__name__)

_STATUS_BY_TYPE: list[tuple[type[DabotError], int]] = [
    (ValidationError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (ExternalServiceError, 500),
]


def status_for(exc: DabotError) -> int:
    """HTTP status code for a domain exception."""
    for exc_type, status_code in _STATUS_BY_TYPE:
        if isinstance(exc, exc_type):
            return status_code
    return 500


def error_response(status_code: int, code: str, message: str, headers=None) -> JSONResponse:
    body = ErrorResponse(error=code, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump(), headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the domain, validation and fallback exception handlers."""

    @app.exception_handler(DabotError)
    async def handle_domain_error(request: Request, exc: DabotError):
        status_code = status_for(exc)
        if status_code >= 500:
            logger.error(
                f"{request.method} {request.url.path} failed: {exc.code} {exc.details}"
            )
        else:
            logger.info(f"{request.method} {request.url.path} -> {status_code} {exc.code}")

        headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
        return error_response(status_code, exc.code, exc.message, headers)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        logger.info(f"{request.method} {request.url.path} -> 400 malformed body")
        return error_response(400, "VALIDATION_ERROR", "Invalid request body")

    @app.exception_handler(Exception)
    async def handle_uncaught(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return error_response(500, "INTERNAL_ERROR", "An unexpected error occurred")
