"""Error Handlers — global exception handlers for the Chirpy API.

Invariants:
    - ChirpyError → its own http_status and public_message (the detailed
      message is logged only)
    - RequestValidationError (malformed JSON, wrong field types) → 400
    - Starlette HTTPException (unknown route, wrong method) → its status, same envelope
    - Exception (catch-all) → 500, never leaks internal details
    - Every handler emits through write_error, so all error bodies are {"error": ...}

Design Decisions:
    - Layered handlers: domain (ChirpyError), validation (Pydantic), HTTP, catch-all (Exception)
    - Extracted from main.py to keep the entry point small
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from chirpy.api.envelope import write_error
from chirpy.core.errors import GENERIC_SERVER_MESSAGE, ChirpyError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_chirpy_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_chirpy_error_handler(app: FastAPI) -> None:
    """Register Chirpy domain/infrastructure error handler."""

    @app.exception_handler(ChirpyError)
    async def chirpy_error_handler(request: Request, exc: ChirpyError):
        logger.info(
            f"ChirpyError: {exc.message}",
            extra={
                "error_code": exc.code, "path": request.url.path,
                "status_code": exc.http_status,
            },
        )
        if exc.context.debug_info:
            logger.debug(f"Error context for {exc.code}: {exc.context.debug_info}")
        return write_error(exc.http_status, exc.public_message, exc)


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return write_error(
            status.HTTP_400_BAD_REQUEST, _summarize_validation_error(exc), exc,
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register handler for framework HTTP errors (unknown route, wrong method)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return write_error(exc.status_code, str(exc.detail))


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return write_error(
            status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_SERVER_MESSAGE,
        )


def _summarize_validation_error(exc: RequestValidationError) -> str:
    """One-line, user-safe description of the first invalid field."""
    errors = exc.errors()
    if not errors:
        return "Invalid request data"
    first = errors[0]
    field = ".".join(str(loc) for loc in first["loc"] if loc != "body")
    if not field:
        return f"Invalid request data: {first['msg']}"
    return f"Invalid request data: {field}: {first['msg']}"
