"""
Error types and the application‑wide error responder.

Services raise the exceptions defined here; ``register_exception_handlers``
turns them (and anything else that escapes a route) into the JSON
envelope ``{"success": false, "error": ...}``.  Unmatched paths and
methods get ``{"error": "Not Found", "message": "Cannot <METHOD> <path>"}``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


logger = logging.getLogger(__name__)


class UserRecordsError(Exception):
    """Base class for errors raised by the service layer."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UserValidationError(UserRecordsError):
    """A create request is missing fields or carries malformed values."""

    status_code = status.HTTP_400_BAD_REQUEST


class DuplicateEmailError(UserRecordsError):
    """Another record already uses the requested email address."""

    status_code = status.HTTP_409_CONFLICT

    def __init__(self, email: str) -> None:
        super().__init__("Email already exists")
        self.email = email


def error_envelope(status_code: int, error: str, **extra) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": error, **extra})


def not_found_response(request: Request) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"error": "Not Found", "message": f"Cannot {request.method} {request.url.path}"},
    )


def register_exception_handlers(app: FastAPI, debug: bool = False) -> None:
    """Attach the JSON error handlers to ``app``."""

    @app.exception_handler(UserRecordsError)
    async def handle_service_error(request: Request, exc: UserRecordsError) -> JSONResponse:
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
        return error_envelope(exc.status_code, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        # The router answers 405 for a known path with an unknown method;
        # both cases are reported as an unmatched route.
        if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
            return not_found_response(request)
        return error_envelope(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        # ServerErrorMiddleware re-raises after this response is sent and the
        # server logs the traceback, so only a one-line summary is logged here.
        logger.error("Unhandled %s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc)
        if debug:
            return error_envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error", message=str(exc))
        return error_envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error")
