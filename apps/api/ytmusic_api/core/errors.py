"""Error envelope and exception handlers.

Every error leaves the service as ``{"success": false, "error": "<message>"}``.
"""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .logger import get_logger

logger = get_logger("errors")

NOT_FOUND_MESSAGE = "Endpoint not found. Visit / for available endpoints."


class YTMusicAPIError(Exception):
    """Upstream transport failure or non-success status from YouTube Music."""

    def __init__(self, message: str, status_code: Optional[int] = None, reason: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason


def error_response(status_code: int, message: str, **extra) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": message, **extra},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = str(exc.detail)
    # Unmatched routes carry the framework's default detail.
    if exc.status_code == 404 and message == "Not Found":
        message = NOT_FOUND_MESSAGE
    return error_response(exc.status_code, message)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    message = str(errors[0].get("msg")) if errors else "Invalid request"
    return error_response(400, message)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s: %s", request.method, request.url.path, exc)
    return error_response(500, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
