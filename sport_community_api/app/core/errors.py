"""
Error taxonomy and JSON error rendering.

Services raise the ``ValueError`` subclasses below; endpoints turn them
into ``HTTPException`` with the matching status code.  The handlers
registered by ``register_exception_handlers`` make sure every failure
reaches the client as ``{"error": "<message>"}``.
"""

import logging
import sqlite3

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class BadRequestError(ValueError):
    """Missing or malformed input."""


class NotFoundError(ValueError):
    """A referenced row does not exist."""


class ConflictError(ValueError):
    """A uniqueness rule would be broken."""


def require_fields(message: str, *values) -> None:
    """Raise ``BadRequestError(message)`` if any value is empty.

    ``None``, empty strings and zero all count as missing.
    """
    if not all(values):
        raise BadRequestError(message)


def to_http(exc: ValueError) -> HTTPException:
    """Map a service error onto the HTTP status it stands for."""
    if isinstance(exc, NotFoundError):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(exc, ConflictError):
        code = status.HTTP_409_CONFLICT
    else:
        code = status.HTTP_400_BAD_REQUEST
    return HTTPException(status_code=code, detail=str(exc))


async def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def _validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"Invalid value for {location}: {first.get('msg')}" if location else first.get("msg")
    else:
        message = "Invalid request"
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


async def _store_exception_handler(request: Request, exc: sqlite3.Error) -> JSONResponse:
    logger.exception("Store failure on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(sqlite3.Error, _store_exception_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)
