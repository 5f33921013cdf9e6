"""
Exception handlers that render every error as plain text.

- HTTPException from services keeps its status and detail.
- Request validation errors (FastAPI's 422) become 400.
- Database failures become an opaque 500; the driver message only goes to
  the server log, tagged with the same reference id returned to the client.
"""

from __future__ import annotations

import logging
from uuid import uuid4

import asyncpg
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

DATABASE_ERROR_MESSAGE = "An error occurred with the database operation."


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request."

    first = errors[0]
    # loc looks like ("path", "athlete_id") or ("body", "score").
    loc = [str(part) for part in first.get("loc", ()) if part not in ("body", "path", "query")]
    field = ".".join(loc)
    msg = str(first.get("msg") or "invalid value")
    if field:
        return f"Invalid value for {field}: {msg}"
    return f"Invalid request: {msg}"


async def http_exception_handler(_: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    return PlainTextResponse(
        str(exc.detail),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(_: Request, exc: RequestValidationError) -> PlainTextResponse:
    return PlainTextResponse(_describe_validation_error(exc), status_code=400)


async def database_exception_handler(request: Request, exc: Exception) -> PlainTextResponse:
    error_id = uuid4().hex[:12]
    logger.error(
        "database_error ref=%s method=%s path=%s error=%s",
        error_id,
        request.method,
        request.url.path,
        exc,
        exc_info=exc,
    )
    return PlainTextResponse(f"{DATABASE_ERROR_MESSAGE} (ref {error_id})", status_code=500)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(asyncpg.PostgresError, database_exception_handler)
    app.add_exception_handler(asyncpg.InterfaceError, database_exception_handler)
    # Pool could not reach the server (refused / reset connection).
    app.add_exception_handler(OSError, database_exception_handler)
