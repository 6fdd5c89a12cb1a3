"""Error envelope shared by every route: ``{"error": str, "details"?: ...}``."""

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from incidentdesk.logging import get_logger

logger = get_logger("incidentdesk.errors")

_LOCATION_PREFIXES = {"body", "query", "path"}


class StorageError(Exception):
    """The store rejected or failed an operation."""

    def __init__(self, message: str, details: str | None = None):
        super().__init__(message)
        self.message = message
        self.details = details


def store_message(exc: SQLAlchemyError) -> str:
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig)
    return str(exc)


@asynccontextmanager
async def storage_errors(message: str) -> AsyncIterator[None]:
    try:
        yield
    except SQLAlchemyError as exc:
        details = store_message(exc)
        logger.error("storage_error", operation=message, error=details)
        raise StorageError(message, details) from exc


def flatten_errors(errors: list[dict[str, Any]]) -> dict[str, Any]:
    """Group validation errors into form-level and per-field messages."""
    form_errors: list[str] = []
    field_errors: dict[str, list[str]] = {}
    for err in errors:
        loc = list(err.get("loc", ()))
        if loc and loc[0] in _LOCATION_PREFIXES:
            loc = loc[1:]
        # json_invalid reports a character offset rather than a field
        if not loc or err.get("type") == "json_invalid":
            form_errors.append(err["msg"])
            continue
        path = ".".join(str(part) for part in loc)
        field_errors.setdefault(path, []).append(err["msg"])
    return {"formErrors": form_errors, "fieldErrors": field_errors}


def error_response(status_code: int, error: str, details: Any = None) -> JSONResponse:
    content: dict[str, Any] = {"error": error}
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, "Invalid payload", flatten_errors(exc.errors()))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    response = error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def storage_exception_handler(request: Request, exc: StorageError) -> JSONResponse:
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.message, exc.details)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(StorageError, storage_exception_handler)
