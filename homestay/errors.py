"""
Error responses.

Every failure leaves the API as ``{"message": ..., "field": ...}`` so the
admin UI can show ``message`` verbatim. Only the first validation error is
reported.
"""
import logging
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from homestay.storage.errors import ConflictError, StorageError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"
_LOCATIONS = ("body", "query", "path", "header", "cookie")


class ApiError(HTTPException):
    """HTTPException that also names the offending field."""

    def __init__(self, status_code: int, message: str, field=None, headers=None):
        super().__init__(status_code=status_code, detail=message, headers=headers)
        self.field = field


def error_body(message, field=None):
    return {"message": message, "field": field}


def first_validation_error(errors):
    """Reduce pydantic's error list to ``(field, message)`` for the first error."""
    if not errors:
        return None, "Invalid request"
    error = errors[0]
    if error.get("type") == "json_invalid":
        return None, "Request body is not valid JSON"
    loc = [str(part) for part in error.get("loc", ())]
    if loc and loc[0] in _LOCATIONS:
        loc = loc[1:]
    field = ".".join(loc) or None
    message = error.get("msg") or "Invalid value"
    if error.get("type") == "missing":
        message = f"{field} is required" if field else "Request body is required"
    elif message.startswith("Value error, "):
        message = message[len("Value error, "):]
    return field, message


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail), getattr(exc, "field", None)),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    field, message = first_validation_error(exc.errors())
    logger.error(f"{request.method} {request.url.path}: invalid {field}: {message}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(message, field),
    )


async def conflict_exception_handler(request: Request, exc: ConflictError):
    logger.error(f"{request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content=error_body(exc.message, exc.field),
    )


async def storage_exception_handler(request: Request, exc: StorageError):
    logger.error(f"{request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(INTERNAL_ERROR_MESSAGE),
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"{request.method} {request.url.path}: unhandled error", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(INTERNAL_ERROR_MESSAGE),
    )


def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ConflictError, conflict_exception_handler)
    app.add_exception_handler(StorageError, storage_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
