"""
Application error taxonomy and the global exception handlers.

Every domain failure is an ``AppError`` tagged with an ``ErrorKind``; the
HTTP status comes from the kind (or a per-class override), never from the
message text.  Responses always carry a ``message`` field and never a
stack trace.
"""

from __future__ import annotations

import logging
from enum import Enum

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INTERNAL = "internal"


_STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.AUTHENTICATION: 401,
    ErrorKind.AUTHORIZATION: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 409,
    ErrorKind.INTERNAL: 500,
}


class AppError(Exception):
    kind: ErrorKind = ErrorKind.INTERNAL
    status_override: int | None = None
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        if self.status_override is not None:
            return self.status_override
        return _STATUS_BY_KIND[self.kind]


# ── Base kinds ──────────────────────────────────────────────────────
class ValidationError(AppError):
    kind = ErrorKind.VALIDATION
    default_message = "Invalid request data"


class AuthenticationError(AppError):
    kind = ErrorKind.AUTHENTICATION
    default_message = "Authentication required"


class AuthorizationError(AppError):
    kind = ErrorKind.AUTHORIZATION
    default_message = "Access denied"


class NotFoundError(AppError):
    kind = ErrorKind.NOT_FOUND
    default_message = "Resource not found"


class ConflictError(AppError):
    kind = ErrorKind.CONFLICT
    default_message = "Resource already exists"


class InternalError(AppError):
    kind = ErrorKind.INTERNAL


# ── Credentials ─────────────────────────────────────────────────────
class DuplicateUser(ConflictError):
    default_message = "User already exists"


class UserNotFound(AuthenticationError):
    default_message = "User not found"


class InvalidPassword(AuthenticationError):
    default_message = "Invalid password"


# ── Tokens ──────────────────────────────────────────────────────────
class TokenMissing(AuthenticationError):
    default_message = "Token not provided"


class TokenInvalid(AuthenticationError):
    status_override = 403
    default_message = "Invalid token"


class TokenExpired(AuthenticationError):
    status_override = 403
    default_message = "Token expired"


# ── Events / volunteers ─────────────────────────────────────────────
class EventNotFound(NotFoundError):
    default_message = "Event not found"


class VolunteerNotFound(NotFoundError):
    default_message = "Volunteer not found"


class VolunteersNotFound(ValidationError):
    default_message = "One or more volunteers do not exist"

    def __init__(self, missing_ids: list[int] | None = None, message: str | None = None) -> None:
        self.missing_ids = sorted(missing_ids or [])
        super().__init__(message)


# ── Handlers ────────────────────────────────────────────────────────
async def _app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)
    else:
        logger.info("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)

    headers = None
    if exc.status_code == 401:
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.message, "success": False},
        headers=headers,
    )


async def _http_exception_handler(
    _request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail), "success": False},
        headers=getattr(exc, "headers", None),
    )


async def _request_validation_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = [
        {
            "loc": [str(part) for part in err.get("loc", ())],
            "msg": str(err.get("msg", "")),
        }
        for err in exc.errors()
    ]
    if errors:
        first = errors[0]
        message = f"{'.'.join(first['loc'])}: {first['msg']}"
    else:
        message = "Invalid request data"
    return JSONResponse(
        status_code=400,
        content={"message": message, "errors": errors, "success": False},
    )


async def _integrity_error_handler(_request: Request, exc: IntegrityError) -> JSONResponse:
    logger.error("Database integrity error: %s", exc, exc_info=True)
    return JSONResponse(
        status_code=409,
        content={"message": "Database constraint violation", "success": False},
    )


async def _sqlalchemy_error_handler(_request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("Database error: %s", exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"message": "Internal database error", "success": False},
    )


async def _generic_exception_handler(_request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception: %s", exc)
    return JSONResponse(
        status_code=500,
        content={"message": "Internal server error", "success": False},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all exception handlers to the FastAPI app."""
    app.add_exception_handler(AppError, _app_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _request_validation_handler)  # type: ignore[arg-type]
    app.add_exception_handler(IntegrityError, _integrity_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(SQLAlchemyError, _sqlalchemy_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, _generic_exception_handler)
