"""Error taxonomy for the marketplace API.

Every failure a handler can report is a subclass of MarketplaceError so the
application can turn them into a uniform ``{"message": ...}`` body.
"""
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

log = logging.getLogger(__name__)


class MarketplaceError(Exception):
    """Base class for all errors surfaced to API callers."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(MarketplaceError):
    """Malformed or missing input."""

    status_code = 400
    default_message = "Invalid request"

    def __init__(self, message: Optional[str] = None, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class NotFound(MarketplaceError):
    status_code = 404
    default_message = "Not found"


class Unauthenticated(MarketplaceError):
    status_code = 401
    default_message = "Unauthorized"


class Forbidden(MarketplaceError):
    status_code = 403
    default_message = "Forbidden"


class ConflictError(MarketplaceError):
    # duplicate unique field; reported as a client error like other bad input
    status_code = 400
    default_message = "Already exists"


class InternalError(MarketplaceError):
    status_code = 500


def _first_validation_error(exc: RequestValidationError) -> ValidationError:
    errors = exc.errors()
    if not errors:
        return ValidationError()
    first = errors[0]
    loc = [str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path")]
    message = first.get("msg", "Invalid request")
    # pydantic prefixes messages raised from custom validators
    if message.startswith("Value error, "):
        message = message[len("Value error, "):]
    return ValidationError(message, field=".".join(loc) or None)


async def marketplace_error_handler(request: Request, exc: MarketplaceError):
    body = {"message": exc.message}
    if isinstance(exc, ValidationError) and exc.field:
        body["field"] = exc.field
    return JSONResponse(status_code=exc.status_code, content=body)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    return await marketplace_error_handler(request, _first_validation_error(exc))


async def storage_error_handler(request: Request, exc: SQLAlchemyError):
    log.exception("Storage failure on %s %s", request.method, request.url.path)
    return await marketplace_error_handler(request, InternalError())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(MarketplaceError, marketplace_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, storage_error_handler)
