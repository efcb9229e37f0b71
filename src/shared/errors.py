"""Marketplace error taxonomy and its HTTP mapping.

Validation and not-found failures use Protean's own exceptions
(``ValidationError``, ``ObjectNotFoundError``) and are mapped by Protean's
FastAPI handlers. The types below cover what Protean does not model.
SQLAlchemy failures from the database provider are answered as a
``StorageError``.
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.exceptions import InvalidOperationError, ObjectNotFoundError, ValidationError
from protean.integrations.fastapi import register_exception_handlers
from sqlalchemy.exc import SQLAlchemyError

logger = structlog.get_logger(__name__)


class EmptyCartError(ValidationError):
    """Checkout attempted on a missing or empty cart."""

    def __init__(self, messages=None):
        super().__init__(messages or {"cart": ["Cart is empty"]})


class InvalidTransitionError(InvalidOperationError):
    """A status change the current state does not allow."""


class AuthError(Exception):
    """Missing, invalid or expired credentials, or insufficient role."""

    def __init__(self, message: str, status_code: int = 401):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class StorageError(Exception):
    """The underlying store failed; not recoverable by the caller."""


def _message_of(exc: Exception, default: str) -> str:
    messages = getattr(exc, "messages", None)
    if isinstance(messages, str):
        return messages
    return str(exc) if exc.args and isinstance(exc.args[0], str) else default


async def _validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"message": "Validation failed", "errors": exc.messages})


async def _not_found_handler(request: Request, exc: ObjectNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"message": _message_of(exc, "Not found")})


async def _empty_cart_handler(request: Request, exc: EmptyCartError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"message": "Cart is empty", "errors": exc.messages})


async def _invalid_transition_handler(request: Request, exc: InvalidTransitionError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"message": _message_of(exc, "Invalid operation")})


async def _auth_error_handler(request: Request, exc: AuthError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def _storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    logger.error("storage_failure", path=request.url.path, error=repr(exc.__cause__ or exc))
    return JSONResponse(status_code=500, content={"message": "Server error"})


async def _database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    error = StorageError("Document store failure")
    error.__cause__ = exc
    return await _storage_error_handler(request, error)


def register_error_handlers(app: FastAPI) -> None:
    """Install Protean's handlers, then the marketplace-specific ones on top."""
    register_exception_handlers(app)

    app.add_exception_handler(ValidationError, _validation_error_handler)
    app.add_exception_handler(ObjectNotFoundError, _not_found_handler)
    app.add_exception_handler(EmptyCartError, _empty_cart_handler)
    app.add_exception_handler(InvalidTransitionError, _invalid_transition_handler)
    app.add_exception_handler(AuthError, _auth_error_handler)
    app.add_exception_handler(StorageError, _storage_error_handler)
    app.add_exception_handler(SQLAlchemyError, _database_error_handler)
