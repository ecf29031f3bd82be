"""Map domain and auth exceptions to HTTP responses.

Registered after Protean's own FastAPI handlers so the mappings here win.
Every error body has the shape ``{"error": <message or field mapping>}``.
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.exceptions import ExpectedVersionError, InvalidOperationError, ObjectNotFoundError, ValidationError

from marketplace.identity.auth.errors import AuthError

logger = structlog.get_logger(__name__)


def _error(status_code: int, error) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": error})


def _message(exc: Exception) -> str:
    messages = getattr(exc, "messages", None)
    if isinstance(messages, str):
        return messages
    if exc.args and isinstance(exc.args[0], str):
        return exc.args[0]
    return str(exc)


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return _error(400, exc.messages)


async def invalid_operation_handler(request: Request, exc: InvalidOperationError) -> JSONResponse:
    return _error(400, _message(exc))


async def not_found_handler(request: Request, exc: ObjectNotFoundError) -> JSONResponse:
    return _error(404, _message(exc) or "Not found")


async def auth_error_handler(request: Request, exc: AuthError) -> JSONResponse:
    return _error(exc.status_code, exc.message)


async def conflict_handler(request: Request, exc: ExpectedVersionError) -> JSONResponse:
    logger.warning("Concurrent modification rejected", path=request.url.path, error=str(exc))
    return _error(409, "The resource was modified concurrently, please retry")


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error", path=request.url.path, method=request.method)
    return _error(500, "Internal server error")


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(InvalidOperationError, invalid_operation_handler)
    app.add_exception_handler(ObjectNotFoundError, not_found_handler)
    app.add_exception_handler(AuthError, auth_error_handler)
    app.add_exception_handler(ExpectedVersionError, conflict_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
