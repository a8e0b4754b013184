"""
Error taxonomy and the handlers that turn errors into responses.

Services raise the exceptions defined here; ``register_exception_handlers``
installs FastAPI handlers that convert them (and request validation
failures) into JSON responses so that no failure escapes the request
boundary.

* ``RequestValidationError`` -> 400 with one entry per failing field.
* ``NotFoundError`` -> 404.
* ``UpstreamUnavailableError`` -> 500 with the error description.
* anything else -> 500, logged with traceback.
"""

import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """Base class for errors raised by the service layer."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_content(self) -> Dict[str, Any]:
        return {"message": self.message}


class NotFoundError(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND


class UpstreamUnavailableError(ServiceError):
    """The user service could not be reached or answered unexpectedly."""

    def __init__(self, error: str) -> None:
        super().__init__("User service unavailable")
        self.error = error

    def to_content(self) -> Dict[str, Any]:
        return {"message": self.message, "error": self.error}


class InternalError(ServiceError):
    pass


def format_validation_errors(errors: List[Dict[str, Any]]) -> List[Dict[str, str]]:
    """Flatten pydantic error dictionaries into ``{field, message}`` pairs.

    The location prefix (``body``, ``path``) is dropped; for path
    parameters only the parameter name is kept.
    """
    formatted = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "path", "query")]
        message = error.get("msg", "Invalid value")
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        formatted.append({"field": ".".join(loc) or "body", "message": message})
    return formatted


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = format_validation_errors(exc.errors())
    logger.info("Rejected %s %s: %s", request.method, request.url.path, errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Validation failed", "errors": errors},
    )


async def _service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.to_content())
    return JSONResponse(status_code=exc.status_code, content=exc.to_content())


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the JSON error handlers on ``app``."""
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(ServiceError, _service_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)
