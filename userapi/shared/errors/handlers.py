"""
Centralized error handlers for FastAPI.

Maps ApiError variants to HTTP responses through a pure projection
and renders framework errors with the same envelope.
No stack traces or internal details are exposed to clients.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from userapi.domain.users.errors import (
    INTERNAL_ERROR_MESSAGE,
    ApiError,
    InternalError,
    InvalidInputError,
    NotFoundError,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_500 = 500

_STATUS_BY_ERROR: tuple[tuple[type[ApiError], int], ...] = (
    (NotFoundError, HTTP_404),
    (InvalidInputError, HTTP_400),
    (InternalError, HTTP_500),
)


def map_api_error(exc: ApiError) -> tuple[int, dict[str, str]]:
    """Project an ApiError onto its HTTP status code and JSON body.

    Args:
        exc: The error to render.

    Returns:
        A ``(status_code, body)`` pair where body is ``{"error": message}``.
        Errors outside the known variants render as an internal error.
    """
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code, {"error": exc.message}
    return HTTP_500, {"error": INTERNAL_ERROR_MESSAGE}


def api_error_response(exc: ApiError) -> JSONResponse:
    """Build the JSON response for an ApiError."""
    status_code, body = map_api_error(exc)
    return JSONResponse(status_code=status_code, content=body)


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid input"
    first = errors[0]
    field = first.get("loc", ("input",))[-1]
    return f"Invalid {field}: {first.get('msg', 'invalid value')}"


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(ApiError)
    async def handle_api_error(_request: Request, exc: ApiError) -> JSONResponse:
        """Render an ApiError raised by a use case."""
        response = api_error_response(exc)
        if response.status_code >= HTTP_500:
            logger.error("%s: %s", type(exc).__name__, exc.message)
        else:
            logger.warning("%s: %s", type(exc).__name__, exc.message)
        return response

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Reject malformed request parameters as invalid input."""
        error = InvalidInputError(_validation_message(exc))
        logger.warning("Request validation failed: %s", error.message)
        return api_error_response(error)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        _request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Wrap routing errors (404, 405, ...) in the error envelope."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return api_error_response(InternalError())
