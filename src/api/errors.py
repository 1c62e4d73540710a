"""
API errors and global exception handlers.

Every failure leaves the service as an envelope with success=false;
no exception crosses the HTTP boundary.
"""

import logging

from fastapi import FastAPI, Request, Response, status
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.api.envelope import respond_json
from src.api.models import Envelope

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Base class for request rejections raised by the gates."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, headers: dict[str, str] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.headers = headers


class MethodNotAllowed(ApiError):
    """Wrong HTTP verb for the route."""

    status_code = status.HTTP_405_METHOD_NOT_ALLOWED

    def __init__(self, allowed: str) -> None:
        super().__init__(f"Method not allowed. Use {allowed}.", headers={"Allow": allowed})
        self.allowed = allowed


class UnsupportedMediaType(ApiError):
    """Content-Type is missing or not exactly application/json."""

    status_code = status.HTTP_415_UNSUPPORTED_MEDIA_TYPE

    def __init__(self) -> None:
        super().__init__("Content-Type must be application/json")


class MalformedBody(ApiError):
    """Body is empty, not valid JSON, or does not match the request model."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, diagnostic: str) -> None:
        super().__init__(f"Invalid JSON: {diagnostic}")
        self.diagnostic = diagnostic


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError) -> Response:
        logger.info(
            "Rejected %s %s: %s (%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.status_code,
        )
        return respond_json(exc.status_code, Envelope.fail(exc.message), headers=exc.headers)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> Response:
        """
        Handle routing misses and framework-raised HTTP errors.

        Verbs the router itself refuses on a routed path get the same
        envelope and Allow header as the method gate.
        """
        allowed = getattr(request.app.state, "allowed_methods", {}).get(request.url.path)
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED and allowed:
            return await api_error_handler(request, MethodNotAllowed(allowed))

        if exc.status_code == status.HTTP_404_NOT_FOUND:
            error = "Not found"
        else:
            error = str(exc.detail)
        return respond_json(exc.status_code, Envelope.fail(error), headers=exc.headers)

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception) -> Response:
        """Catch-all: log with traceback, never leak internals."""
        logger.error(
            "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
        )
        return respond_json(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            Envelope.fail("Internal server error"),
        )
