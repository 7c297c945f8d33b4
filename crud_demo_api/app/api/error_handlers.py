"""
Error handlers: render every failure into the response envelope.

Four layers are registered:

* ``ApiError`` (validation, not found, conflict) → its own status code;
* ``RequestValidationError`` (the request body is not valid JSON) → 400;
* Starlette ``HTTPException`` (unknown route, method not allowed) → its
  status code;
* ``Exception`` (anything else) → 500 with a generic message.

In development mode the envelope also carries the formatted traceback
under ``error.stack``.
"""

import logging
import traceback
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..core.errors import ApiError
from .responses import error_response


logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
        logger.warning(
            "%s %s -> %s: %s",
            request.method,
            request.url.path,
            exc.status_code,
            exc.message,
            extra={"error_code": exc.code},
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=error_response(exc.message, _stack(request, exc)),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = exc.errors()
        logger.warning("Malformed request on %s: %s", request.url.path, errors)
        if any(error.get("type") == "json_invalid" for error in errors):
            message = "Invalid JSON body"
        else:
            message = "Invalid request data"
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_response(message),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=error_response(str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unhandled exception on %s: %s", request.url.path, exc, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_response("Internal Server Error", _stack(request, exc)),
        )


def _stack(request: Request, exc: BaseException) -> Optional[str]:
    """Formatted traceback in development mode, otherwise ``None``."""
    if not request.app.state.settings.is_development:
        return None
    return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
