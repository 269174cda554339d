"""
Error types and JSON error handlers.

Every error the service reports to a client is rendered as
``{"success": false, "message": ...}`` with an HTTP status code; no
exception ever reaches the client as a stack trace.  Route handlers
raise :class:`ApiError`, and ``register_error_handlers`` wires the
handlers into a FastAPI application.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "端點未找到"
INVALID_CREDENTIALS_MESSAGE = "帳號或密碼錯誤"
INTERNAL_ERROR_MESSAGE = "伺服器內部錯誤"


class ApiError(Exception):
    """An error with a fixed HTTP status and a client‑facing message."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "message": message})


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return error_response(exc.status_code, exc.message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render framework HTTP errors in the service's JSON shape.

    A known path requested with an unsupported method is reported as
    not found, the same as an unknown path.
    """
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        logger.debug("No route for %s %s", request.method, request.url.path)
        return error_response(status.HTTP_404_NOT_FOUND, NOT_FOUND_MESSAGE)
    return error_response(exc.status_code, str(exc.detail))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Server error on %s %s", request.method, request.url.path, exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
