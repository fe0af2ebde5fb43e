"""
Обработчики ошибок приложения.

Все ошибки отдаются в едином конверте {"success": false, "error": "..."}.
Детали 5xx пишутся в лог и не раскрываются клиенту.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from jsonstore.api.responses import failure
from jsonstore.core.errors import JSONStoreError, MethodNotAllowed

logger = logging.getLogger(__name__)

HTTP_MESSAGES = {
    400: "Bad request",
    401: "Unauthorized",
    404: "Not found",
    405: MethodNotAllowed.default_message,
    409: "Conflict",
}


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if any(error.get("type") == "json_invalid" for error in errors):
        return "Invalid JSON"
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid value")
    return f"{location}: {message}" if location else message


def register_error_handlers(app: FastAPI) -> None:
    """Регистрация глобальных обработчиков ошибок"""

    @app.exception_handler(JSONStoreError)
    async def store_error_handler(request: Request, exc: JSONStoreError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error(
                "%s: %s | %s %s",
                type(exc).__name__, exc.message, request.method, request.url.path
            )
        else:
            logger.warning(
                "%s (%d): %s | %s %s",
                type(exc).__name__, exc.status_code, exc.message, request.method, request.url.path
            )
        return failure(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        message = _validation_message(exc)
        logger.warning("Validation error: %s | %s %s", message, request.method, request.url.path)
        return failure(400, message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("HTTP %d on %s", exc.status_code, request.url.path)
            return failure(exc.status_code, "Internal server error")
        message = HTTP_MESSAGES.get(exc.status_code, str(exc.detail))
        return failure(exc.status_code, message)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "Unhandled exception | %s %s | type=%s",
            request.method, request.url.path, type(exc).__name__
        )
        return failure(500, "Internal server error")
