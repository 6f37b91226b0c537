import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException


logger = logging.getLogger(__name__)


class AppError(Exception):
    """Базовая ошибка приложения: всегда отдаётся как {success: false, message}."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = 400
    default_message = "Invalid request"


class NotFoundError(AppError):
    status_code = 404
    default_message = "Not found"


class AuthError(AppError):
    status_code = 401
    default_message = "Unauthorized"

    def __init__(self, message: str | None = None, reason: str = "invalid"):
        super().__init__(message)
        self.reason = reason  # missing | invalid | expired


class InternalError(AppError):
    pass


def error_body(message: str) -> dict:
    return {"success": False, "message": message}


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if any(e.get("type") == "missing" for e in errors):
        return "Missing required fields"
    if not errors:
        return "Invalid request"
    first = errors[0]
    # loc = ("body", "reward_link") / ("query", "principal")
    field = ".".join(str(p) for p in first.get("loc", ())[1:]) or "request"
    return f"Invalid request: {field}: {first.get('msg')}"


async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.message))


async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content=error_body(_validation_message(exc)))


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    message = "Route not found" if exc.status_code == 404 else str(exc.detail)
    return JSONResponse(status_code=exc.status_code, content=error_body(message), headers=exc.headers)


async def unhandled_error_handler(request: Request, exc: Exception):
    # наружу детали не отдаём, только в лог
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content=error_body(InternalError.default_message))


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(SQLAlchemyError, unhandled_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
