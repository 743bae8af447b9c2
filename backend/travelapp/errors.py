"""Application error taxonomy and the FastAPI handlers that render it as JSON."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class AppError(Exception):
    status_code = 500
    message = "Internal server error"

    def __init__(self, message: str | None = None, *, error: str | None = None):
        self.message = message or self.message
        self.error = error
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = 400
    message = "Missing or invalid fields"


class AuthError(AppError):
    status_code = 400
    message = "Invalid email or password"


class NotFoundError(AppError):
    status_code = 404
    message = "Not found"


class UpstreamError(AppError):
    status_code = 500
    message = "Upstream service error"


class PersistenceError(AppError):
    status_code = 500
    message = "Database error"


class GenerationError(AppError):
    status_code = 500
    message = "Recommendation generation failed"


def error_body(message: str, error: str | None = None) -> dict:
    return {"success": False, "message": message, "error": error}


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message} ({exc.error})")
    else:
        logger.info(f"{request.method} {request.url.path} rejected: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.message, exc.error))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    fields = sorted({".".join(str(p) for p in err["loc"][1:]) or "body" for err in exc.errors()})
    logger.info(f"{request.method} {request.url.path} invalid fields: {fields}")
    return JSONResponse(
        status_code=400,
        content=error_body(ValidationError.message, ", ".join(fields)),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"{request.method} {request.url.path} crashed: {exc}")
    return JSONResponse(status_code=500, content=error_body(AppError.message, str(exc)))


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
