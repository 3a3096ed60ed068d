"""Error envelope: every failure leaves the API as ``{status: "error", message, timestamp}``."""

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from taskhub.core.errors import AppError
from taskhub.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)


def error_response(message: str, status_code: int) -> JSONResponse:
    body = ErrorResponse(message=message)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    return f"{location}: {first.get('msg')}" if location else first.get("msg", "Invalid request")


async def app_error_handler(request: Request, exc: AppError):
    return error_response(exc.message, exc.status_code)


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404 and exc.detail == "Not Found":
        return error_response("Resource not found", 404)
    return error_response(str(exc.detail), exc.status_code)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    return error_response(_validation_message(exc), 400)


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response("Internal Server Error", 500)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
