from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from movietracker.core.config import settings
from movietracker.core.enums import ErrorKind

from .base import AppError
from .import_exceptions import MetadataNotFoundError

GENERIC_MESSAGE = "An unexpected error occurred."

HTTP_ERROR_CODES = {
    status.HTTP_400_BAD_REQUEST: "bad_request",
    status.HTTP_404_NOT_FOUND: "not_found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "method_not_allowed",
}


def error_response(
    status_code: int, error: str, message: str | None = None
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content={"error": error, "message": message}
    )


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        msg = str(err.get("msg", "Invalid value")).removeprefix("Value error, ")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts) or "Invalid request."


def unexpected_error_response(exc: Exception) -> JSONResponse:
    logger.opt(exception=exc).error("Unhandled exception")
    message = str(exc) if settings.is_development else GENERIC_MESSAGE
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "internal_error", message
    )


def register_exception_handlers(app: FastAPI):
    @app.exception_handler(AppError)
    async def app_error_handler(_: Request, exc: AppError):
        if exc.kind in (ErrorKind.CONFIGURATION, ErrorKind.INTERNAL):
            logger.error(f"{exc.status_code} {exc.error}: {exc.detail}")
        elif exc.kind is ErrorKind.PROVIDER:
            if isinstance(exc, MetadataNotFoundError) and exc.provider_unavailable:
                logger.error(
                    f"{exc.status_code} {exc.error} (provider unavailable): {exc.detail}"
                )
            else:
                logger.warning(f"{exc.status_code} {exc.error} (provider): {exc.detail}")
        else:
            logger.info(f"{exc.status_code} {exc.error}: {exc.detail}")

        if exc.exposes_detail or settings.is_development:
            message = exc.detail
        else:
            message = GENERIC_MESSAGE
        return error_response(exc.status_code, exc.error, message)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(_: Request, exc: RequestValidationError):
        message = _format_validation_errors(exc)
        logger.info(f"400 validation_error: {message}")
        return error_response(
            status.HTTP_400_BAD_REQUEST, "validation_error", message
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(_: Request, exc: StarletteHTTPException):
        error = HTTP_ERROR_CODES.get(exc.status_code, "http_error")
        return error_response(exc.status_code, error, str(exc.detail))

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(_: Request, exc: SQLAlchemyError):
        logger.opt(exception=exc).error("Database error")
        text = str(exc)
        if "does not exist" in text or "no such table" in text:
            message = (
                "The movies table does not exist. Run the database migrations "
                "(alembic upgrade head)."
            )
        elif settings.is_development:
            message = text
        else:
            message = GENERIC_MESSAGE
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "database_error", message
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(_: Request, exc: Exception):
        return unexpected_error_response(exc)
