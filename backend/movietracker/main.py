from collections.abc import AsyncGenerator, Awaitable, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from movietracker.api.main import api_router
from movietracker.core.config import settings
from movietracker.core.db import Database
from movietracker.exceptions.handlers import (
    register_exception_handlers,
    unexpected_error_response,
)
from movietracker.imdb.omdb import OmdbClient
from movietracker.logging_.logger import setup_logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logger(settings.LOG_DIR)
    logger.info(f"Starting {settings.PROJECT_NAME} ({settings.ENVIRONMENT})")

    database = Database(settings.DATABASE_URL)
    database.init()
    omdb_client = OmdbClient()
    app.state.database = database
    app.state.omdb_client = omdb_client
    yield

    logger.info(f"Shutting down {settings.PROJECT_NAME}")
    omdb_client.close()
    database.dispose()


app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url=f"{settings.API_PREFIX}/openapi.json",
    lifespan=lifespan,
)


CORS_ALLOW_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
CORS_ALLOW_HEADERS = ["Content-Type"]


def preflight_headers(origin: str | None) -> dict[str, str]:
    headers = {
        "Access-Control-Allow-Methods": ", ".join(CORS_ALLOW_METHODS),
        "Access-Control-Allow-Headers": ", ".join(CORS_ALLOW_HEADERS),
    }
    allowed = settings.all_cors_origins
    if "*" in allowed:
        headers["Access-Control-Allow-Origin"] = "*"
    elif origin and origin.rstrip("/") in allowed:
        headers["Access-Control-Allow-Origin"] = origin
        headers["Vary"] = "Origin"
    return headers


# Innermost: unexpected errors become JSON 500s here, so the CORS layer
# around it still decorates them.
@app.middleware("http")
async def catch_unexpected_errors(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    try:
        return await call_next(request)
    except Exception as exc:
        return unexpected_error_response(exc)


if settings.all_cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.all_cors_origins,
        allow_credentials="*" not in settings.all_cors_origins,
        allow_methods=CORS_ALLOW_METHODS,
        allow_headers=CORS_ALLOW_HEADERS,
    )


# Outermost: OPTIONS on any path gets an empty 200, before CORS checks,
# routing or database access.
@app.middleware("http")
async def answer_options(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    if request.method == "OPTIONS":
        return Response(
            status_code=status.HTTP_200_OK,
            headers=preflight_headers(request.headers.get("origin")),
        )
    return await call_next(request)


register_exception_handlers(app)

app.include_router(api_router, prefix=settings.API_PREFIX)
