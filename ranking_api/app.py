"""FastAPI application factory and configuration."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlmodel import SQLModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import models  # noqa: F401 - ensure models are registered with SQLModel
from .api.routers import ALL_ROUTERS
from .core import Settings, create_db_engine, load_settings, set_log_level, setup_logger
from .services import LeaderboardBroadcaster, seed_users

logger = setup_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = app.state.engine
    SQLModel.metadata.create_all(engine)
    logger.info("Database connected successfully")
    seed_users(engine)
    yield


async def reject_unknown_origins(request: Request, call_next):
    if not request.app.state.settings.allows_origin(request.headers.get("origin")):
        return JSONResponse({"message": "Not allowed by CORS"}, status_code=403)
    return await call_next(request)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        {"message": exc.detail},
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse({"message": "Invalid request body"}, status_code=400)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse({"message": "Internal server error"}, status_code=500)


def register_routes(app: FastAPI) -> None:
    for router in ALL_ROUTERS:
        app.include_router(router)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or load_settings()
    set_log_level(settings.log_level)

    app = FastAPI(title="Random Ranking API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = create_db_engine(settings.database_url)
    app.state.broadcaster = LeaderboardBroadcaster(app.state.engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    # Outermost middleware: foreign origins never reach CORS or the routes.
    app.middleware("http")(reject_unknown_origins)

    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    register_routes(app)
    return app


app = create_app()


def main() -> None:
    import uvicorn

    settings: Settings = app.state.settings
    logger.info("Server running on port %d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
