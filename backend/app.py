import logging
import os
import tomllib
from contextlib import asynccontextmanager
from pathlib import Path

import setproctitle
from brotli_asgi import BrotliMiddleware
from fastapi import FastAPI, APIRouter, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware import Middleware

import settings
from routes.events import router as events_router
from routes.friends import router as friends_router
from routes.journals import router as journals_router
from routes.profile import router as profile_router
from routes.timetable import router as timetable_router
from routes.users import router as users_router
from routes.world import router as world_router
from services.errors import ServiceError
from services.world import WorldApi
from settings import PROJECT_PATH
from utils.logs import setup_logs

logger = logging.getLogger("dailyverse.main")
setup_logs()
setproctitle.setproctitle("DailyVerse API")


def get_version() -> str:
    """Read version from pyproject.toml"""

    with open(PROJECT_PATH / "pyproject.toml", "rb") as f:
        pyproject = tomllib.load(f)
    return pyproject["project"]["version"]


def update_database():  # pragma: no cover
    """Init the DB or run the Alembic migrations"""
    import alembic.config

    if not Path("alembic.ini").is_file():
        os.chdir(settings.BACKEND_DIR)

    try:
        alembic.config.main(
            argv=[
                "--raiseerr",
                "upgrade",
                "head",
            ]
        )
    except Exception as e:
        logger.exception(f"Cannot run DB migrations: {e}")


@asynccontextmanager
async def app_lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app"""
    logger.debug("Starting...")
    update_database()
    world = WorldApi()
    app.state.world = world
    yield
    await world.close()
    logger.debug("Closing app")


async def service_error_handler(request: Request, exc: ServiceError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.debug(f"Invalid body for {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


def create_app() -> FastAPI:
    """Create and configure the FastAPI application"""

    app = FastAPI(
        title="DailyVerse",
        description="Journals, events and friends in one place",
        version=get_version(),
        middleware=[
            Middleware(BrotliMiddleware, minimum_size=1000),
            Middleware(
                CORSMiddleware,
                allow_origins=settings.CORS_ORIGINS,
                allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
                allow_headers=["Content-Type", "Authorization"],
            ),
        ],
        swagger_ui_parameters={
            "defaultModelsExpandDepth": 0,
        },  # collapse the swagger schema
        lifespan=app_lifespan,
    )
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    @app.get("/")
    async def root():
        return {"version": app.version, "status": "ok"}

    # Mount routers
    api_router = APIRouter()
    api_router.include_router(users_router, tags=["users"])
    api_router.include_router(profile_router, tags=["users"])
    api_router.include_router(friends_router, tags=["friends"])
    api_router.include_router(journals_router)
    api_router.include_router(events_router)
    api_router.include_router(timetable_router)
    api_router.include_router(world_router)
    app.include_router(api_router, prefix=settings.API_PREFIX)
    return app
