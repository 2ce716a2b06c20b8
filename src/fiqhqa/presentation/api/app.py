"""Builds the FiqhQA HTTP application.

Serve it through uvicorn's factory mode so settings are read at startup:

    uvicorn fiqhqa.presentation.api.app:create_app --factory
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fiqhqa.infrastructure.persistence.sqlalchemy import Database
from fiqhqa.presentation.api.config import get_api_settings
from fiqhqa.presentation.api.exception_handlers import setup_exception_handlers
from fiqhqa.presentation.api.middleware import setup_middleware
from fiqhqa.presentation.api.routers import auth_router, users_router
from fiqhqa.presentation.api.schemas import HealthResponse
from fiqhqa_config.settings import Settings, get_settings

API_VERSION = "1.0.0"

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"

# Loggers that stay at WARNING whatever LOG_LEVEL says
QUIET_LOGGERS = ("sqlalchemy.engine", "aiosqlite", "asyncpg", "uvicorn.access")

logger = logging.getLogger(__name__)


@lru_cache()
def _configure_logging(level_name: str) -> None:
    # basicConfig is a no-op when the host (uvicorn, pytest) already
    # installed root handlers; the level assignments still apply.
    logging.basicConfig(format=LOG_FORMAT, stream=sys.stdout)

    level = logging.getLevelName(level_name)
    for name in ("fiqhqa", "fiqhqa_auth"):
        logging.getLogger(name).setLevel(level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": (
            "Exchange a username and password for a bearer token. Tokens "
            "are stateless JWTs and stay valid until they expire."
        ),
    },
    {
        "name": "Users",
        "description": (
            "Account registration and the caller's own profile. Routes under "
            "`/users/me` need `Authorization: Bearer <token>`."
        ),
    },
    {"name": "Health", "description": "Liveness probe."},
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    database: Database = app.state.database
    logger.info("FiqhQA API %s starting", API_VERSION)
    await database.create_schema()
    try:
        yield
    finally:
        logger.info("FiqhQA API stopping")
        await database.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Assemble routers, middleware and error handling.

    ``settings`` replaces the process configuration for every dependency
    of this app; tests pass their own instead of touching the environment.
    That includes storage: the app owns one ``Database`` for
    ``settings.database_url``, kept on ``app.state`` and disposed on
    shutdown. The interactive docs are only mounted when ``api_debug``
    is set.
    """
    settings = settings or get_settings()
    _configure_logging(settings.log_level)

    docs_enabled = settings.api_debug
    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Registration, login and profile management.",
        version=API_VERSION,
        openapi_tags=OPENAPI_TAGS,
        docs_url="/docs" if docs_enabled else None,
        redoc_url=None,
        openapi_url="/openapi.json" if docs_enabled else None,
        lifespan=lifespan,
    )
    app.state.database = Database(settings.database_url, echo=settings.debug)
    app.dependency_overrides[get_api_settings] = lambda: settings

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_methods=["GET", "POST", "PUT", "PATCH"],
            allow_headers=["Authorization", "Content-Type", "Trace-Id"],
            expose_headers=["Trace-Id"],
        )
    setup_middleware(app)
    setup_exception_handlers(app, detailed_errors=settings.api_detailed_errors)

    app.include_router(auth_router, tags=["Authentication"])
    app.include_router(users_router, prefix="/users", tags=["Users"])

    @app.get("/health", tags=["Health"])
    async def health() -> HealthResponse:
        return HealthResponse(status="healthy", version=API_VERSION)

    return app
