"""FastAPI application — entry point for the event booking service."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from eventbook.config import API_VERSION, Settings
from eventbook.logging_config import setup_logger
from eventbook.repos.base import IntervalStore, UserStore
from eventbook.repos.memory import IntervalRepository, UserRepository
from eventbook.repos.sqlite import SqliteIntervalRepository, SqliteUserRepository, init_db
from eventbook.routes.events import router as events_router
from eventbook.routes.users import router as users_router
from eventbook.services.auth import AccountService, PasswordHasher, TokenIssuer
from eventbook.services.scheduling import SchedulingService

logger = logging.getLogger(__name__)


def build_stores(settings: Settings) -> tuple[IntervalStore, UserStore]:
    """Return the interval and user stores selected by ``settings.storage``."""
    if settings.storage == "sqlite":
        init_db(settings.database_path)
        return (
            SqliteIntervalRepository(settings.database_path),
            SqliteUserRepository(settings.database_path),
        )
    return IntervalRepository(), UserRepository()


def create_app(
    settings: Settings | None = None,
    interval_store: IntervalStore | None = None,
    user_store: UserStore | None = None,
) -> FastAPI:
    settings = settings or Settings()
    setup_logger(level=settings.log_level)

    if interval_store is None or user_store is None:
        default_intervals, default_users = build_stores(settings)
        interval_store = interval_store or default_intervals
        user_store = user_store or default_users

    app = FastAPI(title="Event Booking Service", version=API_VERSION, debug=settings.debug)
    app.state.settings = settings
    app.state.accounts = AccountService(
        users=user_store,
        hasher=PasswordHasher(),
        tokens=TokenIssuer(settings.jwt_secret, expires_minutes=settings.token_expire_minutes),
    )
    app.state.scheduling = SchedulingService(intervals=interval_store, users=user_store)

    if settings.debug:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.exception_handler(Exception)
    async def unhandled_exception(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    app.include_router(users_router)
    app.include_router(events_router)

    logger.info("Event booking service configured with %s storage", settings.storage)
    return app


if __name__ == "__main__":
    import uvicorn

    settings = Settings()
    uvicorn.run(
        "eventbook.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
