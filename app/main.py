# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Users API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --port 8080
#   python -m app
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import Settings, get_settings
from app.exceptions import (
    QueryError,
    UsersApiException,
    query_exception_handler,
    unexpected_exception_handler,
    users_api_exception_handler,
)
from app.routers import health, users
from lib.database import UserStore

logging.basicConfig(
    level=logging.DEBUG if get_settings().DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    store: UserStore | None = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Settings to use (defaults to the cached environment settings)
        store: Pre-built store handle. When given, the app uses it as-is and
            leaves closing it to the caller; otherwise the lifespan connects
            on startup and disposes on shutdown.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan handler.

        - Startup: connect to the database; a failure aborts startup
        - Shutdown: dispose the connection pool
        """
        owns_store = getattr(app.state, "user_store", None) is None

        if owns_store:
            try:
                app.state.user_store = UserStore.connect(
                    settings.DATABASE_URL,
                    table=settings.USERS_TABLE,
                    column=settings.USERS_NAME_COLUMN,
                )
            except UsersApiException as e:
                logger.critical(f"Cannot start without a database: {e.to_dict()}")
                raise

        logger.info(
            f"Server running on http://{settings.API_HOST}:{settings.API_PORT} "
            f"({settings.ENVIRONMENT} mode)"
        )

        try:
            yield
        finally:
            logger.info("Shutting down Users API")
            if owns_store:
                app.state.user_store.close()
                app.state.user_store = None

    app = FastAPI(
        title="Users API",
        description="Lists user first names from the users table.",
        version=health.API_VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.user_store = store

    # =========================================================================
    # Middleware
    # =========================================================================

    # Answers CORS preflight; GET /users sets its own allow-origin header
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    app.add_exception_handler(QueryError, query_exception_handler)
    app.add_exception_handler(UsersApiException, users_api_exception_handler)
    app.add_exception_handler(Exception, unexpected_exception_handler)

    # =========================================================================
    # Routers
    # =========================================================================

    app.include_router(users.router, tags=["Users"])
    app.include_router(health.router, tags=["Health"])

    @app.get("/", tags=["Root"])
    async def root():
        """
        Root endpoint - returns API info.
        """
        return {
            "name": "Users API",
            "version": health.API_VERSION,
            "docs": "/docs",
            "users": "/users",
            "health": "/health",
        }

    return app


app = create_app()
