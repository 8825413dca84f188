# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from app.config import Settings
from app.exceptions import DatabaseConnectionError
from lib.database import UserStore


def get_settings_for(request: Request) -> Settings:
    """Get the settings the running app was built with."""
    return request.app.state.settings


def get_user_store(request: Request) -> UserStore:
    """
    Get the store handle opened at startup.

    The handle lives on app.state; tests replace it through
    app.dependency_overrides or create_app(store=...).

    Raises:
        DatabaseConnectionError: If the app has no open handle (lifespan
            never ran, or shutdown already disposed it)
    """
    store = getattr(request.app.state, "user_store", None)
    if store is None or getattr(store, "closed", False):
        raise DatabaseConnectionError("database handle is not open")
    return store


# Type aliases for dependency injection
SettingsDep = Annotated[Settings, Depends(get_settings_for)]
UserStoreDep = Annotated[UserStore, Depends(get_user_store)]
