from __future__ import annotations

from fastapi import Request

from user_service.settings import Settings
from user_service.user_store import InMemoryUserStore

# Both objects live on app.state, set by create_app().


def get_settings_dep(request: Request) -> Settings:
    """FastAPI dependency for the settings the app was created with."""
    return request.app.state.settings


def get_user_store(request: Request) -> InMemoryUserStore:
    return request.app.state.user_store
