from fastapi import Request

from footheroes_backend.core.config import Settings
from footheroes_backend.core.store import FootHeroesStore


def get_store(request: Request) -> FootHeroesStore:
    """The store instance the app was built with."""
    return request.app.state.store


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
