import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from footheroes_backend.core.config import Settings, get_settings
from footheroes_backend.core.database import create_db_engine, init_db
from footheroes_backend.core.logging import setup_logging
from footheroes_backend.core.responses import register_exception_handlers
from footheroes_backend.core.store import FootHeroesStore
from footheroes_backend.seed.seed_all import seed_all

# --- Routers ---
from footheroes_backend.core.auth import router as auth_router
from footheroes_backend.routes.health_routes import router as health_router
from footheroes_backend.routes.leaderboard_routes import router as leaderboard_router
from footheroes_backend.routes.match_routes import router as match_router
from footheroes_backend.routes.team_routes import router as team_router
from footheroes_backend.routes.user_routes import router as user_router

logger = logging.getLogger(__name__)


def build_store(settings: Settings) -> FootHeroesStore:
    """Fresh store with tables created and, if enabled, demo data."""
    engine = create_db_engine(settings.database_url)
    init_db(engine)

    store = FootHeroesStore(engine, session_ttl_seconds=settings.session_ttl_seconds)
    if settings.seed_data:
        seed_all(store)
    return store


def create_app(settings: Optional[Settings] = None, store: Optional[FootHeroesStore] = None) -> FastAPI:
    """
    Builds the FastAPI app around an explicit store.
    Tests pass their own store; otherwise one is built from settings.
    """
    settings = settings or get_settings()
    if store is None:
        store = build_store(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        store.close()
        logger.info("Application shutdown complete")

    app = FastAPI(title=settings.app_name, version=settings.version, lifespan=lifespan)
    app.state.settings = settings
    app.state.store = store
    app.state.started_at = time.monotonic()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    # Routers
    app.include_router(health_router, prefix="/api", tags=["Health"])
    app.include_router(auth_router, prefix="/api/auth", tags=["Auth"])
    app.include_router(team_router, prefix="/api/teams", tags=["Teams"])
    app.include_router(match_router, prefix="/api/matches", tags=["Matches"])
    app.include_router(user_router, prefix="/api/users", tags=["Users"])
    app.include_router(leaderboard_router, prefix="/api", tags=["Leaderboard"])

    logger.info("%s ready (env=%s, seeded=%s)", settings.app_name, settings.env, settings.seed_data)
    return app


settings = get_settings()
setup_logging(settings)

# `uvicorn footheroes_backend.main:app`
app = create_app(settings)
