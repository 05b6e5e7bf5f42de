# health_routes.py
# Liveness and health checks, store status, API index and game mode reference data.

import logging
import time

from fastapi import APIRouter, Depends, Request

from footheroes_backend.core.dependencies import get_app_settings, get_store
from footheroes_backend.core.clock import utc_now
from footheroes_backend.core.config import Settings
from footheroes_backend.core.game_modes import FIELD_SIZES, GAME_MODES
from footheroes_backend.core.responses import envelope, error_response
from footheroes_backend.core.store import FootHeroesStore

router = APIRouter()
logger = logging.getLogger(__name__)

API_ENDPOINTS = {
    "auth": {
        "register": "POST /api/auth/register",
        "login": "POST /api/auth/login",
        "logout": "POST /api/auth/logout",
        "me": "GET /api/auth/me",
    },
    "users": {
        "get": "GET /api/users/:id",
        "profile": "GET /api/users/:id/profile",
        "update": "PUT /api/users/:id",
        "stats": "GET /api/users/:id/stats",
        "matches": "GET /api/users/:id/matches",
    },
    "teams": {
        "list": "GET /api/teams",
        "get": "GET /api/teams/:id",
        "create": "POST /api/teams",
        "join": "POST /api/teams/:id/join",
        "leave": "POST /api/teams/:id/leave",
        "captain": "POST /api/teams/:id/captain",
        "matches": "GET /api/teams/:id/matches",
    },
    "matches": {
        "list": "GET /api/matches",
        "get": "GET /api/matches/:id",
        "create": "POST /api/matches",
        "update": "PUT /api/matches/:id",
        "delete": "DELETE /api/matches/:id",
        "join": "POST /api/matches/:id/participants",
        "events": "GET|POST /api/matches/:id/events",
    },
    "leaderboard": {
        "players": "GET /api/leaderboard",
        "teams": "GET /api/leaderboard/teams",
    },
    "dashboard": "GET /api/dashboard",
    "gameModes": "GET /api/game-modes",
}


def _uptime(request: Request) -> float:
    return round(time.monotonic() - request.app.state.started_at, 3)


@router.get("/ping")
def ping(request: Request):
    return {
        "success": True,
        "message": "FootHeroes API is running!",
        "timestamp": utc_now().isoformat(),
        "uptime": _uptime(request),
    }


@router.get("/health")
def health(
    request: Request,
    store: FootHeroesStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
):
    """Checks the store answers and reports entity counts."""
    try:
        users = len(store.get_all_users())
        teams = len(store.get_all_teams())
        matches = len(store.get_all_matches())
    except Exception:
        logger.exception("Health check failed")
        return error_response(503, "Store unavailable")

    return {
        "success": True,
        "status": "healthy",
        "timestamp": utc_now().isoformat(),
        "uptime": _uptime(request),
        "version": settings.version,
        "services": {
            "database": {"status": "operational", "users": users, "teams": teams, "matches": matches},
            "api": {"status": "operational"},
        },
    }


@router.get("/status")
def status(store: FootHeroesStore = Depends(get_store)):
    stats = store.get_all_player_stats()
    teams = store.get_all_teams()
    return envelope({
        "users": len(store.get_all_users()),
        "teams": len(teams),
        "matches": len(store.get_all_matches()),
        "totalGoals": sum(s.goals for s in stats),
        "totalMatches": sum(s.matches_played for s in stats),
        "activeTeams": sum(1 for t in teams if t.is_recruiting),
        "timestamp": utc_now().isoformat(),
    })


@router.get("/info")
def info(settings: Settings = Depends(get_app_settings)):
    return {
        "message": settings.app_name,
        "version": settings.version,
        "endpoints": API_ENDPOINTS,
    }


@router.get("/game-modes")
def list_game_modes():
    """Supported match formats with their field sizes."""
    modes = []
    for config in GAME_MODES.values():
        field = FIELD_SIZES[config["field_size"]]
        modes.append({
            "mode": config["mode"],
            "playersPerTeam": config["players_per_team"],
            "fieldSize": config["field_size"],
            "fieldName": field["name"],
            "dimensions": field["dimensions"],
            "duration": config["duration"],
            "maxSubstitutions": config["max_substitutions"],
        })
    return envelope(modes)
