# leaderboard_routes.py
# Player/team leaderboards and the personal dashboard.

from fastapi import APIRouter, Depends

from footheroes_backend.core.auth import require_auth
from footheroes_backend.core.dependencies import get_store
from footheroes_backend.core.responses import envelope
from footheroes_backend.core.store import FootHeroesStore
from footheroes_backend.models.user_model import User
from footheroes_backend.services.dashboard import build_dashboard
from footheroes_backend.services.leaderboard import build_player_leaderboard, build_team_leaderboard

router = APIRouter()


@router.get("/leaderboard")
def get_player_leaderboard(store: FootHeroesStore = Depends(get_store)):
    """All players ranked by goals, then rating."""
    return envelope(build_player_leaderboard(store))


@router.get("/leaderboard/teams")
def get_team_leaderboard(store: FootHeroesStore = Depends(get_store)):
    """League table from completed matches: points, goal difference, goals for."""
    return envelope(build_team_leaderboard(store))


@router.get("/dashboard")
def get_dashboard(user: User = Depends(require_auth), store: FootHeroesStore = Depends(get_store)):
    return envelope(build_dashboard(store, user))
