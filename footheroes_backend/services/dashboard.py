# dashboard.py
# Personal dashboard: profile, upcoming/recent fixtures and both leaderboards.

from datetime import datetime
from typing import Optional

from footheroes_backend.core.clock import utc_now
from footheroes_backend.core.store import FootHeroesStore
from footheroes_backend.models.leaderboard_schemas import DashboardData
from footheroes_backend.models.user_model import User
from footheroes_backend.services.assembler import user_profile
from footheroes_backend.services.leaderboard import build_player_leaderboard, build_team_leaderboard

DASHBOARD_MATCH_LIMIT = 5
DASHBOARD_LEADERBOARD_LIMIT = 10


def build_dashboard(store: FootHeroesStore, user: User, now: Optional[datetime] = None) -> DashboardData:
    """
    Assembles the dashboard for a user.
    - upcoming: scheduled matches still in the future, soonest first
    - recent: matches already kicked off or completed, latest first
    Both lists come from the user's match history and are capped at 5.
    """
    now = now or utc_now()
    profile = user_profile(store, user)

    upcoming = sorted(
        (m for m in profile.match_history if m.scheduled_at > now and m.status == "scheduled"),
        key=lambda m: m.scheduled_at,
    )[:DASHBOARD_MATCH_LIMIT]

    recent = sorted(
        (m for m in profile.match_history if m.scheduled_at <= now or m.status == "completed"),
        key=lambda m: m.scheduled_at,
        reverse=True,
    )[:DASHBOARD_MATCH_LIMIT]

    return DashboardData(
        user=profile,
        upcoming_matches=upcoming,
        recent_matches=recent,
        player_leaderboard=build_player_leaderboard(store, limit=DASHBOARD_LEADERBOARD_LIMIT),
        team_leaderboard=build_team_leaderboard(store, limit=DASHBOARD_LEADERBOARD_LIMIT),
    )
