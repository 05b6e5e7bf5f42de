# leaderboard_schemas.py
# Derived views: leaderboards, user profile and dashboard. Nothing here is stored.

from typing import List

from footheroes_backend.models.match_model import MatchRead
from footheroes_backend.models.player_stat_model import PlayerStatsRead
from footheroes_backend.models.schema_base import CamelModel
from footheroes_backend.models.team_model import TeamRead
from footheroes_backend.models.user_model import UserRead


class LeaderboardEntry(CamelModel):
    rank: int
    user: UserRead
    stats: PlayerStatsRead


class TeamLeaderboardEntry(CamelModel):
    rank: int
    team: TeamRead
    matches_played: int
    wins: int
    losses: int
    draws: int
    points: int                 # 3 for a win, 1 for a draw
    goals_for: int
    goals_against: int
    goal_difference: int


class UserProfile(UserRead):
    stats: PlayerStatsRead
    teams: List[TeamRead] = []
    match_history: List[MatchRead] = []


class AuthPayload(CamelModel):
    user: UserRead
    token: str


class DashboardData(CamelModel):
    user: UserProfile
    upcoming_matches: List[MatchRead] = []
    recent_matches: List[MatchRead] = []
    player_leaderboard: List[LeaderboardEntry] = []
    team_leaderboard: List[TeamLeaderboardEntry] = []
