# leaderboard.py
# Player and team leaderboards. Both are recomputed from the store on every
# call; nothing is cached or stored.

from typing import Dict, List, Optional

from footheroes_backend.core.store import FootHeroesStore
from footheroes_backend.models.leaderboard_schemas import LeaderboardEntry, TeamLeaderboardEntry
from footheroes_backend.models.match_model import Match
from footheroes_backend.models.team_model import Team
from footheroes_backend.services.assembler import stats_view, team_view, user_view

POINTS_FOR_WIN = 3
POINTS_FOR_DRAW = 1


def is_scored_result(match: Match) -> bool:
    """A match counts for the table once it is completed with both scores in."""
    return (
        match.status == "completed"
        and match.home_score is not None
        and match.away_score is not None
    )


# =========================================
# PLAYER LEADERBOARD
# =========================================
def build_player_leaderboard(store: FootHeroesStore, limit: Optional[int] = None) -> List[LeaderboardEntry]:
    """
    Ranks every player by goals, then rating (both descending).

    Stats whose user no longer resolves are skipped. Players tied on both keys
    keep registration order and still get distinct consecutive ranks.
    """
    users = {user.id: user for user in store.get_all_users()}

    rows = []
    for stats in store.get_all_player_stats():
        user = users.get(stats.user_id)
        if not user:
            continue
        rows.append((user, stats))

    # sorted() is stable, so equal keys keep store order
    rows = sorted(rows, key=lambda row: (row[1].goals, row[1].rating), reverse=True)
    if limit is not None:
        rows = rows[:limit]

    return [
        LeaderboardEntry(rank=index + 1, user=user_view(user), stats=stats_view(stats))
        for index, (user, stats) in enumerate(rows)
    ]


# =========================================
# TEAM LEADERBOARD
# =========================================
def calculate_team_standings(teams: List[Team], matches: List[Match]) -> List[dict]:
    """
    Builds the league table rows for the given teams from scored matches.
    Returns dicts sorted by points, goal difference, goals for (all descending).
    """
    standings: Dict[int, dict] = {team.id: {
        "team": team,
        "matches_played": 0,
        "wins": 0,
        "draws": 0,
        "losses": 0,
        "goals_for": 0,
        "goals_against": 0,
    } for team in teams}

    for match in matches:
        if not is_scored_result(match):
            continue

        home = standings.get(match.home_team_id)
        away = standings.get(match.away_team_id)
        if not home or not away:
            continue

        home["matches_played"] += 1
        away["matches_played"] += 1
        home["goals_for"] += match.home_score
        home["goals_against"] += match.away_score
        away["goals_for"] += match.away_score
        away["goals_against"] += match.home_score

        if match.home_score > match.away_score:
            home["wins"] += 1
            away["losses"] += 1
        elif match.home_score < match.away_score:
            away["wins"] += 1
            home["losses"] += 1
        else:
            home["draws"] += 1
            away["draws"] += 1

    for row in standings.values():
        row["points"] = row["wins"] * POINTS_FOR_WIN + row["draws"] * POINTS_FOR_DRAW
        row["goal_difference"] = row["goals_for"] - row["goals_against"]

    return sorted(
        standings.values(),
        key=lambda x: (x["points"], x["goal_difference"], x["goals_for"]),
        reverse=True,
    )


def build_team_leaderboard(store: FootHeroesStore, limit: Optional[int] = None) -> List[TeamLeaderboardEntry]:
    standings = calculate_team_standings(store.get_all_teams(), store.get_all_matches())
    if limit is not None:
        standings = standings[:limit]

    entries = []
    for index, row in enumerate(standings):
        entries.append(TeamLeaderboardEntry(
            rank=index + 1,
            team=team_view(store, row["team"]),
            matches_played=row["matches_played"],
            wins=row["wins"],
            losses=row["losses"],
            draws=row["draws"],
            points=row["points"],
            goals_for=row["goals_for"],
            goals_against=row["goals_against"],
            goal_difference=row["goal_difference"],
        ))
    return entries
