"""
Tests for the leaderboard aggregators: player ranking and the league table.
"""

from __future__ import annotations

from sqlmodel import Session

from footheroes_backend.core.store import FootHeroesStore
from footheroes_backend.models.match_model import Match
from footheroes_backend.models.player_stat_model import PlayerStat
from footheroes_backend.models.team_model import Team
from footheroes_backend.services.leaderboard import (
    build_player_leaderboard,
    build_team_leaderboard,
    calculate_team_standings,
)
from tests.factories import make_match, make_team, make_user


def _team(team_id: int, name: str) -> Team:
    return Team(
        id=team_id,
        name=name,
        captain_id=1,
        location="London",
        skill_level="intermediate",
        max_members=15,
    )


def _result(home: int, away: int, home_score, away_score, status: str = "completed") -> Match:
    return Match(
        title="t",
        home_team_id=home,
        away_team_id=away,
        scheduled_at=None,
        duration=90,
        location="x",
        status=status,
        home_score=home_score,
        away_score=away_score,
        created_by_id=1,
    )


# --- Players ---


def test_players_ranked_by_goals_then_rating(store: FootHeroesStore) -> None:
    alice = make_user(store, "alice")
    bob = make_user(store, "bob")
    carl = make_user(store, "carl")
    store.update_player_stats(alice.id, {"goals": 2, "rating": 6.0})
    store.update_player_stats(bob.id, {"goals": 5, "rating": 5.0})
    store.update_player_stats(carl.id, {"goals": 2, "rating": 8.5})

    board = build_player_leaderboard(store)

    assert [e.user.username for e in board] == ["bob", "carl", "alice"]
    assert [e.rank for e in board] == [1, 2, 3]
    assert board[0].stats.goals == 5


def test_full_ties_keep_registration_order_with_distinct_ranks(store: FootHeroesStore) -> None:
    for name in ["first", "second", "third"]:
        make_user(store, name)

    board = build_player_leaderboard(store)

    assert [e.user.username for e in board] == ["first", "second", "third"]
    assert [e.rank for e in board] == [1, 2, 3]


def test_stats_without_user_are_skipped(store: FootHeroesStore) -> None:
    alice = make_user(store, "alice")
    with Session(store.engine) as session:
        session.add(PlayerStat(user_id=999, goals=50))
        session.commit()

    board = build_player_leaderboard(store)

    assert [e.user.id for e in board] == [alice.id]
    assert board[0].rank == 1


def test_player_leaderboard_limit(store: FootHeroesStore) -> None:
    for name in ["aaa", "bbb", "ccc"]:
        make_user(store, name)
    assert len(build_player_leaderboard(store, limit=2)) == 2


# --- Teams ---


def test_standings_points_and_goal_difference() -> None:
    teams = [_team(1, "A"), _team(2, "B")]
    rows = calculate_team_standings(teams, [_result(1, 2, 3, 1)])

    winner, loser = rows
    assert winner["team"].name == "A"
    assert (winner["points"], winner["wins"], winner["goal_difference"]) == (3, 1, 2)
    assert (loser["points"], loser["losses"], loser["goal_difference"]) == (0, 1, -2)
    assert winner["matches_played"] == loser["matches_played"] == 1


def test_draw_gives_one_point_each() -> None:
    rows = calculate_team_standings([_team(1, "A"), _team(2, "B")], [_result(1, 2, 2, 2)])
    assert [(r["points"], r["draws"]) for r in rows] == [(1, 1), (1, 1)]


def test_unscored_or_unfinished_matches_are_ignored() -> None:
    matches = [
        _result(1, 2, 1, 0, status="live"),
        _result(1, 2, None, None),
        _result(1, 2, 4, 0, status="cancelled"),
    ]
    rows = calculate_team_standings([_team(1, "A"), _team(2, "B")], matches)
    assert all(r["matches_played"] == 0 and r["points"] == 0 for r in rows)


def test_tiebreak_on_goal_difference_then_goals_for() -> None:
    teams = [_team(1, "A"), _team(2, "B"), _team(3, "C"), _team(4, "D")]
    matches = [
        _result(1, 4, 1, 0),   # A: +1, 1 scored
        _result(2, 4, 3, 2),   # B: +1, 3 scored
        _result(3, 4, 4, 0),   # C: +4
    ]
    rows = calculate_team_standings(teams, matches)
    assert [r["team"].name for r in rows] == ["C", "B", "A", "D"]


def test_team_leaderboard_from_store(store: FootHeroesStore) -> None:
    alice = make_user(store, "alice")
    bob = make_user(store, "bob")
    lions = make_team(store, alice, name="Lions")
    tigers = make_team(store, bob, name="Tigers")
    match = make_match(store, lions, tigers, alice)
    store.update_match(match.id, {"status": "completed", "home_score": 0, "away_score": 2})

    board = build_team_leaderboard(store)

    assert [e.team.name for e in board] == ["Tigers", "Lions"]
    assert [e.rank for e in board] == [1, 2]
    assert board[0].points == 3
    assert board[0].team.captain.username == "bob"
