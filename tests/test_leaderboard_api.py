"""
Leaderboard and dashboard endpoint tests.
"""

from __future__ import annotations

from fastapi.testclient import TestClient

from footheroes_backend.core.store import FootHeroesStore


def test_team_leaderboard_after_three_one(client: TestClient, register, create_team, create_match) -> None:
    _, headers = register("alice")
    lions = create_team(headers, name="Lions")
    tigers = create_team(headers, name="Tigers")
    match = create_match(headers, lions["id"], tigers["id"])
    client.put(f"/api/matches/{match['id']}", json={
        "status": "completed", "homeScore": 3, "awayScore": 1,
    }, headers=headers)

    board = client.get("/api/leaderboard/teams").json()["data"]

    assert [row["team"]["name"] for row in board] == ["Lions", "Tigers"]
    assert [row["rank"] for row in board] == [1, 2]
    assert (board[0]["points"], board[0]["goalDifference"], board[0]["wins"]) == (3, 2, 1)
    assert (board[1]["points"], board[1]["goalDifference"], board[1]["losses"]) == (0, -2, 1)


def test_player_leaderboard_ranks_are_monotonic(client: TestClient, register, store: FootHeroesStore) -> None:
    users = [register(name)[0] for name in ["alice", "bob", "carl"]]
    store.update_player_stats(users[2]["id"], {"goals": 4})
    store.update_player_stats(users[0]["id"], {"goals": 1, "rating": 7.0})

    board = client.get("/api/leaderboard").json()["data"]

    assert [row["user"]["username"] for row in board] == ["carl", "alice", "bob"]
    assert [row["rank"] for row in board] == [1, 2, 3]
    goals = [row["stats"]["goals"] for row in board]
    assert goals == sorted(goals, reverse=True)


def test_dashboard_requires_auth(client: TestClient) -> None:
    assert client.get("/api/dashboard").status_code == 401


def test_dashboard(client: TestClient, register, create_team, create_match) -> None:
    user, headers = register("alice")
    lions = create_team(headers, name="Lions")
    tigers = create_team(headers, name="Tigers")
    match = create_match(headers, lions["id"], tigers["id"])
    client.post(f"/api/matches/{match['id']}/participants", json={"teamId": lions["id"]}, headers=headers)

    resp = client.get("/api/dashboard", headers=headers)

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["user"]["id"] == user["id"]
    assert [m["id"] for m in data["upcomingMatches"]] == [match["id"]]
    assert data["recentMatches"] == []
    assert [row["user"]["id"] for row in data["playerLeaderboard"]] == [user["id"]]
    assert len(data["teamLeaderboard"]) == 2
