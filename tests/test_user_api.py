"""
User endpoint tests: public lookups, profile, self-service edits and stats.
"""

from __future__ import annotations

from fastapi.testclient import TestClient


def test_get_user(client: TestClient, register) -> None:
    user, _ = register("alice")

    resp = client.get(f"/api/users/{user['id']}")

    assert resp.status_code == 200
    assert resp.json()["data"]["username"] == "alice"
    assert client.get("/api/users/999").status_code == 404


def test_profile_includes_stats_teams_and_history(client: TestClient, register, create_team, create_match) -> None:
    user, headers = register("alice")
    lions = create_team(headers, name="Lions")
    tigers = create_team(headers, name="Tigers")
    match = create_match(headers, lions["id"], tigers["id"])
    client.post(f"/api/matches/{match['id']}/participants", json={"teamId": lions["id"]}, headers=headers)

    profile = client.get(f"/api/users/{user['id']}/profile").json()["data"]

    assert profile["id"] == user["id"]
    assert profile["stats"]["userId"] == user["id"]
    assert [t["name"] for t in profile["teams"]] == ["Lions", "Tigers"]
    assert [m["id"] for m in profile["matchHistory"]] == [match["id"]]


def test_update_own_profile(client: TestClient, register) -> None:
    user, headers = register("alice")

    resp = client.put(f"/api/users/{user['id']}", json={
        "bio": "Left back",
        "position": "defender",
        "avatar": "https://img.example.com/a.png",
    }, headers=headers)

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert (data["bio"], data["position"]) == ("Left back", "defender")
    assert data["id"] == user["id"]
    assert data["email"] == user["email"]


def test_update_other_user_is_forbidden(client: TestClient, register) -> None:
    alice, _ = register("alice")
    _, bob_headers = register("bob")

    resp = client.put(f"/api/users/{alice['id']}", json={"bio": "hacked"}, headers=bob_headers)

    assert resp.status_code == 403
    assert client.get(f"/api/users/{alice['id']}").json()["data"]["bio"] is None


def test_update_rejects_bad_avatar(client: TestClient, register) -> None:
    user, headers = register("alice")
    resp = client.put(f"/api/users/{user['id']}", json={"avatar": "not a url"}, headers=headers)
    assert resp.status_code == 400


def test_stats(client: TestClient, register) -> None:
    user, _ = register("alice")

    stats = client.get(f"/api/users/{user['id']}/stats").json()["data"]

    assert stats["matchesPlayed"] == 0
    assert stats["rating"] == 0.0
    missing = client.get("/api/users/999/stats")
    assert missing.status_code == 404
    assert missing.json()["error"] == "Player stats not found"
