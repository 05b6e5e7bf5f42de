"""
Team endpoint tests: listing filters, membership rules, capacity and captaincy.
"""

from __future__ import annotations

from fastapi.testclient import TestClient


def test_create_team_makes_caller_captain(client: TestClient, register, create_team) -> None:
    user, headers = register("alice", position="defender")

    team = create_team(headers, name="Lions")

    assert team["captainId"] == user["id"]
    assert team["captain"]["username"] == "alice"
    assert team["isRecruiting"] is True
    assert [(m["userId"], m["role"], m["position"]) for m in team["members"]] == [
        (user["id"], "captain", "defender"),
    ]


def test_create_team_requires_auth(client: TestClient) -> None:
    resp = client.post("/api/teams", json={
        "name": "Lions", "location": "London", "skillLevel": "beginner", "maxMembers": 10,
    })
    assert resp.status_code == 401


def test_create_team_validates_capacity_bounds(client: TestClient, register) -> None:
    _, headers = register("alice")
    resp = client.post("/api/teams", json={
        "name": "Lions", "location": "London", "skillLevel": "beginner", "maxMembers": 31,
    }, headers=headers)
    assert resp.status_code == 400
    assert "maxMembers" in resp.json()["error"]


def test_list_teams_filters(client: TestClient, register, create_team) -> None:
    _, headers = register("alice")
    create_team(headers, name="Lions", location="North London", skillLevel="beginner")
    create_team(headers, name="Reds", location="Manchester", skillLevel="advanced")

    all_teams = client.get("/api/teams").json()["data"]
    by_location = client.get("/api/teams", params={"location": "london"}).json()["data"]
    by_skill = client.get("/api/teams", params={"skillLevel": "advanced"}).json()["data"]
    recruiting = client.get("/api/teams", params={"isRecruiting": "false"}).json()["data"]

    assert [t["name"] for t in all_teams] == ["Lions", "Reds"]
    assert [t["name"] for t in by_location] == ["Lions"]
    assert [t["name"] for t in by_skill] == ["Reds"]
    assert recruiting == []


def test_get_missing_team_is_404(client: TestClient) -> None:
    resp = client.get("/api/teams/999")
    assert resp.status_code == 404
    assert resp.json() == {"success": False, "error": "Team not found"}


def test_join_and_leave(client: TestClient, register, create_team) -> None:
    _, captain_headers = register("alice")
    bob, bob_headers = register("bob")
    team = create_team(captain_headers)

    joined = client.post(f"/api/teams/{team['id']}/join", json={"position": "forward"}, headers=bob_headers)
    assert joined.status_code == 200
    assert joined.json()["message"] == "Successfully joined the team"

    again = client.post(f"/api/teams/{team['id']}/join", json={"position": "forward"}, headers=bob_headers)
    assert again.status_code == 400
    assert again.json()["error"] == "You are already a member of this team"

    members = client.get(f"/api/teams/{team['id']}").json()["data"]["members"]
    assert [m["user"]["username"] for m in members] == ["alice", "bob"]
    assert members[1]["role"] == "member"

    left = client.post(f"/api/teams/{team['id']}/leave", headers=bob_headers)
    assert left.status_code == 200

    left_again = client.post(f"/api/teams/{team['id']}/leave", headers=bob_headers)
    assert left_again.status_code == 400
    assert left_again.json()["error"] == "You are not a member of this team"
    assert bob["id"] not in [m["userId"] for m in client.get(f"/api/teams/{team['id']}").json()["data"]["members"]]


def test_join_full_team(client: TestClient, register, create_team) -> None:
    """Captain alone fills a one-slot team."""
    _, captain_headers = register("alice")
    _, bob_headers = register("bob")
    team = create_team(captain_headers, maxMembers=1)

    resp = client.post(f"/api/teams/{team['id']}/join", json={"position": "any"}, headers=bob_headers)

    assert resp.status_code == 400
    assert "team may be full" in resp.json()["error"]
    assert len(client.get(f"/api/teams/{team['id']}").json()["data"]["members"]) == 1


def test_join_missing_team(client: TestClient, register) -> None:
    _, headers = register("alice")
    resp = client.post("/api/teams/42/join", json={"position": "any"}, headers=headers)
    assert resp.status_code == 404


def test_captain_cannot_leave(client: TestClient, register, create_team) -> None:
    _, headers = register("alice")
    team = create_team(headers)

    resp = client.post(f"/api/teams/{team['id']}/leave", headers=headers)

    assert resp.status_code == 400
    assert resp.json()["error"] == "Team captain cannot leave the team"


def test_transfer_captaincy(client: TestClient, register, create_team) -> None:
    alice, alice_headers = register("alice")
    bob, bob_headers = register("bob")
    carl, _ = register("carl")
    team = create_team(alice_headers)
    client.post(f"/api/teams/{team['id']}/join", json={"position": "forward"}, headers=bob_headers)
    url = f"/api/teams/{team['id']}/captain"

    # Only the captain may hand over, and only to a member
    assert client.post(url, json={"userId": alice["id"]}, headers=bob_headers).status_code == 403
    assert client.post(url, json={"userId": carl["id"]}, headers=alice_headers).status_code == 400
    assert client.post(url, json={"userId": alice["id"]}, headers=alice_headers).status_code == 400

    resp = client.post(url, json={"userId": bob["id"]}, headers=alice_headers)
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["captainId"] == bob["id"]
    roles = {m["userId"]: m["role"] for m in data["members"]}
    assert roles == {alice["id"]: "member", bob["id"]: "captain"}

    # The former captain is now free to leave
    assert client.post(f"/api/teams/{team['id']}/leave", headers=alice_headers).status_code == 200


def test_team_views_reflect_renamed_captain(client: TestClient, register, create_team) -> None:
    alice, headers = register("alice")
    team = create_team(headers)

    client.put(f"/api/users/{alice['id']}", json={"firstName": "Alicia"}, headers=headers)

    data = client.get(f"/api/teams/{team['id']}").json()["data"]
    assert data["captain"]["firstName"] == "Alicia"
    assert data["members"][0]["user"]["firstName"] == "Alicia"


def test_team_matches(client: TestClient, register, create_team, create_match) -> None:
    _, headers = register("alice")
    lions = create_team(headers, name="Lions")
    tigers = create_team(headers, name="Tigers")
    bears = create_team(headers, name="Bears")
    match = create_match(headers, lions["id"], tigers["id"])

    assert [m["id"] for m in client.get(f"/api/teams/{tigers['id']}/matches").json()["data"]] == [match["id"]]
    assert client.get(f"/api/teams/{bears['id']}/matches").json()["data"] == []


def test_leave_twice_as_non_member_changes_nothing(client: TestClient, register, create_team) -> None:
    _, captain_headers = register("alice")
    _, stranger_headers = register("stranger")
    team = create_team(captain_headers)
    url = f"/api/teams/{team['id']}"

    before = client.get(url).json()["data"]["members"]
    first = client.post(f"{url}/leave", headers=stranger_headers)
    second = client.post(f"{url}/leave", headers=stranger_headers)

    assert (first.status_code, second.status_code) == (400, 400)
    assert first.json()["error"] == second.json()["error"] == "You are not a member of this team"
    assert client.get(url).json()["data"]["members"] == before


def test_join_then_leave_restores_member_count(client: TestClient, register, create_team) -> None:
    _, captain_headers = register("alice")
    _, bob_headers = register("bob")
    team = create_team(captain_headers)
    url = f"/api/teams/{team['id']}"

    count_before = len(client.get(url).json()["data"]["members"])
    client.post(f"{url}/join", json={"position": "defender"}, headers=bob_headers)
    assert len(client.get(url).json()["data"]["members"]) == count_before + 1
    client.post(f"{url}/leave", headers=bob_headers)

    assert len(client.get(url).json()["data"]["members"]) == count_before
