# team_routes.py
# Team listing, creation, membership (join/leave), captaincy and fixtures.

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from footheroes_backend.core.auth import require_auth
from footheroes_backend.core.dependencies import get_store
from footheroes_backend.core.responses import envelope
from footheroes_backend.core.store import FootHeroesStore
from footheroes_backend.models.team_model import CaptainTransfer, Team, TeamCreate, TeamJoin
from footheroes_backend.models.user_model import SkillLevel, User
from footheroes_backend.services.assembler import match_views, team_view

router = APIRouter()
logger = logging.getLogger(__name__)


def get_team_or_404(store: FootHeroesStore, team_id: int) -> Team:
    team = store.get_team_by_id(team_id)
    if not team:
        raise HTTPException(status_code=404, detail="Team not found")
    return team


# =========================================
# LIST TEAMS
# =========================================
@router.get("")
def list_teams(
    location: Optional[str] = None,
    skill_level: Optional[SkillLevel] = Query(default=None, alias="skillLevel"),
    is_recruiting: Optional[bool] = Query(default=None, alias="isRecruiting"),
    store: FootHeroesStore = Depends(get_store),
):
    """
    All teams, optionally filtered:
    - location: case-insensitive substring match
    - skillLevel: exact match
    - isRecruiting: true/false
    """
    teams = store.get_all_teams()

    if location:
        needle = location.lower()
        teams = [t for t in teams if needle in t.location.lower()]
    if skill_level:
        teams = [t for t in teams if t.skill_level == skill_level]
    if is_recruiting is not None:
        teams = [t for t in teams if t.is_recruiting == is_recruiting]

    return envelope([team_view(store, t) for t in teams])


# =========================================
# GET TEAM
# =========================================
@router.get("/{team_id}")
def get_team(team_id: int, store: FootHeroesStore = Depends(get_store)):
    team = get_team_or_404(store, team_id)
    return envelope(team_view(store, team))


# =========================================
# CREATE TEAM
# =========================================
@router.post("", status_code=201)
def create_team(
    data: TeamCreate,
    user: User = Depends(require_auth),
    store: FootHeroesStore = Depends(get_store),
):
    """The caller becomes captain and first member. New teams are recruiting."""
    team = store.create_team({
        **data.model_dump(),
        "captain_id": user.id,
        "is_recruiting": True,
    })
    if not team:
        raise HTTPException(status_code=400, detail="Failed to create team")

    logger.info("User %s created team %s (%s)", user.id, team.id, team.name)
    return envelope(team_view(store, team), message="Team created successfully")


# =========================================
# JOIN / LEAVE
# =========================================
@router.post("/{team_id}/join")
def join_team(
    team_id: int,
    data: TeamJoin,
    user: User = Depends(require_auth),
    store: FootHeroesStore = Depends(get_store),
):
    # 1. Team must exist
    team = get_team_or_404(store, team_id)

    # 2. No double membership
    members = store.get_team_members(team_id)
    if any(m.user_id == user.id for m in members):
        raise HTTPException(status_code=400, detail="You are already a member of this team")

    # 3. Team must be recruiting
    if not team.is_recruiting:
        raise HTTPException(status_code=400, detail="This team is not currently recruiting")

    # 4. Capacity is enforced by the store
    if not store.add_team_member(team_id, user.id, data.position):
        raise HTTPException(status_code=400, detail="Failed to join team (team may be full)")

    return envelope({"success": True}, message="Successfully joined the team")


@router.post("/{team_id}/leave")
def leave_team(
    team_id: int,
    user: User = Depends(require_auth),
    store: FootHeroesStore = Depends(get_store),
):
    team = get_team_or_404(store, team_id)

    # Captaincy has to be handed over first
    if team.captain_id == user.id:
        raise HTTPException(status_code=400, detail="Team captain cannot leave the team")

    if not store.remove_team_member(team_id, user.id):
        raise HTTPException(status_code=400, detail="You are not a member of this team")

    return envelope(message="Successfully left the team")


# =========================================
# TRANSFER CAPTAINCY
# =========================================
@router.post("/{team_id}/captain")
def transfer_captain(
    team_id: int,
    data: CaptainTransfer,
    user: User = Depends(require_auth),
    store: FootHeroesStore = Depends(get_store),
):
    """Current captain hands the armband to another member of the team."""
    team = get_team_or_404(store, team_id)

    if team.captain_id != user.id:
        raise HTTPException(status_code=403, detail="Only the team captain can transfer captaincy")

    if data.user_id == user.id:
        raise HTTPException(status_code=400, detail="You are already the captain of this team")

    if not store.transfer_captaincy(team_id, data.user_id):
        raise HTTPException(status_code=400, detail="New captain must be a member of this team")

    logger.info("Team %s captaincy moved from user %s to user %s", team_id, user.id, data.user_id)
    return envelope(team_view(store, store.get_team_by_id(team_id)), message="Captaincy transferred")


# =========================================
# TEAM FIXTURES
# =========================================
@router.get("/{team_id}/matches")
def get_team_matches(team_id: int, store: FootHeroesStore = Depends(get_store)):
    return envelope(match_views(store, store.get_matches_by_team_id(team_id)))
