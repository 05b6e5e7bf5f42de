# match_routes.py
# Fixtures: scheduling, score/status updates, soft cancellation,
# lineups (participants) and the match timeline (events).

import logging
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from footheroes_backend.core.auth import require_auth
from footheroes_backend.core.clock import to_naive_utc, utc_now
from footheroes_backend.core.dependencies import get_store
from footheroes_backend.core.game_modes import get_max_players, get_recommended_duration
from footheroes_backend.core.responses import envelope
from footheroes_backend.core.store import FootHeroesStore
from footheroes_backend.models.match_model import (
    Match, MatchCreate, MatchEventCreate, MatchStatus, MatchUpdate, ParticipantCreate,
)
from footheroes_backend.models.user_model import User
from footheroes_backend.services.assembler import event_view, match_view, match_views, participant_view

router = APIRouter()
logger = logging.getLogger(__name__)


def get_match_or_404(store: FootHeroesStore, match_id: int) -> Match:
    match = store.get_match_by_id(match_id)
    if not match:
        raise HTTPException(status_code=404, detail="Match not found")
    return match


def can_manage_match(store: FootHeroesStore, match: Match, user: User) -> bool:
    """The match creator and both team captains may manage a match."""
    if match.created_by_id == user.id:
        return True
    for team_id in (match.home_team_id, match.away_team_id):
        team = store.get_team_by_id(team_id)
        if team and team.captain_id == user.id:
            return True
    return False


# =========================================
# LIST MATCHES
# =========================================
@router.get("")
def list_matches(
    status: Optional[MatchStatus] = None,
    date_from: Optional[datetime] = Query(default=None, alias="dateFrom"),
    date_to: Optional[datetime] = Query(default=None, alias="dateTo"),
    team_id: Optional[int] = Query(default=None, alias="teamId"),
    store: FootHeroesStore = Depends(get_store),
):
    """
    All matches sorted by kick-off, optionally filtered by status,
    an inclusive dateFrom/dateTo window and a team on either side.
    """
    matches = store.get_all_matches()

    if status:
        matches = [m for m in matches if m.status == status]
    if date_from:
        lower = to_naive_utc(date_from)
        matches = [m for m in matches if m.scheduled_at >= lower]
    if date_to:
        upper = to_naive_utc(date_to)
        matches = [m for m in matches if m.scheduled_at <= upper]
    if team_id is not None:
        matches = [m for m in matches if team_id in (m.home_team_id, m.away_team_id)]

    matches = sorted(matches, key=lambda m: m.scheduled_at)
    return envelope(match_views(store, matches))


# =========================================
# GET MATCH
# =========================================
@router.get("/{match_id}")
def get_match(match_id: int, store: FootHeroesStore = Depends(get_store)):
    match = get_match_or_404(store, match_id)
    return envelope(match_view(store, match))


# =========================================
# CREATE MATCH
# =========================================
@router.post("", status_code=201)
def create_match(
    data: MatchCreate,
    user: User = Depends(require_auth),
    store: FootHeroesStore = Depends(get_store),
):
    # 1. Both teams must exist
    home_team = store.get_team_by_id(data.home_team_id)
    away_team = store.get_team_by_id(data.away_team_id)
    if not home_team or not away_team:
        raise HTTPException(status_code=400, detail="One or both teams not found")

    # 2. A team cannot play itself
    if data.home_team_id == data.away_team_id:
        raise HTTPException(status_code=400, detail="Home and away teams must be different")

    # 3. Kick-off must be in the future (only checked at creation)
    scheduled_at = to_naive_utc(data.scheduled_at)
    if scheduled_at <= utc_now():
        raise HTTPException(status_code=400, detail="Match must be scheduled for a future date")

    match_data = data.model_dump()
    match_data["scheduled_at"] = scheduled_at
    match_data["duration"] = data.duration or get_recommended_duration(data.game_mode)
    match_data["status"] = "scheduled"
    match_data["created_by_id"] = user.id

    match = store.create_match(match_data)
    if not match:
        raise HTTPException(status_code=400, detail="Failed to create match")

    logger.info("User %s scheduled match %s (%s)", user.id, match.id, match.title)
    return envelope(match_view(store, match), message="Match created successfully")


# =========================================
# UPDATE MATCH (scores / status)
# =========================================
@router.put("/{match_id}")
def update_match(
    match_id: int,
    data: MatchUpdate,
    user: User = Depends(require_auth),
    store: FootHeroesStore = Depends(get_store),
):
    existing = get_match_or_404(store, match_id)

    if not can_manage_match(store, existing, user):
        raise HTTPException(status_code=403, detail="Not authorized to update this match")

    updated = store.update_match(match_id, data.model_dump(exclude_unset=True, exclude_none=True))
    if not updated:
        raise HTTPException(status_code=400, detail="Failed to update match")

    # Credit the lineup as soon as the match is completed with both scores set
    if updated.status == "completed" and not updated.results_recorded:
        store.record_match_result(match_id)

    return envelope(match_view(store, updated), message="Match updated successfully")


# =========================================
# CANCEL MATCH
# =========================================
@router.delete("/{match_id}")
def cancel_match(
    match_id: int,
    user: User = Depends(require_auth),
    store: FootHeroesStore = Depends(get_store),
):
    """Soft delete: the match stays in the store with status 'cancelled'."""
    existing = get_match_or_404(store, match_id)

    if existing.created_by_id != user.id:
        raise HTTPException(status_code=403, detail="Not authorized to delete this match")

    store.update_match(match_id, {"status": "cancelled"})
    logger.info("User %s cancelled match %s", user.id, match_id)
    return envelope(message="Match cancelled successfully")


# =========================================
# LINEUP
# =========================================
@router.post("/{match_id}/participants", status_code=201)
def join_match(
    match_id: int,
    data: ParticipantCreate,
    user: User = Depends(require_auth),
    store: FootHeroesStore = Depends(get_store),
):
    """The caller lines up for one of the two sides; they must be on that team."""
    match = get_match_or_404(store, match_id)

    if match.status in ("completed", "cancelled"):
        raise HTTPException(status_code=400, detail=f"Match is already {match.status}")

    if data.team_id not in (match.home_team_id, match.away_team_id):
        raise HTTPException(status_code=400, detail="Team is not playing in this match")

    members = store.get_team_members(data.team_id)
    membership = next((m for m in members if m.user_id == user.id), None)
    if not membership:
        raise HTTPException(status_code=403, detail="You are not a member of this team")

    lineup = [p for p in store.get_match_participants(match_id) if p.team_id == data.team_id]
    if len(lineup) >= get_max_players(match.game_mode):
        raise HTTPException(status_code=400, detail="Lineup for this team is full")

    participant = store.add_match_participant(
        match_id,
        user.id,
        data.team_id,
        position=data.position or membership.position,
        is_starter=data.is_starter,
    )
    if not participant:
        raise HTTPException(status_code=400, detail="You are already in the lineup for this match")

    return envelope(participant_view(store, participant), message="Joined the match lineup")


# =========================================
# TIMELINE
# =========================================
@router.get("/{match_id}/events")
def get_match_events(match_id: int, store: FootHeroesStore = Depends(get_store)):
    get_match_or_404(store, match_id)
    events = [event_view(store, e) for e in store.get_match_events(match_id)]
    return envelope([e for e in events if e is not None])


@router.post("/{match_id}/events", status_code=201)
def add_match_event(
    match_id: int,
    data: MatchEventCreate,
    user: User = Depends(require_auth),
    store: FootHeroesStore = Depends(get_store),
):
    match = get_match_or_404(store, match_id)

    if not can_manage_match(store, match, user):
        raise HTTPException(status_code=403, detail="Not authorized to add events to this match")

    if not store.get_user_by_id(data.player_id):
        raise HTTPException(status_code=400, detail="Player not found")

    if data.team_id is not None and data.team_id not in (match.home_team_id, match.away_team_id):
        raise HTTPException(status_code=400, detail="Team is not playing in this match")

    event = store.add_match_event(
        match_id,
        data.player_id,
        data.type,
        data.minute,
        description=data.description,
        team_id=data.team_id,
    )
    if not event:
        raise HTTPException(status_code=400, detail="Failed to add event")

    return envelope(event_view(store, event), message="Event added successfully")
