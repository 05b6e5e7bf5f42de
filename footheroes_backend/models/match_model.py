# match_model.py
# Defines the Match model (fixtures between two teams), the players taking part
# (MatchParticipant) and the in-game timeline (MatchEvent).

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import Field as SchemaField
from sqlmodel import SQLModel, Field

from footheroes_backend.core.clock import utc_now
from footheroes_backend.models.schema_base import CamelModel, timestamp_field
from footheroes_backend.models.team_model import TeamRead
from footheroes_backend.models.user_model import PlayerPosition, UserRead

MatchStatus = Literal["scheduled", "live", "completed", "cancelled"]
GameMode = Literal["5v5", "7v7", "9v9", "10v10", "11v11", "custom"]
MatchEventType = Literal["goal", "assist", "yellow_card", "red_card", "substitution"]


class Match(SQLModel, table=True):
    """
    A scheduled match between two different teams, created by a user.
    Scores stay empty until the match is played.
    """
    id: Optional[int] = Field(default=None, primary_key=True)
    title: str
    description: Optional[str] = None

    # Foreign keys
    home_team_id: int = Field(foreign_key="team.id", index=True)
    away_team_id: int = Field(foreign_key="team.id", index=True)
    created_by_id: int = Field(foreign_key="user.id")

    # Match details
    scheduled_at: datetime = timestamp_field()
    duration: int                          # Minutes
    location: str
    status: str = "scheduled"              # MatchStatus
    game_mode: str = "11v11"

    # Results
    home_score: Optional[int] = None
    away_score: Optional[int] = None
    # Set once the lineup has been credited with this result
    results_recorded: bool = False

    created_at: datetime = timestamp_field(default_factory=utc_now)
    updated_at: datetime = timestamp_field(default_factory=utc_now)


class MatchParticipant(SQLModel, table=True):
    """A player lined up for one side of a match, with per-match stats."""
    id: Optional[int] = Field(default=None, primary_key=True)
    match_id: int = Field(foreign_key="match.id", index=True)
    user_id: int = Field(foreign_key="user.id", index=True)
    team_id: int = Field(foreign_key="team.id")
    position: str
    is_starter: bool = True
    minutes_played: int = 0

    goals: int = 0
    assists: int = 0
    yellow_cards: int = 0
    red_cards: int = 0
    rating: float = 0.0


class MatchEvent(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    match_id: int = Field(foreign_key="match.id", index=True)
    player_id: int = Field(foreign_key="user.id")
    team_id: Optional[int] = Field(default=None, foreign_key="team.id")
    type: str                              # MatchEventType
    minute: int
    description: Optional[str] = None
    created_at: datetime = timestamp_field(default_factory=utc_now)


# -------------------------------
# Pydantic schemas for API requests
# -------------------------------

class MatchCreate(CamelModel):
    title: str = SchemaField(min_length=1, max_length=100)
    description: Optional[str] = None
    home_team_id: int
    away_team_id: int
    scheduled_at: datetime
    # Falls back to the game mode's default length
    duration: Optional[int] = SchemaField(default=None, ge=30, le=180)
    location: str = SchemaField(min_length=1)
    game_mode: GameMode = "11v11"


class MatchUpdate(CamelModel):
    home_score: Optional[int] = SchemaField(default=None, ge=0)
    away_score: Optional[int] = SchemaField(default=None, ge=0)
    status: Optional[MatchStatus] = None


class ParticipantCreate(CamelModel):
    team_id: int
    position: Optional[PlayerPosition] = None
    is_starter: bool = True


class MatchEventCreate(CamelModel):
    type: MatchEventType
    player_id: int
    team_id: Optional[int] = None
    minute: int = SchemaField(ge=0, le=120)
    description: Optional[str] = None


# -------------------------------
# Pydantic schemas for API responses
# -------------------------------

class ParticipantStatsRead(CamelModel):
    goals: int
    assists: int
    yellow_cards: int
    red_cards: int
    rating: float


class MatchParticipantRead(CamelModel):
    id: int
    match_id: int
    user_id: int
    user: UserRead
    team_id: int
    position: str
    is_starter: bool
    minutes_played: int
    stats: ParticipantStatsRead


class MatchEventRead(CamelModel):
    id: int
    match_id: int
    player_id: int
    player: UserRead
    team_id: Optional[int] = None
    type: str
    minute: int
    description: Optional[str] = None
    created_at: datetime


class MatchRead(CamelModel):
    id: int
    title: str
    description: Optional[str] = None
    home_team_id: int
    home_team: TeamRead
    away_team_id: int
    away_team: TeamRead
    scheduled_at: datetime
    duration: int
    location: str
    status: str
    game_mode: str
    home_score: Optional[int] = None
    away_score: Optional[int] = None
    created_by_id: int
    created_by: UserRead
    participants: List[MatchParticipantRead] = []
    events: List[MatchEventRead] = []
    created_at: datetime
    updated_at: datetime
