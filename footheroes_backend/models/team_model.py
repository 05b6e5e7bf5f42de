# team_model.py
# Defines Team and TeamMember (join records), plus the team API schemas.

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import Field as SchemaField
from sqlmodel import SQLModel, Field

from footheroes_backend.core.clock import utc_now
from footheroes_backend.models.schema_base import CamelModel, timestamp_field
from footheroes_backend.models.user_model import PlayerPosition, SkillLevel, UserRead

TeamRole = Literal["captain", "member"]


class Team(SQLModel, table=True):
    """
    An amateur team owned by its captain.
    The captain is always stored as a TeamMember with role 'captain'.
    """
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    description: Optional[str] = None
    logo: Optional[str] = None
    captain_id: int = Field(foreign_key="user.id")
    location: str
    skill_level: str
    max_members: int                   # Capacity, captain included
    is_recruiting: bool = True

    created_at: datetime = timestamp_field(default_factory=utc_now)
    updated_at: datetime = timestamp_field(default_factory=utc_now)


class TeamMember(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    team_id: int = Field(foreign_key="team.id", index=True)
    user_id: int = Field(foreign_key="user.id", index=True)
    role: str = "member"               # TeamRole
    position: str                      # Assigned position within this team
    joined_at: datetime = timestamp_field(default_factory=utc_now)


# -------------------------------
# Pydantic schemas for API requests
# -------------------------------

class TeamCreate(CamelModel):
    name: str = SchemaField(min_length=1, max_length=50)
    description: Optional[str] = None
    logo: Optional[str] = None
    location: str = SchemaField(min_length=1)
    skill_level: SkillLevel
    max_members: int = SchemaField(ge=1, le=30)


class TeamJoin(CamelModel):
    position: PlayerPosition


class CaptainTransfer(CamelModel):
    user_id: int


# -------------------------------
# Pydantic schemas for API responses
# -------------------------------

class TeamMemberRead(CamelModel):
    user_id: int
    user: UserRead
    team_id: int
    role: str
    position: str
    joined_at: datetime


class TeamRead(CamelModel):
    id: int
    name: str
    description: Optional[str] = None
    logo: Optional[str] = None
    captain_id: int
    captain: UserRead
    members: List[TeamMemberRead] = []
    location: str
    skill_level: str
    max_members: int
    is_recruiting: bool
    created_at: datetime
    updated_at: datetime
