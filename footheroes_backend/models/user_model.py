# user_model.py
# Defines the User model (player accounts) and its request/response schemas.

from datetime import datetime
from typing import Literal, Optional

from pydantic import EmailStr, Field as SchemaField
from sqlmodel import SQLModel, Field

from footheroes_backend.core.clock import utc_now
from footheroes_backend.models.schema_base import CamelModel, timestamp_field

PlayerPosition = Literal["goalkeeper", "defender", "midfielder", "forward", "any"]
SkillLevel = Literal["beginner", "intermediate", "advanced", "professional"]


class User(SQLModel, table=True):
    """
    A registered player. Email and username are unique.
    Users are never hard-deleted.
    """
    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(index=True, unique=True)
    username: str = Field(index=True, unique=True)
    first_name: str
    last_name: str
    avatar: Optional[str] = None
    position: str            # PlayerPosition
    skill_level: str         # SkillLevel
    location: str
    bio: Optional[str] = None

    # bcrypt hash, never returned by the API
    password_hash: Optional[str] = None

    created_at: datetime = timestamp_field(default_factory=utc_now)
    updated_at: datetime = timestamp_field(default_factory=utc_now)


# -------------------------------
# Pydantic schemas for API requests
# -------------------------------

class UserRegister(CamelModel):
    email: EmailStr
    username: str = SchemaField(min_length=2, max_length=20)
    first_name: str = SchemaField(min_length=1)
    last_name: str = SchemaField(min_length=1)
    password: str = SchemaField(min_length=6)
    position: PlayerPosition
    skill_level: SkillLevel
    location: str = SchemaField(min_length=1)
    bio: Optional[str] = None


class UserLogin(CamelModel):
    email: EmailStr
    password: str


class UserUpdate(CamelModel):
    """Partial profile update. Only the fields sent are applied."""
    first_name: Optional[str] = SchemaField(default=None, min_length=1)
    last_name: Optional[str] = SchemaField(default=None, min_length=1)
    position: Optional[PlayerPosition] = None
    skill_level: Optional[SkillLevel] = None
    location: Optional[str] = SchemaField(default=None, min_length=1)
    bio: Optional[str] = None
    avatar: Optional[str] = SchemaField(default=None, pattern=r"^https?://\S+$")


# -------------------------------
# Pydantic schemas for API responses
# -------------------------------

class UserRead(CamelModel):
    id: int
    email: str
    username: str
    first_name: str
    last_name: str
    avatar: Optional[str] = None
    position: str
    skill_level: str
    location: str
    bio: Optional[str] = None
    created_at: datetime
    updated_at: datetime
