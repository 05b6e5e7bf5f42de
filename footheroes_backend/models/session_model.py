# session_model.py
# Login sessions: opaque bearer token -> user id.

from datetime import datetime

from sqlmodel import SQLModel, Field

from footheroes_backend.core.clock import utc_now
from footheroes_backend.models.schema_base import timestamp_field


class AuthSession(SQLModel, table=True):
    token: str = Field(primary_key=True)
    user_id: int = Field(foreign_key="user.id", index=True)
    created_at: datetime = timestamp_field(default_factory=utc_now)
