# player_stat_model.py
# Career statistics for a player. One row per user, created together with the user.

from datetime import datetime

from sqlmodel import SQLModel, Field

from footheroes_backend.core.clock import utc_now
from footheroes_backend.models.schema_base import CamelModel, timestamp_field


class PlayerStat(SQLModel, table=True):
    user_id: int = Field(foreign_key="user.id", primary_key=True)

    matches_played: int = 0
    goals: int = 0
    assists: int = 0
    clean_sheets: int = 0
    yellow_cards: int = 0
    red_cards: int = 0
    minutes_played: int = 0
    wins: int = 0
    losses: int = 0
    draws: int = 0

    # Average match rating (0 until rated)
    rating: float = 0.0

    updated_at: datetime = timestamp_field(default_factory=utc_now)


class PlayerStatsRead(CamelModel):
    user_id: int
    matches_played: int
    goals: int
    assists: int
    clean_sheets: int
    yellow_cards: int
    red_cards: int
    minutes_played: int
    wins: int
    losses: int
    draws: int
    rating: float
    updated_at: datetime
