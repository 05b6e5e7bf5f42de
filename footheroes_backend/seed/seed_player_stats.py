# seed_player_stats.py
# Random career numbers so the demo leaderboards have something to rank.

import logging
import random
from typing import List

from footheroes_backend.core.store import FootHeroesStore
from footheroes_backend.models.user_model import User

logger = logging.getLogger(__name__)


def generate_random_stats() -> dict:
    return {
        "matches_played": random.randint(5, 24),
        "goals": random.randint(0, 14),
        "assists": random.randint(0, 9),
        "wins": random.randint(0, 14),
        "losses": random.randint(0, 7),
        "draws": random.randint(0, 4),
        "rating": round(random.uniform(7.0, 10.0), 1),  # 7-10 rating
    }


def seed_player_stats(store: FootHeroesStore, users: List[User]) -> None:
    for user in users:
        store.update_player_stats(user.id, generate_random_stats())
    logger.info("Seeded stats for %s players", len(users))
