# seed_matches.py
# A friendly between the two demo teams, one week from now.

import logging
from datetime import timedelta
from typing import List, Optional

from footheroes_backend.core.clock import utc_now
from footheroes_backend.core.store import FootHeroesStore
from footheroes_backend.models.match_model import Match
from footheroes_backend.models.team_model import Team

logger = logging.getLogger(__name__)


def seed_matches(store: FootHeroesStore, teams: List[Team]) -> Optional[Match]:
    if len(teams) < 2:
        logger.warning("Not enough teams to seed a match.")
        return None

    home, away = teams[0], teams[1]
    match = store.create_match({
        "title": f"{home.name} vs {away.name}",
        "description": "Friendly match",
        "home_team_id": home.id,
        "away_team_id": away.id,
        "scheduled_at": utc_now() + timedelta(days=7),
        "duration": 90,
        "location": "Wembley Stadium",
        "status": "scheduled",
        "game_mode": "11v11",
        "created_by_id": home.captain_id,
    })

    logger.info("Seeded match: %s", match.title)
    return match
