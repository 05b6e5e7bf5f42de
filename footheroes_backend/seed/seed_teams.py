# seed_teams.py
# Two demo teams, each with its captain plus one extra member.

import logging
from typing import List

from footheroes_backend.core.store import FootHeroesStore
from footheroes_backend.models.team_model import Team
from footheroes_backend.models.user_model import User

logger = logging.getLogger(__name__)


def seed_teams(store: FootHeroesStore, users: List[User]) -> List[Team]:
    if len(users) < 2:
        logger.warning("Not enough users to seed teams.")
        return []

    lions = store.create_team({
        "name": "London Lions",
        "description": "Competitive team in London",
        "captain_id": users[0].id,
        "location": "London, UK",
        "skill_level": "intermediate",
        "max_members": 15,
        "is_recruiting": True,
    })
    united = store.create_team({
        "name": "Manchester United FC",
        "description": "Local Manchester team",
        "captain_id": users[1].id,
        "location": "Manchester, UK",
        "skill_level": "advanced",
        "max_members": 20,
        "is_recruiting": False,
    })

    if len(users) > 2:
        store.add_team_member(lions.id, users[2].id, "goalkeeper")
    if len(users) > 3:
        store.add_team_member(united.id, users[3].id, "defender")

    logger.info("Seeded teams: %s, %s", lions.name, united.name)
    return [lions, united]
