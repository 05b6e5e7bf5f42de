# seed_all.py
# Orchestrates all seed steps to populate a fresh store in the correct order.

import logging

from footheroes_backend.core.auth import pwd_context
from footheroes_backend.core.store import FootHeroesStore
from footheroes_backend.seed.seed_matches import seed_matches
from footheroes_backend.seed.seed_player_stats import seed_player_stats
from footheroes_backend.seed.seed_teams import seed_teams
from footheroes_backend.seed.seed_users import seed_users

logger = logging.getLogger(__name__)


def seed_all(store: FootHeroesStore) -> None:
    if store.get_all_users():
        logger.info("Store already has data. Skipping seed.")
        return

    logger.info("Starting demo data seeding...")

    # Step 1: users (each gets a zeroed stats row)
    users = seed_users(store, pwd_context)

    # Step 2: teams and memberships
    teams = seed_teams(store, users)

    # Step 3: a friendly next week
    seed_matches(store, teams)

    # Step 4: demo career stats
    seed_player_stats(store, users)

    logger.info("Demo data seeding complete.")
