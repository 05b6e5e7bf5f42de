# seed_users.py
# Demo player accounts. Every seeded user can log in with DEMO_PASSWORD.

import logging
from typing import List

from passlib.context import CryptContext

from footheroes_backend.core.store import FootHeroesStore
from footheroes_backend.models.user_model import User

logger = logging.getLogger(__name__)

DEMO_PASSWORD = "footheroes"

DEMO_USERS = [
    {
        "email": "john@example.com",
        "username": "johnsmith",
        "first_name": "John",
        "last_name": "Smith",
        "position": "midfielder",
        "skill_level": "intermediate",
        "location": "London, UK",
        "bio": "Love playing football on weekends!",
    },
    {
        "email": "sarah@example.com",
        "username": "sarahj",
        "first_name": "Sarah",
        "last_name": "Johnson",
        "position": "forward",
        "skill_level": "advanced",
        "location": "Manchester, UK",
        "bio": "Striker with 5 years experience",
    },
    {
        "email": "mike@example.com",
        "username": "mikebrown",
        "first_name": "Mike",
        "last_name": "Brown",
        "position": "goalkeeper",
        "skill_level": "intermediate",
        "location": "Birmingham, UK",
        "bio": "Goalkeeper looking for a regular team",
    },
    {
        "email": "emma@example.com",
        "username": "emmaw",
        "first_name": "Emma",
        "last_name": "Wilson",
        "position": "defender",
        "skill_level": "beginner",
        "location": "Liverpool, UK",
        "bio": "New to football but eager to learn",
    },
]


def seed_users(store: FootHeroesStore, pwd_context: CryptContext) -> List[User]:
    """Creates the demo users (skipping any email that already exists)."""
    password_hash = pwd_context.hash(DEMO_PASSWORD)
    users = []
    for data in DEMO_USERS:
        existing = store.get_user_by_email(data["email"])
        if existing:
            users.append(existing)
            continue
        users.append(store.create_user({**data, "password_hash": password_hash}))

    logger.info("Seeded %s demo users", len(users))
    return users
