# __init__.py
# Imports all seed functions for easy batch seeding.

from .seed_users import seed_users
from .seed_teams import seed_teams
from .seed_matches import seed_matches
from .seed_player_stats import seed_player_stats
from .seed_all import seed_all
