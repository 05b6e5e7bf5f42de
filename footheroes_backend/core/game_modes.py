# footheroes_backend/core/game_modes.py
"""
game_modes.py
-------------
Match formats supported by FootHeroes.

Each mode defines players per side, the field it is played on,
the default match length (minutes) and the substitution limit.
"""

DEFAULT_GAME_MODE = "11v11"

GAME_MODES = {
    "5v5": {
        "mode": "5v5",
        "players_per_team": 5,
        "field_size": "small",
        "duration": 40,
        "max_substitutions": 3,
    },
    "7v7": {
        "mode": "7v7",
        "players_per_team": 7,
        "field_size": "medium",
        "duration": 60,
        "max_substitutions": 5,
    },
    "9v9": {
        "mode": "9v9",
        "players_per_team": 9,
        "field_size": "large",
        "duration": 70,
        "max_substitutions": 7,
    },
    "10v10": {
        "mode": "10v10",
        "players_per_team": 10,
        "field_size": "large",
        "duration": 80,
        "max_substitutions": 7,
    },
    "11v11": {
        "mode": "11v11",
        "players_per_team": 11,
        "field_size": "full",
        "duration": 90,
        "max_substitutions": 5,
    },
    # Custom matches start from full-size defaults
    "custom": {
        "mode": "custom",
        "players_per_team": 11,
        "field_size": "full",
        "duration": 90,
        "max_substitutions": 5,
    },
}

FIELD_SIZES = {
    "small": {"name": "Small Field", "dimensions": "40x25m"},
    "medium": {"name": "Medium Field", "dimensions": "60x40m"},
    "large": {"name": "Large Field", "dimensions": "80x50m"},
    "full": {"name": "Full Size", "dimensions": "100x65m"},
}


def get_recommended_duration(mode: str) -> int:
    """Default match length in minutes for a game mode."""
    return GAME_MODES[mode]["duration"]


def get_max_players(mode: str) -> int:
    """Largest matchday squad one side may name: starters plus substitutes."""
    config = GAME_MODES[mode]
    return config["players_per_team"] + config["max_substitutions"]
