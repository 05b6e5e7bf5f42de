import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List, Optional

# =====================================
# Global configuration for FootHeroes
# =====================================


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str) -> Optional[int]:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return None
    return int(value)


@dataclass
class Settings:
    """Application settings loaded from environment variables with safe defaults."""

    app_name: str = "FootHeroes API"
    version: str = "1.0.0"
    env: str = "dev"
    log_level: str = "INFO"

    # In-memory SQLite by default: all state is lost on restart.
    database_url: str = "sqlite://"

    # SEED_DATA:
    # When True, demo users, teams and a friendly match are created at startup.
    seed_data: bool = True

    # SESSION_TTL_SECONDS:
    # Lifetime of a login session. None keeps sessions until logout.
    session_ttl_seconds: Optional[int] = None

    # VERIFY_PASSWORDS:
    # When False, login accepts any password for a known email (demo behaviour).
    verify_passwords: bool = False

    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls) -> "Settings":
        """Create Settings from environment variables."""
        origins = os.getenv("CORS_ORIGINS", "*")
        return cls(
            app_name=os.getenv("APP_NAME", cls.app_name),
            env=os.getenv("ENV", cls.env),
            log_level=os.getenv("LOG_LEVEL", cls.log_level),
            database_url=os.getenv("DATABASE_URL", cls.database_url),
            seed_data=_env_bool("SEED_DATA", cls.seed_data),
            session_ttl_seconds=_env_int("SESSION_TTL_SECONDS"),
            verify_passwords=_env_bool("VERIFY_PASSWORDS", cls.verify_passwords),
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
        )


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings.from_env()
