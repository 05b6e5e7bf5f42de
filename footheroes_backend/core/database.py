from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine

# Register every table on SQLModel.metadata before create_all
from footheroes_backend import models  # noqa: F401


def create_db_engine(database_url: str = "sqlite://", echo: bool = False) -> Engine:
    """
    Builds the engine behind the entity store.

    SQLite databases (the default is a private in-memory one) are pinned to a
    single shared connection so every thread sees the same data.
    """
    if database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(database_url, echo=echo)


def init_db(engine: Engine) -> None:
    """Create tables if they don't exist."""
    SQLModel.metadata.create_all(engine)
