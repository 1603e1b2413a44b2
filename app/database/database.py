"""Engine and session factory shared by the API, the seed scripts and Alembic."""

from collections.abc import Iterator

from sqlalchemy.engine import make_url
from sqlmodel import Session, SQLModel, create_engine

import app.models  # noqa: F401  registers every table on SQLModel.metadata
from app.core.config import get_settings


def engine_options(database_url: str) -> dict:
    """
    Keyword arguments for `create_engine` suited to the database backend.

    SQLite connections are used from FastAPI's threadpool, so the per-thread
    check is turned off; other backends get connection liveness checks.
    """
    if make_url(database_url).get_backend_name() == "sqlite":
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True}


DATABASE_URL = get_settings().DATABASE_URL
engine = create_engine(DATABASE_URL, **engine_options(DATABASE_URL))


def create_db_and_tables() -> None:
    SQLModel.metadata.create_all(engine)


def get_session() -> Iterator[Session]:
    """Request-scoped session; closed once the response has been sent."""
    with Session(engine) as session:
        yield session
