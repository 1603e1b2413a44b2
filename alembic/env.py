"""Alembic environment for the shelter schema.

The database URL always comes from application settings, never from
alembic.ini, so migrations target the same database as the API.
"""

from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine, pool
from sqlalchemy.engine import make_url
from sqlmodel import SQLModel

import app.models  # noqa: F401  registers the shelter tables on SQLModel.metadata
from app.core.config import get_settings

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

DATABASE_URL = get_settings().DATABASE_URL


def _configure_options() -> dict:
    # SQLite cannot ALTER most columns in place; batch mode recreates the table
    return {
        "target_metadata": SQLModel.metadata,
        "compare_type": True,
        "render_as_batch": make_url(DATABASE_URL).get_backend_name() == "sqlite",
    }


def run_migrations_offline() -> None:
    """Write the migration SQL to stdout instead of executing it."""
    context.configure(
        url=DATABASE_URL,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **_configure_options(),
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    connectable = create_engine(DATABASE_URL, poolclass=pool.NullPool)
    with connectable.connect() as connection:
        context.configure(connection=connection, **_configure_options())
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
