"""Command-line entry point that prepares a database for first use.

    python -m app.initial_data [--no-sample-data]

Creates missing tables, then the super admin configured through the
FIRST_SUPERUSER_* settings. Outside production it also seeds the demo shelter
unless ``--no-sample-data`` is given.
"""

import argparse

from loguru import logger
from sqlmodel import Session

from app.core.config import get_settings
from app.database.database import create_db_and_tables, engine
from app.database.init_db import init_db
from app.database.init_sample_data import init_sample_data
from app.utils.logger import setup_logging


def init(with_sample_data: bool = True) -> None:
    create_db_and_tables()
    with Session(engine) as session:
        admin = init_db(session)
        if admin is None:
            logger.warning("FIRST_SUPERUSER_* not set; no admin account created")
        if not with_sample_data:
            return
        if get_settings().is_production:
            logger.info("Production environment; skipping sample data")
            return
        init_sample_data(session)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "--no-sample-data",
        action="store_true",
        help="only create tables and the super admin",
    )
    args = parser.parse_args(argv)

    setup_logging()
    logger.info("Creating initial data")
    init(with_sample_data=not args.no_sample_data)
    logger.info("Initial data created")


if __name__ == "__main__":
    main()
