from loguru import logger
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from app.core.config import Settings, get_settings
from app.core.password import get_password_hash
from app.exceptions import AlreadyExistsError
from app.models.enums import Role
from app.models.user import User


def _bootstrap_credentials(settings: Settings) -> tuple[str, str, str] | None:
    password = (
        settings.FIRST_SUPERUSER_PASSWORD.get_secret_value()
        if settings.FIRST_SUPERUSER_PASSWORD
        else ""
    )
    credentials = (
        settings.FIRST_SUPERUSER_USERNAME,
        settings.FIRST_SUPERUSER_EMAIL,
        password,
    )
    return credentials if all(credentials) else None  # type: ignore[return-value]


def init_db(session: Session) -> User | None:
    """
    Create the bootstrap super admin from the FIRST_SUPERUSER_* settings.

    Does nothing when any of the three settings is missing. An account that
    already uses the configured username is returned as is, even if its role
    is lower.

    Returns:
        The super admin account, or None when none is configured.

    Raises:
        AlreadyExistsError: The username was taken by a concurrent insert.
    """
    credentials = _bootstrap_credentials(get_settings())
    if credentials is None:
        logger.warning("No bootstrap admin configured")
        return None
    username, email, password = credentials

    existing = session.exec(select(User).where(User.username == username)).first()
    if existing is not None:
        logger.info(f"Bootstrap admin '{username}' already present")
        return existing

    admin = User(
        name="Shelter Admin",
        username=username,
        email=email,
        phone="",
        role=Role.SUPER_ADMIN,
        hashed_password=get_password_hash(password),
    )
    session.add(admin)
    try:
        session.commit()
    except IntegrityError as e:
        session.rollback()
        logger.error(f"Could not create bootstrap admin '{username}': {e.orig}")
        raise AlreadyExistsError("User", "username", username) from e
    session.refresh(admin)
    logger.info(f"Created bootstrap admin '{username}'")
    return admin
