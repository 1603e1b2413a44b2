"""User service module for registration and lookups."""

from sqlmodel import Session, select
from sqlalchemy.exc import IntegrityError
from loguru import logger

from app.core import permissions
from app.core.password import get_password_hash
from app.core.security import authenticate_user, create_user_token
from app.exceptions import AlreadyExistsError, InvalidCredentialsError
from app.models.enums import Role
from app.models.token import LoginResult
from app.models.user import User, UserCreate, UserPublic


def get_user_by_username(session: Session, username: str) -> User | None:
    """
    Retrieve a user by username.

    Returns:
        User | None: `User` if a matching record exists, `None` otherwise.
    """
    statement = select(User).where(User.username == username)
    return session.exec(statement).first()


def create_user(
    session: Session, user_in: UserCreate, created_by: User | None = None
) -> User:
    """
    Create and persist a new user with a hashed password.

    Self-registration always produces a `public` account. A non-public role is
    only granted when the request comes from a `super_admin`.

    Parameters:
        user_in (UserCreate): Registration data including the plaintext `password`.
        created_by (User | None): The caller, if authenticated.

    Returns:
        User: The created User model instance.

    Raises:
        InsufficientPermissionsError: A non-admin caller asked for a privileged role.
        AlreadyExistsError: If the username is already taken.
    """
    if user_in.role != Role.PUBLIC:
        permissions.enforce(
            created_by.role if created_by else None,
            [Role.SUPER_ADMIN],
            "Access denied. Only a super admin can assign staff roles.",
        )

    if get_user_by_username(session, user_in.username):
        raise AlreadyExistsError("User", "username", user_in.username)

    db_user = User.model_validate(
        user_in, update={"hashed_password": get_password_hash(user_in.password)}
    )
    session.add(db_user)
    try:
        session.commit()
    except IntegrityError:
        session.rollback()
        raise AlreadyExistsError("User", "username", user_in.username)
    session.refresh(db_user)
    logger.info(f"User '{db_user.username}' registered with role {db_user.role.value}")
    return db_user


def login(session: Session, username: str, password: str) -> LoginResult:
    """
    Check credentials and issue an access token.

    Raises:
        InvalidCredentialsError: Unknown username or wrong password.
    """
    user = authenticate_user(session, username, password)
    if user is None:
        raise InvalidCredentialsError()
    return LoginResult(
        token=create_user_token(user), user=UserPublic.model_validate(user)
    )
