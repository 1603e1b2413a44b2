from collections.abc import Callable
from typing import Annotated

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from loguru import logger
from pydantic import ValidationError
from sqlmodel import Session, select

from app.core import permissions
from app.core.security import decode_access_token
from app.database.database import get_session
from app.exceptions import AuthenticationError, InvalidTokenError
from app.models.enums import Role
from app.models.token import TokenData
from app.models.user import User

# auto_error=False: a missing header yields None so each mode decides what to do
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="api/auth/login", auto_error=False)


def _resolve_user(session: Session, token: str) -> User:
    payload = decode_access_token(token)
    try:
        token_data = TokenData.model_validate(payload)
    except ValidationError as e:
        raise InvalidTokenError() from e
    user = session.exec(select(User).where(User.username == token_data.username)).first()
    if user is None:
        raise InvalidTokenError()
    if token_data.role is not None and token_data.role != user.role:
        # The stored role is authoritative for every check
        logger.info(
            f"Token for '{user.username}' was issued as {token_data.role.value}, "
            f"user is now {user.role.value}"
        )
    return user


def get_current_user(
    token: Annotated[str | None, Depends(oauth2_scheme)],
    session: Annotated[Session, Depends(get_session)],
) -> User:
    """
    Resolve the authenticated user from a bearer access token (mandatory mode).

    Returns:
        user (User): The User whose username matches the token's subject.

    Raises:
        AuthenticationError: 401 when no token is provided.
        InvalidTokenError: 401 when the token is invalid, expired, not an access token, or the user no longer exists.
    """
    if not token:
        raise AuthenticationError("Access denied. No token provided.")
    return _resolve_user(session, token)


def get_optional_user(
    token: Annotated[str | None, Depends(oauth2_scheme)],
    session: Annotated[Session, Depends(get_session)],
) -> User | None:
    """
    Resolve the caller if a usable token is present (optional mode).

    Never raises for credential problems: a missing, garbled, expired or orphaned
    token simply makes the caller anonymous.

    Returns:
        User | None: The authenticated user, or None for anonymous access.
    """
    if not token:
        return None
    try:
        return _resolve_user(session, token)
    except InvalidTokenError as e:
        logger.debug(f"Ignoring unusable bearer token on optional route: {e}")
        return None


def caller_role(user: User | None) -> Role | None:
    return user.role if user is not None else None


def require_roles(*roles: Role) -> Callable[..., User]:
    """
    Build a dependency that authenticates the caller and enforces the role hierarchy.

    Parameters:
        *roles (Role): Roles accepted by the route; the lowest one is the minimum level.

    Returns:
        Callable: A FastAPI dependency returning the authorized User.
    """

    def dependency(current_user: Annotated[User, Depends(get_current_user)]) -> User:
        permissions.enforce(current_user.role, roles)
        return current_user

    return dependency


CurrentUser = Annotated[User, Depends(get_current_user)]
OptionalUser = Annotated[User | None, Depends(get_optional_user)]
StaffUser = Annotated[User, Depends(require_roles(*permissions.STAFF_ROLES))]
AdminUser = Annotated[User, Depends(require_roles(Role.SUPER_ADMIN))]
