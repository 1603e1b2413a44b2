from datetime import datetime, timedelta, timezone

import jwt
from jwt.exceptions import ExpiredSignatureError, PyJWTError
from loguru import logger
from sqlmodel import Session, select

from app.core.config import get_settings
from app.core.password import DUMMY_HASH, verify_and_rehash, verify_password
from app.exceptions import AppException, InvalidTokenError, TokenExpiredError
from app.models.user import User


def authenticate_user(session: Session, username: str, password: str) -> User | None:
    """
    Authenticate a user by username and password.

    A hash made with outdated Argon2 parameters is replaced on a successful login.

    Returns:
        User if authentication succeeds, `None` otherwise.
    """
    statement = select(User).where(User.username == username)
    user = session.exec(statement).first()
    if user is None:
        verify_password(password, DUMMY_HASH)
        return None

    valid, new_hash = verify_and_rehash(password, user.hashed_password)
    if not valid:
        return None
    if new_hash:
        user.hashed_password = new_hash
        session.add(user)
        session.commit()
        session.refresh(user)
        logger.info(f"Upgraded password hash for '{user.username}'")
    return user


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    """
    Create a JWT access token containing the provided payload.

    Parameters:
        data (dict): Claims to include in the token payload (`sub`, `id`, `role`).
        expires_delta (timedelta | None): Optional time until expiration. If `None`, the expiration is set using ACCESS_TOKEN_EXPIRE_MINUTES from application settings.

    Returns:
        str: Encoded JWT access token string.

    Raises:
        AppException: If the token cannot be generated.
    """
    settings = get_settings()
    expires_delta = (
        expires_delta
        if expires_delta
        else timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode = data.copy()
    to_encode.update(
        {"exp": datetime.now(timezone.utc) + expires_delta, "type": "access"}
    )
    try:
        return jwt.encode(
            to_encode,
            settings.SECRET_KEY.get_secret_value(),
            algorithm=settings.ALGORITHM,
        )
    except PyJWTError as e:
        raise AppException("Could not generate authentication token.") from e


def create_user_token(user: User) -> str:
    """Issue an access token carrying the user's identity and role."""
    return create_access_token(
        data={"sub": user.username, "id": user.id, "role": user.role.value}
    )


def decode_access_token(token: str) -> dict:
    """
    Decode and verify an access token.

    Returns:
        dict: The verified payload.

    Raises:
        TokenExpiredError: The token signature is valid but it has expired.
        InvalidTokenError: The token is malformed, badly signed, not an access token or has no subject.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY.get_secret_value(),
            algorithms=[settings.ALGORITHM],
        )
    except ExpiredSignatureError as e:
        raise TokenExpiredError("access") from e
    except PyJWTError as e:
        raise InvalidTokenError() from e

    if payload.get("sub") is None or payload.get("type") != "access":
        raise InvalidTokenError()
    return payload
