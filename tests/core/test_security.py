"""Tests for password checks and access tokens."""

from datetime import timedelta

import jwt
import pytest
from pwdlib.hashers.argon2 import Argon2Hasher
from sqlmodel import Session

from app.core.config import get_settings
from app.core.password import get_password_hash, verify_password
from app.core.security import (
    authenticate_user,
    create_access_token,
    create_user_token,
    decode_access_token,
)
from app.exceptions import InvalidTokenError, TokenExpiredError
from app.models.user import User

TEST_PASSWORD = "testpassword123"


class TestPasswordHashing:
    def test_hash_and_verify(self):
        hashed = get_password_hash("s3cret-pass")
        assert hashed != "s3cret-pass"
        assert verify_password("s3cret-pass", hashed)
        assert not verify_password("wrong-pass", hashed)


class TestAuthenticateUser:
    def test_valid_credentials(self, session: Session, staff_user: User):
        user = authenticate_user(session, staff_user.username, TEST_PASSWORD)
        assert user is not None
        assert user.id == staff_user.id

    def test_outdated_hash_is_upgraded(self, session: Session, staff_user: User):
        """A hash made with weaker Argon2 parameters is replaced at login."""
        staff_user.hashed_password = Argon2Hasher(time_cost=1, memory_cost=8192).hash(
            TEST_PASSWORD
        )
        session.add(staff_user)
        session.commit()
        old_hash = staff_user.hashed_password

        user = authenticate_user(session, staff_user.username, TEST_PASSWORD)

        assert user.hashed_password != old_hash
        assert verify_password(TEST_PASSWORD, user.hashed_password)

    def test_wrong_password(self, session: Session, staff_user: User):
        assert authenticate_user(session, staff_user.username, "nope-nope") is None

    def test_unknown_user(self, session: Session):
        assert authenticate_user(session, "ghost", TEST_PASSWORD) is None


class TestAccessTokens:
    def test_user_token_claims(self, staff_user: User):
        """The token carries the username as subject plus id and role."""
        payload = decode_access_token(create_user_token(staff_user))
        assert payload["sub"] == staff_user.username
        assert payload["id"] == staff_user.id
        assert payload["role"] == "clinic_staff"
        assert payload["type"] == "access"

    def test_expired_token(self):
        token = create_access_token({"sub": "vet"}, expires_delta=timedelta(seconds=-5))
        with pytest.raises(TokenExpiredError):
            decode_access_token(token)

    def test_garbled_token(self):
        with pytest.raises(InvalidTokenError):
            decode_access_token("not-a-jwt")

    def test_wrong_signature(self):
        token = jwt.encode(
            {"sub": "vet", "type": "access"}, "another-secret", algorithm="HS256"
        )
        with pytest.raises(InvalidTokenError):
            decode_access_token(token)

    def test_token_without_subject(self):
        token = create_access_token({"id": 1})
        with pytest.raises(InvalidTokenError):
            decode_access_token(token)

    def test_non_access_token_type(self):
        settings = get_settings()
        token = jwt.encode(
            {"sub": "vet", "type": "refresh"},
            settings.SECRET_KEY.get_secret_value(),
            algorithm=settings.ALGORITHM,
        )
        with pytest.raises(InvalidTokenError):
            decode_access_token(token)
