"""Tests for the authentication dependencies."""

from datetime import timedelta

import pytest
from sqlmodel import Session

from app.core.dependencies import (
    caller_role,
    get_current_user,
    get_optional_user,
    require_roles,
)
from app.core.security import create_access_token, create_user_token
from app.exceptions import (
    AuthenticationError,
    InsufficientPermissionsError,
    InvalidTokenError,
)
from app.models.enums import Role
from app.models.user import User


class TestGetCurrentUser:
    def test_valid_token(self, session: Session, public_user: User):
        user = get_current_user(token=create_user_token(public_user), session=session)
        assert user.id == public_user.id

    def test_missing_token(self, session: Session):
        with pytest.raises(AuthenticationError) as excinfo:
            get_current_user(token=None, session=session)
        assert str(excinfo.value) == "Access denied. No token provided."

    def test_invalid_token(self, session: Session):
        with pytest.raises(InvalidTokenError):
            get_current_user(token="garbage", session=session)

    def test_user_no_longer_exists(self, session: Session):
        token = create_access_token({"sub": "deleted-user"})
        with pytest.raises(InvalidTokenError):
            get_current_user(token=token, session=session)

    def test_unknown_role_claim(self, session: Session, staff_user: User):
        token = create_access_token({"sub": staff_user.username, "role": "janitor"})
        with pytest.raises(InvalidTokenError):
            get_current_user(token=token, session=session)

    def test_stored_role_wins_over_claim(self, session: Session, staff_user: User):
        token = create_access_token({"sub": staff_user.username, "role": "super_admin"})
        user = get_current_user(token=token, session=session)
        assert user.role == Role.CLINIC_STAFF


class TestGetOptionalUser:
    def test_no_token_is_anonymous(self, session: Session):
        assert get_optional_user(token=None, session=session) is None

    def test_garbled_token_is_anonymous(self, session: Session):
        """Optional routes never fail on bad credentials."""
        assert get_optional_user(token="garbage", session=session) is None

    def test_expired_token_is_anonymous(self, session: Session, staff_user: User):
        token = create_access_token(
            {"sub": staff_user.username}, expires_delta=timedelta(minutes=-1)
        )
        assert get_optional_user(token=token, session=session) is None

    def test_valid_token_resolves_user(self, session: Session, staff_user: User):
        user = get_optional_user(token=create_user_token(staff_user), session=session)
        assert user is not None
        assert user.role == Role.CLINIC_STAFF


class TestRequireRoles:
    def test_higher_role_passes(self, admin_user: User):
        dependency = require_roles(Role.CLINIC_STAFF, Role.SUPER_ADMIN)
        assert dependency(current_user=admin_user) is admin_user

    def test_lower_role_is_rejected(self, public_user: User):
        dependency = require_roles(Role.CLINIC_STAFF)
        with pytest.raises(InsufficientPermissionsError):
            dependency(current_user=public_user)


def test_caller_role(staff_user: User):
    assert caller_role(None) is None
    assert caller_role(staff_user) == Role.CLINIC_STAFF
