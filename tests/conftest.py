import os

# The engine in app.database.database is built at import time from these
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-testing-only-min-32-chars")
os.environ.setdefault("ENVIRONMENT", "test")

from datetime import datetime  # noqa: E402
from decimal import Decimal  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import Session, SQLModel, create_engine  # noqa: E402

from app.core.config import get_settings  # noqa: E402
from app.core.password import get_password_hash  # noqa: E402
from app.core.security import create_user_token  # noqa: E402
from app.database.database import get_session  # noqa: E402
from app.main import app  # noqa: E402
from app.models.campaign import FundraisingCampaign  # noqa: E402
from app.models.enums import Role  # noqa: E402
from app.models.user import User  # noqa: E402

TEST_PASSWORD = "testpassword123"


@pytest.fixture(name="session")
def session_fixture():
    """
    Yield a Session on a fresh in-memory SQLite database with every table created.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session


@pytest.fixture(name="client")
def client_fixture(session: Session):
    """
    Yield a TestClient whose requests use the test session.

    The app lifespan is not entered, so logging and telemetry stay untouched.
    """

    def get_session_override():
        return session

    app.dependency_overrides[get_session] = get_session_override
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


def _make_user(session: Session, username: str, role: Role) -> User:
    user = User(
        name=username.title(),
        username=username,
        email=f"{username}@example.com",
        phone="0700000000",
        role=role,
        hashed_password=get_password_hash(TEST_PASSWORD),
    )
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture(name="public_user")
def public_user_fixture(session: Session) -> User:
    return _make_user(session, "visitor", Role.PUBLIC)


@pytest.fixture(name="staff_user")
def staff_user_fixture(session: Session) -> User:
    return _make_user(session, "vet", Role.CLINIC_STAFF)


@pytest.fixture(name="admin_user")
def admin_user_fixture(session: Session) -> User:
    return _make_user(session, "boss", Role.SUPER_ADMIN)


def auth_headers(user: User) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_user_token(user)}"}


@pytest.fixture(name="public_headers")
def public_headers_fixture(public_user: User) -> dict[str, str]:
    return auth_headers(public_user)


@pytest.fixture(name="staff_headers")
def staff_headers_fixture(staff_user: User) -> dict[str, str]:
    return auth_headers(staff_user)


@pytest.fixture(name="admin_headers")
def admin_headers_fixture(admin_user: User) -> dict[str, str]:
    return auth_headers(admin_user)


@pytest.fixture(name="sek_campaign")
def sek_campaign_fixture(session: Session) -> FundraisingCampaign:
    """Active SEK campaign: 30000 collected of a 50000 goal."""
    campaign = FundraisingCampaign(
        title="New cattery roof",
        target_amount=Decimal("50000.00"),
        current_amount=Decimal("30000.00"),
        currency="SEK",
        is_active=True,
        start_date=datetime(2024, 1, 1),
        end_date=datetime(2024, 12, 31),
    )
    session.add(campaign)
    session.commit()
    session.refresh(campaign)
    return campaign


@pytest.fixture(name="production_settings")
def production_settings_fixture(monkeypatch):
    """Switch get_settings() to production for the duration of a test."""
    monkeypatch.setenv("ENVIRONMENT", "production")
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()
