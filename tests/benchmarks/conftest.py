"""Shared fixtures for benchmark tests."""

from datetime import datetime

import pytest
from dateutil.relativedelta import relativedelta
from sqlmodel import Session

from app.models.adoption import Adoption
from app.models.cat import Cat
from app.models.enums import AdoptionStatus, AgeGroup, CatStatus, EntryType, Gender
from app.models.user import User

SEED_CATS = 240


@pytest.fixture(name="populated_session")
def populated_session_fixture(session: Session, public_user: User) -> Session:
    """
    Fill the test database with two years of intake and adoption history.

    Cats cycle through every age group, status and entry type; every third cat
    has a completed adoption dated a month after it entered.
    """
    start = datetime(2022, 1, 1)
    groups, statuses, entries = list(AgeGroup), list(CatStatus), list(EntryType)
    for i in range(SEED_CATS):
        entered = start + relativedelta(days=3 * i)
        cat = Cat(
            name=f"bench_cat_{i}",
            age=i % 15,
            age_group=groups[i % len(groups)],
            gender=Gender.FEMALE if i % 2 else Gender.MALE,
            status=statuses[i % len(statuses)],
            entry_date=entered,
            entry_type=entries[i % len(entries)],
        )
        session.add(cat)
        session.flush()
        if i % 3 == 0:
            session.add(
                Adoption(
                    cat_id=cat.id,
                    user_id=public_user.id,
                    status=AdoptionStatus.COMPLETED,
                    adoption_date=entered + relativedelta(months=1),
                )
            )
    session.commit()
    return session
