"""Sample data initialization for non-production environments.

Seeds a small shelter: a few users of each role, cats entering over the last
months, completed and pending adoptions, neuter/spay procedures, and an active
SEK fundraising campaign with some donations. Every dashboard report has
something to show after running it.

Idempotent: nothing is created if the sample staff account already exists.
Refuses to run when ENVIRONMENT is production.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any

from dateutil.relativedelta import relativedelta
from loguru import logger
from sqlmodel import Session, select

from app.core.config import get_settings
from app.core.password import get_password_hash
from app.models.adoption import Adoption
from app.models.campaign import FundraisingCampaign
from app.models.cat import Cat, CatCreate
from app.models.donation import Donation
from app.models.enums import (
    AdoptionStatus,
    AgeGroup,
    CatStatus,
    EntryType,
    Gender,
    ProcedureType,
    Role,
)
from app.models.medical_procedure import MedicalProcedure
from app.models.user import User, UserCreate
from app.services import cat as cat_service
from app.services import user as user_service

SAMPLE_PASSWORD = "password123"

USERS_CONFIG: list[dict[str, Any]] = [
    {
        "name": "Sara Lindqvist",
        "username": "sara.staff",
        "email": "sara@shelter.example",
        "phone": "0701234567",
        "role": Role.CLINIC_STAFF,
    },
    {
        "name": "Erik Nilsson",
        "username": "erik",
        "email": "erik@example.com",
        "phone": "0709876543",
        "role": Role.PUBLIC,
    },
    {
        "name": "Maja Berg",
        "username": "maja",
        "email": "maja@example.com",
        "phone": "0705551234",
        "role": Role.PUBLIC,
    },
]

# (name, age, age group, gender, status, months ago, entry type, neutered)
CATS_CONFIG: list[tuple] = [
    ("Misse", 1, AgeGroup.KITTEN, Gender.FEMALE, CatStatus.AVAILABLE, 0, EntryType.RESCUE, False),
    ("Sotis", 4, AgeGroup.ADULT, Gender.MALE, CatStatus.AVAILABLE, 0, EntryType.SURRENDER, True),
    ("Findus", 11, AgeGroup.SENIOR, Gender.MALE, CatStatus.AVAILABLE, 1, EntryType.RESCUE, True),
    ("Tiger", 2, AgeGroup.ADULT, Gender.MALE, CatStatus.BOOKED, 1, EntryType.STRAY, True),
    ("Nala", 0, AgeGroup.KITTEN, Gender.FEMALE, CatStatus.BOOKED, 2, EntryType.RESCUE, False),
    ("Smulan", 6, AgeGroup.ADULT, Gender.FEMALE, CatStatus.ADOPTED, 3, EntryType.SURRENDER, True),
    ("Pelle", 3, AgeGroup.ADULT, Gender.MALE, CatStatus.ADOPTED, 4, EntryType.RESCUE, True),
]


def init_sample_data(session: Session, now: datetime | None = None) -> None:
    """
    Populate the database with a demo shelter.

    Args:
        session: Database session for data creation
        now: Reference time for relative dates (defaults to the current time)

    Raises:
        RuntimeError: If attempted to run in production environment
    """
    settings = get_settings()
    if settings.is_production:
        raise RuntimeError(
            "Sample data initialization cannot run in production environment!"
        )

    if session.exec(select(User).where(User.username == "sara.staff")).first():
        logger.info("Sample data already exists. Skipping initialization.")
        return

    logger.info(f"Initializing sample data for {settings.ENVIRONMENT} environment...")
    now = now or datetime.now()

    # --- 1. Users ---
    # Written directly: registration refuses staff roles without an admin caller
    users: dict[str, User] = {}
    for conf in USERS_CONFIG:
        user_in = UserCreate(password=SAMPLE_PASSWORD, **conf)
        if user_in.role == Role.PUBLIC:
            user = user_service.create_user(session, user_in)
        else:
            user = User.model_validate(
                user_in,
                update={"hashed_password": get_password_hash(user_in.password)},
            )
            session.add(user)
            session.commit()
            session.refresh(user)
        users[user.username] = user

    # --- 2. Cats ---
    cats: dict[str, Cat] = {}
    for name, age, group, gender, status, months_ago, entry, neutered in CATS_CONFIG:
        cats[name] = cat_service.create_cat(
            session,
            CatCreate(
                name=name,
                age=age,
                age_group=group,
                gender=gender,
                status=status,
                entry_date=now - relativedelta(months=months_ago, days=1),
                entry_type=entry,
                is_neutered_or_spayed=neutered,
            ),
        )
    logger.info(f"Created {len(cats)} cats")

    # --- 3. Procedures ---
    for cat in cats.values():
        if not cat.is_neutered_or_spayed:
            continue
        procedure_type = (
            ProcedureType.SPAYED if cat.gender == Gender.FEMALE else ProcedureType.NEUTERED
        )
        session.add(
            MedicalProcedure(
                cat_id=cat.id,
                procedure_type=procedure_type,
                procedure_date=cat.entry_date + relativedelta(days=7),
                veterinarian="Dr. Holm",
                cost=Decimal("1200.00"),
            )
        )

    # --- 4. Adoptions ---
    session.add(
        Adoption(
            cat_id=cats["Smulan"].id,
            user_id=users["erik"].id,
            status=AdoptionStatus.COMPLETED,
            adoption_date=now - relativedelta(months=2),
        )
    )
    session.add(
        Adoption(
            cat_id=cats["Pelle"].id,
            user_id=users["maja"].id,
            status=AdoptionStatus.COMPLETED,
            adoption_date=now - relativedelta(months=1),
        )
    )
    session.add(
        Adoption(
            cat_id=cats["Tiger"].id,
            user_id=users["maja"].id,
            adopted_with=cats["Nala"].id,
            status=AdoptionStatus.PENDING,
        )
    )

    # --- 5. Campaign and donations ---
    donations = [Decimal("500.00"), Decimal("1500.00"), Decimal("250.00")]
    session.add(
        FundraisingCampaign(
            title="Winter shelter renovation",
            target_amount=Decimal("50000.00"),
            current_amount=sum(donations, Decimal("0")),
            start_date=now - relativedelta(months=1),
            end_date=now + relativedelta(months=2),
        )
    )
    for amount in donations:
        session.add(Donation(amount=amount, donor_name="Sample donor"))

    session.commit()
    logger.info(
        f"Sample data initialized successfully for {settings.ENVIRONMENT} environment"
    )
