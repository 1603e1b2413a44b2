"""Shared builders for service tests."""

from datetime import datetime

import pytest
from sqlmodel import Session

from app.models.adoption import Adoption
from app.models.cat import Cat
from app.models.enums import (
    AdoptionStatus,
    AgeGroup,
    CatStatus,
    EntryType,
    Gender,
    ProcedureType,
)
from app.models.medical_procedure import MedicalProcedure
from app.models.user import User

# Session fixture is inherited from root conftest.py


@pytest.fixture(name="add_cat")
def add_cat_fixture(session: Session):
    """Return a callable inserting a cat; keyword arguments override the defaults."""

    def add(**overrides) -> Cat:
        fields = {
            "name": "Misse",
            "age": 2,
            "age_group": AgeGroup.ADULT,
            "gender": Gender.FEMALE,
            "status": CatStatus.AVAILABLE,
            "entry_date": datetime(2024, 3, 10),
            "entry_type": EntryType.RESCUE,
        }
        fields.update(overrides)
        cat = Cat(**fields)
        session.add(cat)
        session.commit()
        session.refresh(cat)
        return cat

    return add


@pytest.fixture(name="add_adoption")
def add_adoption_fixture(session: Session, add_cat, public_user: User):
    """Return a callable inserting an adoption of a fresh cat by `public_user`."""

    def add(
        adoption_date: datetime | None,
        status: AdoptionStatus = AdoptionStatus.COMPLETED,
    ) -> Adoption:
        cat = add_cat(status=CatStatus.ADOPTED)
        adoption = Adoption(
            cat_id=cat.id,
            user_id=public_user.id,
            status=status,
            adoption_date=adoption_date,
        )
        session.add(adoption)
        session.commit()
        session.refresh(adoption)
        return adoption

    return add


@pytest.fixture(name="add_procedure")
def add_procedure_fixture(session: Session, add_cat):
    """Return a callable inserting a procedure on a fresh cat."""

    def add(procedure_type: ProcedureType, procedure_date: datetime) -> MedicalProcedure:
        cat = add_cat()
        procedure = MedicalProcedure(
            cat_id=cat.id, procedure_type=procedure_type, procedure_date=procedure_date
        )
        session.add(procedure)
        session.commit()
        session.refresh(procedure)
        return procedure

    return add
