from datetime import datetime
from typing import TYPE_CHECKING
from sqlmodel import SQLModel, Field, Relationship

from .enums import AgeGroup, CatStatus, EntryType, Gender

if TYPE_CHECKING:
    from app.models.medical_procedure import MedicalProcedure


class CatBase(SQLModel):
    name: str = Field(max_length=100)
    age: int = Field(ge=0)
    age_group: AgeGroup = Field(index=True)
    gender: Gender
    breed: str | None = Field(default=None, max_length=100)
    color: str | None = Field(default=None, max_length=50)
    status: CatStatus = Field(default=CatStatus.AVAILABLE, index=True)
    description: str | None = None
    image_url: str | None = Field(default=None, max_length=500)
    entry_date: datetime = Field(index=True)
    entry_type: EntryType = Field(index=True)
    is_neutered_or_spayed: bool = False
    medical_notes: str | None = None


class Cat(CatBase, table=True):
    id: int | None = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    medical_procedures: list["MedicalProcedure"] = Relationship(back_populates="cat")


class CatCreate(CatBase):
    pass


class CatPublic(CatBase):
    id: int
    created_at: datetime
    updated_at: datetime


class CatUpdate(SQLModel):
    name: str | None = None
    age: int | None = Field(default=None, ge=0)
    age_group: AgeGroup | None = None
    gender: Gender | None = None
    breed: str | None = None
    color: str | None = None
    status: CatStatus | None = None
    description: str | None = None
    image_url: str | None = None
    entry_date: datetime | None = None
    entry_type: EntryType | None = None
    is_neutered_or_spayed: bool | None = None
    medical_notes: str | None = None
