from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Optional
from sqlmodel import SQLModel, Field, Relationship

from .enums import ProcedureType

if TYPE_CHECKING:
    from app.models.cat import Cat


class MedicalProcedureBase(SQLModel):
    cat_id: int = Field(foreign_key="cat.id", index=True)
    procedure_type: ProcedureType = Field(index=True)
    procedure_date: datetime = Field(index=True)
    veterinarian: str | None = Field(default=None, max_length=100)
    notes: str | None = None
    cost: Decimal | None = Field(default=None, max_digits=10, decimal_places=2)


class MedicalProcedure(MedicalProcedureBase, table=True):
    __tablename__ = "medical_procedure"

    id: int | None = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=datetime.now)
    cat: Optional["Cat"] = Relationship(back_populates="medical_procedures")


class MedicalProcedureCreate(MedicalProcedureBase):
    pass


class MedicalProcedurePublic(MedicalProcedureBase):
    id: int
    created_at: datetime
