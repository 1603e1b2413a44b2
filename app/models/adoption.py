from datetime import datetime
from typing import TYPE_CHECKING, Optional
from sqlmodel import SQLModel, Field, Relationship

from .enums import AdoptionStatus

if TYPE_CHECKING:
    from app.models.user import User


class AdoptionBase(SQLModel):
    cat_id: int = Field(foreign_key="cat.id", index=True)
    user_id: int = Field(foreign_key="user.id", index=True)
    adopted_with: int | None = Field(default=None, foreign_key="cat.id")
    status: AdoptionStatus = Field(default=AdoptionStatus.PENDING, index=True)
    adoption_date: datetime | None = Field(default=None, index=True)
    notes: str | None = None


class Adoption(AdoptionBase, table=True):
    id: int | None = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    user: Optional["User"] = Relationship(back_populates="adoptions")


class AdoptionCreate(AdoptionBase):
    pass


class AdoptionPublic(AdoptionBase):
    id: int
    created_at: datetime
    updated_at: datetime


class AdoptionUpdate(SQLModel):
    status: AdoptionStatus | None = None
    adoption_date: datetime | None = None
    adopted_with: int | None = None
    notes: str | None = None
