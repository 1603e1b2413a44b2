from datetime import datetime
from decimal import Decimal
from pydantic import field_validator
from sqlmodel import SQLModel, Field


class DonationBase(SQLModel):
    donor_name: str | None = Field(default=None, max_length=100)
    donor_email: str | None = Field(default=None, max_length=255)
    amount: Decimal = Field(max_digits=10, decimal_places=2, gt=0)
    currency: str = Field(default="SEK", min_length=3, max_length=3)
    is_anonymous: bool = False
    notes: str | None = None


class Donation(DonationBase, table=True):
    id: int | None = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=datetime.now)


class DonationCreate(DonationBase):
    @field_validator("currency")
    @classmethod
    def normalize_currency(cls, value: str) -> str:
        return value.upper()


class DonationPublic(DonationBase):
    id: int
    created_at: datetime
