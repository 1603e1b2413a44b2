from datetime import datetime
from decimal import Decimal
from sqlmodel import SQLModel, Field


class FundraisingCampaignBase(SQLModel):
    title: str = Field(max_length=200)
    description: str | None = None
    target_amount: Decimal = Field(max_digits=10, decimal_places=2, ge=0)
    currency: str = Field(default="SEK", min_length=3, max_length=3, index=True)
    is_active: bool = Field(default=True, index=True)
    start_date: datetime
    end_date: datetime | None = None


class FundraisingCampaign(FundraisingCampaignBase, table=True):
    __tablename__ = "fundraising_campaign"

    id: int | None = Field(default=None, primary_key=True)
    # Incremented by the store on every matching donation, never recomputed
    current_amount: Decimal = Field(default=Decimal("0"), max_digits=10, decimal_places=2)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)


class FundraisingCampaignPublic(FundraisingCampaignBase):
    id: int
    current_amount: Decimal
    created_at: datetime
    updated_at: datetime
