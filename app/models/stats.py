"""Statistics report models for the public dashboard."""

from sqlmodel import SQLModel


class MonthlyCount(SQLModel):
    """Number of matching rows in one calendar month."""

    month: str  # Format: "YYYY-MM"
    count: int


class TotalAdoptionsReport(SQLModel):
    total: int
    series: list[MonthlyCount]
    min: MonthlyCount | None
    max: MonthlyCount | None


class AvailableBreakdown(SQLModel):
    """Available cats split by age group; the three counts sum to the available total."""

    kittens: int
    adults: int
    seniors: int


class CatsStatusSeries(SQLModel):
    available: list[MonthlyCount]
    booked: list[MonthlyCount]


class CatsStatusReport(SQLModel):
    available: int
    booked: int
    available_breakdown: AvailableBreakdown
    series: CatsStatusSeries
    min: MonthlyCount | None
    max: MonthlyCount | None


class IncomingCatsSeries(SQLModel):
    rescued: list[MonthlyCount]
    surrendered: list[MonthlyCount]
    total: list[MonthlyCount]


class IncomingCatsReport(SQLModel):
    rescued_this_month: int
    surrendered_this_month: int
    series: IncomingCatsSeries
    min: MonthlyCount | None
    max: MonthlyCount | None


class NeuteredCatsSeries(SQLModel):
    neutered: list[MonthlyCount]
    spayed: list[MonthlyCount]
    total: list[MonthlyCount]


class NeuteredCatsReport(SQLModel):
    neutered_this_month: int
    spayed_this_month: int
    series: NeuteredCatsSeries
    min: MonthlyCount | None
    max: MonthlyCount | None


class CampaignReport(SQLModel):
    campaign_goal: float
    current_donated: float
    start_date: str  # Format: "YYYY-MM-DD"
    end_date: str | None
