"""Statistics reports for the shelter dashboard.

Each builder composes the aggregate queries from `app.services.aggregation`.
Builders that need "this month" take the current time explicitly; only the
HTTP layer reads the wall clock.
"""

from datetime import datetime

from sqlmodel import Session, col, or_, select

from app.models.adoption import Adoption
from app.models.campaign import FundraisingCampaign
from app.models.cat import Cat
from app.models.enums import AdoptionStatus, AgeGroup, CatStatus, EntryType, ProcedureType
from app.models.medical_procedure import MedicalProcedure
from app.models.stats import (
    AvailableBreakdown,
    CampaignReport,
    CatsStatusReport,
    CatsStatusSeries,
    IncomingCatsReport,
    IncomingCatsSeries,
    NeuteredCatsReport,
    NeuteredCatsSeries,
    TotalAdoptionsReport,
)
from app.services.aggregation import (
    DateRange,
    count_where,
    min_max_by_count,
    month_window,
    monthly_series,
)


def get_total_adoptions(
    session: Session, date_range: DateRange | None = None
) -> TotalAdoptionsReport:
    """
    Count completed adoptions, optionally restricted to a date range.

    Args:
        session: Database session
        date_range: Inclusive bounds on `adoption_date` (end bound covers the whole day)

    Returns:
        TotalAdoptionsReport: total, monthly series, and the min/max months
    """
    date_range = date_range or DateRange()
    conditions = [
        Adoption.status == AdoptionStatus.COMPLETED,
        *date_range.predicates(Adoption.adoption_date),
    ]

    total = count_where(session, Adoption, *conditions)
    series = monthly_series(session, Adoption.adoption_date, *conditions)
    lowest, highest = min_max_by_count(series)
    return TotalAdoptionsReport(total=total, series=series, min=lowest, max=highest)


def get_cats_status(session: Session) -> CatsStatusReport:
    """
    Current available/booked counts, with the available cats split by age group.

    Series are bucketed by the month each cat entered the shelter. Min and max
    are taken over the available series.
    """
    available_filter = Cat.status == CatStatus.AVAILABLE
    booked_filter = Cat.status == CatStatus.BOOKED

    breakdown = AvailableBreakdown(
        kittens=count_where(
            session, Cat, available_filter, Cat.age_group == AgeGroup.KITTEN
        ),
        adults=count_where(
            session, Cat, available_filter, Cat.age_group == AgeGroup.ADULT
        ),
        seniors=count_where(
            session, Cat, available_filter, Cat.age_group == AgeGroup.SENIOR
        ),
    )

    available_series = monthly_series(session, Cat.entry_date, available_filter)
    booked_series = monthly_series(session, Cat.entry_date, booked_filter)
    lowest, highest = min_max_by_count(available_series)

    return CatsStatusReport(
        available=count_where(session, Cat, available_filter),
        booked=count_where(session, Cat, booked_filter),
        available_breakdown=breakdown,
        series=CatsStatusSeries(available=available_series, booked=booked_series),
        min=lowest,
        max=highest,
    )


def get_incoming_cats(session: Session, now: datetime) -> IncomingCatsReport:
    """
    Rescued and surrendered cats for the current month, plus their monthly history.

    Args:
        session: Database session
        now: Reference time; "this month" is its calendar month

    Returns:
        IncomingCatsReport: this-month counts, rescued/surrendered/total series,
        min/max over the total series
    """
    month_start, month_end = month_window(now)
    this_month = [Cat.entry_date >= month_start, Cat.entry_date <= month_end]
    rescued = Cat.entry_type == EntryType.RESCUE
    surrendered = Cat.entry_type == EntryType.SURRENDER
    incoming = or_(rescued, surrendered)

    total_series = monthly_series(session, Cat.entry_date, incoming)
    lowest, highest = min_max_by_count(total_series)

    return IncomingCatsReport(
        rescued_this_month=count_where(session, Cat, rescued, *this_month),
        surrendered_this_month=count_where(session, Cat, surrendered, *this_month),
        series=IncomingCatsSeries(
            rescued=monthly_series(session, Cat.entry_date, rescued),
            surrendered=monthly_series(session, Cat.entry_date, surrendered),
            total=total_series,
        ),
        min=lowest,
        max=highest,
    )


def get_neutered_cats(session: Session, now: datetime) -> NeuteredCatsReport:
    """
    Neuter and spay procedures for the current month, plus their monthly history.

    Other procedure types (vaccinations, deworming) are not counted.
    """
    month_start, month_end = month_window(now)
    this_month = [
        MedicalProcedure.procedure_date >= month_start,
        MedicalProcedure.procedure_date <= month_end,
    ]
    neutered = MedicalProcedure.procedure_type == ProcedureType.NEUTERED
    spayed = MedicalProcedure.procedure_type == ProcedureType.SPAYED
    sterilised = or_(neutered, spayed)

    total_series = monthly_series(session, MedicalProcedure.procedure_date, sterilised)
    lowest, highest = min_max_by_count(total_series)

    return NeuteredCatsReport(
        neutered_this_month=count_where(
            session, MedicalProcedure, neutered, *this_month
        ),
        spayed_this_month=count_where(session, MedicalProcedure, spayed, *this_month),
        series=NeuteredCatsSeries(
            neutered=monthly_series(session, MedicalProcedure.procedure_date, neutered),
            spayed=monthly_series(session, MedicalProcedure.procedure_date, spayed),
            total=total_series,
        ),
        min=lowest,
        max=highest,
    )


def get_campaign(session: Session) -> CampaignReport | None:
    """
    Progress of the active fundraising campaign.

    When several campaigns are active the one with the lowest id is reported.
    Amounts are converted to float for the dashboard.

    Returns:
        CampaignReport | None: The report, or None if no campaign is active.
    """
    campaign = session.exec(
        select(FundraisingCampaign)
        .where(FundraisingCampaign.is_active == True)  # noqa: E712
        .order_by(col(FundraisingCampaign.id))
        .limit(1)
    ).first()
    if campaign is None:
        return None

    return CampaignReport(
        campaign_goal=float(campaign.target_amount),
        current_donated=float(campaign.current_amount),
        start_date=campaign.start_date.date().isoformat(),
        end_date=campaign.end_date.date().isoformat() if campaign.end_date else None,
    )
