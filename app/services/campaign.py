"""Fundraising campaign lookups and the donation accumulator."""

from decimal import Decimal

from sqlalchemy import update
from sqlmodel import Session, col, func, select

from app.models.campaign import FundraisingCampaign


def get_all_campaigns(session: Session) -> list[FundraisingCampaign]:
    statement = select(FundraisingCampaign).order_by(col(FundraisingCampaign.id))
    return list(session.exec(statement).all())


def get_active_campaign_for_currency(
    session: Session, currency: str
) -> FundraisingCampaign | None:
    """
    Find the campaign that collects donations in `currency`.

    Currencies are compared case-insensitively. Only one active campaign per
    currency is expected; if several exist the lowest id is used so the choice
    is stable.
    """
    statement = (
        select(FundraisingCampaign)
        .where(
            FundraisingCampaign.is_active == True,  # noqa: E712
            func.upper(FundraisingCampaign.currency) == currency.upper(),
        )
        .order_by(col(FundraisingCampaign.id))
        .limit(1)
    )
    return session.exec(statement).first()


def add_to_current_amount(
    session: Session, campaign: FundraisingCampaign, amount: Decimal
) -> FundraisingCampaign:
    """
    Increase a campaign's collected amount by `amount`.

    The increment is a single ``current_amount = current_amount + :amount``
    UPDATE evaluated by the database, so concurrent donations cannot overwrite
    each other's contribution. The row is re-read afterwards to return the new
    total.

    Args:
        session: Database session
        campaign: Campaign to credit
        amount: Donation amount in the campaign's currency

    Returns:
        FundraisingCampaign: The refreshed campaign
    """
    session.exec(  # type: ignore[call-overload]
        update(FundraisingCampaign)
        .where(col(FundraisingCampaign.id) == campaign.id)
        .values(current_amount=FundraisingCampaign.current_amount + amount)
    )
    session.commit()
    session.refresh(campaign)
    return campaign
