"""Donation service: CRUD plus the campaign update triggered by each new donation."""

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, col, select
from starlette.concurrency import run_in_threadpool

from app.exceptions import InternalError
from app.models.campaign import FundraisingCampaign
from app.models.donation import Donation, DonationCreate
from app.services import campaign as campaign_service
from app.services.realtime import CampaignEvent, EventPublisher
from app.services.utils import get_or_404


def get_all_donations(session: Session) -> list[Donation]:
    return list(session.exec(select(Donation).order_by(col(Donation.id))).all())


def get_donation(session: Session, donation_id: int) -> Donation:
    return get_or_404(session, Donation, donation_id, "Donation")


def campaign_updated_payload(campaign: FundraisingCampaign) -> dict:
    """Build the `campaign:updated` event body (amounts as floats)."""
    return {
        "campaignId": campaign.id,
        "currentAmount": float(campaign.current_amount),
        "targetAmount": float(campaign.target_amount),
        "currency": campaign.currency,
    }


def save_donation(
    session: Session, donation_in: DonationCreate
) -> tuple[Donation, FundraisingCampaign | None]:
    """
    Persist a donation and credit it to the matching active campaign.

    Steps:
        1. The donation is committed on its own.
        2. The active campaign in the donation's currency is looked up; without
           one the donation is returned with no campaign.
        3. The campaign total is incremented by the store.

    The donation and campaign writes are separate commits. If the campaign
    update fails the donation stays recorded and InternalError is raised so the
    client can retry or alert.

    Args:
        session: Database session
        donation_in: Validated donation data

    Returns:
        The persisted donation and the credited campaign, or None when no
        campaign collects in its currency.

    Raises:
        InternalError: If the campaign could not be updated after the donation was saved
    """
    donation = Donation.model_validate(donation_in)
    session.add(donation)
    session.commit()
    session.refresh(donation)
    logger.info(
        f"Donation {donation.id} recorded: {donation.amount} {donation.currency}"
    )

    campaign = campaign_service.get_active_campaign_for_currency(
        session, donation.currency
    )
    if campaign is None:
        logger.debug(f"No active {donation.currency} campaign; nothing to update")
        return donation, None

    donation_id, campaign_id = donation.id, campaign.id
    try:
        campaign = campaign_service.add_to_current_amount(
            session, campaign, donation.amount
        )
    except SQLAlchemyError as e:
        session.rollback()
        logger.error(
            f"Donation {donation_id} saved but campaign {campaign_id} was not updated: {e}"
        )
        raise InternalError(
            "Donation recorded but the campaign total could not be updated"
        ) from e

    logger.info(
        f"Campaign {campaign.id} now at {campaign.current_amount} {campaign.currency}"
    )
    return donation, campaign


async def record_donation(
    session: Session, donation_in: DonationCreate, publisher: EventPublisher
) -> Donation:
    """
    Save a donation and announce the campaign change to connected clients.

    The blocking database work of `save_donation` runs in the threadpool, so
    the event loop keeps serving other requests and sockets meanwhile. A
    `campaign:updated` event is published only when a campaign was credited.
    """
    donation, campaign = await run_in_threadpool(save_donation, session, donation_in)
    if campaign is not None:
        await publisher.publish(
            CampaignEvent.UPDATED, campaign_updated_payload(campaign)
        )
    return donation
