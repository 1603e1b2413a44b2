"""Donation router: staff listings and the public donation endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path
from sqlmodel import Session

from app.core.dependencies import CurrentUser, StaffUser
from app.database.database import get_session
from app.models.campaign import FundraisingCampaignPublic
from app.models.donation import DonationCreate, DonationPublic
from app.models.response import ApiResponse
from app.services import campaign as campaign_service
from app.services import donation as donation_service
from app.services.realtime import BroadcastChannel, get_channel

router = APIRouter(prefix="/api/donations", tags=["donations"])


@router.get("", response_model=ApiResponse[list[DonationPublic]])
def get_donations(
    session: Annotated[Session, Depends(get_session)],
    current_user: StaffUser,
) -> ApiResponse[list[DonationPublic]]:
    """
    List every donation.

    ### Authorization:
    - `clinic_staff` or `super_admin`
    """
    donations = donation_service.get_all_donations(session)
    return ApiResponse(data=[DonationPublic.model_validate(d) for d in donations])


@router.post("", response_model=ApiResponse[DonationPublic], status_code=201)
async def create_donation(
    *,
    session: Annotated[Session, Depends(get_session)],
    channel: Annotated[BroadcastChannel, Depends(get_channel)],
    current_user: CurrentUser,
    donation_in: DonationCreate,
) -> ApiResponse[DonationPublic]:
    """
    Record a donation.

    If an active campaign collects in the donation's currency its total is
    increased and a `campaign:updated` event is broadcast to dashboard clients.

    ## Example Request

    ```json
    {"amount": "5000.00", "currency": "SEK", "donor_name": "Anna"}
    ```

    ### Authorization:
    - Any authenticated user

    Raises:
        401 AuthenticationError: If no valid token is provided.
        500 InternalError: The donation was saved but the campaign update failed.
    """
    donation = await donation_service.record_donation(session, donation_in, channel)
    return ApiResponse(data=DonationPublic.model_validate(donation))


@router.get("/campaigns", response_model=ApiResponse[list[FundraisingCampaignPublic]])
def get_campaigns(
    session: Annotated[Session, Depends(get_session)],
    current_user: CurrentUser,
) -> ApiResponse[list[FundraisingCampaignPublic]]:
    """
    List all fundraising campaigns, active or not.

    ### Authorization:
    - Any authenticated user
    """
    campaigns = campaign_service.get_all_campaigns(session)
    return ApiResponse(
        data=[FundraisingCampaignPublic.model_validate(c) for c in campaigns]
    )


@router.get("/{donation_id}", response_model=ApiResponse[DonationPublic])
def get_donation(
    session: Annotated[Session, Depends(get_session)],
    current_user: StaffUser,
    donation_id: Annotated[int, Path(description="Donation ID")],
) -> ApiResponse[DonationPublic]:
    """
    Retrieve one donation.

    ### Authorization:
    - `clinic_staff` or `super_admin`

    Raises:
        404 NotFoundError: If the donation doesn't exist.
    """
    donation = donation_service.get_donation(session, donation_id)
    return ApiResponse(data=DonationPublic.model_validate(donation))
