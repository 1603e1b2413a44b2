"""Public dashboard statistics router.

All endpoints use optional authentication: anonymous visitors and staff share
the same routes. The incoming/neutered reports are staff-only and enforce that
inside the handler, so anonymous callers get a clean 403 instead of a 401.
"""

from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from app.core import permissions
from app.core.dependencies import OptionalUser, caller_role
from app.database.database import get_session
from app.exceptions import InsufficientPermissionsError
from app.models.response import ApiResponse
from app.models.stats import (
    CampaignReport,
    CatsStatusReport,
    IncomingCatsReport,
    NeuteredCatsReport,
    TotalAdoptionsReport,
)
from app.models.user import User
from app.services import stats as stats_service
from app.services.aggregation import DateRange

router = APIRouter(prefix="/api", tags=["stats"])

STAFF_ONLY_MESSAGE = "Access denied. Staff or admin role required."


def require_staff(user: User | None) -> None:
    """Deny anonymous and public callers with a 403."""
    decision = permissions.authorize(caller_role(user), permissions.STAFF_ROLES)
    if decision is not permissions.AccessDecision.ALLOW:
        raise InsufficientPermissionsError(STAFF_ONLY_MESSAGE)


@router.get("/total_adoptions", response_model=ApiResponse[TotalAdoptionsReport])
def get_total_adoptions(
    session: Annotated[Session, Depends(get_session)],
    current_user: OptionalUser,
    start_date: Annotated[
        str | None, Query(description="Start date filter (YYYY-MM-DD)")
    ] = None,
    end_date: Annotated[
        str | None, Query(description="End date filter (YYYY-MM-DD), inclusive")
    ] = None,
) -> ApiResponse[TotalAdoptionsReport]:
    """
    Completed adoptions with a monthly breakdown.

    ### Query Parameters:
    - **start_date**: Only count adoptions on or after this day
    - **end_date**: Only count adoptions up to the end of this day

    ### Authorization:
    - Public (token optional)

    Raises:
        400 ValidationError: If a date is not in `YYYY-MM-DD` format.
    """
    date_range = DateRange.from_params(start_date, end_date)
    return ApiResponse(data=stats_service.get_total_adoptions(session, date_range))


@router.get("/cats_status", response_model=ApiResponse[CatsStatusReport])
def get_cats_status(
    session: Annotated[Session, Depends(get_session)],
    current_user: OptionalUser,
) -> ApiResponse[CatsStatusReport]:
    """
    Available and booked cats, the age split of available cats, and entry-month series.

    ### Authorization:
    - Public (token optional)
    """
    return ApiResponse(data=stats_service.get_cats_status(session))


@router.get("/incoming_cats", response_model=ApiResponse[IncomingCatsReport])
def get_incoming_cats(
    session: Annotated[Session, Depends(get_session)],
    current_user: OptionalUser,
) -> ApiResponse[IncomingCatsReport]:
    """
    Rescues and surrenders this month, with monthly series.

    ### Authorization:
    - `clinic_staff` or `super_admin`

    Raises:
        403 InsufficientPermissionsError: For anonymous and public callers.
    """
    require_staff(current_user)
    return ApiResponse(
        data=stats_service.get_incoming_cats(session, now=datetime.now())
    )


@router.get("/neutered_cats", response_model=ApiResponse[NeuteredCatsReport])
def get_neutered_cats(
    session: Annotated[Session, Depends(get_session)],
    current_user: OptionalUser,
) -> ApiResponse[NeuteredCatsReport]:
    """
    Neuter and spay procedures this month, with monthly series.

    ### Authorization:
    - `clinic_staff` or `super_admin`

    Raises:
        403 InsufficientPermissionsError: For anonymous and public callers.
    """
    require_staff(current_user)
    return ApiResponse(
        data=stats_service.get_neutered_cats(session, now=datetime.now())
    )


@router.get("/campaign", response_model=ApiResponse[CampaignReport | None])
def get_campaign(
    session: Annotated[Session, Depends(get_session)],
    current_user: OptionalUser,
) -> ApiResponse[CampaignReport | None]:
    """
    Progress of the active fundraising campaign.

    Returns `{"success": true, "data": null}` when no campaign is active.

    ### Authorization:
    - Public (token optional)
    """
    return ApiResponse(data=stats_service.get_campaign(session))
