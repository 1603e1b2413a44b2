"""Adoption router."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path
from sqlmodel import Session

from app.core.dependencies import AdminUser, CurrentUser, StaffUser
from app.database.database import get_session
from app.models.adoption import AdoptionCreate, AdoptionPublic, AdoptionUpdate
from app.models.response import ApiResponse
from app.services import adoption as adoption_service

router = APIRouter(prefix="/api/adoptions", tags=["adoptions"])

AdoptionId = Annotated[int, Path(description="Adoption ID")]


@router.get("", response_model=ApiResponse[list[AdoptionPublic]])
def get_adoptions(
    session: Annotated[Session, Depends(get_session)],
    current_user: CurrentUser,
) -> ApiResponse[list[AdoptionPublic]]:
    adoptions = adoption_service.get_all_adoptions(session)
    return ApiResponse(data=[AdoptionPublic.model_validate(a) for a in adoptions])


@router.post("", response_model=ApiResponse[AdoptionPublic], status_code=201)
def create_adoption(
    *,
    session: Annotated[Session, Depends(get_session)],
    current_user: CurrentUser,
    adoption_in: AdoptionCreate,
) -> ApiResponse[AdoptionPublic]:
    """
    Open an adoption request.

    Only adoptions whose status later becomes `completed` count toward the
    adoption statistics.

    ### Authorization:
    - Any authenticated user

    Raises:
        404 NotFoundError: If the referenced cat or user doesn't exist.
    """
    adoption = adoption_service.create_adoption(session, adoption_in)
    return ApiResponse(data=AdoptionPublic.model_validate(adoption))


@router.get("/{adoption_id}", response_model=ApiResponse[AdoptionPublic])
def get_adoption(
    session: Annotated[Session, Depends(get_session)],
    current_user: CurrentUser,
    adoption_id: AdoptionId,
) -> ApiResponse[AdoptionPublic]:
    adoption = adoption_service.get_adoption(session, adoption_id)
    return ApiResponse(data=AdoptionPublic.model_validate(adoption))


@router.put("/{adoption_id}", response_model=ApiResponse[AdoptionPublic])
def update_adoption(
    *,
    session: Annotated[Session, Depends(get_session)],
    current_user: StaffUser,
    adoption_id: AdoptionId,
    adoption_update: AdoptionUpdate,
) -> ApiResponse[AdoptionPublic]:
    """
    Move an adoption through its lifecycle (pending, approved, completed, cancelled).

    ### Authorization:
    - `clinic_staff` or `super_admin`
    """
    adoption = adoption_service.update_adoption(session, adoption_id, adoption_update)
    return ApiResponse(data=AdoptionPublic.model_validate(adoption))


@router.delete("/{adoption_id}", response_model=ApiResponse[None])
def delete_adoption(
    session: Annotated[Session, Depends(get_session)],
    current_user: AdminUser,
    adoption_id: AdoptionId,
) -> ApiResponse[None]:
    adoption_service.delete_adoption(session, adoption_id)
    return ApiResponse()
