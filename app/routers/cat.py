"""Cat router for shelter staff."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path
from sqlmodel import Session

from app.core.dependencies import AdminUser, CurrentUser, StaffUser
from app.database.database import get_session
from app.models.cat import CatCreate, CatPublic, CatUpdate
from app.models.response import ApiResponse
from app.services import cat as cat_service

router = APIRouter(prefix="/api/cats", tags=["cats"])

CatId = Annotated[int, Path(description="Cat ID")]


@router.get("", response_model=ApiResponse[list[CatPublic]])
def get_cats(
    session: Annotated[Session, Depends(get_session)],
    current_user: CurrentUser,
) -> ApiResponse[list[CatPublic]]:
    """
    List every cat in the shelter.

    ### Authorization:
    - Any authenticated user
    """
    cats = cat_service.get_all_cats(session)
    return ApiResponse(data=[CatPublic.model_validate(c) for c in cats])


@router.post("", response_model=ApiResponse[CatPublic], status_code=201)
def create_cat(
    *,
    session: Annotated[Session, Depends(get_session)],
    current_user: StaffUser,
    cat_in: CatCreate,
) -> ApiResponse[CatPublic]:
    """
    Register a cat entering the shelter.

    ### Authorization:
    - `clinic_staff` or `super_admin`
    """
    cat = cat_service.create_cat(session, cat_in)
    return ApiResponse(data=CatPublic.model_validate(cat))


@router.get("/{cat_id}", response_model=ApiResponse[CatPublic])
def get_cat(
    session: Annotated[Session, Depends(get_session)],
    current_user: CurrentUser,
    cat_id: CatId,
) -> ApiResponse[CatPublic]:
    """
    Retrieve one cat.

    Raises:
        400: If `cat_id` is not an integer.
        404 NotFoundError: If the cat doesn't exist.
    """
    return ApiResponse(data=CatPublic.model_validate(cat_service.get_cat(session, cat_id)))


@router.put("/{cat_id}", response_model=ApiResponse[CatPublic])
def update_cat(
    *,
    session: Annotated[Session, Depends(get_session)],
    current_user: StaffUser,
    cat_id: CatId,
    cat_update: CatUpdate,
) -> ApiResponse[CatPublic]:
    """
    Update a cat (partial: only provided fields change).

    ### Authorization:
    - `clinic_staff` or `super_admin`
    """
    cat = cat_service.update_cat(session, cat_id, cat_update)
    return ApiResponse(data=CatPublic.model_validate(cat))


@router.delete("/{cat_id}", response_model=ApiResponse[None])
def delete_cat(
    session: Annotated[Session, Depends(get_session)],
    current_user: AdminUser,
    cat_id: CatId,
) -> ApiResponse[None]:
    """
    Delete a cat.

    ### Authorization:
    - `super_admin` only
    """
    cat_service.delete_cat(session, cat_id)
    return ApiResponse()
