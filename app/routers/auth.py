from typing import Annotated

from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.core.dependencies import OptionalUser
from app.database.database import get_session
from app.models.response import ApiResponse
from app.models.token import LoginResult
from app.models.user import UserCreate, UserLogin, UserPublic
from app.services import user as user_service

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=ApiResponse[LoginResult])
def login(
    credentials: UserLogin,
    session: Annotated[Session, Depends(get_session)],
) -> ApiResponse[LoginResult]:
    """
    Exchange a username and password for a bearer token.

    Expects JSON: {"username": "...", "password": "..."}

    Raises:
        401 InvalidCredentialsError: Unknown username or wrong password.
    """
    result = user_service.login(session, credentials.username, credentials.password)
    return ApiResponse(data=result)


@router.post("/register", response_model=ApiResponse[UserPublic], status_code=201)
def register(
    user_in: UserCreate,
    session: Annotated[Session, Depends(get_session)],
    current_user: OptionalUser,
) -> ApiResponse[UserPublic]:
    """
    Create an account.

    Anyone may register a `public` account. Creating `clinic_staff` or
    `super_admin` accounts requires a `super_admin` token.

    Raises:
        401/403: A privileged role was requested without a super admin token.
        409 AlreadyExistsError: The username is taken.
    """
    user = user_service.create_user(session, user_in, created_by=current_user)
    return ApiResponse(data=UserPublic.model_validate(user))
