from pydantic import BaseModel, Field

from app.models.enums import Role
from app.models.user import UserPublic


class TokenData(BaseModel):
    """Claims read back from a verified access token."""

    username: str = Field(alias="sub")
    user_id: int | None = Field(default=None, alias="id")
    role: Role | None = None


class LoginResult(BaseModel):
    token: str
    token_type: str = "bearer"
    user: UserPublic
