from datetime import datetime
from typing import TYPE_CHECKING
from sqlmodel import SQLModel, Field, Relationship
from .enums import Role

if TYPE_CHECKING:
    from app.models.adoption import Adoption


class UserBase(SQLModel):
    name: str = Field(max_length=100)
    username: str = Field(max_length=50, unique=True, index=True)
    email: str = Field(max_length=255)
    phone: str = Field(max_length=20)


class User(UserBase, table=True):
    id: int | None = Field(default=None, primary_key=True)
    hashed_password: str = Field(max_length=255)
    role: Role = Field(default=Role.PUBLIC, index=True)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    adoptions: list["Adoption"] = Relationship(back_populates="user")


class UserCreate(UserBase):
    password: str = Field(min_length=8)
    role: Role = Role.PUBLIC


class UserPublic(UserBase):
    id: int
    role: Role
    created_at: datetime


class UserLogin(SQLModel):
    username: str
    password: str
