"""
Exceptions raised by the service layer and the auth dependencies.

Each class carries a client-facing message; the status code is chosen in
app/core/error_handlers.py, never here.
"""

from app.exceptions.auth import (
    AuthenticationError,
    InsufficientPermissionsError,
    InvalidCredentialsError,
    InvalidTokenError,
    TokenExpiredError,
)
from app.exceptions.base import AppException, InternalError
from app.exceptions.crud import AlreadyExistsError, NotFoundError, ValidationError

__all__ = [
    "AppException",
    "InternalError",
    "NotFoundError",
    "AlreadyExistsError",
    "ValidationError",
    "AuthenticationError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "TokenExpiredError",
    "InsufficientPermissionsError",
]
