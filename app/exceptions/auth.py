"""Credential and role errors.

Everything here derives from AuthenticationError (401) except that
InsufficientPermissionsError is mapped to 403: the caller is known, its role is
simply too low.
"""

from app.exceptions.base import AppException


class AuthenticationError(AppException):
    def __init__(self, message: str = "Access denied. User not authenticated."):
        super().__init__(message)


class InvalidCredentialsError(AuthenticationError):
    """Login with an unknown username or a wrong password."""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class InvalidTokenError(AuthenticationError):
    """Bearer token that cannot be decoded, is not an access token, or names a deleted user."""

    def __init__(self, message: str = "Invalid token."):
        super().__init__(message)


class TokenExpiredError(InvalidTokenError):
    def __init__(self, token_type: str = "access"):
        self.token_type = token_type
        super().__init__(f"{token_type.capitalize()} token has expired")


class InsufficientPermissionsError(AuthenticationError):
    """Authenticated caller below the role level an operation requires."""

    def __init__(self, message: str = "Access denied. Insufficient permissions."):
        super().__init__(message)
