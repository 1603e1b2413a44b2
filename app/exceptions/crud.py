"""Errors about the records a request reads or writes."""

from app.exceptions.base import AppException


class NotFoundError(AppException):
    """A lookup by primary key matched no row (404)."""

    def __init__(self, resource: str, identifier: int | str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} with identifier '{identifier}' not found")


class AlreadyExistsError(AppException):
    """
    A write would duplicate a unique value (409).

    Attributes:
        resource: Record type, e.g. "User".
        field: The unique column, e.g. "username".
        value: The value that is already taken.
    """

    def __init__(self, resource: str, field: str, value: int | str):
        self.resource = resource
        self.field = field
        self.value = value
        super().__init__(f"{resource} with {field}='{value}' already exists")


class ValidationError(AppException):
    """
    Input the request schema accepted but the service cannot use (400).

    Raised for malformed date filters. `field` names the offending parameter
    when there is one.
    """

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        super().__init__(message)
