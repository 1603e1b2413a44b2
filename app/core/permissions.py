"""Role hierarchy authorization.

Roles form a total order taken from the declaration order of `Role`:
``public < clinic_staff < super_admin``. A caller satisfies a requirement when
its level is at least the lowest level among the roles an operation accepts,
so a higher role can always do what a lower one can.
"""

from collections.abc import Sequence
from enum import Enum

from app.exceptions import AuthenticationError, InsufficientPermissionsError
from app.models.enums import Role

_ROLE_LEVELS: dict[Role, int] = {role: level for level, role in enumerate(Role)}

STAFF_ROLES: tuple[Role, ...] = (Role.CLINIC_STAFF, Role.SUPER_ADMIN)


class AccessDecision(str, Enum):
    ALLOW = "allow"
    UNAUTHENTICATED = "unauthenticated"
    INSUFFICIENT_PERMISSIONS = "insufficient_permissions"


def role_level(role: Role) -> int:
    """Return the position of `role` in the hierarchy (0 = least privileged)."""
    return _ROLE_LEVELS[Role(role)]


def authorize(caller: Role | None, accepted: Sequence[Role]) -> AccessDecision:
    """
    Decide whether a caller may perform an operation.

    Parameters:
        caller (Role | None): The caller's role, or None for an anonymous caller.
        accepted (Sequence[Role]): Roles accepted by the operation. Empty means no requirement.

    Returns:
        AccessDecision: ALLOW, UNAUTHENTICATED when a role is required but the caller
        has none, or INSUFFICIENT_PERMISSIONS when the caller's level is too low.
    """
    if not accepted:
        return AccessDecision.ALLOW
    if caller is None:
        return AccessDecision.UNAUTHENTICATED
    required = min(role_level(role) for role in accepted)
    if role_level(caller) >= required:
        return AccessDecision.ALLOW
    return AccessDecision.INSUFFICIENT_PERMISSIONS


def enforce(
    caller: Role | None, accepted: Sequence[Role], message: str | None = None
) -> None:
    """
    Raise the matching auth exception unless `authorize` allows the caller.

    Raises:
        AuthenticationError: The operation requires a role and the caller is anonymous.
        InsufficientPermissionsError: The caller's role is below the required level.
    """
    decision = authorize(caller, accepted)
    if decision is AccessDecision.UNAUTHENTICATED:
        raise AuthenticationError()
    if decision is AccessDecision.INSUFFICIENT_PERMISSIONS:
        if message:
            raise InsufficientPermissionsError(message)
        raise InsufficientPermissionsError()
