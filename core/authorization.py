"""
Role-based authorization policy.
Endpoints declare the roles they admit; is_allowed is the single decision point.
"""

from collections.abc import Iterable
from enum import Enum


class Role(str, Enum):
    USER = "USER"
    ADMIN = "ADMIN"


def is_allowed(admitted_roles: Iterable[Role], role: str | Role | None) -> bool:
    """Return True when role is one of admitted_roles. Unknown or missing roles are denied."""
    if role is None:
        return False
    try:
        resolved = Role(role)
    except ValueError:
        return False
    return resolved in set(admitted_roles)


def is_owner_or_admin(payload: dict, resource_owner_id: str) -> bool:
    """A USER may only act on its own record; ADMIN may act on any."""
    if payload.get("role") == Role.ADMIN.value:
        return True
    return payload.get("sub") == resource_owner_id
