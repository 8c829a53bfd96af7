"""
Userhub - Authorization Policy
Decides whether a caller may act on a target user

Rules, evaluated in order:
1. Non-admin callers may only act on their own record
2. Only admins may change a user's role (update)
3. Admins may not delete their own account (delete)
"""

import enum
from dataclasses import dataclass
from typing import Any, Mapping, Optional
from userhub.core.errors import ErrorKind, UserhubError, error_for_kind
from userhub.models.user import UserRole


class Action(str, enum.Enum):
    """Actions guarded by the policy"""
    UPDATE = "update"
    DELETE = "delete"


@dataclass(frozen=True)
class Caller:
    """Authenticated identity making the request"""
    id: int
    email: str
    role: UserRole

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @classmethod
    def from_user(cls, user) -> "Caller":
        return cls(id=user.id, email=user.email, role=UserRole(user.role))


@dataclass(frozen=True)
class PolicyDecision:
    """Outcome of an authorization check"""
    allowed: bool
    kind: Optional[ErrorKind] = None
    reason: Optional[str] = None

    def to_error(self) -> UserhubError:
        """Exception to raise for a denied decision"""
        return error_for_kind(self.kind, self.reason)


ALLOW = PolicyDecision(allowed=True)

OWNERSHIP_REASONS = {
    Action.UPDATE: "You can only update your own information unless you are an admin.",
    Action.DELETE: "You can only delete your own account unless you are an admin.",
}


def authorize(
    caller: Caller,
    target_id: int,
    action: Action,
    updates: Optional[Mapping[str, Any]] = None,
) -> PolicyDecision:
    """
    Check whether caller may perform action on the user identified by target_id

    Args:
        caller: Authenticated caller
        target_id: ID of the user being updated or deleted
        action: Action being attempted
        updates: Validated update payload (UPDATE only)

    Returns:
        PolicyDecision; denied decisions carry the error kind and reason
    """
    is_self = caller.id == target_id

    if not caller.is_admin and not is_self:
        return PolicyDecision(False, ErrorKind.AUTHORIZATION, OWNERSHIP_REASONS[action])

    if action == Action.UPDATE and updates and "role" in updates and not caller.is_admin:
        return PolicyDecision(
            False, ErrorKind.AUTHORIZATION, "Only admin users can change user roles."
        )

    if action == Action.DELETE and is_self and caller.is_admin:
        return PolicyDecision(
            False, ErrorKind.VALIDATION, "Admin users cannot delete their own account."
        )

    return ALLOW
