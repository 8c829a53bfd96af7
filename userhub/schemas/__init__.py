"""
Userhub - Schemas
"""

from userhub.schemas.user import (
    ParseResult,
    UserIdParams,
    UserUpdate,
    UserPublic,
    DeletedUser,
    validate_user_id,
    validate_user_update,
    format_validation_error,
)

__all__ = [
    "ParseResult",
    "UserIdParams",
    "UserUpdate",
    "UserPublic",
    "DeletedUser",
    "validate_user_id",
    "validate_user_update",
    "format_validation_error",
]
