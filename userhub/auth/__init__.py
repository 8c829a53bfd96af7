"""
Userhub - Auth Module
"""

from userhub.auth.security import (
    verify_password,
    get_password_hash,
    create_access_token,
    create_user_token,
    decode_token,
)
from userhub.auth.policy import Action, Caller, PolicyDecision, authorize
from userhub.auth.dependencies import get_current_user, get_current_caller

__all__ = [
    "verify_password",
    "get_password_hash",
    "create_access_token",
    "create_user_token",
    "decode_token",
    "Action",
    "Caller",
    "PolicyDecision",
    "authorize",
    "get_current_user",
    "get_current_caller",
]
