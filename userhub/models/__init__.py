"""
Userhub - Database Models
"""

from userhub.models.user import User, UserRole

__all__ = [
    "User",
    "UserRole",
]
