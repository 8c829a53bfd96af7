"""
Userhub - Services
"""

from userhub.services.user_service import UserService

__all__ = ["UserService"]
