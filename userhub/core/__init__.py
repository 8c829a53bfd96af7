"""
Userhub - Core Module
"""

from userhub.core.config import settings
from userhub.core.database import get_db, init_db, close_db

__all__ = [
    "settings",
    "get_db",
    "init_db",
    "close_db",
]
