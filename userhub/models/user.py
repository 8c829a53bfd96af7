"""
Userhub - User Model
RBAC: Admin → User
"""

from sqlalchemy import Column, String, DateTime, Enum, Integer
from datetime import datetime
import enum
from userhub.core.database import Base

# Largest value a SQLite INTEGER primary key can hold
MAX_USER_ID = 2**63 - 1


class UserRole(str, enum.Enum):
    """User roles"""
    USER = "user"
    ADMIN = "admin"


class User(Base):
    """User account"""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    hashed_password = Column(String(255), nullable=False)

    # RBAC
    role = Column(
        Enum(UserRole, values_callable=lambda roles: [r.value for r in roles]),
        default=UserRole.USER,
        nullable=False,
    )

    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<User {self.email} ({self.role})>"

