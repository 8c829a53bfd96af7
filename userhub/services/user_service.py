"""
Userhub - User Service
Persistence operations for user management
"""

from typing import Any, Dict, List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from userhub.models.user import MAX_USER_ID, User, UserRole
from userhub.auth.security import get_password_hash
from userhub.core.errors import NotFoundError, ConflictError
from loguru import logger


USER_NOT_FOUND = "User not found"
EMAIL_TAKEN = "User with this email already exists"


class UserService:
    """Service for user operations"""

    @staticmethod
    async def create_user(
        db: AsyncSession,
        name: str,
        email: str,
        password: str,
        role: UserRole = UserRole.USER,
    ) -> User:
        """
        Create new user

        Raises:
            ConflictError: If the email is already registered
        """
        email = email.strip().lower()
        if await UserService.get_user_by_email(db, email):
            raise ConflictError(EMAIL_TAKEN)

        user = User(
            name=name.strip(),
            email=email,
            hashed_password=get_password_hash(password),
            role=role,
        )
        db.add(user)
        try:
            await db.commit()
        except IntegrityError as e:
            await db.rollback()
            logger.error(f"❌ User creation failed: {e}")
            raise ConflictError(EMAIL_TAKEN)
        await db.refresh(user)

        logger.info(f"✅ User created: {user.email} ({user.role.value})")
        return user

    @staticmethod
    async def get_all_users(db: AsyncSession) -> List[User]:
        """List all users ordered by ID"""
        result = await db.execute(select(User).order_by(User.id))
        return list(result.scalars().all())

    @staticmethod
    async def find_user_by_id(db: AsyncSession, user_id: int) -> Optional[User]:
        """Get user by ID, or None"""
        if user_id > MAX_USER_ID:
            return None
        result = await db.execute(
            select(User).where(User.id == user_id)
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def get_user_by_id(db: AsyncSession, user_id: int) -> User:
        """
        Get user by ID

        Raises:
            NotFoundError: If no user has this ID
        """
        user = await UserService.find_user_by_id(db, user_id)
        if user is None:
            raise NotFoundError(USER_NOT_FOUND)
        return user

    @staticmethod
    async def get_user_by_email(db: AsyncSession, email: str) -> Optional[User]:
        """Get user by email"""
        result = await db.execute(
            select(User).where(User.email == email)
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def update_user(
        db: AsyncSession,
        user_id: int,
        updates: Dict[str, Any],
    ) -> User:
        """
        Apply a validated partial update

        Args:
            db: Database session
            user_id: ID of the user to update
            updates: Any subset of name/email/password/role

        Raises:
            NotFoundError: If no user has this ID
            ConflictError: If another user already owns the new email
        """
        user = await UserService.get_user_by_id(db, user_id)
        update_data = dict(updates)

        new_email = update_data.get("email")
        if new_email is not None and new_email != user.email:
            existing = await UserService.get_user_by_email(db, new_email)
            if existing is not None and existing.id != user.id:
                raise ConflictError(EMAIL_TAKEN)

        if "password" in update_data:
            update_data["hashed_password"] = get_password_hash(update_data.pop("password"))

        for field, value in update_data.items():
            setattr(user, field, value)

        try:
            await db.commit()
        except IntegrityError as e:
            await db.rollback()
            logger.error(f"❌ User update failed: {e}")
            raise ConflictError(EMAIL_TAKEN)
        await db.refresh(user)

        logger.info(f"✅ User updated: {user.email}")
        return user

    @staticmethod
    async def delete_user(db: AsyncSession, user_id: int) -> User:
        """
        Delete user

        Returns:
            The deleted user, detached from the session

        Raises:
            NotFoundError: If no user has this ID
        """
        user = await UserService.get_user_by_id(db, user_id)
        await db.delete(user)
        await db.commit()

        logger.info(f"✅ User deleted: {user_id}")
        return user
