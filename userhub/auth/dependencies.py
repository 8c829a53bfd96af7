"""
Userhub - Auth Dependencies
FastAPI dependencies that resolve the authenticated caller
"""

from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from userhub.core.database import get_db
from userhub.models.user import MAX_USER_ID, User
from userhub.auth.security import decode_token, verify_token_type
from userhub.auth.policy import Caller
from userhub.schemas.user import USER_ID_PATTERN

# HTTP Bearer token scheme; missing credentials are reported as 401 below
security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: AsyncSession = Depends(get_db)
) -> User:
    """
    Get current authenticated user from JWT token

    Raises:
        HTTPException: If token is missing or invalid, or the user no longer exists
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if credentials is None:
        raise credentials_exception

    payload = decode_token(credentials.credentials)
    if payload is None:
        raise credentials_exception

    if not verify_token_type(payload, "access"):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token type",
        )

    subject = payload.get("sub")
    if subject is None or not USER_ID_PATTERN.fullmatch(str(subject)) or int(subject) > MAX_USER_ID:
        raise credentials_exception

    result = await db.execute(
        select(User).where(User.id == int(subject))
    )
    user = result.scalar_one_or_none()

    if user is None:
        raise credentials_exception

    return user


async def get_current_caller(
    current_user: User = Depends(get_current_user)
) -> Caller:
    """Identity of the caller as seen by the authorization policy"""
    return Caller.from_user(current_user)
