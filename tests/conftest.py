"""
Userhub - PyTest Configuration

Test fixtures for:
- Database sessions with in-memory SQLite
- User factories (ADMIN, USER)
- Token factories (valid, expired, invalid)
- HTTP client bound to the app with the test session
"""

import os

# Settings are read at import time; configure them before importing userhub
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("ENVIRONMENT", "test")

import pytest
from typing import AsyncGenerator
from datetime import datetime, timedelta
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from userhub.core.database import Base, get_db
from userhub.auth.security import get_password_hash, create_access_token, create_user_token
from userhub.models.user import User, UserRole
from userhub.main import app


# Test database URL (in-memory SQLite for speed)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# Standard test password
TEST_PASSWORD = "TestPassword123!"


# ============================================================================
# CORE FIXTURES
# ============================================================================

@pytest.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Create test database session

    Each test gets a fresh database
    """
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    TestingSessionLocal = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False
    )

    async with TestingSessionLocal() as session:
        yield session

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client whose requests share the test database session"""
    async def _override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


# ============================================================================
# USER FACTORIES
# ============================================================================

async def _add_user(db_session: AsyncSession, name: str, email: str, role: UserRole) -> User:
    user = User(
        name=name,
        email=email,
        hashed_password=get_password_hash(TEST_PASSWORD),
        role=role,
        created_at=datetime.utcnow(),
    )
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


@pytest.fixture
async def admin_user(db_session: AsyncSession) -> User:
    """ADMIN: may update any user and change roles"""
    return await _add_user(db_session, "Admin User", "admin@userhub.io", UserRole.ADMIN)


@pytest.fixture
async def regular_user(db_session: AsyncSession, admin_user: User) -> User:
    """USER: may only manage their own record"""
    return await _add_user(db_session, "Regular User", "user@userhub.io", UserRole.USER)


@pytest.fixture
async def other_user(db_session: AsyncSession, regular_user: User) -> User:
    """Second USER, target of cross-account attempts"""
    return await _add_user(db_session, "Other User", "other@userhub.io", UserRole.USER)


# ============================================================================
# TOKEN FACTORIES
# ============================================================================

@pytest.fixture
def admin_headers(admin_user: User) -> dict:
    """Authorization header for ADMIN"""
    return {"Authorization": f"Bearer {create_user_token(admin_user)}"}


@pytest.fixture
def user_headers(regular_user: User) -> dict:
    """Authorization header for regular USER"""
    return {"Authorization": f"Bearer {create_user_token(regular_user)}"}


@pytest.fixture
def expired_token(admin_user: User) -> str:
    """
    Generate expired JWT token

    Expired 1 hour ago
    """
    token_data = {
        "sub": str(admin_user.id),
        "email": admin_user.email,
        "role": admin_user.role.value
    }
    return create_access_token(token_data, expires_delta=timedelta(hours=-1))


@pytest.fixture
def invalid_token() -> str:
    """Malformed JWT token with invalid signature"""
    return "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9.INVALID.SIGNATURE"


@pytest.fixture
def token_with_invalid_user() -> str:
    """Generate token for non-existent user"""
    return create_access_token({
        "sub": "999999",
        "email": "ghost@userhub.io",
        "role": "user"
    })
