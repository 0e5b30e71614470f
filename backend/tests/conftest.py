"""
Pytest fixtures for testing.
"""
import os

# Settings are read at import time; configure before importing the app
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
import pytest_asyncio
from typing import AsyncGenerator, Dict

from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

# Import database module BEFORE app to allow override
import jobtracker.database
from jobtracker.database import Base
# Import ALL models so Base.metadata knows about all tables
from jobtracker.models.user import User
from jobtracker.models.company import Company
from jobtracker.models.application import Application
from jobtracker.models.interview import Interview
from jobtracker.services.identity import hash_password
from jobtracker.services.tokens import issue_token

# Now import app (after we can override database)
from jobtracker.main import app as fastapi_app


# Test database URL (use in-memory SQLite for fast tests)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

TEST_PASSWORD = "correct horse battery staple"


@pytest_asyncio.fixture
async def db() -> AsyncGenerator[AsyncSession, None]:
    """
    Create a fresh database for each test.
    Ensures cleanup happens even if test fails.
    """
    # StaticPool keeps one connection alive so every session sees
    # the same in-memory database
    test_engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    
    # Replace the app's engine and sessionmaker so get_db() uses the test DB
    original_engine = jobtracker.database.engine
    original_sessionmaker = jobtracker.database.AsyncSessionLocal
    
    jobtracker.database.engine = test_engine
    jobtracker.database.AsyncSessionLocal = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False
    )
    
    session = jobtracker.database.AsyncSessionLocal()
    
    try:
        yield session
    finally:
        await session.close()
        async with test_engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
        await test_engine.dispose()
        
        jobtracker.database.engine = original_engine
        jobtracker.database.AsyncSessionLocal = original_sessionmaker


@pytest_asyncio.fixture
async def async_client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    Unauthenticated HTTP client against the app.
    
    The db fixture already swapped the engine, so endpoints use the test DB.
    """
    transport = ASGITransport(app=fastapi_app)
    
    async with AsyncClient(
        transport=transport,
        base_url="http://test",
        follow_redirects=True  # Follow 307 redirects for trailing slashes
    ) as client:
        yield client


async def _create_user(db: AsyncSession, email: str, username: str) -> User:
    user = User(email=email, username=username, password_hash=hash_password(TEST_PASSWORD))
    db.add(user)
    await db.commit()
    await db.refresh(user)
    return user


@pytest_asyncio.fixture
async def test_user(db: AsyncSession) -> User:
    return await _create_user(db, "testuser@example.com", "testuser")


@pytest_asyncio.fixture
async def other_user(db: AsyncSession) -> User:
    """A second account, for isolation tests."""
    return await _create_user(db, "other@example.com", "other")


def bearer(user: User) -> Dict[str, str]:
    return {"Authorization": f"Bearer {issue_token(user.id, user.email)}"}


@pytest.fixture
def auth_headers(test_user: User) -> Dict[str, str]:
    return bearer(test_user)


@pytest.fixture
def other_headers(other_user: User) -> Dict[str, str]:
    return bearer(other_user)


@pytest_asyncio.fixture
async def client(async_client: AsyncClient, auth_headers: Dict[str, str]) -> AsyncClient:
    """Client that sends test_user's bearer token on every request."""
    async_client.headers.update(auth_headers)
    return async_client
