"""
Tests for registration, login, profile and the access guard.

Each test gets a fresh in-memory SQLite database (see conftest.py).
"""
import pytest
from datetime import timedelta

from httpx import AsyncClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from jobtracker.models.user import User
from jobtracker.services.identity import verify_password
from jobtracker.services.tokens import issue_token, verify_token
from conftest import TEST_PASSWORD


# ============================================================
# REGISTRATION
# ============================================================

@pytest.mark.asyncio
async def test_register_hashes_password(async_client: AsyncClient, db: AsyncSession):
    response = await async_client.post(
        "/api/auth/register",
        json={"email": "new@example.com", "password": "s3cret!", "username": "newbie"}
    )
    
    assert response.status_code == 201
    data = response.json()
    assert data["message"] == "User created!"
    
    result = await db.execute(select(User).where(User.email == "new@example.com"))
    user = result.scalar_one()
    assert str(user.id) == data["user_id"]
    assert user.username == "newbie"
    assert user.password_hash != "s3cret!", "Plaintext must never be stored"
    assert verify_password("s3cret!", user.password_hash)


@pytest.mark.asyncio
async def test_register_duplicate_email_conflict(async_client: AsyncClient, test_user: User):
    response = await async_client.post(
        "/api/auth/register",
        json={"email": test_user.email, "password": "whatever", "username": "dup"}
    )
    
    assert response.status_code == 409
    assert response.json()["detail"] == "User already exists"


@pytest.mark.asyncio
async def test_register_rejects_invalid_email(async_client: AsyncClient):
    response = await async_client.post(
        "/api/auth/register",
        json={"email": "not-an-email", "password": "pw", "username": "x"}
    )
    
    assert response.status_code == 422


# ============================================================
# LOGIN
# ============================================================

@pytest.mark.asyncio
async def test_login_returns_bearer_token(async_client: AsyncClient, test_user: User):
    response = await async_client.post(
        "/api/auth/login",
        json={"email": test_user.email, "password": TEST_PASSWORD}
    )
    
    assert response.status_code == 200
    data = response.json()
    assert data["token_type"] == "bearer"
    assert data["expires_in"] == 3600
    
    claims = verify_token(data["access_token"])
    assert claims.id == test_user.id
    assert claims.email == test_user.email


@pytest.mark.asyncio
async def test_login_wrong_password(async_client: AsyncClient, test_user: User):
    response = await async_client.post(
        "/api/auth/login",
        json={"email": test_user.email, "password": "wrong"}
    )
    
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_login_unknown_user_indistinguishable(async_client: AsyncClient, test_user: User):
    """Unknown email and bad password give the caller the same answer."""
    unknown = await async_client.post(
        "/api/auth/login",
        json={"email": "nobody@example.com", "password": TEST_PASSWORD}
    )
    bad_password = await async_client.post(
        "/api/auth/login",
        json={"email": test_user.email, "password": "wrong"}
    )
    
    assert unknown.status_code == bad_password.status_code == 401
    assert unknown.json() == bad_password.json()


@pytest.mark.asyncio
async def test_register_then_login(async_client: AsyncClient, db: AsyncSession):
    await async_client.post(
        "/api/auth/register",
        json={"email": "flow@example.com", "password": "pw-123", "username": "flow"}
    )
    login = await async_client.post(
        "/api/auth/login",
        json={"email": "flow@example.com", "password": "pw-123"}
    )
    token = login.json()["access_token"]
    
    profile = await async_client.get(
        "/api/auth/profile",
        headers={"Authorization": f"Bearer {token}"}
    )
    
    assert profile.status_code == 200
    assert profile.json()["email"] == "flow@example.com"
    assert profile.json()["username"] == "flow"


# ============================================================
# PROFILE
# ============================================================

@pytest.mark.asyncio
async def test_profile_excludes_password(client: AsyncClient, test_user: User):
    response = await client.get("/api/auth/profile")
    
    assert response.status_code == 200
    data = response.json()
    assert data["id"] == str(test_user.id)
    assert data["email"] == test_user.email
    assert "password_hash" not in data
    assert "password" not in data


@pytest.mark.asyncio
async def test_profile_of_missing_user_not_found(async_client: AsyncClient):
    """A validly signed token for an id with no user row."""
    from uuid import uuid4
    token = issue_token(uuid4(), "ghost@example.com")
    
    response = await async_client.get(
        "/api/auth/profile",
        headers={"Authorization": f"Bearer {token}"}
    )
    
    assert response.status_code == 404


# ============================================================
# ACCESS GUARD
# ============================================================

SCOPED_ROUTES = [
    ("GET", "/api/auth/profile"),
    ("GET", "/api/companies/"),
    ("GET", "/api/companies/summary"),
    ("POST", "/api/companies/"),
    ("GET", "/api/jobs/"),
    ("POST", "/api/jobs/"),
    ("GET", "/api/interviews/"),
    ("POST", "/api/interviews/"),
]


@pytest.mark.asyncio
@pytest.mark.parametrize("method,path", SCOPED_ROUTES)
async def test_scoped_routes_require_token(async_client: AsyncClient, method: str, path: str):
    response = await async_client.request(method, path)
    
    assert response.status_code == 401
    assert response.json()["detail"] == "No token provided"
    assert response.headers["www-authenticate"] == "Bearer"


@pytest.mark.asyncio
@pytest.mark.parametrize("header", ["Token abc", "Bearer", "bearer abc", "abc"])
async def test_malformed_authorization_header(async_client: AsyncClient, header: str):
    response = await async_client.get("/api/companies/", headers={"Authorization": header})
    
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_invalid_token_rejected(async_client: AsyncClient):
    response = await async_client.get(
        "/api/companies/",
        headers={"Authorization": "Bearer not.a.token"}
    )
    
    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid token"


@pytest.mark.asyncio
async def test_expired_token_rejected(async_client: AsyncClient, test_user: User):
    token = issue_token(test_user.id, test_user.email, expires_delta=timedelta(seconds=-5))
    
    response = await async_client.get(
        "/api/companies/",
        headers={"Authorization": f"Bearer {token}"}
    )
    
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_health_is_public(async_client: AsyncClient):
    response = await async_client.get("/health")
    
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
