"""
Authentication endpoints and the access guard dependency.

Security features:
- Passwords are bcrypt-hashed before storage
- Bearer tokens are signed JWTs valid for a fixed window (no refresh)
- Unknown email and wrong password give the same 401 to the caller
- Every scoped endpoint depends on get_current_identity, which rejects the
  request before any store access when the token is missing or invalid
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from jobtracker.database import get_db
from jobtracker.errors import NotFoundError, UnauthenticatedError
from jobtracker.schemas.auth import (
    RegisterRequest,
    RegisterResponse,
    LoginRequest,
    TokenResponse,
    TokenClaims,
    ProfileResponse,
)
from jobtracker.services import identity
from jobtracker.services.tokens import issue_token, verify_token, token_ttl

logger = logging.getLogger(__name__)
router = APIRouter()

BEARER_PREFIX = "Bearer "


# Authentication Dependencies
async def get_current_identity(
    authorization: Optional[str] = Header(None)
) -> TokenClaims:
    """
    Dependency that verifies the bearer token and returns the owner scope.
    
    The returned id is the only owner every downstream query may touch.
    The user row is not loaded; the signed token is the proof.
    
    Raises:
        UnauthenticatedError (401): header missing, not a bearer credential,
            or token invalid/expired
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise UnauthenticatedError("No token provided")
    
    token = authorization[len(BEARER_PREFIX):].strip()
    return verify_token(token)


# Endpoints
@router.post("/register", response_model=RegisterResponse, status_code=201)
async def register(
    request: RegisterRequest,
    db: AsyncSession = Depends(get_db)
):
    """
    Create an account.
    
    Returns:
        201: User created
        409: Email already registered
    """
    user = await identity.register_user(
        db,
        email=request.email,
        password=request.password,
        username=request.username,
    )
    return RegisterResponse(message="User created!", user_id=str(user.id))


@router.post("/login", response_model=TokenResponse)
async def login(
    request: LoginRequest,
    db: AsyncSession = Depends(get_db)
):
    """
    Exchange email and password for a bearer token.
    
    Returns:
        200: Token valid for the configured window
        401: Unknown email or wrong password
    """
    user = await identity.authenticate_user(db, request.email, request.password)
    
    return TokenResponse(
        access_token=issue_token(user.id, user.email),
        expires_in=int(token_ttl().total_seconds()),
    )


@router.get("/profile", response_model=ProfileResponse)
async def get_profile(
    current_user: TokenClaims = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db)
):
    """Account details of the token's owner. Never includes the password hash."""
    user = await identity.get_user(db, current_user.id)
    
    if not user:
        raise NotFoundError("User not found")
    
    return ProfileResponse(
        id=user.id,
        email=user.email,
        username=user.username,
        created_at=user.created_at,
    )
