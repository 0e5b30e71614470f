"""Authentication-related Pydantic schemas."""
from datetime import datetime
from typing import Optional
from uuid import UUID
from pydantic import BaseModel, EmailStr, Field


class RegisterRequest(BaseModel):
    """Request to create an account."""
    email: EmailStr
    password: str = Field(min_length=1)
    username: Optional[str] = None


class RegisterResponse(BaseModel):
    """Response after successful registration."""
    message: str
    user_id: str


class LoginRequest(BaseModel):
    """Request to exchange credentials for a bearer token."""
    email: EmailStr
    password: str


class TokenResponse(BaseModel):
    """Response after successful login."""
    access_token: str
    token_type: str = "bearer"
    expires_in: int  # seconds


class TokenClaims(BaseModel):
    """Identity claims embedded in a verified token."""
    id: UUID
    email: str


class ProfileResponse(BaseModel):
    id: UUID
    email: str
    username: Optional[str] = None
    created_at: datetime
