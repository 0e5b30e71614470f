"""
Token service: issues and verifies signed, time-limited bearer tokens.

Tokens carry only {id, email} plus iat/exp. The validity window is the
configured access_token_ttl_minutes, there is no refresh, and the signing
secret is read once from settings.
"""
import logging
from datetime import datetime, timedelta
from typing import Optional
from uuid import UUID

from jose import JWTError, ExpiredSignatureError, jwt
from pydantic import ValidationError

from jobtracker.config import settings
from jobtracker.errors import UnauthenticatedError
from jobtracker.schemas.auth import TokenClaims

logger = logging.getLogger(__name__)


def token_ttl() -> timedelta:
    return timedelta(minutes=settings.access_token_ttl_minutes)


def issue_token(user_id: UUID, email: str, expires_delta: Optional[timedelta] = None) -> str:
    """
    Create a signed token binding the caller to user_id.
    
    Args:
        user_id: Identifier of the authenticated user
        email: User email, echoed back by verify_token
        expires_delta: Override of the configured validity window (tests only)
    
    Returns:
        Encoded JWT
    """
    issued_at = datetime.utcnow()
    expires_at = issued_at + (expires_delta if expires_delta is not None else token_ttl())
    
    claims = {
        "id": str(user_id),
        "email": email,
        "iat": issued_at,
        "exp": expires_at,
    }
    return jwt.encode(claims, settings.secret_key, algorithm=settings.jwt_algorithm)


def verify_token(token: Optional[str]) -> TokenClaims:
    """
    Verify signature and expiry, and return the embedded identity.
    
    Raises:
        UnauthenticatedError: token absent, malformed, expired, forged,
            or missing the id/email claims
    """
    if not token:
        raise UnauthenticatedError("No token provided")
    
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
    except ExpiredSignatureError:
        logger.warning("Rejected expired token")
        raise UnauthenticatedError("Invalid token")
    except JWTError as e:
        logger.warning(f"Rejected token: {str(e)}")
        raise UnauthenticatedError("Invalid token")
    
    try:
        return TokenClaims(id=payload.get("id"), email=payload.get("email"))
    except ValidationError:
        logger.warning("Rejected token with missing or malformed identity claims")
        raise UnauthenticatedError("Invalid token")
