"""
Identity store: registration and credential checks.
"""
import logging
from typing import Optional
from uuid import UUID

from passlib.context import CryptContext
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from jobtracker.config import settings
from jobtracker.errors import ConflictError, UnauthenticatedError
from jobtracker.models.user import User

logger = logging.getLogger(__name__)

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds,
)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, password_hash: str) -> bool:
    return pwd_context.verify(plain_password, password_hash)


async def get_user_by_email(db: AsyncSession, email: str) -> Optional[User]:
    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def get_user(db: AsyncSession, user_id: UUID) -> Optional[User]:
    result = await db.execute(select(User).where(User.id == user_id))
    return result.scalar_one_or_none()


async def register_user(
    db: AsyncSession,
    email: str,
    password: str,
    username: Optional[str] = None
) -> User:
    """
    Create a user with a hashed password.
    
    Raises:
        ConflictError: email already registered
    """
    if await get_user_by_email(db, email):
        logger.info(f"Registration rejected, email already registered: {email}")
        raise ConflictError("User already exists")
    
    user = User(email=email, username=username, password_hash=hash_password(password))
    db.add(user)
    try:
        await db.commit()
    except IntegrityError:
        # Lost a race with a concurrent registration of the same email
        await db.rollback()
        raise ConflictError("User already exists")
    await db.refresh(user)
    
    logger.info(f"Registered user {user.id}: {user.email}")
    return user


async def authenticate_user(db: AsyncSession, email: str, password: str) -> User:
    """
    Check credentials.
    
    Unknown email and wrong password are logged separately but raise
    the same error to the caller.
    
    Raises:
        UnauthenticatedError: credentials do not match a user
    """
    user = await get_user_by_email(db, email)
    if not user:
        logger.warning(f"Login failed, user not found: {email}")
        raise UnauthenticatedError("Invalid email or password")
    
    if not verify_password(password, user.password_hash):
        logger.warning(f"Login failed, invalid password: {email}")
        raise UnauthenticatedError("Invalid email or password")
    
    logger.info(f"Successful login: {user.email}")
    return user
