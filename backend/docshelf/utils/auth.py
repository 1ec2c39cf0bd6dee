import logging
from datetime import datetime, timedelta

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from docshelf.config import get_settings
from docshelf.core.constants import ACCESS_TOKEN_COOKIE
from docshelf.core.exceptions import ForbiddenClientException
from docshelf.database import get_db
from docshelf.models.user import User

logger = logging.getLogger(__name__)

settings = get_settings()
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
security = HTTPBearer(auto_error=False)


def hash_password(password: str) -> str:
    """Hash a password using bcrypt"""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash"""
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(user_id: str) -> str:
    """Create a JWT access token"""
    expire = datetime.utcnow() + timedelta(days=settings.jwt_expire_days)
    to_encode = {
        "sub": user_id,
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> dict:
    """Decode and validate a JWT token"""
    try:
        return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError as e:
        logger.info(f"Rejected access token: {e}")
        raise ForbiddenClientException() from e


async def get_current_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: AsyncSession = Depends(get_db),
) -> User:
    """
    Resolve the authenticated principal for a request.

    Applied as a dependency on every protected route, so it runs before
    body validation or any storage access. Every failure is reported as
    a ForbiddenError.
    """
    # Try to get token from Authorization header first, then the cookie
    if credentials:
        token = credentials.credentials
    else:
        token = request.cookies.get(ACCESS_TOKEN_COOKIE)

    if not token:
        logger.info("Request has no access token")
        raise ForbiddenClientException()

    payload = decode_token(token)
    user_id = payload.get("sub")

    if not user_id:
        logger.info("Access token has no subject")
        raise ForbiddenClientException()

    result = await db.execute(select(User).where(User.id == user_id))
    user = result.scalar_one_or_none()

    if not user:
        logger.info(f"Access token refers to unknown user {user_id}")
        raise ForbiddenClientException()

    return user
