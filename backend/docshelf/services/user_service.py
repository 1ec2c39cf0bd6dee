import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from docshelf.core.exceptions import InvalidCredentialsException, SetupCompletedException
from docshelf.models.user import User
from docshelf.utils.auth import hash_password, verify_password

logger = logging.getLogger(__name__)


class UserService:
    """Account bootstrap and credential checks."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def has_users(self) -> bool:
        result = await self.db.execute(select(func.count(User.id)))
        return result.scalar() > 0

    async def create_first_user(self, email: str, password: str) -> User:
        """Create the owner account; refused once any account exists"""
        if await self.has_users():
            logger.info(f"Setup attempted for {email} but an account already exists")
            raise SetupCompletedException()

        user = User(email=email, password_hash=hash_password(password))
        self.db.add(user)
        await self.db.commit()
        await self.db.refresh(user)

        logger.info(f"Created first user {user.id}")
        return user

    async def authenticate(self, email: str, password: str) -> User:
        result = await self.db.execute(select(User).where(User.email == email))
        user = result.scalar_one_or_none()

        if not user or not verify_password(password, user.password_hash):
            # Same error for unknown email and wrong password
            logger.info(f"Failed login for {email}")
            raise InvalidCredentialsException()

        logger.info(f"User {user.id} logged in")
        return user
