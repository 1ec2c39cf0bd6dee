from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from docshelf.config import get_settings
from docshelf.core.constants import ACCESS_TOKEN_COOKIE
from docshelf.database import get_db
from docshelf.models.user import User
from docshelf.schemas.user import Token, UserCreate, UserLogin, UserResponse
from docshelf.services.user_service import UserService
from docshelf.utils.auth import create_access_token, get_current_user

router = APIRouter()


@router.post("/setup", response_model=UserResponse)
async def setup(
    data: UserCreate,
    db: AsyncSession = Depends(get_db),
) -> User:
    """Create the first account of a fresh installation"""
    return await UserService(db).create_first_user(data.email, data.password)


@router.post("/login", response_model=Token)
async def login(
    response: Response,
    data: UserLogin,
    db: AsyncSession = Depends(get_db),
) -> Token:
    """
    Exchange email and password for an access token.

    The token is returned in the body for bearer use and also set as an
    HTTP-only cookie for browser clients.
    """
    user = await UserService(db).authenticate(data.email, data.password)
    token = create_access_token(user.id)

    response.set_cookie(
        key=ACCESS_TOKEN_COOKIE,
        value=token,
        httponly=True,
        secure=True,
        samesite="strict",
        max_age=get_settings().jwt_expire_days * 24 * 60 * 60,
    )
    return Token(access_token=token)


@router.post("/logout", response_model=None)
async def logout(response: Response) -> dict[str, str]:
    response.delete_cookie(ACCESS_TOKEN_COOKIE)
    return {"status": "ok"}


@router.get("/me", response_model=UserResponse)
async def get_me(current_user: User = Depends(get_current_user)) -> User:
    """The authenticated principal"""
    return current_user
