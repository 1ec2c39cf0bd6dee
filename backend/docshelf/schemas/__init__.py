from docshelf.schemas.tag import (
    StatusResponse,
    TagCreate,
    TagIdResponse,
    TagListResponse,
    TagResponse,
    TagStatResponse,
    TagStatsResponse,
    TagUpdate,
)
from docshelf.schemas.user import Token, UserCreate, UserLogin, UserResponse

__all__ = [
    "UserCreate",
    "UserResponse",
    "UserLogin",
    "Token",
    "TagCreate",
    "TagUpdate",
    "TagResponse",
    "TagListResponse",
    "TagStatResponse",
    "TagStatsResponse",
    "TagIdResponse",
    "StatusResponse",
]
