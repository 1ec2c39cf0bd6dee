from fastapi import APIRouter, Depends, Path, Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from docshelf.core.constants import ID_PATH_PATTERN, TAG_NAME_MAX_LENGTH, TAG_NAME_MIN_LENGTH
from docshelf.database import get_db
from docshelf.models.user import User
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
from docshelf.services.tag_service import TagService
from docshelf.utils.auth import get_current_user
from docshelf.utils.validation import validate_hex_color, validate_length

router = APIRouter()


async def read_body(request: Request, schema: type[BaseModel]) -> BaseModel:
    """
    Parse a JSON request body into a schema.

    An empty body yields the schema's defaults, i.e. no fields provided.
    """
    raw = await request.body()
    if not raw.strip():
        return schema()
    try:
        return schema.model_validate_json(raw)
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False))


# The body is only read once the caller is authenticated
async def tag_create_body(
    request: Request, current_user: User = Depends(get_current_user)
) -> TagCreate:
    return await read_body(request, TagCreate)


async def tag_update_body(
    request: Request, current_user: User = Depends(get_current_user)
) -> TagUpdate:
    return await read_body(request, TagUpdate)


@router.get("/list", response_model=TagListResponse)
async def list_tags(
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> TagListResponse:
    """List all tags of the current user"""
    tags = await TagService(db).list_by_user(current_user.id)
    return TagListResponse(tags=[TagResponse.model_validate(tag) for tag in tags])


@router.get("/stats", response_model=TagStatsResponse)
async def tag_stats(
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> TagStatsResponse:
    """List all tags of the current user with their document counts"""
    rows = await TagService(db).get_stats(current_user.id)
    return TagStatsResponse(
        stats=[
            TagStatResponse(
                id=row.id, name=row.name, color=row.color, count=row.document_count
            )
            for row in rows
        ]
    )


@router.put("", response_model=TagIdResponse)
async def create_tag(
    data: TagCreate = Depends(tag_create_body),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> TagIdResponse:
    """Create a new tag"""
    name = validate_length(data.name, "name", TAG_NAME_MIN_LENGTH, TAG_NAME_MAX_LENGTH)
    color = validate_hex_color(data.color, "color", nullable=True)

    tag = await TagService(db).create_tag(current_user.id, name, color)
    return TagIdResponse(id=tag.id)


@router.post("/{tag_id}", response_model=TagIdResponse)
async def update_tag(
    data: TagUpdate = Depends(tag_update_body),
    tag_id: str = Path(pattern=ID_PATH_PATTERN),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> TagIdResponse:
    """Rename and/or recolor a tag"""
    name = validate_length(
        data.name, "name", TAG_NAME_MIN_LENGTH, TAG_NAME_MAX_LENGTH, nullable=True
    )
    color = validate_hex_color(data.color, "color", nullable=True)

    await TagService(db).update_tag(current_user.id, tag_id, name=name, color=color)
    return TagIdResponse(id=tag_id)


@router.delete("/{tag_id}", response_model=StatusResponse)
async def delete_tag(
    tag_id: str = Path(pattern=ID_PATH_PATTERN),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> StatusResponse:
    """Delete a tag"""
    await TagService(db).delete_tag(current_user.id, tag_id)
    return StatusResponse(status="ok")
