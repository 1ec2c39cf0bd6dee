import logging
from collections.abc import Sequence

from sqlalchemy import Row, and_, delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from docshelf.core.exceptions import TagAlreadyExistsException, TagNotFoundException
from docshelf.models.document import Document
from docshelf.models.document_tag import DocumentTag
from docshelf.models.tag import Tag

logger = logging.getLogger(__name__)


class TagService:
    """
    Storage access for tags.

    Every operation is scoped to an owner passed in explicitly; a tag owned
    by someone else behaves exactly like a tag that does not exist.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_by_user(self, user_id: str) -> Sequence[Tag]:
        """All tags of a user, ordered by name"""
        result = await self.db.execute(
            select(Tag).where(Tag.user_id == user_id).order_by(Tag.name)
        )
        return result.scalars().all()

    async def get_by_user_and_name(self, user_id: str, name: str) -> Tag | None:
        result = await self.db.execute(
            select(Tag).where(Tag.user_id == user_id, Tag.name == name)
        )
        return result.scalar_one_or_none()

    async def get_by_user_and_id(self, user_id: str, tag_id: str) -> Tag | None:
        result = await self.db.execute(
            select(Tag).where(Tag.id == tag_id, Tag.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def get_stats(self, user_id: str) -> Sequence[Row]:
        """
        Tags of a user with the number of documents using each one.

        Rows carry id, name, color and document_count. Only the owner's
        documents that are not soft-deleted are counted; unused tags are
        reported with a count of 0.
        """
        document_count = func.count(Document.id).label("document_count")
        result = await self.db.execute(
            select(Tag.id, Tag.name, Tag.color, document_count)
            .outerjoin(DocumentTag, DocumentTag.tag_id == Tag.id)
            .outerjoin(
                Document,
                and_(
                    Document.id == DocumentTag.document_id,
                    Document.user_id == user_id,
                    Document.deleted_at.is_(None),
                ),
            )
            .where(Tag.user_id == user_id)
            .group_by(Tag.id, Tag.name, Tag.color)
            .order_by(Tag.name)
        )
        return result.all()

    async def create_tag(self, user_id: str, name: str, color: str | None = None) -> Tag:
        """Create a tag, rejecting a name the user already has"""
        # Early exit; the unique constraint on (user_id, name) is the real guarantee
        if await self.get_by_user_and_name(user_id, name):
            logger.info(f"Tag name {name!r} already used by user {user_id}")
            raise TagAlreadyExistsException(name)

        tag = Tag(user_id=user_id, name=name, color=color or None)
        self.db.add(tag)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            logger.warning(f"Concurrent creation of tag {name!r} for user {user_id}")
            raise TagAlreadyExistsException(name)
        await self.db.refresh(tag)

        logger.info(f"Created tag {tag.id} for user {user_id}")
        return tag

    async def update_tag(
        self,
        user_id: str,
        tag_id: str,
        name: str | None = None,
        color: str | None = None,
    ) -> Tag:
        """
        Rename and/or recolor a tag.

        Empty or missing values leave the field unchanged. Renaming onto a
        name held by another of the user's tags is refused by the storage
        constraint and reported as AlreadyExistingTag.
        """
        tag = await self.get_by_user_and_id(user_id, tag_id)
        if not tag:
            raise TagNotFoundException(tag_id)

        if name:
            tag.name = name
        if color:
            tag.color = color

        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            logger.info(f"Rename of tag {tag_id} to {name!r} conflicts for user {user_id}")
            raise TagAlreadyExistsException(name)
        await self.db.refresh(tag)

        logger.info(f"Updated tag {tag_id} for user {user_id}")
        return tag

    async def delete_tag(self, user_id: str, tag_id: str) -> None:
        """Delete a tag and detach it from every document"""
        tag = await self.get_by_user_and_id(user_id, tag_id)
        if not tag:
            raise TagNotFoundException(tag_id)

        await self.db.execute(delete(DocumentTag).where(DocumentTag.tag_id == tag.id))
        await self.db.delete(tag)
        await self.db.commit()

        logger.info(f"Deleted tag {tag_id} for user {user_id}")
