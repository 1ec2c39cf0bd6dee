from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from docshelf.core.constants import TAG_NAME_MAX_LENGTH
from docshelf.database import Base
from docshelf.models.base import generate_id

if TYPE_CHECKING:
    from docshelf.models.document_tag import DocumentTag
    from docshelf.models.user import User


class Tag(Base):
    __tablename__ = "tags"
    # Owner-scoped name uniqueness is enforced here, not only by the service check
    __table_args__ = (UniqueConstraint("user_id", "name", name="uq_tags_user_id_name"),)

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_id)
    user_id: Mapped[str] = mapped_column(String(36), ForeignKey("users.id"), index=True)
    name: Mapped[str] = mapped_column(String(TAG_NAME_MAX_LENGTH))
    color: Mapped[str | None] = mapped_column(String(7))  # Hex color
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    # Relationships
    user: Mapped[User] = relationship(back_populates="tags")
    documents: Mapped[list[DocumentTag]] = relationship(
        back_populates="tag", passive_deletes=True
    )
