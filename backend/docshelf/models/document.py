from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from docshelf.database import Base
from docshelf.models.base import generate_id

if TYPE_CHECKING:
    from docshelf.models.document_tag import DocumentTag
    from docshelf.models.user import User


class Document(Base):
    __tablename__ = "documents"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_id)
    user_id: Mapped[str] = mapped_column(String(36), ForeignKey("users.id"), index=True)
    title: Mapped[str] = mapped_column(String(100))
    description: Mapped[str | None] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime)  # Soft delete

    # Relationships
    user: Mapped[User] = relationship(back_populates="documents")
    tags: Mapped[list[DocumentTag]] = relationship(back_populates="document")
