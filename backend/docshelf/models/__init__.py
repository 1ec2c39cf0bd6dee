from docshelf.models.document import Document
from docshelf.models.document_tag import DocumentTag
from docshelf.models.tag import Tag
from docshelf.models.user import User

__all__ = [
    "User",
    "Document",
    "Tag",
    "DocumentTag",
]
