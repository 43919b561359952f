"""Render blog posts into paginated, printable PDF documents."""

from .config import LayoutSettings
from .errors import DocumentGenerationError
from .generator import DocumentGenerator, generate_document
from .models import Block, BlockKind, BlogRecord, Document, RenderedDocument

__all__ = [
    "Block",
    "BlockKind",
    "BlogRecord",
    "Document",
    "DocumentGenerationError",
    "DocumentGenerator",
    "LayoutSettings",
    "RenderedDocument",
    "generate_document",
]
