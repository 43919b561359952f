"""Value types flowing through the blog-to-PDF rendering pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Mapping

from blogprint.errors import RecordError


@dataclass(slots=True)
class BlogRecord:
    """Blog post as served by the blog API; read-only input to generation."""

    id: str
    title: str
    author_name: str
    category: str
    created_at: datetime
    html_content: str
    subtitle: str | None = None

    @classmethod
    def from_api_payload(cls, payload: Mapping[str, Any]) -> "BlogRecord":
        """Build a record from the blog API JSON document."""

        missing = [name for name in ("_id", "title", "category", "createdAt") if not payload.get(name)]
        author = payload.get("author")
        if isinstance(author, Mapping):
            author_name = str(author.get("name") or "").strip()
        else:
            author_name = str(author or "").strip()
        if not author_name:
            missing.append("author")
        if missing:
            raise RecordError(f"Blog payload is missing required fields: {', '.join(missing)}")

        raw_created = str(payload["createdAt"]).strip()
        try:
            created_at = datetime.fromisoformat(raw_created.replace("Z", "+00:00"))
        except ValueError as exc:
            raise RecordError(f"Blog payload has invalid createdAt: {raw_created!r}") from exc

        subtitle = str(payload.get("subtitle") or "").strip()
        return cls(
            id=str(payload["_id"]),
            title=str(payload["title"]).strip(),
            author_name=author_name,
            category=str(payload["category"]).strip(),
            created_at=created_at,
            html_content=str(payload.get("content") or ""),
            subtitle=subtitle or None,
        )


class BlockKind(Enum):
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    LIST_ITEM = "list_item"
    QUOTE = "quote"
    EMPHASIS = "emphasis"


@dataclass(slots=True, frozen=True)
class Block:
    """Semantically classified unit of extracted text."""

    kind: BlockKind
    text: str
    level: int | None = None


@dataclass(slots=True, frozen=True)
class Line:
    """One wrapped line of text and its measured width in layout units."""

    text: str
    width: float


@dataclass(slots=True)
class PlacedLine:
    """A line positioned on a content page; ``y`` is the top of the line box."""

    text: str
    width: float
    x: float
    y: float
    line_height: float
    kind: BlockKind
    level: int | None = None


@dataclass(slots=True)
class Band:
    """Fixed-position header or footer strip."""

    left: str
    right: str
    y: float


@dataclass(slots=True)
class IntroLine:
    """Left-aligned title or metadata line opening the first content page."""

    text: str
    width: float
    y: float
    role: str


@dataclass(slots=True)
class Page:
    index: int
    lines: list[PlacedLine] = field(default_factory=list)
    header: Band | None = None
    footer: Band | None = None
    overflow: bool = False
    intro: list[IntroLine] = field(default_factory=list)
    divider_y: float | None = None



@dataclass(slots=True)
class CoverLine:
    """Centered cover text; ``role`` selects the cover style."""

    text: str
    width: float
    y: float
    role: str


@dataclass(slots=True)
class CoverPage:
    lines: list[CoverLine] = field(default_factory=list)


@dataclass(slots=True)
class CoverMeta:
    title: str
    author: str
    category: str
    date: datetime
    subtitle: str | None = None


@dataclass(slots=True)
class Document:
    """Rendered cover plus content pages, ready for serialization."""

    cover: CoverPage
    pages: list[Page]
    meta: CoverMeta


@dataclass(slots=True)
class RenderedDocument:
    """Final artifact handed to the caller."""

    content: bytes
    filename: str
    page_count: int
