"""Cover page and running bands around paginated content."""

from __future__ import annotations

from datetime import datetime
import logging

from blogprint.config import LayoutSettings
from blogprint.layout.measure import MM_PER_POINT, TextMeasurer
from blogprint.models import Band, CoverLine, CoverMeta, CoverPage, Document, Page
from blogprint.styles import (
    COVER_GROUP_STEP,
    COVER_MAX_SUBTITLE_LINES,
    COVER_MAX_TITLE_LINES,
    COVER_STYLES,
    COVER_SUBTITLE_GAP,
    COVER_SUBTITLE_STEP,
    COVER_TITLE_STEP,
)

logger = logging.getLogger(__name__)

_ELLIPSIS = "…"


def format_cover_date(value: datetime) -> str:
    """Render a date as ``March 5, 2024``."""

    return f"{value:%B} {value.day}, {value.year}"


def footer_label(index: int, total: int) -> str:
    return f"Page {index} of {total}"


class DocumentRenderer:
    """Attach the cover page, header bands and footer bands."""

    def __init__(self, settings: LayoutSettings, measurer: TextMeasurer | None = None) -> None:
        self._settings = settings
        self._measurer = measurer or TextMeasurer()

    def render(self, pages: list[Page], meta: CoverMeta) -> Document:
        if not pages:
            raise ValueError("Cannot render a document without content pages")

        cover = self.build_cover(meta)
        for page in pages:
            page.header = self._header_band()

        # Footers need the final page count, so they are written only after
        # every page exists.
        total = len(pages)
        for page in pages:
            page.footer = Band(
                left=self._settings.brand_name,
                right=footer_label(page.index, total),
                y=self._settings.page_height - self._settings.footer_text_offset,
            )

        logger.debug("Rendered cover and %d content pages", total)
        return Document(cover=cover, pages=pages, meta=meta)

    def build_cover(self, meta: CoverMeta) -> CoverPage:
        """Lay out the centered cover text.

        Title and subtitle are capped to a few lines, the last one ending in an
        ellipsis. The block starts at one third of the page height and moves up
        when its last line would fall below the bottom margin.
        """

        settings = self._settings
        width = settings.content_width
        title = self._capped("title", meta.title, width, COVER_MAX_TITLE_LINES)
        subtitle = self._capped("subtitle", meta.subtitle, width, COVER_MAX_SUBTITLE_LINES) if meta.subtitle else []

        subtitle_height = COVER_SUBTITLE_GAP + len(subtitle) * COVER_SUBTITLE_STEP if subtitle else 0.0
        groups = 3 if meta.category else 2
        extent = len(title) * COVER_TITLE_STEP + subtitle_height + groups * COVER_GROUP_STEP

        start = settings.page_height / 3
        if start + extent > settings.content_bottom:
            top = settings.margin + COVER_STYLES["title"].size * MM_PER_POINT
            start = max(top, settings.content_bottom - extent)

        cover = CoverPage()
        for index, text in enumerate(title):
            cover.lines.append(self._line("title", text, start + index * COVER_TITLE_STEP))
        cursor = start + len(title) * COVER_TITLE_STEP

        for index, text in enumerate(subtitle):
            cover.lines.append(self._line("subtitle", text, cursor + COVER_SUBTITLE_GAP + index * COVER_SUBTITLE_STEP))
        cursor += subtitle_height

        cover.lines.append(self._line("author", f"By {meta.author}", cursor + COVER_GROUP_STEP))
        cover.lines.append(self._line("date", format_cover_date(meta.date), cursor + 2 * COVER_GROUP_STEP))
        if meta.category:
            cover.lines.append(self._line("category", meta.category.upper(), cursor + 3 * COVER_GROUP_STEP))
        return cover

    def _header_band(self) -> Band | None:
        if not self._settings.header_band:
            return None
        return Band(
            left=self._settings.brand_name,
            right=self._settings.header_label,
            y=self._settings.header_baseline,
        )

    def _capped(self, role: str, text: str, width: float, limit: int) -> list[str]:
        style = COVER_STYLES[role]
        lines = [line.text for line in self._measurer.wrap(text, style.size, width, font=style.font)]
        if len(lines) <= limit:
            return lines

        logger.debug("Cover %s wraps to %d lines; keeping %d", role, len(lines), limit)
        kept = lines[:limit]
        words = kept[-1].split()
        while len(words) > 1:
            candidate = " ".join(words) + _ELLIPSIS
            if self._measurer.text_width(candidate, style.size, font=style.font) <= width:
                break
            words.pop()
        kept[-1] = " ".join(words) + _ELLIPSIS
        return kept

    def _line(self, role: str, text: str, y: float) -> CoverLine:
        style = COVER_STYLES[role]
        width = self._measurer.text_width(text, style.size, font=style.font)
        return CoverLine(text=text, width=width, y=y, role=role)
