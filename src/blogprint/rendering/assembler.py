"""Serialize a rendered document to PDF bytes with PyMuPDF."""

from __future__ import annotations

import logging
import re

import pymupdf

from blogprint.config import LayoutSettings
from blogprint.errors import AssemblyError
from blogprint.layout.measure import MM_PER_POINT, TextMeasurer, load_font
from blogprint.models import Band, CoverPage, Document, Page, RenderedDocument
from blogprint.styles import (
    COVER_STYLES,
    DIVIDER_RULE,
    FOOTER_RULE,
    FOOTER_TEXT,
    HEADER_BRAND,
    HEADER_FILL,
    HEADER_LABEL,
    INTRO_STYLES,
    RULE_WIDTH,
    TextStyle,
    style_for,
)

logger = logging.getLogger(__name__)

POINTS_PER_MM = 1 / MM_PER_POINT
DEFAULT_FILENAME_STEM = "blog"
OUTPUT_EXTENSION = "pdf"

# Baseline sits this far below the top of a line box, as a fraction of the em.
_BASELINE_RATIO = 0.8
_SLUG_RE = re.compile(r"[^a-z0-9]+")
_UNDERSCORES_RE = re.compile(r"_+")


def slugify_filename(title: str | None, extension: str = OUTPUT_EXTENSION) -> str:
    """Derive a filesystem-safe ``<slug>.<ext>`` name from a title."""

    stem = _SLUG_RE.sub("_", (title or "").lower())
    stem = _UNDERSCORES_RE.sub("_", stem).strip("_")
    return f"{stem or DEFAULT_FILENAME_STEM}.{extension}"


def _rgb(color: tuple[int, int, int]) -> tuple[float, float, float]:
    return tuple(channel / 255 for channel in color)


def _pt(value: float) -> float:
    return value * POINTS_PER_MM


class OutputAssembler:
    """Write cover and content pages into a single reproducible PDF."""

    def __init__(self, settings: LayoutSettings, measurer: TextMeasurer | None = None) -> None:
        self._settings = settings
        self._measurer = measurer or TextMeasurer()

    def assemble(self, document: Document) -> RenderedDocument:
        try:
            content = self._write(document)
        except Exception as exc:
            raise AssemblyError(f"PDF writer failed: {exc}") from exc

        if not content:
            raise AssemblyError("PDF writer produced no output")

        filename = slugify_filename(document.meta.title)
        logger.debug("Assembled %s (%d bytes)", filename, len(content))
        return RenderedDocument(content=content, filename=filename, page_count=len(document.pages) + 1)

    def _write(self, document: Document) -> bytes:
        pdf = pymupdf.open()
        try:
            self._draw_cover(pdf, document.cover)
            for page in document.pages:
                self._draw_page(pdf, page)

            meta = document.meta
            stamp = meta.date.strftime("D:%Y%m%d%H%M%S")
            pdf.set_metadata(
                {
                    "title": meta.title,
                    "author": meta.author,
                    "subject": meta.category,
                    "creator": self._settings.brand_name,
                    "producer": self._settings.brand_name,
                    "creationDate": stamp,
                    "modDate": stamp,
                }
            )
            return pdf.tobytes(garbage=3, deflate=True, no_new_id=True)
        finally:
            pdf.close()

    def _new_page(self, pdf: pymupdf.Document) -> pymupdf.Page:
        return pdf.new_page(width=_pt(self._settings.page_width), height=_pt(self._settings.page_height))

    def _text(self, page: pymupdf.Page, x: float, baseline: float, text: str, style: TextStyle) -> None:
        # TextWriter embeds the font, so characters outside Latin-1 keep their glyphs.
        writer = pymupdf.TextWriter(page.rect, color=_rgb(style.color))
        writer.append((_pt(x), _pt(baseline)), text, font=load_font(style.font), fontsize=style.size)
        writer.write_text(page)

    def _right_aligned(self, page: pymupdf.Page, baseline: float, text: str, style: TextStyle) -> None:
        width = self._measurer.text_width(text, style.size, font=style.font)
        x = self._settings.page_width - self._settings.margin - width
        self._text(page, x, baseline, text, style)

    def _draw_cover(self, pdf: pymupdf.Document, cover: CoverPage) -> None:
        page = self._new_page(pdf)
        for line in cover.lines:
            x = (self._settings.page_width - line.width) / 2
            self._text(page, x, line.y, line.text, COVER_STYLES[line.role])

    def _draw_page(self, pdf: pymupdf.Document, content: Page) -> None:
        page = self._new_page(pdf)

        if content.header is not None:
            self._draw_header(page, content.header)

        for intro in content.intro:
            style = INTRO_STYLES[intro.role]
            self._text(page, self._settings.margin, self._baseline(intro.y, style), intro.text, style)
        if content.divider_y is not None:
            self._rule(page, content.divider_y, DIVIDER_RULE)

        for line in content.lines:
            style = style_for(line.kind, line.level)
            self._text(page, line.x, self._baseline(line.y, style), line.text, style)

        if content.footer is not None:
            self._draw_footer(page, content.footer)

    def _draw_header(self, page: pymupdf.Page, band: Band) -> None:
        settings = self._settings
        band_rect = pymupdf.Rect(0, 0, _pt(settings.page_width), _pt(settings.header_band_height))
        page.draw_rect(band_rect, color=None, fill=_rgb(HEADER_FILL))
        self._text(page, settings.margin, band.y, band.left, HEADER_BRAND)
        if band.right:
            self._right_aligned(page, band.y, band.right, HEADER_LABEL)

    def _draw_footer(self, page: pymupdf.Page, band: Band) -> None:
        settings = self._settings
        self._rule(page, settings.page_height - settings.footer_rule_offset, FOOTER_RULE)
        self._text(page, settings.margin, band.y, band.left, FOOTER_TEXT)
        self._right_aligned(page, band.y, band.right, FOOTER_TEXT)

    def _rule(self, page: pymupdf.Page, y: float, color: tuple[int, int, int]) -> None:
        settings = self._settings
        page.draw_line(
            pymupdf.Point(_pt(settings.margin), _pt(y)),
            pymupdf.Point(_pt(settings.page_width - settings.margin), _pt(y)),
            color=_rgb(color),
            width=_pt(RULE_WIDTH),
        )

    @staticmethod
    def _baseline(top: float, style: TextStyle) -> float:
        return top + style.size * MM_PER_POINT * _BASELINE_RATIO
