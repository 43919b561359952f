"""Atomic-block pagination of an extracted block stream.

Each block is measured with its kind's style, then either placed at the cursor
or, when it does not fit above the bottom margin, moved whole to a fresh page.
Blocks are never split across pages. A block taller than a whole page is put at
the top of a fresh page and allowed to run past the bottom margin; the page is
flagged ``overflow`` and a warning is logged.

When given the post metadata, the first page opens with the post title, an
author/category/date line and a divider rule. Those sit in ``Page.intro`` so
that ``Page.lines`` holds body text only.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging

from blogprint.config import LayoutSettings
from blogprint.layout.measure import TextMeasurer
from blogprint.models import Block, CoverMeta, IntroLine, Line, Page, PlacedLine
from blogprint.styles import DIVIDER_SPACING, INTRO_STYLES, block_style

logger = logging.getLogger(__name__)


def intro_metadata(meta: CoverMeta) -> str:
    """Render the metadata line, e.g. ``Author: Ada | Category: others | Date: 3/5/2024``."""

    date = f"{meta.date.month}/{meta.date.day}/{meta.date.year}"
    return f"Author: {meta.author} | Category: {meta.category} | Date: {date}"


@dataclass(slots=True)
class _MeasuredBlock:
    block: Block
    lines: list[Line]
    line_height: float
    height: float
    spacing_after: float
    indent: float


class _PaginationRun:
    """Cursor and page list for a single pagination call."""

    def __init__(self, settings: LayoutSettings) -> None:
        self._settings = settings
        self.pages: list[Page] = [Page(index=1)]
        self.cursor = settings.content_top

    @property
    def current(self) -> Page:
        return self.pages[-1]

    def fits(self, measured: _MeasuredBlock) -> bool:
        return self.cursor + measured.height <= self._settings.content_bottom

    def has_content(self) -> bool:
        return bool(self.current.lines or self.current.intro)

    def new_page(self) -> None:
        self.pages.append(Page(index=len(self.pages) + 1))
        self.cursor = self._settings.content_top

    def place(self, measured: _MeasuredBlock) -> None:
        x = self._settings.margin + measured.indent
        for offset, line in enumerate(measured.lines):
            self.current.lines.append(
                PlacedLine(
                    text=line.text,
                    width=line.width,
                    x=x,
                    y=self.cursor + offset * measured.line_height,
                    line_height=measured.line_height,
                    kind=measured.block.kind,
                    level=measured.block.level,
                )
            )
        self.cursor += measured.height + measured.spacing_after


class PaginationEngine:
    """Lay blocks out onto fixed-size pages."""

    def __init__(self, settings: LayoutSettings, measurer: TextMeasurer | None = None) -> None:
        self._settings = settings
        self._measurer = measurer or TextMeasurer()

    def measure(self, block: Block) -> _MeasuredBlock:
        style = block_style(block)
        width = self._settings.content_width - style.indent
        lines = self._measurer.wrap(block.text, style.size, width, font=style.font)
        line_height = style.size * self._settings.line_height_factor
        return _MeasuredBlock(
            block=block,
            lines=lines,
            line_height=line_height,
            height=len(lines) * line_height,
            spacing_after=style.spacing_after,
            indent=style.indent,
        )

    def paginate(self, blocks: list[Block], intro: CoverMeta | None = None) -> list[Page]:
        """Return content pages, always at least one."""

        run = _PaginationRun(self._settings)
        if intro is not None:
            self._place_intro(run, intro)

        for block in blocks:
            measured = self.measure(block)
            if not measured.lines:
                continue

            if not run.fits(measured) and run.has_content():
                run.new_page()

            if not run.fits(measured):
                # Only reachable on an empty page: the block is taller than the page.
                logger.warning(
                    "Block of %d lines (%.1fmm) exceeds usable page height %.1fmm; overflowing page %d",
                    len(measured.lines),
                    measured.height,
                    self._settings.usable_height,
                    run.current.index,
                )
                run.current.overflow = True

            run.place(measured)

        logger.debug("Paginated %d blocks onto %d pages", len(blocks), len(run.pages))
        return run.pages

    def _place_intro(self, run: _PaginationRun, meta: CoverMeta) -> None:
        page = run.current
        width = self._settings.content_width
        for role, text in (("title", meta.title), ("metadata", intro_metadata(meta))):
            style = INTRO_STYLES[role]
            line_height = style.size * self._settings.line_height_factor
            lines = self._measurer.wrap(text, style.size, width, font=style.font)
            for offset, line in enumerate(lines):
                page.intro.append(
                    IntroLine(text=line.text, width=line.width, y=run.cursor + offset * line_height, role=role)
                )
            run.cursor += len(lines) * line_height + style.spacing_after

        page.divider_y = run.cursor
        run.cursor += DIVIDER_SPACING
