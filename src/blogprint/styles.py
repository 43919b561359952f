"""Fixed typography for content blocks, cover lines and bands.

Fonts are PyMuPDF Base-14 names: ``helv`` Helvetica, ``hebo`` Helvetica-Bold,
``heit`` Helvetica-Oblique. They are embedded when drawn, so curly quotes,
dashes and ellipses render as written.
"""

from __future__ import annotations

from dataclasses import dataclass

from blogprint.models import Block, BlockKind


@dataclass(frozen=True, slots=True)
class TextStyle:
    font: str
    size: float
    color: tuple[int, int, int]
    spacing_after: float = 0.0
    indent: float = 0.0


HEADING_MAJOR = TextStyle(font="hebo", size=14, color=(50, 50, 150), spacing_after=8)
HEADING_MINOR = TextStyle(font="hebo", size=12, color=(100, 50, 150), spacing_after=6)
PARAGRAPH = TextStyle(font="helv", size=10, color=(60, 60, 60), spacing_after=6)
LIST_ITEM = TextStyle(font="helv", size=10, color=(60, 60, 60), spacing_after=4)
QUOTE = TextStyle(font="heit", size=10, color=(90, 90, 90), spacing_after=6, indent=6)
EMPHASIS = TextStyle(font="hebo", size=10, color=(40, 40, 40), spacing_after=4)

COVER_STYLES: dict[str, TextStyle] = {
    "title": TextStyle(font="hebo", size=24, color=(30, 30, 100)),
    "subtitle": TextStyle(font="helv", size=14, color=(60, 60, 110)),
    "author": TextStyle(font="helv", size=14, color=(80, 80, 80)),
    "category": TextStyle(font="hebo", size=10, color=(100, 50, 150)),
    "date": TextStyle(font="helv", size=14, color=(80, 80, 80)),
}

# Vertical step between wrapped cover title lines, and between cover groups.
COVER_TITLE_STEP = 10.0
COVER_GROUP_STEP = 15.0
COVER_SUBTITLE_STEP = 8.0
COVER_SUBTITLE_GAP = 5.0
COVER_MAX_TITLE_LINES = 6
COVER_MAX_SUBTITLE_LINES = 4

# Title and metadata lines above the body on the first content page.
INTRO_STYLES: dict[str, TextStyle] = {
    "title": TextStyle(font="hebo", size=18, color=(30, 30, 100), spacing_after=10),
    "metadata": TextStyle(font="helv", size=10, color=(100, 100, 100), spacing_after=15),
}
DIVIDER_RULE = (200, 200, 200)
DIVIDER_SPACING = 15.0

HEADER_FILL = (240, 240, 240)
HEADER_BRAND = TextStyle(font="hebo", size=16, color=(50, 50, 150))
HEADER_LABEL = TextStyle(font="helv", size=8, color=(100, 100, 100))
FOOTER_TEXT = TextStyle(font="helv", size=8, color=(100, 100, 100))
FOOTER_RULE = (220, 220, 220)
RULE_WIDTH = 0.5


def style_for(kind: BlockKind, level: int | None = None) -> TextStyle:
    """Return the style shared by every line of a block of this kind."""

    if kind is BlockKind.HEADING:
        return HEADING_MINOR if level is not None and level >= 5 else HEADING_MAJOR
    if kind is BlockKind.LIST_ITEM:
        return LIST_ITEM
    if kind is BlockKind.QUOTE:
        return QUOTE
    if kind is BlockKind.EMPHASIS:
        return EMPHASIS
    return PARAGRAPH


def block_style(block: Block) -> TextStyle:
    return style_for(block.kind, block.level)
