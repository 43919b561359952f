"""Greedy word wrapping against the Helvetica family shipped with PyMuPDF.

Widths come from the same ``pymupdf.Font`` objects the assembler embeds, so
what is measured is exactly what gets drawn, typographic punctuation included.
"""

from __future__ import annotations

from functools import lru_cache

import pymupdf

from blogprint.errors import MeasurementError
from blogprint.models import Line

# Layout unit is the millimetre; font metrics come back in points.
MM_PER_POINT = 25.4 / 72
DEFAULT_FONT = "helv"

# Base-14 names: Helvetica, Helvetica-Bold, Helvetica-Oblique, Helvetica-BoldOblique.
FONT_NAMES = frozenset({"helv", "hebo", "heit", "hebi"})


@lru_cache(maxsize=None)
def load_font(name: str) -> pymupdf.Font:
    if name not in FONT_NAMES:
        raise ValueError(f"Unsupported font {name!r}")
    return pymupdf.Font(name)


@lru_cache(maxsize=16384)
def _text_length_points(text: str, font: str, font_size: float) -> float:
    return load_font(font).text_length(text, fontsize=font_size)


class TextMeasurer:
    """Measure and wrap text; identical inputs always give identical lines."""

    def text_width(self, text: str, font_size: float, *, font: str = DEFAULT_FONT) -> float:
        if font_size <= 0:
            raise MeasurementError(f"Cannot measure text at non-positive font size {font_size}")
        try:
            points = _text_length_points(text, font, float(font_size))
        except Exception as exc:
            raise MeasurementError(f"Cannot measure text with font {font!r} at {font_size}pt: {exc}") from exc
        return points * MM_PER_POINT

    def wrap(
        self,
        text: str,
        font_size: float,
        available_width: float,
        *,
        font: str = DEFAULT_FONT,
    ) -> list[Line]:
        """Pack words into lines no wider than ``available_width``.

        Words are never broken. A word wider than the column is emitted on its
        own line and overflows.
        """

        words = text.split()
        if not words:
            return []

        space = self.text_width(" ", font_size, font=font)
        lines: list[Line] = []
        current = words[0]
        current_width = self.text_width(current, font_size, font=font)

        for word in words[1:]:
            word_width = self.text_width(word, font_size, font=font)
            candidate_width = current_width + space + word_width
            if candidate_width <= available_width:
                current = f"{current} {word}"
                current_width = candidate_width
                continue

            lines.append(Line(text=current, width=current_width))
            current = word
            current_width = word_width

        lines.append(Line(text=current, width=current_width))
        return lines
