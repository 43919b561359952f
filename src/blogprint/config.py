"""Page geometry and branding settings for document generation.

All lengths are millimetres. Font sizes are points.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Mapping


PAGE_FORMATS: dict[str, tuple[float, float]] = {
    "a4": (210.0, 297.0),
    "letter": (215.9, 279.4),
}

DEFAULT_PAGE_FORMAT = "a4"
DEFAULT_MARGIN = 20.0
DEFAULT_HEADER_BAND_HEIGHT = 30.0
DEFAULT_HEADER_GAP = 15.0
DEFAULT_HEADER_BASELINE = 20.0
DEFAULT_FOOTER_RULE_OFFSET = 15.0
DEFAULT_FOOTER_TEXT_OFFSET = 8.0
DEFAULT_LINE_HEIGHT_FACTOR = 0.4
DEFAULT_BRAND_NAME = "QuestMeraki"
DEFAULT_HEADER_LABEL = "Premium Blog Content"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_flag(*, name: str, raw_value: str) -> bool:
    value = raw_value.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be one of: {', '.join(sorted(_TRUE_VALUES | _FALSE_VALUES))}")


@dataclass(frozen=True, slots=True)
class LayoutSettings:
    """Validated page geometry, band placement and brand strings."""

    page_width: float = PAGE_FORMATS[DEFAULT_PAGE_FORMAT][0]
    page_height: float = PAGE_FORMATS[DEFAULT_PAGE_FORMAT][1]
    margin: float = DEFAULT_MARGIN
    header_band: bool = True
    header_band_height: float = DEFAULT_HEADER_BAND_HEIGHT
    header_gap: float = DEFAULT_HEADER_GAP
    header_baseline: float = DEFAULT_HEADER_BASELINE
    footer_rule_offset: float = DEFAULT_FOOTER_RULE_OFFSET
    footer_text_offset: float = DEFAULT_FOOTER_TEXT_OFFSET
    line_height_factor: float = DEFAULT_LINE_HEIGHT_FACTOR
    brand_name: str = DEFAULT_BRAND_NAME
    header_label: str = DEFAULT_HEADER_LABEL

    def __post_init__(self) -> None:
        if self.page_width <= 0 or self.page_height <= 0:
            raise ValueError("page dimensions must be positive")
        if self.margin < 0:
            raise ValueError("margin cannot be negative")
        if self.content_width <= 0:
            raise ValueError("margins leave no horizontal room for content")
        if self.content_top >= self.content_bottom:
            raise ValueError("margins and header band leave no vertical room for content")
        if self.line_height_factor <= 0:
            raise ValueError("line_height_factor must be positive")

    @property
    def content_width(self) -> float:
        return self.page_width - 2 * self.margin

    @property
    def content_top(self) -> float:
        """First placeable offset on a content page."""

        if self.header_band:
            return max(self.margin, self.header_band_height + self.header_gap)
        return self.margin

    @property
    def content_bottom(self) -> float:
        return self.page_height - self.margin

    @property
    def usable_height(self) -> float:
        return self.content_bottom - self.content_top

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "LayoutSettings":
        source: Mapping[str, str] = os.environ if environ is None else environ

        page_format = source.get("BLOGPRINT_PAGE_FORMAT", DEFAULT_PAGE_FORMAT).strip().lower()
        if page_format not in PAGE_FORMATS:
            raise ValueError(f"BLOGPRINT_PAGE_FORMAT must be one of: {', '.join(sorted(PAGE_FORMATS))}")

        brand_name = source.get("BLOGPRINT_BRAND_NAME", DEFAULT_BRAND_NAME).strip()
        if not brand_name:
            raise ValueError("BLOGPRINT_BRAND_NAME cannot be empty")

        header_label = source.get("BLOGPRINT_HEADER_LABEL", DEFAULT_HEADER_LABEL).strip()

        header_band_raw = source.get("BLOGPRINT_HEADER_BAND", "true")
        header_band = _parse_flag(name="BLOGPRINT_HEADER_BAND", raw_value=header_band_raw)

        width, height = PAGE_FORMATS[page_format]
        return cls(
            page_width=width,
            page_height=height,
            header_band=header_band,
            brand_name=brand_name,
            header_label=header_label,
        )
