"""HTML normalization and block extraction interfaces."""

from .extractor import PLACEHOLDER_TEXT, BlockExtractor, extract_blocks
from .normalization import normalize_html, normalize_whitespace

__all__ = ["BlockExtractor", "PLACEHOLDER_TEXT", "extract_blocks", "normalize_html", "normalize_whitespace"]
