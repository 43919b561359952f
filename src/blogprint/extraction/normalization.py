"""HTML and whitespace normalization applied before block extraction."""

from __future__ import annotations

import re

from bs4 import BeautifulSoup, Comment

_WHITESPACE_RE = re.compile(r"\s+")
_CONTROL_CHARS_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")

# Elements dropped with their whole subtree. Images are never embedded in the output.
DISALLOWED_TAGS = (
    "script",
    "style",
    "img",
    "noscript",
    "template",
    "iframe",
    "object",
    "embed",
    "video",
    "audio",
    "svg",
    "canvas",
    "picture",
    "source",
    "head",
)

HTML_PARSER = "lxml"


def normalize_whitespace(text: str) -> str:
    """Collapse repeated whitespace and trim boundaries."""

    return _WHITESPACE_RE.sub(" ", text).strip()


def normalize_html(raw_html: str | None) -> str:
    """Strip disallowed elements and whitespace noise from raw blog HTML.

    Returns an empty string when nothing textual survives, which sends the
    extractor down its placeholder path.
    """

    if not raw_html:
        return ""

    cleaned = _CONTROL_CHARS_RE.sub("", str(raw_html))
    if not cleaned.strip():
        return ""

    soup = BeautifulSoup(cleaned, HTML_PARSER)
    for element in soup.find_all(DISALLOWED_TAGS):
        # Nested matches are already gone with their ancestor.
        if not element.decomposed:
            element.decompose()
    for comment in soup.find_all(string=lambda node: isinstance(node, Comment)):
        comment.extract()

    if not normalize_whitespace(soup.get_text(" ")):
        return ""

    return normalize_whitespace(str(soup))
