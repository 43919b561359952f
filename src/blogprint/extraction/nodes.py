"""Explicit element/text tree built from parsed HTML."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

from blogprint.extraction.normalization import HTML_PARSER

ROOT_TAG = "#root"

BLOCK_LEVEL_TAGS = frozenset(
    {
        ROOT_TAG,
        "address",
        "article",
        "aside",
        "blockquote",
        "body",
        "dd",
        "details",
        "div",
        "dl",
        "dt",
        "figcaption",
        "figure",
        "footer",
        "form",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "header",
        "hr",
        "html",
        "li",
        "main",
        "nav",
        "ol",
        "p",
        "pre",
        "section",
        "summary",
        "table",
        "tbody",
        "td",
        "tfoot",
        "th",
        "thead",
        "tr",
        "ul",
    }
)


@dataclass(slots=True)
class Text:
    value: str


@dataclass(slots=True)
class Element:
    tag: str
    children: list["Node"] = field(default_factory=list)

    @property
    def is_block_level(self) -> bool:
        return self.tag in BLOCK_LEVEL_TAGS

    def has_block_descendants(self) -> bool:
        for child in self.children:
            if isinstance(child, Element) and (child.is_block_level or child.has_block_descendants()):
                return True
        return False


Node = Union[Element, Text]


def _convert(tag: Tag) -> Element:
    element = Element(tag=tag.name.lower())
    for child in tag.children:
        if isinstance(child, Tag):
            element.children.append(_convert(child))
        elif isinstance(child, NavigableString) and not isinstance(child, PreformattedString):
            # Comments, doctypes and CDATA are PreformattedString subclasses.
            element.children.append(Text(str(child)))
    return element


def parse_html(html: str) -> Element:
    """Parse HTML into a detached tree rooted at a synthetic ``#root`` element."""

    root = Element(tag=ROOT_TAG)
    if not html:
        return root

    soup = BeautifulSoup(html, HTML_PARSER)
    for child in soup.children:
        if isinstance(child, Tag):
            root.children.append(_convert(child))
        elif isinstance(child, NavigableString) and not isinstance(child, PreformattedString):
            root.children.append(Text(str(child)))
    return root


def text_content(node: Node) -> str:
    """Concatenated descendant text; ``<br>`` counts as a space."""

    if isinstance(node, Text):
        return node.value
    if node.tag == "br":
        return " "
    return "".join(text_content(child) for child in node.children)


def block_segments(node: Node) -> list[str]:
    """Descendant text split at block-level element boundaries."""

    segments: list[str] = [""]

    def walk(current: Node) -> None:
        if isinstance(current, Text):
            segments[-1] += current.value
            return
        if current.tag == "br":
            segments[-1] += " "
            return
        boundary = current.is_block_level
        if boundary:
            segments.append("")
        for child in current.children:
            walk(child)
        if boundary:
            segments.append("")

    walk(node)
    return segments
