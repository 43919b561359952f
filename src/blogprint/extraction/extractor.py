"""Turn normalized blog HTML into an ordered stream of typed blocks.

The tree is visited in document order. A mapped element (heading, paragraph,
list item, quote, emphasis) is emitted whole and its subtree is not visited
again, so nested markup never re-emits the same words. Elements that wrap
block-level children are treated as containers and descended into instead.
A per-call seen-set keyed on normalized text drops exact repeats.
"""

from __future__ import annotations

import logging
import re

from blogprint.extraction.nodes import Element, Node, Text, block_segments, parse_html, text_content
from blogprint.extraction.normalization import normalize_whitespace
from blogprint.models import Block, BlockKind

logger = logging.getLogger(__name__)

NOISE_THRESHOLD = 10
CATCH_ALL_MIN_LENGTH = 20
LIST_BULLET = "• "
PLACEHOLDER_TEXT = "No content available"

_HEADING_LEVELS = {"h1": 1, "h2": 2, "h3": 3, "h4": 4, "h5": 5, "h6": 6}
_EMPHASIS_TAGS = frozenset({"strong", "b"})
_CONTEXT_KINDS = {"li": BlockKind.LIST_ITEM, "blockquote": BlockKind.QUOTE}
_PARAGRAPH_SPLIT_RE = re.compile(r" {2,}")


def _min_length(context: BlockKind | None) -> int:
    # Unclassified text needs the longer catch-all length; text inside a
    # list item, quote or paragraph only has to clear the noise threshold.
    return NOISE_THRESHOLD if context is not None else CATCH_ALL_MIN_LENGTH


class _ExtractionRun:
    """Mutable state for one extraction pass."""

    def __init__(self) -> None:
        self.blocks: list[Block] = []
        self._seen: set[str] = set()

    def emit(self, kind: BlockKind, raw_text: str, *, level: int | None = None, exempt: bool = False) -> bool:
        text = normalize_whitespace(raw_text)
        if not text:
            return False
        if not exempt and len(text) <= NOISE_THRESHOLD:
            return False
        if text in self._seen:
            return False
        self._seen.add(text)

        if kind is BlockKind.LIST_ITEM:
            text = f"{LIST_BULLET}{text}"
        self.blocks.append(Block(kind=kind, text=text, level=level))
        return True

    def visit(self, element: Element, context: BlockKind | None = None) -> None:
        tag = element.tag

        level = _HEADING_LEVELS.get(tag)
        if level is not None:
            self.emit(BlockKind.HEADING, text_content(element), level=level, exempt=True)
            return

        if tag in _CONTEXT_KINDS or tag == "p":
            kind = _CONTEXT_KINDS.get(tag, context or BlockKind.PARAGRAPH)
            if element.has_block_descendants():
                self.visit_children(element, kind)
            else:
                self.emit(kind, text_content(element))
            return

        if tag in _EMPHASIS_TAGS:
            self.emit(BlockKind.EMPHASIS, text_content(element))
            return

        if element.has_block_descendants():
            self.visit_children(element, context)
            return

        self.visit_leaf(element, context)

    def visit_leaf(self, element: Element, context: BlockKind | None) -> None:
        text = normalize_whitespace(text_content(element))
        if len(text) > _min_length(context):
            self.emit(context or BlockKind.PARAGRAPH, text)
            return
        for child in element.children:
            if isinstance(child, Element):
                self.visit(child, context)

    def visit_children(self, element: Element, context: BlockKind | None) -> None:
        run: list[Node] = []
        for child in element.children:
            if isinstance(child, Element) and child.is_block_level:
                self.flush_inline_run(run, context)
                run = []
                self.visit(child, context)
            else:
                run.append(child)
        self.flush_inline_run(run, context)

    def flush_inline_run(self, run: list[Node], context: BlockKind | None) -> None:
        """Handle loose inline content sitting between block-level siblings."""

        meaningful = [node for node in run if not (isinstance(node, Text) and not node.value.strip())]
        if not meaningful:
            return
        if len(meaningful) == 1 and isinstance(meaningful[0], Element):
            self.visit(meaningful[0], context)
            return

        text = normalize_whitespace("".join(text_content(node) for node in meaningful))
        if len(text) > _min_length(context):
            self.emit(context or BlockKind.PARAGRAPH, text)
            return
        for node in meaningful:
            if isinstance(node, Element):
                self.visit(node, context)

    def fallback(self, root: Element) -> None:
        segments = [normalize_whitespace(segment) for segment in block_segments(root)]
        joined = "  ".join(segment for segment in segments if segment)
        for part in _PARAGRAPH_SPLIT_RE.split(joined):
            self.emit(BlockKind.PARAGRAPH, part, exempt=True)


class BlockExtractor:
    """Extract typed blocks from normalized HTML."""

    def extract(self, normalized_html: str) -> list[Block]:
        run = _ExtractionRun()
        root = parse_html(normalized_html)
        run.visit_children(root, None)

        if not run.blocks:
            run.fallback(root)
            if run.blocks:
                logger.debug("No structured blocks found; used plain-text fallback (%d blocks)", len(run.blocks))

        if not run.blocks:
            logger.warning("Content is empty or unreadable; substituting placeholder block")
            return [Block(kind=BlockKind.PARAGRAPH, text=PLACEHOLDER_TEXT)]

        logger.debug("Extracted %d blocks", len(run.blocks))
        return run.blocks


def extract_blocks(normalized_html: str) -> list[Block]:
    """Convenience wrapper around :class:`BlockExtractor`."""

    return BlockExtractor().extract(normalized_html)
