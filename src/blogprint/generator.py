"""Generation entrypoint: blog record in, PDF bytes and filename out."""

from __future__ import annotations

import logging

from blogprint.config import LayoutSettings
from blogprint.errors import DocumentGenerationError
from blogprint.extraction.extractor import BlockExtractor
from blogprint.extraction.normalization import normalize_html
from blogprint.layout.measure import TextMeasurer
from blogprint.layout.pagination import PaginationEngine
from blogprint.models import BlogRecord, CoverMeta, Document, RenderedDocument
from blogprint.rendering.assembler import OutputAssembler
from blogprint.rendering.renderer import DocumentRenderer

logger = logging.getLogger(__name__)


def cover_meta_for(record: BlogRecord) -> CoverMeta:
    return CoverMeta(
        title=record.title,
        author=record.author_name,
        category=record.category,
        date=record.created_at,
        subtitle=record.subtitle,
    )


class DocumentGenerator:
    """Run the full pipeline; every call works on freshly allocated state."""

    def __init__(self, settings: LayoutSettings | None = None) -> None:
        self._settings = settings or LayoutSettings()
        self._measurer = TextMeasurer()

    def build_document(self, record: BlogRecord) -> Document:
        """Run every stage except serialization."""

        normalized = normalize_html(record.html_content)
        blocks = BlockExtractor().extract(normalized)
        meta = cover_meta_for(record)
        pages = PaginationEngine(self._settings, self._measurer).paginate(blocks, intro=meta)
        return DocumentRenderer(self._settings, self._measurer).render(pages, meta)

    def generate(self, record: BlogRecord) -> RenderedDocument:
        """Return the PDF for ``record`` or raise the generic generation error."""

        try:
            document = self.build_document(record)
            rendered = OutputAssembler(self._settings, self._measurer).assemble(document)
        except Exception as exc:
            logger.exception("Document generation failed for blog %s", record.id)
            raise DocumentGenerationError() from exc

        logger.info(
            "Generated %s for blog %s (%d pages, %d bytes)",
            rendered.filename,
            record.id,
            rendered.page_count,
            len(rendered.content),
        )
        return rendered


def generate_document(record: BlogRecord, settings: LayoutSettings | None = None) -> RenderedDocument:
    """Convenience wrapper around :class:`DocumentGenerator`."""

    return DocumentGenerator(settings).generate(record)
