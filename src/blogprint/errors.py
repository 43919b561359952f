"""Error taxonomy for document generation."""

from __future__ import annotations

GENERIC_FAILURE_MESSAGE = "Failed to generate document. Please try again."


class BlogprintError(Exception):
    """Base class for all blogprint errors."""


class RecordError(BlogprintError):
    """Blog payload could not be turned into a record."""


class MeasurementError(BlogprintError):
    """Text width could not be computed for a font/size combination."""


class AssemblyError(BlogprintError):
    """The PDF writer failed while serializing a document."""


class DocumentGenerationError(BlogprintError):
    """Raised at the generation boundary; carries only the generic message."""

    def __init__(self, message: str = GENERIC_FAILURE_MESSAGE) -> None:
        super().__init__(message)
