"""Document rendering and PDF assembly."""

from .assembler import OutputAssembler, slugify_filename
from .renderer import DocumentRenderer

__all__ = ["DocumentRenderer", "OutputAssembler", "slugify_filename"]
