"""Text measurement and pagination."""

from .measure import TextMeasurer
from .pagination import PaginationEngine

__all__ = ["PaginationEngine", "TextMeasurer"]
