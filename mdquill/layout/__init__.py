"""Page-level decorations drawn around the laid out text."""

from .page_numbering import PageNumberer, format_page_number

__all__ = ["PageNumberer", "format_page_number"]
