"""
Text layout engine: measurement, line breaking, alignment and pagination.
"""

from .layout_engine import MarkdownLayoutEngine, layout_paragraph
from .layout_primitives import Alignment, CursorState, LayoutOptions, Line, PageConfig
from .line_breaker import LineBreaker, wrap_segments
from .pagination_manager import PaginationController, PaginationState
from .render_context import RenderContext
from .text_alignment import LineRenderer, TextAlignmentEngine
from .text_metrics import TextMetricsEngine

__all__ = [
    "MarkdownLayoutEngine",
    "layout_paragraph",
    "Alignment",
    "CursorState",
    "LayoutOptions",
    "Line",
    "PageConfig",
    "LineBreaker",
    "wrap_segments",
    "PaginationController",
    "PaginationState",
    "RenderContext",
    "LineRenderer",
    "TextAlignmentEngine",
    "TextMetricsEngine",
]
