"""
Pagination controller.

Tracks the vertical cursor across a whole document build, starts new pages
when the next line would overflow the bottom margin, and drives the line
wrapper and line renderer for every block in source order.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

from ..exceptions import LayoutError
from ..models.block import Block, BlockKind
from ..models.text_style import PLAIN, TextSegment, TextStyle
from ..parser.inline_tokenizer import InlineTokenizer, apply_overlay
from .layout_primitives import CursorState, LayoutOptions, Line
from .line_breaker import LineBreaker
from .render_context import RenderContext
from .text_alignment import LineRenderer
from .text_metrics import TextMetricsEngine

logger = logging.getLogger(__name__)

# Distance between the list marker and the list text, in em.
MARKER_GUTTER_EM = 1.0
BULLET = "•"

PageBreakCallback = Callable[[int], None]


class PaginationState(str, Enum):
    """States of one document build."""

    WRITING_PAGE = "writing_page"
    PAGE_BREAK_PENDING = "page_break_pending"
    DONE = "done"


class PaginationController:
    """
    Manages the write cursor and page breaks of one document build.

    ``on_page_break`` is called with the number of the page being closed,
    right before the surface starts the next page, so callers can finish
    their per-page bookkeeping (page numbers, footers) on the right page.
    """

    def __init__(
        self,
        context: RenderContext,
        cursor: CursorState,
        on_page_break: Optional[PageBreakCallback] = None,
        page_number: int = 1,
    ) -> None:
        self.context = context
        self.cursor = cursor
        self.page_number = page_number
        self.page_breaks = 0
        self.state = PaginationState.WRITING_PAGE
        self.tokenizer = InlineTokenizer()
        self._on_page_break = on_page_break
        self._ordered_counter: Optional[int] = None
        self._metrics: Dict[Tuple[str, float, float], TextMetricsEngine] = {}

        logger.debug("Pagination controller initialized at y=%.2f (page height %.2f)",
                     cursor.y, cursor.page_height)

    # ------------------------------------------------------------------
    # Cursor and page management
    # ------------------------------------------------------------------
    def ensure_space(self, height: float) -> bool:
        """
        Start a new page if ``height`` does not fit below the cursor.

        A page that holds no content yet is never broken, so content taller
        than a whole page is drawn (and overflows) instead of looping.

        Returns:
            True if a page break happened
        """
        self._check_open()
        if self.cursor.fits(height):
            return False
        if self.cursor.at_page_top:
            logger.warning("Content of height %.2f does not fit on an empty page; drawing anyway", height)
            return False
        self.break_page()
        return True

    def break_page(self) -> None:
        """Close the current page and continue at the top margin of a new one."""
        self._check_open()
        self.state = PaginationState.PAGE_BREAK_PENDING
        finished = self.page_number
        if self._on_page_break is not None:
            self._on_page_break(finished)
        self.context.start_new_page()
        self.page_number += 1
        self.page_breaks += 1
        self.cursor.page_height = self.context.current_page_height()
        self.cursor.reset()
        self.state = PaginationState.WRITING_PAGE
        logger.debug("Page %d finished; continuing on page %d", finished, self.page_number)

    def advance(self, height: float) -> float:
        self._check_open()
        return self.cursor.advance(height)

    def move_to(self, y: float) -> None:
        """Place the cursor at ``y`` on the current page."""
        self._check_open()
        self.cursor.y = y

    def finish(self) -> None:
        self.state = PaginationState.DONE

    def _check_open(self) -> None:
        if self.state is PaginationState.DONE:
            raise LayoutError("Document build already finished", f"page {self.page_number}")

    # ------------------------------------------------------------------
    # Block layout
    # ------------------------------------------------------------------
    def metrics_for(self, options: LayoutOptions) -> TextMetricsEngine:
        key = (options.font_family, options.font_size, options.line_spacing)
        metrics = self._metrics.get(key)
        if metrics is None:
            metrics = TextMetricsEngine(self.context, options.font_size, options.line_spacing)
            self._metrics[key] = metrics
        return metrics

    def layout_block(self, block: Block, x: float, options: LayoutOptions,
                     advance_last_line: bool = True) -> float:
        """
        Wrap, paginate and paint one block.

        Args:
            block: Classified source line
            x: Left edge of the text column
            options: Layout options
            advance_last_line: Whether to move the cursor below the block's last line

        Returns:
            Cursor position after the block
        """
        self._check_open()
        previous_family = self.context.set_font_family(options.font_family)
        try:
            return self._layout_block(block, x, options, advance_last_line)
        finally:
            if previous_family is not None and previous_family != options.font_family:
                self.context.set_font_family(previous_family)

    def _layout_block(self, block: Block, x: float, options: LayoutOptions,
                      advance_last_line: bool) -> float:
        metrics = self.metrics_for(options)

        if block.kind is BlockKind.BLANK:
            self.ensure_space(options.line_height)
            self.advance(options.line_height)
            return self.cursor.y

        if block.kind is not BlockKind.ORDERED_ITEM:
            self._ordered_counter = None

        if block.kind is BlockKind.HORIZONTAL_RULE:
            self._draw_rule(x, options)
            return self.cursor.y

        overlay = block.inline_style(options.indentation_em)
        segments = apply_overlay(self.tokenizer.tokenize(block.content), overlay)
        breaker = LineBreaker(metrics.measure, font_size=options.font_size)
        lines = breaker.wrap(segments, options.max_width, overlay.indentation)

        line_height = metrics.line_height_for(overlay)
        if not lines:
            logger.debug("Block %r produced no text; advancing one line", block.content[:30])
            self.ensure_space(line_height)
            if advance_last_line:
                self.advance(line_height)
            return self.cursor.y

        if block.kind is BlockKind.HEADING:
            self.ensure_space(line_height * len(lines))

        self._paint_lines(lines, x, options, metrics, overlay, block, advance_last_line)

        if block.kind is BlockKind.ORDERED_ITEM:
            self._ordered_counter = self._item_number(block) + 1

        return self.cursor.y

    def _paint_lines(
        self,
        lines: List[Line],
        x: float,
        options: LayoutOptions,
        metrics: TextMetricsEngine,
        overlay: TextStyle,
        block: Block,
        advance_last_line: bool,
    ) -> None:
        renderer = LineRenderer(metrics)
        line_height = metrics.line_height_for(overlay)
        ascent = metrics.font_size_for(overlay)
        last_index = len(lines) - 1

        for index, line in enumerate(lines):
            self.ensure_space(line_height)
            baseline = self.cursor.y + ascent
            if index == 0 and block.is_list_item:
                self._draw_marker(block, renderer, x, baseline, overlay, options)
            renderer.render(line, x, baseline, options, is_last_line=index == last_index)
            if index < last_index or advance_last_line:
                self.advance(line_height)

    def _item_number(self, block: Block) -> int:
        if self._ordered_counter is not None:
            return self._ordered_counter
        return block.number if block.number is not None else 1

    def marker_text(self, block: Block) -> str:
        if block.kind is BlockKind.ORDERED_ITEM:
            return f"{self._item_number(block)}."
        return BULLET

    def _draw_marker(self, block: Block, renderer: LineRenderer, x: float, baseline: float,
                     overlay: TextStyle, options: LayoutOptions) -> None:
        marker = TextSegment(self.marker_text(block), PLAIN)
        indent = overlay.indentation * options.font_size
        marker_x = x + indent - MARKER_GUTTER_EM * options.font_size
        width = renderer.metrics.measure(marker.text, marker.style)
        renderer.draw_run(marker.text, marker.style, marker_x, baseline, width)

    def _draw_rule(self, x: float, options: LayoutOptions) -> None:
        line_height = options.line_height
        self.ensure_space(line_height)
        rule_y = self.cursor.y + line_height / 2
        left = x + options.indentation_em * options.font_size
        self.context.draw_line(left, rule_y, x + options.max_width, rule_y)
        self.advance(line_height)
