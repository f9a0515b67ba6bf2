"""
Layout engine entry point.

MarkdownLayoutEngine is what a document assembler talks to: it accepts raw
markdown-flavoured text plus an origin and layout options, lays it out onto the
render context (breaking pages as needed) and returns the new cursor position.
State that spans calls (cursor, page number, ordered list counters) lives in
one PaginationController per engine.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from ..models.block import Block
from ..parser.block_classifier import BlockClassifier
from .layout_primitives import CursorState, LayoutOptions, PageConfig
from .pagination_manager import PageBreakCallback, PaginationController
from .render_context import RenderContext

logger = logging.getLogger(__name__)


class MarkdownLayoutEngine:
    """
    Lays out markdown text onto a render context.

    Args:
        context: Rendering surface, used exclusively by this engine during a build
        page: Page geometry; without it the whole page height is usable
        on_page_break: Called with the number of each page closed by a page break
    """

    def __init__(
        self,
        context: RenderContext,
        page: Optional[PageConfig] = None,
        on_page_break: Optional[PageBreakCallback] = None,
    ) -> None:
        self.context = context
        self.page = page
        self.classifier = BlockClassifier()
        self._on_page_break = on_page_break
        self._controller: Optional[PaginationController] = None

    @property
    def controller(self) -> PaginationController:
        if self._controller is None:
            self._controller = PaginationController(
                self.context,
                self._new_cursor(),
                on_page_break=self._on_page_break,
            )
        return self._controller

    @property
    def page_number(self) -> int:
        return self.controller.page_number

    def _new_cursor(self) -> CursorState:
        if self.page is not None:
            return self.page.new_cursor()
        return CursorState(y=0.0, page_height=self.context.current_page_height())

    def layout_paragraph(
        self,
        raw_text: str,
        x: float,
        y: float,
        options: LayoutOptions,
        advance_last_line: bool = True,
    ) -> float:
        """
        Lays out ``raw_text`` starting at ``(x, y)``.

        Every source line becomes one block (heading, list item, rule,
        paragraph); blank lines advance the cursor by one line height.

        Args:
            raw_text: Markdown-flavoured text
            x: Left edge of the text column
            y: Cursor position to start from
            options: Layout options
            advance_last_line: Whether to move below the last line; pass False
                when the caller adds its own trailing spacing

        Returns:
            Cursor position after the text, on whatever page it ended
        """
        controller = self.controller
        controller.move_to(y)

        blocks = self.classifier.classify_lines(raw_text)
        last_index = len(blocks) - 1
        for index, block in enumerate(blocks):
            controller.layout_block(
                block,
                x,
                options,
                advance_last_line=advance_last_line or index < last_index,
            )
        return controller.cursor.y

    def layout_blocks(self, blocks: List[Block], x: float, options: LayoutOptions) -> float:
        """Lays out pre-classified blocks, adding paragraph spacing after text blocks."""
        controller = self.controller
        for block in blocks:
            controller.layout_block(block, x, options)
            if block.has_text and options.paragraph_spacing > 0:
                if controller.cursor.fits(options.paragraph_spacing):
                    controller.advance(options.paragraph_spacing)
        return controller.cursor.y

    def layout_document(self, text: str, options: LayoutOptions, x: Optional[float] = None) -> float:
        """
        Lays out a whole document from the current cursor position and
        finishes the build.

        Returns:
            Final cursor position
        """
        if x is None:
            x = self.page.margin_left if self.page is not None else 0.0

        blocks = self.classifier.classify_lines(text)
        logger.info("Laying out %d blocks", len(blocks))
        y = self.layout_blocks(blocks, x, options)
        self.finish()
        logger.info("Layout finished on page %d", self.page_number)
        return y

    def finish(self) -> None:
        self.controller.finish()


def layout_paragraph(
    context: RenderContext,
    raw_text: str,
    x: float,
    y: float,
    options: LayoutOptions,
    *,
    page: Optional[PageConfig] = None,
    on_page_break: Optional[PageBreakCallback] = None,
    advance_last_line: bool = True,
) -> float:
    """One-shot helper around :meth:`MarkdownLayoutEngine.layout_paragraph`."""
    engine = MarkdownLayoutEngine(context, page=page, on_page_break=on_page_break)
    return engine.layout_paragraph(raw_text, x, y, options, advance_last_line=advance_last_line)
