"""
Page numbering.

PageNumberer is registered as the layout engine's page break callback (and
called once more for the last page) and prints the page number in the
footer or header band of the page that is being closed.
"""

from __future__ import annotations

import logging

from ..config import FontSettings, PageNumberingConfig
from ..engine.layout_primitives import Alignment, PageConfig
from ..engine.render_context import RenderContext
from ..engine.text_alignment import TextAlignmentEngine
from ..utils.units import mm_to_points

logger = logging.getLogger(__name__)

# Distance between a top page number baseline and the top margin.
TOP_OFFSET_MM = 5.0

_ROMAN_NUMERALS = (
    (1000, "m"),
    (900, "cm"),
    (500, "d"),
    (400, "cd"),
    (100, "c"),
    (90, "xc"),
    (50, "l"),
    (40, "xl"),
    (10, "x"),
    (9, "ix"),
    (5, "v"),
    (4, "iv"),
    (1, "i"),
)


def _to_roman(number: int) -> str:
    result = []
    remaining = number
    for value, numeral in _ROMAN_NUMERALS:
        while remaining >= value:
            result.append(numeral)
            remaining -= value
    return "".join(result)


def _to_letters(number: int) -> str:
    # a..z, aa..az, ba.. (no zero digit)
    number -= 1
    result = ""
    while number >= 0:
        result = chr(ord("a") + number % 26) + result
        number = number // 26 - 1
    return result


def format_page_number(number: int, style: str = "arabic") -> str:
    """
    Format a page number.

    Args:
        number: Page number (1-based)
        style: ``arabic``, ``roman`` (lower case) or ``letters``

    Returns:
        Formatted number, empty for numbers below 1
    """
    if number <= 0:
        return ""
    if style == "roman":
        return _to_roman(number)
    if style == "letters":
        return _to_letters(number)
    return str(number)


class PageNumberer:
    """Draws page numbers through a render context."""

    def __init__(
        self,
        context: RenderContext,
        page: PageConfig,
        config: PageNumberingConfig,
        font: FontSettings,
    ) -> None:
        self.context = context
        self.page = page
        self.config = config
        self.font = font
        self.pages_numbered = 0

    def label_for(self, page_number: int) -> str:
        return format_page_number(self.config.start + page_number - 1, self.config.style)

    def baseline(self) -> float:
        if self.config.position == "top":
            return max(self.page.margin_top - mm_to_points(TOP_OFFSET_MM), self.font.size)
        return self.page.page_height - self.page.margin_bottom / 2

    def __call__(self, page_number: int) -> None:
        if not self.config.enabled:
            return

        label = self.label_for(page_number)
        previous_family = self.context.set_font_family(self.font.family)
        self.context.set_active_style(False, False, self.font.size)
        width = self.context.measure_text_width(label)

        alignment = self.config.alignment
        if alignment is Alignment.CENTER:
            x = self.page.page_width / 2 - width / 2
        else:
            x = TextAlignmentEngine.calculate_x(
                self.page.margin_left,
                self.page.content_width,
                width,
                alignment,
            )

        self.context.draw_text(label, x, self.baseline())
        if previous_family is not None:
            self.context.set_font_family(previous_family)
        self.pages_numbered += 1
        logger.debug("Numbered page %d as %r", page_number, label)
