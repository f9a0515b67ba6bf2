"""

Line positioning and painting.

TextAlignmentEngine computes the starting X position of a line for
left/center/right alignment; LineRenderer paints a wrapped line, spreading
justified lines across the available width.

Supports:
- left: left alignment (default)
- center: centering
- right: right alignment
- justify: uniform extra spacing per inter-word gap

"""

from __future__ import annotations

import logging
from typing import Optional, Union

from ..models.text_style import TextStyle
from .layout_primitives import Alignment, LayoutOptions, Line
from .text_metrics import TextMetricsEngine

logger = logging.getLogger(__name__)

UNDERLINE_OFFSET = 0.05
STRIKETHROUGH_OFFSET = 0.3

_ALIASES = {
    "left": Alignment.LEFT,
    "start": Alignment.LEFT,
    "l": Alignment.LEFT,
    "center": Alignment.CENTER,
    "centre": Alignment.CENTER,
    "middle": Alignment.CENTER,
    "c": Alignment.CENTER,
    "right": Alignment.RIGHT,
    "end": Alignment.RIGHT,
    "r": Alignment.RIGHT,
    "justify": Alignment.JUSTIFY,
    "justified": Alignment.JUSTIFY,
    "both": Alignment.JUSTIFY,
    "j": Alignment.JUSTIFY,
}


class TextAlignmentEngine:
    """
    Engine for calculating X positions based on alignment.
    """

    @staticmethod
    def normalize(alignment: Union[Alignment, str, None]) -> Alignment:
        """Map alignment names and their common aliases onto :class:`Alignment`."""
        if isinstance(alignment, Alignment):
            return alignment
        if not alignment:
            return Alignment.LEFT
        return _ALIASES.get(str(alignment).strip().lower(), Alignment.LEFT)

    @staticmethod
    def calculate_x(
        x: float,
        available_width: float,
        text_width: float,
        alignment: Union[Alignment, str] = Alignment.LEFT,
    ) -> float:
        """

        Calculates X position for text based on alignment.

        Args:
            x: Left edge of the text area
            available_width: Width of the text area
            text_width: Text width in points
            alignment: Alignment; justify starts at the left edge

        Returns:
            X position for text

        """
        alignment = TextAlignmentEngine.normalize(alignment)

        if alignment is Alignment.CENTER:
            return max(x, x + (available_width - text_width) / 2)

        if alignment is Alignment.RIGHT:
            return max(x, x + available_width - text_width)

        return x


class LineRenderer:
    """Paints wrapped lines through the metrics engine's render context."""

    def __init__(self, metrics: TextMetricsEngine) -> None:
        self.metrics = metrics
        self.context = metrics.context

    def line_width(self, line: Line) -> float:
        """Sum of segment widths, each measured in its own style."""
        return sum(self.metrics.measure(segment.text, segment.style) for segment in line.segments)

    def render(
        self,
        line: Line,
        x: float,
        y: float,
        options: LayoutOptions,
        is_last_line: bool = False,
        align: Optional[Union[Alignment, str]] = None,
    ) -> None:
        """

        Paints one line with its baseline at ``y``.

        Args:
            line: Wrapped line
            x: Left edge of the text column (indentation is taken from the line)
            y: Baseline position
            options: Layout options of the paragraph
            is_last_line: Last line of its paragraph, never justified
            align: Alignment override, defaults to ``options.align``

        """
        alignment = TextAlignmentEngine.normalize(align if align is not None else options.align)
        origin = x + line.offset_x
        available = line.available_width if line.available_width > 0 else options.max_width - line.offset_x
        total_width = self.line_width(line)

        if alignment is Alignment.JUSTIFY:
            gaps = line.gap_count
            if not is_last_line and gaps > 0 and not line.forced:
                extra = max(available - total_width, 0.0) / gaps
                self._draw_justified(line, origin, y, extra)
                return
            if not is_last_line:
                logger.debug("Line %r has no stretchable gaps; drawn left aligned", line.text[:30])
            alignment = Alignment.LEFT

        cursor = TextAlignmentEngine.calculate_x(origin, available, total_width, alignment)
        for segment in line.segments:
            width = self.metrics.measure(segment.text, segment.style)
            self.draw_run(segment.text, segment.style, cursor, y, width)
            cursor += width

    def _draw_justified(self, line: Line, x: float, y: float, extra_per_gap: float) -> None:
        cursor = x
        for segment in line.segments:
            words = segment.text.split(" ")
            for index, word in enumerate(words):
                if index > 0:
                    cursor += self.metrics.space_width(segment.style) + extra_per_gap
                if not word:
                    continue
                width = self.metrics.measure(word, segment.style)
                self.draw_run(word, segment.style, cursor, y, width)
                cursor += width

    def draw_run(self, text: str, style: TextStyle, x: float, y: float, width: float) -> None:
        if not text:
            return
        self.metrics.activate(style)
        self.context.draw_text(text, x, y)
        self._draw_decorations(style, x, y, width)

    def _draw_decorations(self, style: TextStyle, x: float, y: float, width: float) -> None:
        font_size = self.metrics.font_size_for(style)
        if style.underline:
            underline_y = y + font_size * UNDERLINE_OFFSET
            self.context.draw_line(x, underline_y, x + width, underline_y)
        if style.strikethrough:
            strike_y = y - font_size * STRIKETHROUGH_OFFSET
            self.context.draw_line(x, strike_y, x + width, strike_y)

