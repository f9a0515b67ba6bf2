"""

TextMetricsEngine - style-aware text measurement on top of a RenderContext.

Measures widths of styled text by switching the context's active font before
every measurement. Results are cached per (text, font attributes) because the
wrapper and the renderer measure the same words repeatedly.

"""

from __future__ import annotations

import logging
import math
from typing import Dict, Tuple

from ..exceptions import MeasurementUnavailableError
from ..models.text_style import TextStyle
from .render_context import RenderContext

logger = logging.getLogger(__name__)


class TextMetricsEngine:
    """

    Engine for calculating text metrics.

    Args:
        context: Rendering surface providing width measurement
        font_size: Base (paragraph) font size; headings are scaled from it
        line_spacing: Line height multiplier

    """

    def __init__(self, context: RenderContext, font_size: float = 12.0, line_spacing: float = 1.2):
        self.context = context
        self.font_size = float(font_size)
        self.line_spacing = float(line_spacing)
        self._cache: Dict[Tuple[str, Tuple[bool, bool, bool, float]], float] = {}

    def font_size_for(self, style: TextStyle) -> float:
        """Font size of text drawn with ``style``."""
        return self.font_size * style.heading_scale

    def line_height_for(self, style: TextStyle) -> float:
        """Height of one line of text drawn with ``style``."""
        return self.font_size_for(style) * self.line_spacing

    def activate(self, style: TextStyle) -> None:
        """Make ``style`` the active font of the context."""
        self.context.set_active_style(
            style.bold,
            style.italic,
            self.font_size_for(style),
            monospace=style.code,
        )

    def measure(self, text: str, style: TextStyle) -> float:
        """

        Measures width of ``text`` drawn in ``style``.

        Raises:
            MeasurementUnavailableError: if the context cannot report a usable width

        """
        if not text:
            return 0.0

        key = (text, style.font_key)
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        try:
            self.activate(style)
            width = self.context.measure_text_width(text)
        except MeasurementUnavailableError:
            raise
        except Exception as exc:
            raise MeasurementUnavailableError("Rendering surface failed to measure text", str(exc)) from exc

        if width is None or not isinstance(width, (int, float)) or not math.isfinite(width) or width < 0:
            raise MeasurementUnavailableError(
                "Rendering surface returned an unusable width",
                f"{width!r} for {text[:20]!r}",
            )

        width = float(width)
        self._cache[key] = width
        return width

    def space_width(self, style: TextStyle) -> float:
        return self.measure(" ", style)

    def clear_cache(self) -> None:
        self._cache.clear()
