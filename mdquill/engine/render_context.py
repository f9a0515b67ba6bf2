"""

RenderContext - capability interface of a rendering surface.

The layout engine never touches fonts, canvases or pages directly. Everything
it needs from the surface goes through one explicitly passed context object,
which owns the mutable "current font" state for the duration of a build.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class RenderContext(ABC):
    """Measurement and paint capabilities consumed by the layout engine."""

    @abstractmethod
    def set_active_style(
        self,
        bold: bool,
        italic: bool,
        font_size: Optional[float] = None,
        monospace: bool = False,
    ) -> None:
        """Switch the active font used by later measure/draw calls."""

    @abstractmethod
    def measure_text_width(self, text: str) -> float:
        """Width of ``text`` in the active font."""

    @abstractmethod
    def draw_text(self, text: str, x: float, y: float) -> None:
        """Paint ``text`` with its baseline starting at ``(x, y)``."""

    @abstractmethod
    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        """Stroke a straight line (underlines, strikethrough, rules)."""

    @abstractmethod
    def start_new_page(self) -> None:
        """Finalize the current page and begin a new one."""

    @abstractmethod
    def current_page_height(self) -> float:
        """Height of the current page."""

    def current_page_width(self) -> Optional[float]:
        """Width of the current page, when the surface knows it."""
        return None

    def set_font_family(self, family: str) -> Optional[str]:
        """
        Switch the font family used by later ``set_active_style`` calls.

        Returns:
            The previous family, or None when the surface has a single family
        """
        return None
