"""
PDF output through ReportLab.

ReportLabRenderContext adapts a ReportLab canvas to the engine's
:class:`RenderContext`; PdfRenderer wires settings, page numbering and the
layout engine into a complete build.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import BinaryIO, Optional, Tuple, Union

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfgen.canvas import Canvas

from ..config import RenderSettings
from ..engine.layout_engine import MarkdownLayoutEngine
from ..engine.render_context import RenderContext
from ..engine.utils.font_utils import resolve_font_variant
from ..exceptions import FontError, RenderingError
from ..layout.page_numbering import PageNumberer

logger = logging.getLogger(__name__)


def _check_font(font_name: str) -> None:
    try:
        pdfmetrics.getFont(font_name)
    except (KeyError, ValueError, OSError) as exc:
        raise FontError("Font is not registered with ReportLab", font_name) from exc


class ReportLabRenderContext(RenderContext):
    """
    Render context drawing on a ReportLab canvas.

    Layout coordinates are top-down; ReportLab's origin is the bottom-left
    corner, so every y is flipped against the page height.

    Args:
        canvas: Target canvas
        font_family: Body font family (standard PDF family or a registered TTF family)
        font_size: Initial font size
        page_size: Page size in points, defaults to the canvas page size
    """

    def __init__(
        self,
        canvas: Canvas,
        font_family: str = "Helvetica",
        font_size: float = 12.0,
        page_size: Optional[Tuple[float, float]] = None,
    ) -> None:
        self.canvas = canvas
        self.page_size = page_size or canvas._pagesize
        self.font_family = font_family
        self.font_size = float(font_size)
        self.bold = False
        self.italic = False
        self.monospace = False
        self.font_name = self._resolve()
        _check_font(self.font_name)
        self.pages_started = 0
        self._apply()

    def _resolve(self) -> str:
        return resolve_font_variant(self.font_family, self.bold, self.italic, monospace=self.monospace)

    def _apply(self) -> None:
        self.canvas.setFont(self.font_name, self.font_size)

    def set_active_style(
        self,
        bold: bool,
        italic: bool,
        font_size: Optional[float] = None,
        monospace: bool = False,
    ) -> None:
        self.bold = bool(bold)
        self.italic = bool(italic)
        self.monospace = bool(monospace)
        if font_size is not None:
            self.font_size = float(font_size)
        self.font_name = self._resolve()
        self._apply()

    def set_font_family(self, family: str) -> Optional[str]:
        previous = self.font_family
        _check_font(resolve_font_variant(family, False, False))
        self.font_family = family
        self.font_name = self._resolve()
        self._apply()
        return previous

    def measure_text_width(self, text: str) -> float:
        return pdfmetrics.stringWidth(text, self.font_name, self.font_size)

    def draw_text(self, text: str, x: float, y: float) -> None:
        self.canvas.drawString(x, self.current_page_height() - y, text)

    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        height = self.current_page_height()
        self.canvas.line(x1, height - y1, x2, height - y2)

    def start_new_page(self) -> None:
        self.canvas.showPage()
        self.pages_started += 1
        # showPage() resets the graphics state, including the font.
        self._apply()

    def current_page_height(self) -> float:
        return float(self.page_size[1])

    def current_page_width(self) -> Optional[float]:
        return float(self.page_size[0])


class PdfRenderer:
    """
    Renders markdown text into a PDF document.

    Args:
        settings: Page, font and numbering settings
        title: Document title stored in the PDF metadata
        author: Document author stored in the PDF metadata
    """

    def __init__(
        self,
        settings: Optional[RenderSettings] = None,
        title: Optional[str] = None,
        author: Optional[str] = None,
    ) -> None:
        self.settings = settings or RenderSettings()
        self.title = title
        self.author = author

    def render(self, markdown_text: str, output: Union[str, Path, BinaryIO]) -> int:
        """

        Lay out ``markdown_text`` and write the PDF to ``output``.

        Args:
            markdown_text: Source text
            output: File path or binary file object

        Returns:
            Number of pages written

        """
        page = self.settings.to_page_config()
        options = self.settings.to_layout_options(page)
        target = str(output) if isinstance(output, Path) else output

        canvas = Canvas(target, pagesize=(page.page_width, page.page_height))
        if self.title:
            canvas.setTitle(self.title)
        if self.author:
            canvas.setAuthor(self.author)

        context = ReportLabRenderContext(
            canvas,
            font_family=options.font_family,
            font_size=options.font_size,
            page_size=(page.page_width, page.page_height),
        )
        numberer = PageNumberer(context, page, self.settings.page_numbering, self.settings.footer)
        engine = MarkdownLayoutEngine(context, page=page, on_page_break=numberer)

        engine.layout_document(markdown_text or "", options)
        numberer(engine.page_number)

        try:
            canvas.showPage()
            canvas.save()
        except OSError as exc:
            raise RenderingError("Failed to write PDF", str(exc)) from exc

        logger.info("Rendered %d page(s)", engine.page_number)
        return engine.page_number

    def render_bytes(self, markdown_text: str) -> bytes:
        buffer = io.BytesIO()
        self.render(markdown_text, buffer)
        return buffer.getvalue()
