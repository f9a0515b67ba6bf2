"""Output surfaces: PDF through ReportLab and an HTML preview."""

from .html_renderer import HtmlPreviewRenderer, render_html
from .pdf_renderer import PdfRenderer, ReportLabRenderContext

__all__ = [
    "HtmlPreviewRenderer",
    "render_html",
    "PdfRenderer",
    "ReportLabRenderContext",
]
