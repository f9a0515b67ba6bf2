"""
mdquill - markdown text layout for paginated PDF output.

The layout engine wraps, aligns and paginates lightly structured markdown
(headings, emphasis, lists, rules) onto any :class:`RenderContext`; a
ReportLab-backed PDF renderer and an HTML preview ship with the package.
"""

__version__ = "0.1.0"

from .config import FontSettings, Margins, PageNumberingConfig, RenderSettings
from .engine import (
    Alignment,
    LayoutOptions,
    MarkdownLayoutEngine,
    PageConfig,
    RenderContext,
    layout_paragraph,
)
from .exceptions import (
    ConfigurationError,
    FontError,
    LayoutError,
    MdQuillError,
    MeasurementUnavailableError,
    ParsingError,
    RenderingError,
)
from .parser import classify_lines, tokenize
from .renderers import HtmlPreviewRenderer, PdfRenderer, ReportLabRenderContext, render_html

__all__ = [
    "__version__",
    "FontSettings",
    "Margins",
    "PageNumberingConfig",
    "RenderSettings",
    "Alignment",
    "LayoutOptions",
    "MarkdownLayoutEngine",
    "PageConfig",
    "RenderContext",
    "layout_paragraph",
    "ConfigurationError",
    "FontError",
    "LayoutError",
    "MdQuillError",
    "MeasurementUnavailableError",
    "ParsingError",
    "RenderingError",
    "classify_lines",
    "tokenize",
    "HtmlPreviewRenderer",
    "PdfRenderer",
    "ReportLabRenderContext",
    "render_html",
]
