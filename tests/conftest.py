"""
Pytest configuration for mdquill
"""

import logging
import sys
from pathlib import Path

import pytest

from mdquill.engine.layout_primitives import CursorState, LayoutOptions
from mdquill.engine.render_context import RenderContext


class RecordingContext(RenderContext):
    """
    Deterministic render context.

    Every character is ``char_width`` points wide regardless of font; draw
    calls are recorded in order together with the style active at the time.
    """

    def __init__(self, char_width: float = 10.0, page_height: float = 100.0, page_width: float = 200.0):
        self.char_width = char_width
        self.page_height = page_height
        self.page_width = page_width
        self.style = (False, False, None, False)
        self.family = "Helvetica"
        self.families = []
        self.calls = []
        self.measured = []

    def set_active_style(self, bold, italic, font_size=None, monospace=False):
        self.style = (bold, italic, font_size, monospace)

    def set_font_family(self, family):
        previous = self.family
        self.family = family
        self.families.append(family)
        return previous

    def measure_text_width(self, text):
        self.measured.append(text)
        return len(text) * self.char_width

    def draw_text(self, text, x, y):
        self.calls.append(("text", text, x, y, self.style))

    def draw_line(self, x1, y1, x2, y2):
        self.calls.append(("line", x1, y1, x2, y2))

    def start_new_page(self):
        self.calls.append(("page",))

    def current_page_height(self):
        return self.page_height

    def current_page_width(self):
        return self.page_width

    @property
    def texts(self):
        return [call for call in self.calls if call[0] == "text"]

    @property
    def drawn_text(self):
        return [call[1] for call in self.texts]

    @property
    def lines(self):
        return [call for call in self.calls if call[0] == "line"]

    @property
    def page_breaks(self):
        return sum(1 for call in self.calls if call[0] == "page")


@pytest.fixture(autouse=True)
def configure_logging():
    """Configure logging for tests to avoid file handler issues."""
    # Clear all existing handlers
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    # Set up console-only logging for tests
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.WARNING)  # Only show warnings and errors during tests

    formatter = logging.Formatter(
        '%(name)s - %(levelname)s - %(message)s'
    )
    console_handler.setFormatter(formatter)

    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.WARNING)

    yield

    # Cleanup after test
    for handler in root_logger.handlers:
        handler.close()
    root_logger.handlers.clear()


@pytest.fixture
def make_context():
    """Factory for recording contexts with custom geometry."""
    return RecordingContext


@pytest.fixture
def context():
    """Recording context: 10pt per character, 100pt high pages."""
    return RecordingContext()


@pytest.fixture
def tall_context():
    """Recording context with pages tall enough to never break."""
    return RecordingContext(page_height=10_000.0)


@pytest.fixture
def options():
    """Layout options with a 10pt line height."""
    return LayoutOptions(max_width=100.0, font_size=10.0, line_spacing=1.0)


@pytest.fixture
def cursor():
    return CursorState(y=0.0, page_height=10_000.0)


@pytest.fixture
def char_measure():
    """Measure function: 10pt per character."""
    return lambda text, style: len(text) * 10.0


@pytest.fixture
def markdown_file(tmp_path: Path) -> Path:
    path = tmp_path / "notes.md"
    path.write_text(
        "# Notes\n"
        "\n"
        "Some **bold** and *italic* text with a [link](https://example.com).\n"
        "\n"
        "1. first\n"
        "2. second\n"
        "- bullet\n"
        "---\n"
        "Closing paragraph.\n",
        encoding="utf-8",
    )
    return path
