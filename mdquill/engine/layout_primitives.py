"""

Data structures shared by the line wrapper, line renderer and pagination
controller.

All coordinates are top-down: ``y`` grows towards the bottom of the page, the
rendering surface is responsible for flipping them if its origin differs.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from ..models.text_style import TextSegment


class Alignment(str, Enum):
    """Horizontal alignment of wrapped lines."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    JUSTIFY = "justify"


@dataclass(frozen=True, slots=True)
class LayoutOptions:
    """Per-call layout parameters supplied by the document assembler."""

    max_width: float
    align: Alignment = Alignment.LEFT
    font_size: float = 12.0
    line_spacing: float = 1.2
    font_family: str = "Helvetica"
    indentation_em: float = 0.0
    paragraph_spacing: float = 0.0

    def __post_init__(self) -> None:
        if self.max_width <= 0:
            raise ValueError(f"max_width must be positive, got {self.max_width}")
        if self.font_size <= 0:
            raise ValueError(f"font_size must be positive, got {self.font_size}")
        if self.line_spacing <= 0:
            raise ValueError(f"line_spacing must be positive, got {self.line_spacing}")
        if self.indentation_em < 0:
            raise ValueError(f"indentation_em must be non-negative, got {self.indentation_em}")

    @property
    def line_height(self) -> float:
        return self.font_size * self.line_spacing


@dataclass(slots=True)
class Line:
    """

    One wrapped row of a paragraph.

    ``width`` is the measured width of the segments including inter-word
    spaces. ``offset_x`` is the indentation (in points) applied to the row and
    ``available_width`` the width it was packed into. ``forced`` marks rows
    produced by splitting a single word that was wider than the line.

    """

    segments: List[TextSegment] = field(default_factory=list)
    width: float = 0.0
    available_width: float = 0.0
    offset_x: float = 0.0
    forced: bool = False

    @property
    def text(self) -> str:
        return "".join(segment.text for segment in self.segments)

    @property
    def gap_count(self) -> int:
        """Number of inter-word spaces eligible for justification."""
        return sum(segment.text.count(" ") for segment in self.segments)


@dataclass(slots=True)
class CursorState:
    """Vertical write position within the current page."""

    y: float
    page_height: float
    top_margin: float = 0.0
    bottom_margin: float = 0.0

    @property
    def limit(self) -> float:
        """Lowest y a line may reach on the current page."""
        return self.page_height - self.bottom_margin

    @property
    def at_page_top(self) -> bool:
        return self.y <= self.top_margin

    def fits(self, height: float) -> bool:
        return self.y + height <= self.limit

    def advance(self, height: float) -> float:
        if height < 0:
            raise ValueError(f"cursor cannot move upwards (height={height})")
        self.y += height
        return self.y

    def reset(self) -> float:
        self.y = self.top_margin
        return self.y


@dataclass(frozen=True, slots=True)
class PageConfig:
    """Page geometry in points."""

    page_width: float
    page_height: float
    margin_top: float = 72.0
    margin_right: float = 72.0
    margin_bottom: float = 72.0
    margin_left: float = 72.0

    def __post_init__(self) -> None:
        if self.content_width <= 0 or self.content_height <= 0:
            raise ValueError("margins leave no room for content")

    @property
    def content_width(self) -> float:
        return self.page_width - self.margin_left - self.margin_right

    @property
    def content_height(self) -> float:
        return self.page_height - self.margin_top - self.margin_bottom

    @property
    def content_top(self) -> float:
        """Top of the content area (top-down coordinates)."""
        return self.margin_top

    @property
    def content_bottom(self) -> float:
        """Bottom of the content area (top-down coordinates)."""
        return self.page_height - self.margin_bottom

    def new_cursor(self) -> CursorState:
        return CursorState(
            y=self.margin_top,
            page_height=self.page_height,
            top_margin=self.margin_top,
            bottom_margin=self.margin_bottom,
        )
