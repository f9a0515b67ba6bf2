"""Inline style and styled text segment value types."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple

HEADING_BASE_SCALE = 2.5
HEADING_SCALE_STEP = 0.3


class ListKind(str, Enum):
    """List flavours recognized on list-item lines."""

    ORDERED = "ordered"
    UNORDERED = "unordered"


@dataclass(frozen=True, slots=True)
class TextStyle:
    """
    Style active for one run of text.

    Instances are immutable: the tokenizer freezes the style that was active
    when a segment closed, and block overlays are applied with ``evolve``.
    ``indentation`` is expressed in em (multiples of the base font size).
    """

    bold: bool = False
    italic: bool = False
    heading: Optional[int] = None
    is_list: bool = False
    list_kind: Optional[ListKind] = None
    list_level: int = 0
    indentation: float = 0.0
    underline: bool = False
    strikethrough: bool = False
    code: bool = False
    link: Optional[str] = None

    def __post_init__(self) -> None:
        if self.heading is not None and not 1 <= self.heading <= 6:
            raise ValueError(f"heading level must be within 1..6, got {self.heading}")
        if self.list_level < 0:
            raise ValueError(f"list_level must be non-negative, got {self.list_level}")
        if self.indentation < 0:
            raise ValueError(f"indentation must be non-negative, got {self.indentation}")

    def evolve(self, **changes) -> "TextStyle":
        """Return a copy with ``changes`` applied."""
        return replace(self, **changes)

    @property
    def heading_scale(self) -> float:
        """Font-size multiplier for heading lines (``2.5 - level * 0.3``)."""
        if self.heading is None:
            return 1.0
        return HEADING_BASE_SCALE - self.heading * HEADING_SCALE_STEP

    @property
    def font_key(self) -> Tuple[bool, bool, bool, float]:
        """Attributes that influence glyph metrics."""
        return (self.bold, self.italic, self.code, self.heading_scale)


PLAIN = TextStyle()


@dataclass(frozen=True, slots=True)
class TextSegment:
    """A maximal run of text sharing one style."""

    text: str
    style: TextStyle = PLAIN
