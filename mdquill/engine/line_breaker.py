"""Greedy line breaking of styled segments."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional

from ..models.text_style import TextSegment, TextStyle
from .layout_primitives import Line

logger = logging.getLogger(__name__)

MeasureFunc = Callable[[str, TextStyle], float]

# Tolerance for accumulated float error when comparing against the line width.
_EPSILON = 1e-6


@dataclass(slots=True)
class _Word:
    """Space-delimited word, possibly made of pieces in different styles."""

    pieces: List[TextSegment] = field(default_factory=list)
    widths: List[float] = field(default_factory=list)

    @property
    def width(self) -> float:
        return sum(self.widths)

    @property
    def leading_style(self) -> TextStyle:
        return self.pieces[0].style


class _LineBuilder:
    def __init__(self, available_width: float, offset_x: float) -> None:
        self.available_width = available_width
        self.offset_x = offset_x
        self.segments: List[TextSegment] = []
        self.width = 0.0

    @property
    def empty(self) -> bool:
        return not self.segments

    def add_text(self, text: str, style: TextStyle, width: float) -> None:
        # Same-style neighbours share one segment to save draw calls.
        if self.segments and self.segments[-1].style == style:
            previous = self.segments[-1]
            self.segments[-1] = TextSegment(previous.text + text, style)
        else:
            self.segments.append(TextSegment(text, style))
        self.width += width

    def add_word(self, word: _Word, space_width: float) -> None:
        for index, (piece, width) in enumerate(zip(word.pieces, word.widths)):
            if index == 0 and not self.empty:
                self.add_text(" " + piece.text, piece.style, space_width + width)
            else:
                self.add_text(piece.text, piece.style, width)

    def close(self, forced: bool = False) -> Line:
        line = Line(
            segments=list(self.segments),
            width=self.width,
            available_width=self.available_width,
            offset_x=self.offset_x,
            forced=forced,
        )
        self.segments = []
        self.width = 0.0
        return line


class LineBreaker:
    """

    Simple greedy line breaker with character-level fallback.

    Words are packed onto a line while they fit; a word wider than the whole
    line is broken into character fragments, each emitted as its own forced
    line. No hyphenation is performed.

    """

    def __init__(self, measure: MeasureFunc, font_size: float = 12.0) -> None:
        self.measure = measure
        self.font_size = float(font_size)

    def wrap(
        self,
        segments: Iterable[TextSegment],
        max_width: float,
        base_indent_em: float = 0.0,
    ) -> List[Line]:
        """

        Wraps styled segments into lines.

        Args:
            segments: Segments of one paragraph in source order
            max_width: Width of the text column
            base_indent_em: Left indentation in em, subtracted from the width

        Returns:
            Lines in source order; empty when the segments carry no text

        """
        offset_x = base_indent_em * self.font_size
        available = max_width - offset_x
        if available <= 0:
            logger.warning(
                "Indentation %.2f leaves no room in width %.2f; every character gets its own line",
                offset_x,
                max_width,
            )

        lines: List[Line] = []
        builder = _LineBuilder(available, offset_x)

        for word in self._collect_words(segments):
            if not builder.empty:
                space_width = self.measure(" ", word.leading_style)
                if builder.width + space_width + word.width <= available + _EPSILON:
                    builder.add_word(word, space_width)
                    continue
                lines.append(builder.close())

            if word.width <= available + _EPSILON:
                builder.add_word(word, 0.0)
            else:
                lines.extend(self._split_word(word, available, offset_x))

        if not builder.empty:
            lines.append(builder.close())

        return lines

    def _collect_words(self, segments: Iterable[TextSegment]) -> List[_Word]:
        words: List[_Word] = []
        current: Optional[_Word] = None
        pending_space = False

        for segment in segments:
            if not segment.text:
                continue
            parts = segment.text.replace("\t", " ").split(" ")
            for index, part in enumerate(parts):
                if index > 0:
                    pending_space = True
                if not part:
                    continue
                if current is None or pending_space:
                    current = _Word()
                    words.append(current)
                current.pieces.append(TextSegment(part, segment.style))
                current.widths.append(self.measure(part, segment.style))
                pending_space = False

        return words

    def _split_word(self, word: _Word, available: float, offset_x: float) -> List[Line]:
        logger.debug(
            "Word %r (%.2f) wider than line (%.2f); splitting by character",
            "".join(piece.text for piece in word.pieces)[:30],
            word.width,
            available,
        )
        lines: List[Line] = []
        builder = _LineBuilder(available, offset_x)

        for piece in word.pieces:
            for char in piece.text:
                char_width = self.measure(char, piece.style)
                # Each forced line keeps at least one character.
                if not builder.empty and builder.width + char_width > available + _EPSILON:
                    lines.append(builder.close(forced=True))
                builder.add_text(char, piece.style, char_width)

        if not builder.empty:
            lines.append(builder.close(forced=True))
        return lines


def wrap_segments(
    segments: Iterable[TextSegment],
    measure: MeasureFunc,
    max_width: float,
    base_indent_em: float = 0.0,
    font_size: float = 12.0,
) -> List[Line]:
    """Wrap ``segments`` into lines no wider than ``max_width`` minus indentation."""
    return LineBreaker(measure, font_size=font_size).wrap(segments, max_width, base_indent_em)
