"""
Inline markdown tokenizer.

Turns one logical line of markdown-flavoured text into an ordered list of
:class:`TextSegment` objects. Emphasis uses flag toggling rather than a style
stack: an opening marker flips its flag, the same marker closes it. Markers
without a matching close later in the line are kept as literal text.
"""

from __future__ import annotations

import logging
import re
from bisect import bisect_left
from typing import Dict, Iterable, List, Optional

from ..models.text_style import PLAIN, TextSegment, TextStyle

logger = logging.getLogger(__name__)

_DOUBLE_MARKERS = ("**", "__", "~~")
_SINGLE_MARKERS = ("*", "_")

_MARKER_FLAGS: Dict[str, str] = {
    "**": "bold",
    "__": "bold",
    "~~": "strikethrough",
    "*": "italic",
    "_": "italic",
}

_LINK_RE = re.compile(r"\[([^\]]+)\]\(([^)\s]+)\)")


def _marker_at(text: str, index: int) -> Optional[str]:
    """Return the emphasis marker starting at ``index``, longest first."""
    for marker in _DOUBLE_MARKERS:
        if text.startswith(marker, index):
            return marker
    if text[index] in _SINGLE_MARKERS:
        return text[index]
    return None


def _code_span_end(text: str, index: int) -> int:
    """Index of the backtick closing a non-empty code span opened at ``index``, or -1."""
    close = text.find("`", index + 1)
    if close > index + 1:
        return close
    return -1


def _scan_markers(text: str) -> Dict[str, List[int]]:
    """
    Positions of every emphasis marker outside code spans and links.

    Steps through the line exactly like the tokenizer does, so a marker found
    here is one the tokenizer will reach.
    """
    positions: Dict[str, List[int]] = {}
    index = 0
    while index < len(text):
        char = text[index]
        if char == "`":
            close = _code_span_end(text, index)
            if close != -1:
                index = close + 1
                continue
        elif char == "[":
            match = _LINK_RE.match(text, index)
            if match:
                index = match.end()
                continue
        marker = _marker_at(text, index)
        if marker is None:
            index += 1
            continue
        positions.setdefault(marker, []).append(index)
        index += len(marker)
    return positions


def _has_closing(positions: Dict[str, List[int]], marker: str, start: int) -> bool:
    """Check whether ``marker`` occurs again at or after ``start``."""
    found = positions.get(marker, [])
    return bisect_left(found, start) < len(found)


class InlineTokenizer:
    """Left-to-right scanner producing styled segments."""

    def __init__(self, base_style: TextStyle = PLAIN) -> None:
        self.base_style = base_style

    def tokenize(self, line: str) -> List[TextSegment]:
        if not line:
            return []

        segments: List[TextSegment] = []
        buffer: List[str] = []
        style = self.base_style
        open_markers: Dict[str, str] = {}
        positions = _scan_markers(line)

        def flush() -> None:
            if buffer:
                segments.append(TextSegment("".join(buffer), style))
                buffer.clear()

        index = 0
        length = len(line)
        while index < length:
            char = line[index]

            if char == "`":
                close = _code_span_end(line, index)
                if close != -1:
                    flush()
                    segments.append(TextSegment(line[index + 1:close], style.evolve(code=True)))
                    index = close + 1
                    continue
                buffer.append(char)
                index += 1
                continue

            if char == "[":
                match = _LINK_RE.match(line, index)
                if match:
                    flush()
                    link_style = style.evolve(underline=True, link=match.group(2))
                    segments.append(TextSegment(match.group(1), link_style))
                    index = match.end()
                    continue

            marker = _marker_at(line, index)
            if marker is None:
                buffer.append(char)
                index += 1
                continue

            flag = _MARKER_FLAGS[marker]
            if open_markers.get(flag) == marker:
                flush()
                style = style.evolve(**{flag: False})
                del open_markers[flag]
            elif flag not in open_markers and _has_closing(positions, marker, index + len(marker)):
                flush()
                style = style.evolve(**{flag: True})
                open_markers[flag] = marker
            else:
                logger.debug("Unmatched marker %r at column %d kept as literal text", marker, index)
                buffer.append(marker)
            index += len(marker)

        flush()
        return segments


def tokenize(line: str, base_style: TextStyle = PLAIN) -> List[TextSegment]:
    """Tokenize ``line`` into styled segments."""
    return InlineTokenizer(base_style).tokenize(line)


def apply_overlay(segments: Iterable[TextSegment], overlay: TextStyle) -> List[TextSegment]:
    """
    Overlay block-level attributes onto every segment.

    Heading level, list context and indentation come from ``overlay``; the
    segment keeps its own inline flags, with bold forced on when the overlay
    is bold.
    """
    result: List[TextSegment] = []
    for segment in segments:
        style = segment.style.evolve(
            bold=segment.style.bold or overlay.bold,
            heading=overlay.heading,
            is_list=overlay.is_list,
            list_kind=overlay.list_kind,
            list_level=overlay.list_level,
            indentation=overlay.indentation,
        )
        result.append(TextSegment(segment.text, style))
    return result
