"""Classification of raw markdown lines into block constructs."""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from ..models.block import Block, BlockKind

logger = logging.getLogger(__name__)

HEADING_RE = re.compile(r"^(#{1,6})\s+(.+)$")
ORDERED_RE = re.compile(r"^(\d+)\.\s+(.+)$")
UNORDERED_RE = re.compile(r"^[-*+]\s+(.+)$")
RULE_RE = re.compile(r"^(?:-{3,}|\*{3,}|_{3,})$")

TAB_WIDTH = 2


class BlockClassifier:
    """
    Tags each source line as heading, list item, rule, paragraph or blank.

    Leading whitespace only matters for list items, where every two spaces
    (or one tab) count as one nesting level.
    """

    def classify_line(self, raw: str) -> Block:
        expanded = raw.rstrip("\r\n").expandtabs(TAB_WIDTH)
        stripped = expanded.strip()
        if not stripped:
            return Block(BlockKind.BLANK)

        if RULE_RE.match(stripped):
            return Block(BlockKind.HORIZONTAL_RULE)

        match = HEADING_RE.match(stripped)
        if match:
            return Block(BlockKind.HEADING, match.group(2).strip(), level=len(match.group(1)))

        list_level = (len(expanded) - len(expanded.lstrip(" "))) // TAB_WIDTH

        match = ORDERED_RE.match(stripped)
        if match:
            return Block(
                BlockKind.ORDERED_ITEM,
                match.group(2).strip(),
                number=int(match.group(1)),
                list_level=list_level,
            )

        match = UNORDERED_RE.match(stripped)
        if match:
            return Block(BlockKind.UNORDERED_ITEM, match.group(1).strip(), list_level=list_level)

        return Block(BlockKind.PARAGRAPH, stripped)

    def classify_lines(self, text: Optional[str]) -> List[Block]:
        """
        Classify every line of ``text``.

        Runs of blank lines collapse into one ``BLANK`` block; blank lines at
        the start or end of the text are dropped.
        """
        if not text:
            return []

        blocks: List[Block] = []
        for raw in text.splitlines():
            block = self.classify_line(raw)
            if block.kind is BlockKind.BLANK and (not blocks or blocks[-1].kind is BlockKind.BLANK):
                continue
            blocks.append(block)

        if blocks and blocks[-1].kind is BlockKind.BLANK:
            blocks.pop()

        logger.debug("Classified %d blocks", len(blocks))
        return blocks


_DEFAULT = BlockClassifier()


def classify_line(raw: str) -> Block:
    return _DEFAULT.classify_line(raw)


def classify_lines(text: Optional[str]) -> List[Block]:
    return _DEFAULT.classify_lines(text)
