"""Block-level constructs produced by the block classifier."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .text_style import ListKind, TextStyle

# Indentation of list content per nesting level, in em.
LIST_INDENT_EM = 1.5


class BlockKind(str, Enum):
    """Tag of a classified source line."""

    HEADING = "heading"
    ORDERED_ITEM = "ordered_item"
    UNORDERED_ITEM = "unordered_item"
    HORIZONTAL_RULE = "horizontal_rule"
    PARAGRAPH = "paragraph"
    BLANK = "blank"


@dataclass(frozen=True, slots=True)
class Block:
    """
    One markdown construct with its marker stripped.

    ``level`` is the heading level for headings, ``number`` the source number
    of an ordered item and ``list_level`` the nesting derived from leading
    indentation of a list item.
    """

    kind: BlockKind
    content: str = ""
    level: Optional[int] = None
    number: Optional[int] = None
    list_level: int = 0

    @property
    def is_list_item(self) -> bool:
        return self.kind in (BlockKind.ORDERED_ITEM, BlockKind.UNORDERED_ITEM)

    @property
    def has_text(self) -> bool:
        return self.kind not in (BlockKind.HORIZONTAL_RULE, BlockKind.BLANK)

    def indentation_em(self, base_indent_em: float = 0.0) -> float:
        """Left indentation of the block's text in em."""
        if self.is_list_item:
            return base_indent_em + (self.list_level + 1) * LIST_INDENT_EM
        return base_indent_em

    def inline_style(self, base_indent_em: float = 0.0) -> TextStyle:
        """Style overlay applied to every segment of this block."""
        indentation = self.indentation_em(base_indent_em)
        if self.kind is BlockKind.HEADING:
            return TextStyle(bold=True, heading=self.level, indentation=indentation)
        if self.kind is BlockKind.ORDERED_ITEM:
            return TextStyle(is_list=True, list_kind=ListKind.ORDERED,
                             list_level=self.list_level, indentation=indentation)
        if self.kind is BlockKind.UNORDERED_ITEM:
            return TextStyle(is_list=True, list_kind=ListKind.UNORDERED,
                             list_level=self.list_level, indentation=indentation)
        return TextStyle(indentation=indentation)
