"""Value types shared by the parser, layout engine and renderers."""

from .block import LIST_INDENT_EM, Block, BlockKind
from .text_style import PLAIN, ListKind, TextSegment, TextStyle

__all__ = [
    "LIST_INDENT_EM",
    "Block",
    "BlockKind",
    "PLAIN",
    "ListKind",
    "TextSegment",
    "TextStyle",
]
