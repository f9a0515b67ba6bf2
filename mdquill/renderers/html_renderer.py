"""
HTML preview of markdown text.

Shares the block classifier and inline tokenizer with the PDF path so the
preview shows exactly the structure that will be laid out.
"""

from __future__ import annotations

import html
import logging
from typing import List, Optional

from ..models.block import LIST_INDENT_EM, Block, BlockKind
from ..models.text_style import TextSegment
from ..parser.block_classifier import BlockClassifier
from ..parser.inline_tokenizer import InlineTokenizer

logger = logging.getLogger(__name__)

_LIST_TAGS = {
    BlockKind.ORDERED_ITEM: "ol",
    BlockKind.UNORDERED_ITEM: "ul",
}


def render_segment(segment: TextSegment) -> str:
    """Escape one segment and wrap it in the tags of its style."""
    style = segment.style
    text = html.escape(segment.text, quote=False)
    if style.code:
        text = f"<code>{text}</code>"
    if style.strikethrough:
        text = f"<del>{text}</del>"
    if style.italic:
        text = f"<em>{text}</em>"
    if style.bold:
        text = f"<strong>{text}</strong>"
    if style.link:
        text = f'<a href="{html.escape(style.link, quote=True)}">{text}</a>'
    return text


class HtmlPreviewRenderer:
    """Converts markdown text into an HTML fragment."""

    def __init__(self) -> None:
        self.classifier = BlockClassifier()
        self.tokenizer = InlineTokenizer()

    def render_inline(self, text: str) -> str:
        return "".join(render_segment(segment) for segment in self.tokenizer.tokenize(text))

    def render(self, markdown_text: Optional[str]) -> str:
        parts: List[str] = []
        open_list: Optional[str] = None

        for block in self.classifier.classify_lines(markdown_text):
            tag = _LIST_TAGS.get(block.kind)
            if open_list is not None and tag != open_list:
                parts.append(f"</{open_list}>")
                open_list = None

            if block.kind is BlockKind.BLANK:
                continue

            if tag is not None:
                if open_list is None:
                    parts.append(self._open_list(block, tag))
                    open_list = tag
                parts.append(self._list_item(block))
            elif block.kind is BlockKind.HEADING:
                parts.append(f"<h{block.level}>{self.render_inline(block.content)}</h{block.level}>")
            elif block.kind is BlockKind.HORIZONTAL_RULE:
                parts.append("<hr />")
            else:
                parts.append(f"<p>{self.render_inline(block.content)}</p>")

        if open_list is not None:
            parts.append(f"</{open_list}>")

        logger.debug("Rendered HTML preview with %d elements", len(parts))
        return "\n".join(parts)

    @staticmethod
    def _open_list(block: Block, tag: str) -> str:
        if tag == "ol" and block.number is not None and block.number != 1:
            return f'<ol start="{block.number}">'
        return f"<{tag}>"

    def _list_item(self, block: Block) -> str:
        content = self.render_inline(block.content)
        if block.list_level > 0:
            margin = block.list_level * LIST_INDENT_EM
            return f'<li style="margin-left: {margin:g}em">{content}</li>'
        return f"<li>{content}</li>"


def render_html(markdown_text: Optional[str]) -> str:
    return HtmlPreviewRenderer().render(markdown_text)
