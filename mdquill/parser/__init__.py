"""Markdown parsing: block classification and inline tokenization."""

from .block_classifier import BlockClassifier, classify_line, classify_lines
from .inline_tokenizer import InlineTokenizer, apply_overlay, tokenize

__all__ = [
    "BlockClassifier",
    "classify_line",
    "classify_lines",
    "InlineTokenizer",
    "apply_overlay",
    "tokenize",
]
