"""
Tests for block classification.
"""

import pytest

from mdquill.models.block import Block, BlockKind
from mdquill.models.text_style import ListKind, TextStyle
from mdquill.parser.block_classifier import BlockClassifier, classify_line, classify_lines


class TestClassifyLine:
    """Test cases for single-line classification."""

    @pytest.mark.parametrize("raw, level, content", [
        ("# Title", 1, "Title"),
        ("### Third", 3, "Third"),
        ("###### Six", 6, "Six"),
        ("# C#", 1, "C#"),
    ])
    def test_headings(self, raw, level, content):
        block = classify_line(raw)

        assert block.kind is BlockKind.HEADING
        assert block.level == level
        assert block.content == content

    def test_seven_hashes_is_paragraph(self):
        assert classify_line("####### too deep").kind is BlockKind.PARAGRAPH

    def test_hash_without_space_is_paragraph(self):
        assert classify_line("#hashtag").kind is BlockKind.PARAGRAPH

    def test_ordered_item(self):
        block = classify_line("12. twelfth")

        assert block == Block(BlockKind.ORDERED_ITEM, "twelfth", number=12)

    @pytest.mark.parametrize("marker", ["-", "*", "+"])
    def test_unordered_item(self, marker):
        block = classify_line(f"{marker} item")

        assert block.kind is BlockKind.UNORDERED_ITEM
        assert block.content == "item"

    @pytest.mark.parametrize("raw", ["---", "***", "___", "-----", "  ---  "])
    def test_horizontal_rule(self, raw):
        assert classify_line(raw).kind is BlockKind.HORIZONTAL_RULE

    def test_bold_line_is_not_a_list_item(self):
        """Test that a line opening with ** stays a paragraph."""
        block = classify_line("**bold** start")

        assert block.kind is BlockKind.PARAGRAPH
        assert block.content == "**bold** start"

    def test_blank(self):
        assert classify_line("   ").kind is BlockKind.BLANK

    def test_list_level_from_spaces(self):
        """Test that every two leading spaces add one nesting level."""
        assert classify_line("- top").list_level == 0
        assert classify_line("  - nested").list_level == 1
        assert classify_line("    1. deeper").list_level == 2

    def test_list_level_from_tab(self):
        assert classify_line("\t- nested").list_level == 1

    def test_paragraph_is_stripped(self):
        assert classify_line("   indented text  ").content == "indented text"


class TestClassifyLines:
    """Test cases for whole-text classification."""

    def test_empty(self):
        assert classify_lines("") == []
        assert classify_lines(None) == []

    def test_blank_runs_collapse(self):
        """Test that consecutive blank lines become one blank block."""
        kinds = [block.kind for block in classify_lines("a\n\n\n\nb")]

        assert kinds == [BlockKind.PARAGRAPH, BlockKind.BLANK, BlockKind.PARAGRAPH]

    def test_leading_and_trailing_blanks_dropped(self):
        kinds = [block.kind for block in classify_lines("\n\na\n\n")]

        assert kinds == [BlockKind.PARAGRAPH]

    def test_windows_newlines(self):
        blocks = BlockClassifier().classify_lines("# T\r\n- x\r\n")

        assert [block.kind for block in blocks] == [BlockKind.HEADING, BlockKind.UNORDERED_ITEM]
        assert blocks[1].content == "x"


class TestBlockStyle:
    """Test cases for block overlays."""

    def test_heading_overlay(self):
        """Test that headings are bold with their level and scale."""
        style = classify_line("# Title").inline_style()

        assert style.bold
        assert style.heading == 1
        assert style.heading_scale == pytest.approx(2.2)

    def test_list_overlay(self):
        style = classify_line("  1. item").inline_style(base_indent_em=1.0)

        assert style.is_list
        assert style.list_kind is ListKind.ORDERED
        assert style.list_level == 1
        assert style.indentation == pytest.approx(1.0 + 2 * 1.5)

    def test_paragraph_overlay_keeps_base_indent(self):
        assert classify_line("text").inline_style(2.0) == TextStyle(indentation=2.0)

    def test_has_text(self):
        assert classify_line("text").has_text
        assert not classify_line("---").has_text


class TestTextStyle:
    """Test cases for style validation."""

    @pytest.mark.parametrize("kwargs", [
        {"heading": 0},
        {"heading": 7},
        {"list_level": -1},
        {"indentation": -0.5},
    ])
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            TextStyle(**kwargs)

    def test_evolve_returns_new_instance(self):
        base = TextStyle()
        bold = base.evolve(bold=True)

        assert bold.bold
        assert not base.bold
