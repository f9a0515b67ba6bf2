"""
Tests for PaginationController.
"""

from dataclasses import replace

import pytest

from mdquill.engine.layout_primitives import CursorState, LayoutOptions
from mdquill.engine.pagination_manager import BULLET, PaginationController, PaginationState
from mdquill.exceptions import LayoutError, MeasurementUnavailableError
from mdquill.models.block import Block, BlockKind
from mdquill.parser.block_classifier import classify_lines


def _page_cursor(y):
    return CursorState(y=y, page_height=100.0, top_margin=5.0, bottom_margin=10.0)


def _layout(controller, text, options, x=0.0):
    for block in classify_lines(text):
        controller.layout_block(block, x, options)


class TestEnsureSpace:
    """Test cases for page break decisions."""

    def test_break_when_line_overflows(self, context):
        """Test a 10pt line at y=85 with a 90pt limit."""
        pages = []
        cursor = _page_cursor(85.0)
        controller = PaginationController(context, cursor, on_page_break=pages.append)

        assert controller.ensure_space(10.0) is True
        assert cursor.y == pytest.approx(5.0)
        assert controller.page_number == 2
        assert controller.page_breaks == 1
        assert pages == [1]
        assert context.calls == [("page",)]

    def test_no_break_when_line_fits_exactly(self, context):
        controller = PaginationController(context, _page_cursor(80.0))

        assert controller.ensure_space(10.0) is False
        assert context.page_breaks == 0

    def test_callback_runs_before_new_page(self, context):
        """Test that the finished page is reported while it is still current."""
        events = []
        controller = PaginationController(
            context,
            _page_cursor(85.0),
            on_page_break=lambda number: events.append((number, context.page_breaks)),
        )
        controller.ensure_space(10.0)

        assert events == [(1, 0)]

    def test_empty_page_is_never_broken(self, context):
        """Test that content taller than a page does not loop."""
        controller = PaginationController(context, _page_cursor(5.0))

        assert controller.ensure_space(500.0) is False
        assert context.page_breaks == 0
        assert controller.state is PaginationState.WRITING_PAGE

    def test_cursor_reset_uses_new_page_height(self, make_context):
        context = make_context(page_height=100.0)
        controller = PaginationController(context, _page_cursor(85.0))
        context.page_height = 300.0
        controller.break_page()

        assert controller.cursor.page_height == 300.0
        assert controller.cursor.limit == pytest.approx(290.0)

    def test_finish_blocks_further_writes(self, context, options):
        controller = PaginationController(context, _page_cursor(5.0))
        controller.finish()

        assert controller.state is PaginationState.DONE
        with pytest.raises(LayoutError):
            controller.ensure_space(10.0)
        with pytest.raises(LayoutError):
            controller.layout_block(Block(BlockKind.PARAGRAPH, "x"), 0.0, options)

    def test_advance_rejects_negative(self, context):
        controller = PaginationController(context, _page_cursor(5.0))

        with pytest.raises(ValueError):
            controller.advance(-1.0)


class TestLayoutBlock:
    """Test cases for laying out classified blocks."""

    def test_break_happens_before_drawing(self, context, options):
        controller = PaginationController(context, _page_cursor(85.0))
        y = controller.layout_block(Block(BlockKind.PARAGRAPH, "hello"), 0.0, options)

        assert context.calls[0] == ("page",)
        assert context.texts == [("text", "hello", 0.0, pytest.approx(15.0), (False, False, 10.0, False))]
        assert y == pytest.approx(15.0)

    def test_each_line_checked(self, make_context):
        """Test that a paragraph continues on the next page mid-block."""
        context = make_context()
        options = LayoutOptions(max_width=40.0, font_size=10.0, line_spacing=1.0)
        controller = PaginationController(context, _page_cursor(70.0))
        controller.layout_block(Block(BlockKind.PARAGRAPH, "aaaa bbbb cccc"), 0.0, options)

        drawn = [(call[1], call[3]) for call in context.texts]
        assert drawn == [("aaaa", pytest.approx(80.0)), ("bbbb", pytest.approx(90.0)), ("cccc", pytest.approx(15.0))]
        assert context.page_breaks == 1
        assert context.calls.index(("page",)) == 2

    def test_heading_checks_whole_height(self, context, options):
        """Test that a two-line heading moves to the next page as a whole."""
        controller = PaginationController(context, _page_cursor(50.0))
        controller.layout_block(Block(BlockKind.HEADING, "aaaa bbbb cccc", level=1), 0.0, options)

        assert context.calls[0] == ("page",)
        assert [call[1] for call in context.texts] == ["aaaa bbbb", "cccc"]
        assert [call[3] for call in context.texts] == [pytest.approx(27.0), pytest.approx(49.0)]

    def test_heading_style(self, context, options, cursor):
        controller = PaginationController(context, cursor)
        controller.layout_block(Block(BlockKind.HEADING, "Title", level=1), 0.0, options)

        bold, italic, font_size, monospace = context.texts[0][4]
        assert bold and not italic and not monospace
        assert font_size == pytest.approx(22.0)
        assert cursor.y == pytest.approx(22.0)

    def test_oversized_lines_terminate(self, make_context):
        """Test that lines taller than a page still progress one page at a time."""
        context = make_context()
        options = LayoutOptions(max_width=40.0, font_size=200.0, line_spacing=1.0)
        controller = PaginationController(context, _page_cursor(5.0))
        controller.layout_block(Block(BlockKind.PARAGRAPH, "aaaa bbbb cccc"), 0.0, options)

        assert len(context.texts) == 3
        assert controller.page_breaks == 2

    def test_blank_advances_one_line(self, context, options, cursor):
        controller = PaginationController(context, cursor)
        _layout(controller, "a\n\n\nb", options)

        assert [call[3] for call in context.texts] == [pytest.approx(10.0), pytest.approx(30.0)]
        assert cursor.y == pytest.approx(30.0)

    def test_markup_only_paragraph_advances(self, context, options, cursor):
        controller = PaginationController(context, cursor)
        controller.layout_block(Block(BlockKind.PARAGRAPH, "****"), 0.0, options)

        assert context.texts == []
        assert cursor.y == pytest.approx(10.0)

    def test_horizontal_rule(self, context, options, cursor):
        controller = PaginationController(context, cursor)
        controller.layout_block(Block(BlockKind.HORIZONTAL_RULE), 10.0, options)

        assert context.lines == [("line", 10.0, pytest.approx(5.0), pytest.approx(110.0), pytest.approx(5.0))]
        assert cursor.y == pytest.approx(10.0)

    def test_advance_last_line_false(self, context, options, cursor):
        controller = PaginationController(context, cursor)
        y = controller.layout_block(Block(BlockKind.PARAGRAPH, "aaaa bbbb cccc"), 0.0, options,
                                    advance_last_line=False)

        assert y == pytest.approx(10.0)


class TestListMarkers:
    """Test cases for list markers and ordered counters."""

    def test_ordered_run_across_blank_line(self, context, options, cursor):
        """Test that a blank line keeps the ordered counter."""
        controller = PaginationController(context, cursor)
        _layout(controller, "1. one\n\n2. two", options)

        assert context.drawn_text == ["1.", "one", "2.", "two"]

    def test_counter_increments_regardless_of_source_numbers(self, context, options, cursor):
        controller = PaginationController(context, cursor)
        _layout(controller, "1. a\n1. b\n1. c", options)

        assert context.drawn_text == ["1.", "a", "2.", "b", "3.", "c"]

    def test_run_starts_at_first_number(self, context, options, cursor):
        controller = PaginationController(context, cursor)
        _layout(controller, "3. a\n7. b", options)

        assert context.drawn_text == ["3.", "a", "4.", "b"]

    def test_other_block_resets_counter(self, context, options, cursor):
        controller = PaginationController(context, cursor)
        _layout(controller, "1. a\n2. b\nbreak\n5. c\n- d\n1. e", options)

        assert context.drawn_text == ["1.", "a", "2.", "b", "break", "5.", "c", BULLET, "d", "1.", "e"]

    def test_marker_position(self, context, options, cursor):
        """Test that markers sit one em left of the list text."""
        controller = PaginationController(context, cursor)
        _layout(controller, "- item", options, x=20.0)

        marker, text = context.texts
        assert marker[1] == BULLET
        assert marker[2] == pytest.approx(20.0 + 15.0 - 10.0)
        assert text[2] == pytest.approx(20.0 + 15.0)
        assert marker[3] == text[3]

    def test_nested_item_indent(self, context, options, cursor):
        controller = PaginationController(context, cursor)
        _layout(controller, "  - nested", options)

        marker, text = context.texts
        assert marker[2] == pytest.approx(20.0)
        assert text[2] == pytest.approx(30.0)

    def test_marker_only_on_first_line(self, make_context, cursor):
        context = make_context()
        options = LayoutOptions(max_width=60.0, font_size=10.0, line_spacing=1.0)
        controller = PaginationController(context, cursor)
        _layout(controller, "1. aaa bbb", options)

        assert context.drawn_text == ["1.", "aaa", "bbb"]

    def test_marker_text(self, context, cursor):
        controller = PaginationController(context, cursor)

        assert controller.marker_text(Block(BlockKind.UNORDERED_ITEM, "x")) == BULLET
        assert controller.marker_text(Block(BlockKind.ORDERED_ITEM, "x", number=4)) == "4."

    def test_metrics_are_shared_per_options(self, context, options, cursor):
        controller = PaginationController(context, cursor)

        assert controller.metrics_for(options) is controller.metrics_for(options)


class TestFontFamily:
    """Test cases for the per-call font family."""

    def test_block_uses_options_family(self, context, cursor):
        """Test that a block is laid out in its family and the context family is restored."""
        options = LayoutOptions(max_width=100.0, font_size=10.0, line_spacing=1.0, font_family="Times-Roman")
        controller = PaginationController(context, cursor)
        controller.layout_block(Block(BlockKind.PARAGRAPH, "hello"), 0.0, options)

        assert context.families == ["Times-Roman", "Helvetica"]
        assert context.family == "Helvetica"
        assert context.drawn_text == ["hello"]

    def test_same_family_is_not_restored(self, context, options, cursor):
        controller = PaginationController(context, cursor)
        controller.layout_block(Block(BlockKind.PARAGRAPH, "hello"), 0.0, options)

        assert context.families == ["Helvetica"]

    def test_family_restored_after_failure(self, make_context, cursor):
        context = make_context(char_width=-1.0)
        options = LayoutOptions(max_width=100.0, font_family="Courier")
        controller = PaginationController(context, cursor)

        with pytest.raises(MeasurementUnavailableError):
            controller.layout_block(Block(BlockKind.PARAGRAPH, "x"), 0.0, options)
        assert context.family == "Helvetica"

    def test_metrics_cached_per_family(self, context, options, cursor):
        """Test that widths measured in one family are never reused for another."""
        controller = PaginationController(context, cursor)
        times = replace(options, font_family="Times-Roman")

        assert controller.metrics_for(options) is not controller.metrics_for(times)
        assert controller.metrics_for(times) is controller.metrics_for(times)
