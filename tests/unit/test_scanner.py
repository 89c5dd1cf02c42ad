#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the line scanner's dispatch and run grouping."""

import pytest

from monomd.context import RenderContext
from monomd.placeholders import BLANK_MARKER, Category
from monomd.scanner import LineScanner


def _scan(context: RenderContext, text: str) -> str:
    return LineScanner(context).scan(text)


@pytest.mark.unit
class TestHeadings:
    """Tests for heading lines."""

    @pytest.mark.parametrize("level", range(1, 7))
    def test_levels(self, context: RenderContext, level: int) -> None:
        """One to six hashes pick the heading level."""
        assert _scan(context, "#" * level + " Title") == f"<h{level}>Title</h{level}>"

    @pytest.mark.parametrize("line", ["####### seven", "#nospace"])
    def test_not_headings(self, context: RenderContext, line: str) -> None:
        """Seven hashes or a missing space make a paragraph."""
        assert _scan(context, line) == f"<p>{line}</p>"

    def test_heading_content_is_formatted(self, context: RenderContext) -> None:
        """Heading text gets inline formatting."""
        assert _scan(context, "## **Bold** title") == "<h2><b>Bold</b> title</h2>"

    def test_heading_wins_over_list(self, context: RenderContext) -> None:
        """Dispatch tries headings first."""
        assert _scan(context, "# - item") == "<h1>- item</h1>"


@pytest.mark.unit
class TestRuns:
    """Tests for blockquote and list runs."""

    def test_quote_run_ends_at_other_line(self, context: RenderContext) -> None:
        """Consecutive quote lines form one quote."""
        assert _scan(context, "> a\n> b\nc") == "<blockquote>a<br>b</blockquote>\n<p>c</p>"

    def test_quote_needs_space(self, context: RenderContext) -> None:
        """">" without a space is ordinary text."""
        assert _scan(context, ">no space") == "<p>>no space</p>"

    def test_quote_wins_over_list(self, context: RenderContext) -> None:
        """A quoted list marker is quote content."""
        assert _scan(context, "> - x") == "<blockquote>- x</blockquote>"

    def test_list_run_ends_at_paragraph(self, context: RenderContext) -> None:
        """A non-list line without a preceding hard break ends the list."""
        assert _scan(context, "- a\n- b\nc") == "<ul><li>a</li><li>b</li></ul>\n<p>c</p>"

    def test_list_continuation(self, context: RenderContext) -> None:
        """After two trailing spaces the next line continues the item."""
        assert _scan(context, "- a  \ncontinued\n- b") == "<ul><li>a<br>continued</li><li>b</li></ul>"

    def test_blank_line_ends_list_even_after_hard_break(self, context: RenderContext) -> None:
        """Blank markers are never continuations."""
        html = _scan(context, f"- a  \n{BLANK_MARKER}\nb")
        assert html.startswith("<ul><li>a")
        assert html.endswith(f"</ul>\n<p>{BLANK_MARKER}</p>\n<p>b</p>")

    def test_separate_lists(self, context: RenderContext) -> None:
        """A blank line splits two lists."""
        html = _scan(context, f"- a\n{BLANK_MARKER}\n1. b")
        assert html == f"<ul><li>a</li></ul>\n<p>{BLANK_MARKER}</p>\n<ol><li>b</li></ol>"

    def test_checkbox_ids_from_context(self, context: RenderContext) -> None:
        """Checklist ids come from the context's factory across lists."""
        html = _scan(context, f"- [ ] a\n{BLANK_MARKER}\n- [x] b")
        assert 'id="cb-1"' in html
        assert 'id="cb-2"' in html


@pytest.mark.unit
class TestParagraphs:
    """Tests for paragraphs, handles and blank lines."""

    def test_paragraph_per_line(self, context: RenderContext) -> None:
        """Each plain line is its own paragraph."""
        assert _scan(context, "one\ntwo") == "<p>one</p>\n<p>two</p>"

    def test_block_handle_is_not_wrapped(self, context: RenderContext) -> None:
        """Lines holding only a block span are emitted bare."""
        handle = context.placeholders.add(Category.TABLE, "<table></table>", "| a |\n|---|")
        assert _scan(context, f"intro\n{handle}") == f"<p>intro</p>\n{handle}"

    def test_inline_handle_is_wrapped(self, context: RenderContext) -> None:
        """Internal links are inline and stay inside a paragraph."""
        handle = context.placeholders.add(Category.INTERNAL_LINK, "<span></span>", "!!a!!(b)")
        assert _scan(context, handle) == f"<p>{handle}</p>"

    def test_blank_marker(self, context: RenderContext) -> None:
        """A blank-line marker becomes an empty paragraph."""
        assert _scan(context, BLANK_MARKER) == f"<p>{BLANK_MARKER}</p>"

    def test_trailing_whitespace_line_is_dropped(self, context: RenderContext) -> None:
        """The unmarked final line produces nothing when it is empty."""
        assert _scan(context, "a\n   ") == "<p>a</p>"
        assert _scan(context, "") == ""
