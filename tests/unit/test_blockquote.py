#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for nested blockquotes."""

import pytest

from monomd.blockquote import (
    BlockQuoteLine,
    QuoteNode,
    build_quote_tree,
    parse_nested_blockquote,
    tokenize_quote_lines,
)


@pytest.mark.unit
class TestTokenizeQuoteLines:
    """Tests for tokenize_quote_lines."""

    def test_depth_counts_prefixes(self) -> None:
        """Each "> " adds one level."""
        records = tokenize_quote_lines(["> a", "> > b", "> > > c"])
        assert records == [
            BlockQuoteLine(depth=1, content="a"),
            BlockQuoteLine(depth=2, content="b"),
            BlockQuoteLine(depth=3, content="c"),
        ]

    def test_prefix_needs_space(self) -> None:
        """">>" is content, not two levels."""
        assert tokenize_quote_lines(["> >>x"]) == [BlockQuoteLine(depth=1, content=">>x")]

    def test_depth_is_clamped(self) -> None:
        """Lines deeper than the limit fold into the deepest level."""
        assert tokenize_quote_lines(["> > > > x"], max_depth=2) == [BlockQuoteLine(depth=2, content="x")]


@pytest.mark.unit
class TestBuildQuoteTree:
    """Tests for build_quote_tree."""

    def test_children_in_source_order(self) -> None:
        """Text and nested quotes interleave as written."""
        tree = build_quote_tree(
            [
                BlockQuoteLine(1, "a"),
                BlockQuoteLine(2, "b"),
                BlockQuoteLine(1, "c"),
            ]
        )
        assert tree == QuoteNode(depth=1, children=["a", QuoteNode(depth=2, children=["b"]), "c"])


@pytest.mark.unit
class TestParseNestedBlockquote:
    """Tests for parse_nested_blockquote."""

    def test_single_level(self) -> None:
        """Lines at one level are joined by line breaks."""
        assert parse_nested_blockquote(["> one", "> two"]) == "<blockquote>one<br>two</blockquote>"

    def test_nested(self) -> None:
        """A deeper line opens a child quote."""
        assert parse_nested_blockquote(["> a", "> > b"]) == "<blockquote>a<br><blockquote>b</blockquote></blockquote>"

    def test_return_to_outer_level(self) -> None:
        """A shallower line closes the child quote."""
        assert parse_nested_blockquote(["> a", "> > b", "> c"]) == (
            "<blockquote>a<br><blockquote>b</blockquote><br>c</blockquote>"
        )

    @pytest.mark.parametrize("depth", [1, 2, 5, 9])
    def test_k_levels(self, depth: int) -> None:
        """k prefixes give exactly k nested quotes."""
        html = parse_nested_blockquote(["> " * depth + "deep"])
        assert html == "<blockquote>" * depth + "deep" + "</blockquote>" * depth

    def test_inline_formatting(self) -> None:
        """Quote lines are inline formatted."""
        assert parse_nested_blockquote(["> **b** and `c`"]) == "<blockquote><b>b</b> and <code>c</code></blockquote>"
