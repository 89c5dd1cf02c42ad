#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the table model and renderer."""

import pytest

from monomd.exceptions import ParsingError, TableFormatError
from monomd.tables import TableModel, parse_table, render_table, resolve_alignment, split_row


@pytest.mark.unit
class TestRowSplitting:
    """Tests for split_row and resolve_alignment."""

    def test_cells_are_stripped(self) -> None:
        """Outer pipes are dropped and cells trimmed."""
        assert split_row("|  a | b  |") == ["a", "b"]

    def test_empty_inner_cells_are_kept(self) -> None:
        """Empty cells keep their position."""
        assert split_row("| a |  | c |") == ["a", "", "c"]

    @pytest.mark.parametrize(
        "cell,alignment",
        [(":---:", "center"), (":-:", "center"), ("---:", "right"), ("---", "left"), (":---", "left"), ("", "left")],
    )
    def test_alignment(self, cell: str, alignment: str) -> None:
        """Colons pick the alignment."""
        assert resolve_alignment(cell) == alignment


@pytest.mark.unit
class TestParseTable:
    """Tests for parse_table."""

    def test_basic_model(self) -> None:
        """Header, alignments, rows and caption are separated."""
        model = parse_table(["| N | A |", "|---|:-:|", "| x | 1 |", "| y | 2 |"], caption="Cap")

        assert model.headers == ["N", "A"]
        assert model.alignments == ["left", "center"]
        assert model.rows == [["x", "1"], ["y", "2"]]
        assert model.caption == "Cap"

    def test_missing_alignment_defaults_to_left(self) -> None:
        """Columns past the alignment row are left-aligned."""
        model = parse_table(["| a | b | c |", "|--:|"])
        assert [model.alignment(i) for i in range(3)] == ["right", "left", "left"]

    @pytest.mark.parametrize("lines", [[], ["| a |"], ["| a |", "   "]])
    def test_too_few_lines(self, lines: list) -> None:
        """A header and an alignment line are required."""
        with pytest.raises(TableFormatError) as exc_info:
            parse_table(lines)

        assert isinstance(exc_info.value, ParsingError)
        assert exc_info.value.parsing_stage == "table"


@pytest.mark.unit
class TestRenderTable:
    """Tests for render_table."""

    def test_ragged_rows_render_as_written(self) -> None:
        """Rows longer or shorter than the header are not padded or cut."""
        model = TableModel(headers=["a", "b"], alignments=["center", "right"], rows=[["1", "2", "3"], ["4"]])
        html = render_table(model)

        assert (
            '<tr><td style="text-align: center">1</td><td style="text-align: right">2</td>'
            '<td style="text-align: left">3</td></tr>'
        ) in html
        assert '<tr><td style="text-align: center">4</td></tr>' in html

    def test_cells_get_inline_formatting(self) -> None:
        """Header and data cells are formatted."""
        model = TableModel(headers=["**H**"], alignments=["left"], rows=[["~~x~~"]])
        html = render_table(model)

        assert '<th style="text-align: left"><b>H</b></th>' in html
        assert '<td style="text-align: left"><s>x</s></td>' in html

    def test_caption_is_escaped_not_formatted(self) -> None:
        """Captions are plain text."""
        model = TableModel(headers=["a"], alignments=["left"], caption="**<x>**")
        assert "<caption>**&lt;x&gt;**</caption>" in render_table(model)

    def test_empty_caption_is_rendered(self) -> None:
        """An empty bracket pair still yields a caption element."""
        model = TableModel(headers=["a"], alignments=["left"], caption="")
        assert render_table(model).startswith("<table><caption></caption><thead>")

    def test_no_caption(self) -> None:
        """Without a caption the table starts with its head."""
        model = TableModel(headers=["a"], alignments=["left"])
        assert render_table(model) == (
            '<table><thead><tr><th style="text-align: left">a</th></tr></thead><tbody></tbody></table>'
        )
