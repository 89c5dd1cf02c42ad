#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/monomd/tables.py
"""Pipe table model and rendering.

A table span is a header line, an alignment line and any number of data
rows, all pipe-delimited::

    | Name | Score |[Results]
    |------|:-----:|
    | Ann  | 12    |

The optional ``[caption]`` sits immediately after the header's closing pipe.
It is captured by the extraction pattern and handed to :func:`parse_table`
separately, so the header line arriving here never contains it.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Sequence

from monomd.constants import Alignment
from monomd.exceptions import TableFormatError
from monomd.html_utils import escape_html, style_attr
from monomd.inline import parse_inline

if TYPE_CHECKING:
    from monomd.context import RenderContext

logger = logging.getLogger(__name__)

DEFAULT_ALIGNMENT: Alignment = "left"


@dataclass
class TableModel:
    """Parsed table ready for rendering.

    Parameters
    ----------
    headers : list of str
        Header cell source text
    alignments : list of {"left", "center", "right"}
        Column alignments, by position
    rows : list of list of str
        Data cell source text; rows may be shorter or longer than the header
    caption : str or None, default = None
        Caption text

    """

    headers: list[str]
    alignments: list[Alignment]
    rows: list[list[str]] = field(default_factory=list)
    caption: str | None = None

    def alignment(self, column: int) -> Alignment:
        """Return the alignment of ``column``, left when the alignment row is shorter."""
        if column < len(self.alignments):
            return self.alignments[column]
        return DEFAULT_ALIGNMENT


def split_row(line: str) -> list[str]:
    """Split a pipe-delimited line into stripped cell texts.

    The outer pipes delimit the row; empty cells between inner pipes are kept.

    Examples
    --------
        >>> split_row("| a |  | c |")
        ['a', '', 'c']

    """
    stripped = line.strip()
    if stripped.startswith("|"):
        stripped = stripped[1:]
    if stripped.endswith("|"):
        stripped = stripped[:-1]
    return [cell.strip() for cell in stripped.split("|")]


def resolve_alignment(cell: str) -> Alignment:
    """Map an alignment-row cell to an alignment.

    ``:---:`` is center, a trailing colon is right, anything else is left.
    """
    cell = cell.strip()
    if cell.startswith(":") and cell.endswith(":"):
        return "center"
    if cell.endswith(":"):
        return "right"
    return "left"


def parse_table(lines: Sequence[str], caption: str | None = None) -> TableModel:
    """Build a :class:`TableModel` from the lines of a table span.

    Parameters
    ----------
    lines : sequence of str
        Header line, alignment line, then data rows
    caption : str, optional
        Caption captured alongside the header line

    Returns
    -------
    TableModel
        The parsed table

    Raises
    ------
    TableFormatError
        If fewer than two lines are given.

    """
    lines = [line for line in lines if line.strip()]
    if len(lines) < 2:
        raise TableFormatError(f"A table needs a header line and an alignment line, got {len(lines)} line(s)")

    header_line, alignment_line, *data_lines = lines
    return TableModel(
        headers=split_row(header_line),
        alignments=[resolve_alignment(cell) for cell in split_row(alignment_line)],
        rows=[split_row(line) for line in data_lines],
        caption=caption,
    )


def render_table(model: TableModel, context: RenderContext | None = None) -> str:
    """Render a table model as a ``<table>`` element.

    Header and data cells get inline formatting; the caption is escaped only.
    Cells are aligned by position with no bounds check against the header, so
    ragged rows render as written.
    """
    parts = ["<table>"]
    if model.caption is not None:
        parts.append(f"<caption>{escape_html(model.caption)}</caption>")

    parts.append("<thead><tr>")
    for column, header in enumerate(model.headers):
        parts.append(f"<th{style_attr(model.alignment(column))}>{parse_inline(header, context)}</th>")
    parts.append("</tr></thead><tbody>")

    for row in model.rows:
        parts.append("<tr>")
        for column, cell in enumerate(row):
            parts.append(f"<td{style_attr(model.alignment(column))}>{parse_inline(cell, context)}</td>")
        parts.append("</tr>")

    parts.append("</tbody></table>")
    logger.debug("Rendered table with %d columns and %d rows", len(model.headers), len(model.rows))
    return "".join(parts)
