#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/monomd/blockquote.py
"""Nested blockquotes.

Each ``"> "`` prefix on a line adds one level of quoting. A run of quote
lines is tokenized into :class:`BlockQuoteLine` records, folded into a tree
of :class:`QuoteNode` objects by depth, and rendered::

    > outer            <blockquote>outer<br>
    > > inner    ->      <blockquote>inner</blockquote>
    > outer again        <br>outer again</blockquote>

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Sequence, Union

from monomd.constants import DEFAULT_MAX_NESTING_DEPTH
from monomd.inline import parse_inline

if TYPE_CHECKING:
    from monomd.context import RenderContext

QUOTE_PREFIX = "> "


@dataclass(frozen=True)
class BlockQuoteLine:
    """One source line of a quote run with its prefixes removed."""

    depth: int
    content: str


@dataclass
class QuoteNode:
    """A ``<blockquote>``; children are text lines and nested quotes in source order."""

    depth: int
    children: list[Union[str, QuoteNode]] = field(default_factory=list)


def tokenize_quote_lines(lines: Sequence[str], max_depth: int = DEFAULT_MAX_NESTING_DEPTH) -> list[BlockQuoteLine]:
    """Count and strip the ``"> "`` prefixes of each line.

    Lines without a prefix are treated as depth 1 so a hand-built run still
    renders; depths beyond ``max_depth`` are clamped to it.
    """
    records = []
    for line in lines:
        depth = 0
        while line.startswith(QUOTE_PREFIX, depth * len(QUOTE_PREFIX)):
            depth += 1
        content = line[depth * len(QUOTE_PREFIX) :]
        records.append(BlockQuoteLine(depth=min(max(depth, 1), max_depth), content=content))
    return records


def build_quote_tree(records: Sequence[BlockQuoteLine]) -> QuoteNode:
    """Fold depth-tagged lines into one root :class:`QuoteNode`."""
    root, _ = _fold(records, 0, 1)
    return root


def _fold(records: Sequence[BlockQuoteLine], start: int, depth: int) -> tuple[QuoteNode, int]:
    node = QuoteNode(depth=depth)
    index = start
    while index < len(records):
        record = records[index]
        if record.depth < depth:
            break
        if record.depth == depth:
            node.children.append(record.content)
            index += 1
        else:
            child, index = _fold(records, index, depth + 1)
            node.children.append(child)
    return node, index


def render_quote(node: QuoteNode, context: RenderContext | None = None) -> str:
    """Render a quote tree; lines and child quotes are joined by ``<br>``."""
    parts = [
        render_quote(child, context) if isinstance(child, QuoteNode) else parse_inline(child, context)
        for child in node.children
    ]
    return f"<blockquote>{'<br>'.join(parts)}</blockquote>"


def parse_nested_blockquote(lines: Sequence[str], context: RenderContext | None = None) -> str:
    """Render a run of ``"> "``-prefixed lines as nested ``<blockquote>`` elements.

    Examples
    --------
        >>> parse_nested_blockquote(["> a", "> > b"])
        '<blockquote>a<br><blockquote>b</blockquote></blockquote>'

    """
    max_depth = context.options.max_nesting_depth if context is not None else DEFAULT_MAX_NESTING_DEPTH
    return render_quote(build_quote_tree(tokenize_quote_lines(lines, max_depth)), context)
