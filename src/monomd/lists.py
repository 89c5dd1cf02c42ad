#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/monomd/lists.py
"""Nested bulleted, numbered and checklist lists.

Every list line carries its own nesting level (two spaces of indentation per
level) and its own kind, so kinds can be mixed freely::

    - fruit                 <ul><li>fruit<ol>
      1. apple         ->     <li>apple</li>
      2. pear                 <li>pear</li></ol></li>
    - [x] done              <li class="checklist-item">...</li></ul>

A run of list lines is tokenized into :class:`ListEntry` records, folded into
a :class:`ListNode` tree and rendered. A nested list's tag follows the kind
of its own first item, not the kind of its parent.

"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field, replace
from typing import Optional, Sequence

from monomd.constants import (
    CSS_CLASS_CHECKLIST_CONTENT,
    CSS_CLASS_CHECKLIST_ITEM,
    DEFAULT_MAX_NESTING_DEPTH,
    LIST_INDENT_WIDTH,
    ListKind,
)
from monomd.context import IdFactory, RenderContext
from monomd.exceptions import ListFormatError
from monomd.html_utils import escape_html
from monomd.inline import parse_inline

logger = logging.getLogger(__name__)

LIST_LINE_RE = re.compile(r"^\s*(?:[-*]|\d+\.)\s")

_CHECKLIST_RE = re.compile(r"^(\s*)- \[([ xX])\]\s(.*)$")
_ORDERED_RE = re.compile(r"^(\s*)\d+\.\s(.*)$")
_BULLET_RE = re.compile(r"^(\s*)[-*]\s(.*)$")
_HARD_BREAK_RE = re.compile(r"  \n[ \t]*")


def is_list_line(line: str) -> bool:
    """Return True if ``line`` starts a bulleted, numbered or checklist item."""
    return LIST_LINE_RE.match(line) is not None


@dataclass(frozen=True)
class ListEntry:
    """One list item as written: level, kind, check state and raw content."""

    level: int
    kind: ListKind
    content: str
    checked: Optional[bool] = None


@dataclass
class ListNodeItem:
    """A rendered ``<li>`` with an optional nested list."""

    entry: ListEntry
    children: Optional[ListNode] = None


@dataclass
class ListNode:
    """A ``<ul>`` or ``<ol>`` container."""

    ordered: bool
    items: list[ListNodeItem] = field(default_factory=list)


def tokenize_list_item(item: str) -> ListEntry:
    """Classify one list item.

    ``item`` is the item's first line, optionally followed by continuation
    lines joined with ``"\\n"``. Continuations that follow a line ending in
    two spaces become ``<br>`` breaks.

    Examples
    --------
        >>> tokenize_list_item("  - [x] ship it")
        ListEntry(level=1, kind='checklist', content='ship it', checked=True)

    """
    first_line, newline, rest = item.partition("\n")
    indent = len(first_line) - len(first_line.lstrip())
    level = indent // LIST_INDENT_WIDTH

    match = _CHECKLIST_RE.match(first_line)
    if match:
        kind: ListKind = "checklist"
        checked: Optional[bool] = match.group(2) in "xX"
        content = match.group(3)
    else:
        checked = None
        match = _ORDERED_RE.match(first_line)
        if match:
            kind = "ordered"
        else:
            match = _BULLET_RE.match(first_line)
            kind = "unordered"
        content = match.group(2) if match else first_line.strip()

    content = _HARD_BREAK_RE.sub("<br>", content + newline + rest)
    return ListEntry(level=level, kind=kind, content=content, checked=checked)


def build_list_tree(entries: Sequence[ListEntry], max_depth: int = DEFAULT_MAX_NESTING_DEPTH) -> ListNode:
    """Fold a flat run of entries into a :class:`ListNode` tree.

    Levels are first clamped so that no entry sits more than one level below
    its predecessor (and none deeper than ``max_depth``); otherwise such an
    entry would have no parent to attach to.

    Raises
    ------
    ListFormatError
        If ``entries`` is empty.

    """
    if not entries:
        raise ListFormatError("A list needs at least one item")

    normalized = []
    previous_level = -1
    for entry in entries:
        level = min(entry.level, previous_level + 1, max_depth - 1)
        normalized.append(entry if level == entry.level else replace(entry, level=level))
        previous_level = level

    items, _ = _fold(normalized, 0, -1)
    return ListNode(ordered=normalized[0].kind == "ordered", items=items)


def _fold(entries: Sequence[ListEntry], start: int, parent_level: int) -> tuple[list[ListNodeItem], int]:
    items = []
    index = start
    while index < len(entries):
        entry = entries[index]
        if entry.level <= parent_level:
            break
        item = ListNodeItem(entry=entry)
        items.append(item)
        index += 1
        if index < len(entries) and entries[index].level > entry.level:
            child_ordered = entries[index].kind == "ordered"
            child_items, index = _fold(entries, index, entry.level)
            item.children = ListNode(ordered=child_ordered, items=child_items)
    return items, index


def render_list(node: ListNode, context: RenderContext) -> str:
    """Render a list tree; checklist checkboxes take ids from ``context``."""
    tag = "ol" if node.ordered else "ul"
    body = "".join(_render_item(item, context) for item in node.items)
    return f"<{tag}>{body}</{tag}>"


def _render_item(item: ListNodeItem, context: RenderContext) -> str:
    entry = item.entry
    content = parse_inline(entry.content, context)
    if entry.kind == "checklist":
        box_id = escape_html(context.next_id())
        checked = " checked" if entry.checked else ""
        head = (
            f'<li class="{CSS_CLASS_CHECKLIST_ITEM}"><div class="{CSS_CLASS_CHECKLIST_CONTENT}">'
            f'<input type="checkbox" id="{box_id}"{checked} disabled>'
            f'<label for="{box_id}">{content}</label></div>'
        )
    else:
        head = f"<li>{content}"
    nested = render_list(item.children, context) if item.children is not None else ""
    return f"{head}{nested}</li>"


def parse_list(
    items: Sequence[str],
    context: RenderContext | None = None,
    id_factory: IdFactory | None = None,
) -> str:
    """Render a run of list items as nested ``<ul>``/``<ol>`` elements.

    Parameters
    ----------
    items : sequence of str
        One string per item: the item line plus any continuation lines
        joined with ``"\\n"``
    context : RenderContext, optional
        Per-call state; a fresh one is created when omitted
    id_factory : callable, optional
        Checkbox id source used when ``context`` is omitted

    Returns
    -------
    str
        HTML

    Raises
    ------
    ListFormatError
        If ``items`` is empty.

    Examples
    --------
        >>> parse_list(["- a", "  1. b"])
        '<ul><li>a<ol><li>b</li></ol></li></ul>'

    """
    if context is None:
        context = RenderContext(id_factory=id_factory)
    entries = [tokenize_list_item(item) for item in items]
    tree = build_list_tree(entries, context.options.max_nesting_depth)
    logger.debug("Built list of %d items", len(entries))
    return render_list(tree, context)
