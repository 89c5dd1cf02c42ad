#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/monomd/placeholders.py
"""Opaque handles and the side-table of pre-rendered spans.

Spans that must not be seen by the line scanner are rendered early, stored
in a :class:`PlaceholderTable` and replaced in the working text by a handle.
Handles, escape sentinels and the blank-line marker all share one token
syntax built from the STX/ETX control characters::

    \\x02 <tag letter> [<index>] \\x03

Those two characters (and NUL) are replaced in user input by
:func:`strip_reserved` before any stage runs, so a token can never be forged
by the document itself.

"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

TOKEN_OPEN = "\x02"
TOKEN_CLOSE = "\x03"

TOKEN_RE = re.compile("\x02([A-Z])(\\d*)\x03")

_RESERVED_RE = re.compile("[\x00\x02\x03]")
_REPLACEMENT_CHAR = "\ufffd"

BLANK_TAG = "B"
ESCAPE_TAG = "E"


def make_token(tag: str, index: int | None = None) -> str:
    """Return the token for ``tag`` and an optional sequence index."""
    return f"{TOKEN_OPEN}{tag}{'' if index is None else index}{TOKEN_CLOSE}"


BLANK_MARKER = make_token(BLANK_TAG)


def strip_reserved(text: str) -> str:
    """Normalize line endings and replace the characters tokens are built from."""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    return _RESERVED_RE.sub(_REPLACEMENT_CHAR, text)


def is_blank_line(line: str) -> bool:
    """Return True for whitespace-only lines and blank-line marker lines."""
    stripped = line.strip()
    return not stripped or stripped == BLANK_MARKER


class Category(str, Enum):
    """Categories of protected spans, in extraction order."""

    CODE = "C"
    IMAGE = "I"
    INTERNAL_LINK = "L"
    ADMONITION = "A"
    TABLE = "T"

    @property
    def is_block(self) -> bool:
        """Whether the rendered span is a block element rather than inline."""
        return self is not Category.INTERNAL_LINK


_CATEGORY_TAGS = {category.value: category for category in Category}


@dataclass(frozen=True)
class PlaceholderEntry:
    """A rendered span and the source text it was extracted from."""

    html: str
    source: str


@dataclass
class PlaceholderTable:
    """Five ordered sequences of rendered spans, one per :class:`Category`.

    Examples
    --------
        >>> table = PlaceholderTable()
        >>> handle = table.add(Category.TABLE, "<table></table>", "|a|\\n|-|")
        >>> table.splice(f"before {handle} after")
        'before <table></table> after'

    """

    entries: dict[Category, list[PlaceholderEntry]] = field(
        default_factory=lambda: {category: [] for category in Category}
    )

    def add(self, category: Category, html: str, source: str) -> str:
        """Store a rendered span and return the handle that stands in for it."""
        bucket = self.entries[category]
        bucket.append(PlaceholderEntry(html=html, source=source))
        return make_token(category.value, len(bucket) - 1)

    def count(self, category: Category) -> int:
        """Return the number of spans stored for ``category``."""
        return len(self.entries[category])

    def lookup(self, category: Category, index: int) -> PlaceholderEntry:
        """Return the entry stored under ``category`` and ``index``."""
        return self.entries[category][index]

    def block_category(self, line: str) -> Category | None:
        """Return the category if ``line`` holds nothing but one block-level handle."""
        match = TOKEN_RE.fullmatch(line.strip())
        if match is None:
            return None
        category = _CATEGORY_TAGS.get(match.group(1))
        if category is None or not category.is_block:
            return None
        return category

    def splice(self, text: str) -> str:
        """Replace every handle in ``text`` with its rendered HTML.

        Spliced HTML is resolved on its own, never re-scanned as part of the
        surrounding text, so a handle captured inside another span (an image
        inside a table cell, say) is restored regardless of category order.
        Escape sentinels and blank-line markers are left in place.
        """
        return self._substitute(text, lambda entry: self.splice(entry.html))

    def to_source(self, text: str) -> str:
        """Replace every handle in ``text`` with the source text it was extracted from."""
        return self._substitute(text, lambda entry: self.to_source(entry.source))

    def _substitute(self, text, resolve) -> str:
        def replace_token(match: re.Match[str]) -> str:
            category = _CATEGORY_TAGS.get(match.group(1))
            if category is None or not match.group(2):
                return match.group(0)
            return resolve(self.lookup(category, int(match.group(2))))

        return TOKEN_RE.sub(replace_token, text)
