#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/monomd/scanner.py
"""Line-oriented block scanner.

Runs after the extraction passes, so every line it sees is either plain
markup or holds handles. Each line is classified, first match wins:

1. heading (``#`` to ``######`` followed by whitespace)
2. blockquote run (``"> "`` prefix)
3. list run (bullet, numbered or checklist prefix)
4. a lone block-level handle, emitted unwrapped
5. a blank-line marker, emitted as an empty paragraph break
6. anything else non-blank becomes a paragraph

"""

from __future__ import annotations

import logging
import re

from monomd.blockquote import QUOTE_PREFIX, parse_nested_blockquote
from monomd.context import RenderContext
from monomd.inline import parse_inline
from monomd.lists import is_list_line, parse_list
from monomd.placeholders import BLANK_MARKER, is_blank_line

logger = logging.getLogger(__name__)

HEADING_RE = re.compile(r"^(#{1,6})\s+(.+)$")

# A list line ending in two spaces lets the next line continue the item
_CONTINUATION_SUFFIX = "  "


class LineScanner:
    """Single forward pass over the protected text.

    Parameters
    ----------
    context : RenderContext
        Per-call state handed to the inline formatter and nested builders

    """

    def __init__(self, context: RenderContext):
        """Bind the scanner to the call's context."""
        self.context = context
        self._lines: list[str] = []
        self._cursor = 0

    def scan(self, text: str) -> str:
        """Render ``text`` block by block and join the blocks with newlines."""
        self._lines = text.split("\n")
        self._cursor = 0
        blocks: list[str] = []

        while self._cursor < len(self._lines):
            block = self._next_block()
            if block is not None:
                blocks.append(block)

        logger.debug("Scanned %d lines into %d blocks", len(self._lines), len(blocks))
        return "\n".join(blocks)

    def _next_block(self) -> str | None:
        line = self._lines[self._cursor]

        heading = HEADING_RE.match(line)
        if heading:
            self._cursor += 1
            level = len(heading.group(1))
            return f"<h{level}>{parse_inline(heading.group(2), self.context)}</h{level}>"

        if line.startswith(QUOTE_PREFIX):
            return parse_nested_blockquote(self._take_quote_run(), self.context)

        if is_list_line(line):
            return parse_list(self._take_list_run(), self.context)

        self._cursor += 1
        if self.context.placeholders.block_category(line) is not None:
            return line.strip()
        if line.strip() == BLANK_MARKER:
            return f"<p>{BLANK_MARKER}</p>"
        if not line.strip():
            return None
        return f"<p>{parse_inline(line, self.context)}</p>"

    def _take_quote_run(self) -> list[str]:
        run = []
        while self._cursor < len(self._lines) and self._lines[self._cursor].startswith(QUOTE_PREFIX):
            run.append(self._lines[self._cursor])
            self._cursor += 1
        return run

    def _take_list_run(self) -> list[str]:
        """Collect list items; a line ending in two spaces may pull in one non-blank continuation."""
        items: list[list[str]] = []
        while self._cursor < len(self._lines):
            line = self._lines[self._cursor]
            if is_list_line(line):
                items.append([line])
            elif items and not is_blank_line(line) and self._lines[self._cursor - 1].endswith(_CONTINUATION_SUFFIX):
                items[-1].append(line)
            else:
                break
            self._cursor += 1
        return ["\n".join(item) for item in items]
