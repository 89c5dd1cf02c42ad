#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/monomd/protector.py
"""Extraction passes that shield complex spans from the line scanner.

Five passes run over the whole text in a fixed order:

1. fenced code blocks (with the optional ``:::output`` split)
2. images ``![alt](url)``
3. internal links ``!!text!!(path)``
4. admonitions ``:::info`` / ``:::warn`` / ``:::alert``
5. tables

Each pass renders every match straight away, files the HTML in the
:class:`~monomd.placeholders.PlaceholderTable` and leaves a handle in the
text. Later passes therefore only ever see handles where earlier spans were.

"""

from __future__ import annotations

import logging
import re
from typing import Callable

from monomd.constants import (
    CSS_CLASS_ADMONITION,
    CSS_CLASS_ADMONITION_CONTENT,
    CSS_CLASS_ADMONITION_HEADER,
    CSS_CLASS_ADMONITION_TYPE_PREFIX,
    CSS_CLASS_ARTICLE_IMAGE,
    CSS_CLASS_CODE_CONTAINER,
    CSS_CLASS_CODE_OUTPUT,
    CSS_CLASS_CODE_PROGRAM,
    CSS_CLASS_INTERNAL_LINK,
    INTERNAL_LINK_STYLE,
)
from monomd.context import RenderContext
from monomd.html_utils import escape_html
from monomd.placeholders import BLANK_MARKER, Category
from monomd.tables import parse_table, render_table

logger = logging.getLogger(__name__)

CODE_BLOCK_RE = re.compile(r"```([^\n`]*)\n(.*?)```", re.DOTALL)
IMAGE_RE = re.compile(r"!\[([^\]\[\n]*)\]\(([^)\[\n]+)\)")
INTERNAL_LINK_RE = re.compile(r"!!([^!\n]+)!!\(([^)!\n]+)\)")
ADMONITION_OPEN_RE = re.compile(r":::(info|warn|alert)[ \t]*")
ADMONITION_CLOSE_RE = re.compile(r":::[ \t]*")
TABLE_RE = re.compile(
    r"^(?P<header>\|[^\n]+\|)(?:\[(?P<caption>[^\]\n]*)\])?[ \t]*\n"
    r"(?P<rows>\|[^\n]+\|[ \t]*(?:\n\|[^\n]+\|[ \t]*)*)$",
    re.MULTILINE,
)

OUTPUT_OPEN = ":::output\n"
OUTPUT_CLOSE = "\n:::"


def mark_blank_lines(text: str) -> str:
    """Replace every whitespace-only line except the last with the blank-line marker."""
    lines = text.split("\n")
    last = len(lines) - 1
    return "\n".join(
        BLANK_MARKER if index < last and not line.strip() else line for index, line in enumerate(lines)
    )


def split_output(body: str) -> tuple[str, str] | None:
    """Split a code body at its first ``:::output`` marker.

    Returns the program and output text, or None when the body has no
    ``:::output`` line followed later by a closing ``:::``. Later markers
    are never tried: if the first has no closing fence, none has.

    Examples
    --------
        >>> split_output("print(1)\\n:::output\\n1\\n:::\\n")
        ('print(1)\\n', '1')

    """
    start = body.find(OUTPUT_OPEN)
    if start == -1:
        return None
    output_start = start + len(OUTPUT_OPEN)
    end = body.find(OUTPUT_CLOSE, output_start)
    if end == -1:
        return None
    return body[:start], body[output_start:end]


def _trim_code(text: str) -> str:
    # Leading indentation of the first code line is content; only blank lines go
    return text.lstrip("\n").rstrip()


class BlockProtector:
    """Run the five extraction passes for one conversion.

    Every pass does work proportional to the text it scans: the inline
    patterns stop at the next opener, and admonition fences are paired by a
    single walk over the lines.

    Parameters
    ----------
    context : RenderContext
        Per-call state; rendered spans are stored in ``context.placeholders``

    Examples
    --------
        >>> from monomd.context import RenderContext
        >>> context = RenderContext()
        >>> text = BlockProtector(context).protect("see ![logo](a.png)")
        >>> context.placeholders.count(Category.IMAGE)
        1

    """

    def __init__(self, context: RenderContext):
        """Bind the protector to the call's context."""
        self.context = context

    def protect(self, text: str) -> str:
        """Run every pass in order and return the text with handles in place of spans."""
        text = self._extract(text, Category.CODE, CODE_BLOCK_RE, self.render_code_block)
        text = self._extract(text, Category.IMAGE, IMAGE_RE, self.render_image)
        text = self._extract(text, Category.INTERNAL_LINK, INTERNAL_LINK_RE, self.render_internal_link)
        text = self._extract_admonitions(text)
        return self._extract(text, Category.TABLE, TABLE_RE, self.render_table)

    def _extract(
        self,
        text: str,
        category: Category,
        pattern: re.Pattern[str],
        render: Callable[[re.Match[str]], str],
    ) -> str:
        placeholders = self.context.placeholders
        before = placeholders.count(category)
        text = pattern.sub(lambda match: placeholders.add(category, render(match), match.group(0)), text)
        self._log_extracted(category, placeholders.count(category) - before)
        return text

    def _extract_admonitions(self, text: str) -> str:
        """Replace each ``:::kind`` line, its body and the next ``:::`` line with a handle.

        The body holds at least one line, so a closing fence directly under
        the opener is body text.
        """
        placeholders = self.context.placeholders
        lines = text.split("\n")
        closers = [index for index, line in enumerate(lines) if ADMONITION_CLOSE_RE.fullmatch(line)]

        result: list[str] = []
        extracted = 0
        next_closer = 0
        index = 0
        while index < len(lines):
            opener = ADMONITION_OPEN_RE.fullmatch(lines[index])
            if opener is not None:
                while next_closer < len(closers) and closers[next_closer] < index + 2:
                    next_closer += 1
                if next_closer < len(closers):
                    close = closers[next_closer]
                    html = self.render_admonition(opener.group(1), "\n".join(lines[index + 1 : close]))
                    result.append(placeholders.add(Category.ADMONITION, html, "\n".join(lines[index : close + 1])))
                    extracted += 1
                    index = close + 1
                    continue
            result.append(lines[index])
            index += 1

        self._log_extracted(Category.ADMONITION, extracted)
        return "\n".join(result)

    @staticmethod
    def _log_extracted(category: Category, extracted: int) -> None:
        if extracted:
            logger.debug("Extracted %d %s span(s)", extracted, category.name.lower())

    def render_code_block(self, match: re.Match[str]) -> str:
        """Render a fenced code block; the language tag is ignored.

        A body containing ``:::output`` ... ``:::`` is split into a program
        region and an output region inside one container.
        """
        body = match.group(2).replace(BLANK_MARKER, "")
        escapes = self.context.escapes

        split = split_output(body)
        if split is None:
            code = escape_html(_trim_code(escapes.restore_source(body)))
            return f"<pre><code>{code}</code></pre>"

        program, output = (escape_html(_trim_code(escapes.restore_source(part))) for part in split)
        return (
            f'<div class="{CSS_CLASS_CODE_CONTAINER}">'
            f'<pre class="{CSS_CLASS_CODE_PROGRAM}"><code>{program}</code></pre>'
            f'<pre class="{CSS_CLASS_CODE_OUTPUT}"><code>{output}</code></pre>'
            "</div>"
        )

    def render_image(self, match: re.Match[str]) -> str:
        """Render an image as a figure, captioned with its alt text when there is one."""
        alt, url = match.group(1), match.group(2)
        caption = f"<figcaption>{escape_html(alt)}</figcaption>" if alt else ""
        return (
            f'<figure class="{CSS_CLASS_ARTICLE_IMAGE}">'
            f'<img src="{escape_html(url)}" alt="{escape_html(alt)}" />{caption}</figure>'
        )

    def render_internal_link(self, match: re.Match[str]) -> str:
        """Render an internal link as a span carrying its path in ``data-path``.

        It is not an anchor: the host application intercepts clicks on it.
        """
        label, path = match.group(1), match.group(2)
        return (
            f'<span class="{CSS_CLASS_INTERNAL_LINK}" data-path="{escape_html(path)}" '
            f'style="{INTERNAL_LINK_STYLE}">{escape_html(label)}</span>'
        )

    def render_admonition(self, kind: str, body: str) -> str:
        """Render an admonition block. The body is literal text, not markup."""
        body = self.context.placeholders.to_source(body).replace(BLANK_MARKER, "").strip()
        label = escape_html(self.context.options.admonition_label(kind))
        return (
            f'<div class="{CSS_CLASS_ADMONITION} {CSS_CLASS_ADMONITION_TYPE_PREFIX}{kind}">'
            f'<div class="{CSS_CLASS_ADMONITION_HEADER}">{label}</div>'
            f'<div class="{CSS_CLASS_ADMONITION_CONTENT}">{escape_html(body)}</div>'
            "</div>"
        )

    def render_table(self, match: re.Match[str]) -> str:
        """Render a table span; the caption comes from its own match group."""
        lines = [match.group("header"), *match.group("rows").split("\n")]
        return render_table(parse_table(lines, match.group("caption")), self.context)
