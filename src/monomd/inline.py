#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/monomd/inline.py
"""Inline formatting.

Applied to paragraph lines, heading text, quote lines, list item content and
table cells. Each marker has a single meaning:

==================  =====================
``**text**``        ``<b>``
``__text__``        ``<u>``
``~~text~~``        ``<s>``
```` `code` ````    ``<code>`` (literal)
``[text](url)``     ``<a>``
==================  =====================

Text outside code spans is passed through unescaped, so inline HTML in the
source survives; only the values the formatter injects itself (code span
content, link URLs) are escaped.

"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from monomd.constants import ACCENT_LINK_STYLE, DEFAULT_LINK_TARGET
from monomd.html_utils import escape_html
from monomd.placeholders import TOKEN_RE, make_token

if TYPE_CHECKING:
    from monomd.context import RenderContext

_CODE_SPAN_RE = re.compile(r"`([^`]+)`")
_BOLD_RE = re.compile(r"\*\*([^*]+)\*\*")
_UNDERLINE_RE = re.compile(r"__([^_]+)__")
_STRIKE_RE = re.compile(r"~~([^~]+)~~")
_LINK_RE = re.compile(r"\[([^\]\[]+)\]\(([^)\[]+)\)")

# Local to one parse_inline call; never leaves this module
_CODE_SPAN_TAG = "K"


def parse_inline(text: str, context: RenderContext | None = None) -> str:
    """Apply inline formatting to one run of text.

    Parameters
    ----------
    text : str
        Text to format; may contain handles and escape sentinels
    context : RenderContext, optional
        Per-call state. Supplies the link target and lets code spans show
        backslash escapes as written.

    Returns
    -------
    str
        HTML

    Examples
    --------
        >>> parse_inline("**bold** and `a**b`")
        '<b>bold</b> and <code>a**b</code>'

    """
    code_spans: list[str] = []

    def _protect_code(match: re.Match[str]) -> str:
        content = match.group(1)
        if context is not None:
            content = context.escapes.restore_source(content)
        code_spans.append(f"<code>{escape_html(content)}</code>")
        return make_token(_CODE_SPAN_TAG, len(code_spans) - 1)

    text = _CODE_SPAN_RE.sub(_protect_code, text)
    text = _BOLD_RE.sub(r"<b>\1</b>", text)
    text = _UNDERLINE_RE.sub(r"<u>\1</u>", text)
    text = _STRIKE_RE.sub(r"<s>\1</s>", text)

    target = context.options.link_target if context is not None else DEFAULT_LINK_TARGET
    text = _LINK_RE.sub(lambda match: _render_link(match.group(1), match.group(2), target), text)

    if not code_spans:
        return text

    def _restore_code(match: re.Match[str]) -> str:
        if match.group(1) != _CODE_SPAN_TAG:
            return match.group(0)
        return code_spans[int(match.group(2))]

    return TOKEN_RE.sub(_restore_code, text)


def _render_link(label: str, url: str, target: str | None) -> str:
    target_attr = f' target="{escape_html(target)}"' if target else ""
    return f'<a href="{escape_html(url)}"{target_attr} style="{ACCENT_LINK_STYLE}">{label}</a>'
