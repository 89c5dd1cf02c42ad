#  Copyright (c) 2025 Tom Villani, Ph.D.
"""HTML-related utility helpers."""

from __future__ import annotations

from html import escape as _html_escape


def escape_html(text: str, *, enabled: bool = True) -> str:
    """Escape ``& < > " '`` for use in text and attribute values.

    Matches the entity set produced by the original renderer: quotes are
    escaped too, so the result is safe inside double-quoted attributes.
    """
    if not enabled:
        return text
    return _html_escape(text, quote=True)


def style_attr(alignment: str) -> str:
    """Return the ``style`` attribute used for aligned table cells."""
    return f' style="text-align: {alignment}"'
