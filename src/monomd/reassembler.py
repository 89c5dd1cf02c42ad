#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/monomd/reassembler.py
"""Final stage: splice protected spans back in and wrap the fragment."""

from __future__ import annotations

import logging

from monomd.context import RenderContext
from monomd.html_utils import escape_html
from monomd.placeholders import BLANK_MARKER

logger = logging.getLogger(__name__)


def reassemble(scanned: str, context: RenderContext) -> str:
    """Turn scanner output into the finished, wrapped HTML fragment.

    Steps, in order: every handle is replaced by its rendered span, blank-line
    markers become ``<br>``, escape sentinels become their (escaped) literal
    characters, and the result is wrapped in the container ``<div>``.

    Parameters
    ----------
    scanned : str
        Output of :class:`~monomd.scanner.LineScanner`
    context : RenderContext
        The context the earlier stages filled

    Returns
    -------
    str
        The HTML fragment

    """
    html = context.placeholders.splice(scanned)
    html = html.replace(BLANK_MARKER, "<br>")
    html = context.escapes.restore(html)
    logger.debug("Reassembled fragment of %d characters", len(html))
    return f'<div class="{escape_html(context.options.wrapper_class)}">{html}</div>'


def build_full_html(html: str, css: str) -> str:
    """Prefix the fragment with a ``<style>`` block when there is CSS to embed."""
    if not css:
        return html
    return f"<style>{css}</style>{html}"
