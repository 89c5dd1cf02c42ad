"""monomd - render the MonoMD markup dialect to an HTML fragment and stylesheet.

MonoMD is a small Markdown-like dialect for articles embedded in a host
application. Besides headings, inline formatting, nested blockquotes and
nested mixed lists, it supports checklists, fenced code blocks with a paired
program/output view, figures, internal cross-document links, three kinds of
admonition block and tables with captions and per-column alignment.

Rendering is a linear pipeline: structurally complex spans are rendered first
and replaced by opaque handles, the remaining text is scanned line by line,
and the handles are spliced back in at the end.

Requirements
------------
- Python 3.10+
- ``rich`` (optional) for formatted command line output

Examples
--------
Basic usage:

    >>> from monomd import render
    >>> result = render("# Notes\\n- [x] done\\n- [ ] todo")
    >>> result.html.startswith('<div class="monomd-body"><h1>Notes</h1>')
    True

Without the stylesheet, as a plain dict:

    >>> from monomd import render_markdown
    >>> render_markdown("plain", include_css=False)["css"]
    ''

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "monomd requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from monomd.api import RenderResult, render, render_markdown
from monomd.blockquote import parse_nested_blockquote
from monomd.context import RenderContext, sequential_ids
from monomd.exceptions import (
    InputTooLargeError,
    InvalidOptionsError,
    ListFormatError,
    MonoMdError,
    ParsingError,
    RenderingError,
    TableFormatError,
    ValidationError,
)
from monomd.html_utils import escape_html
from monomd.inline import parse_inline
from monomd.lists import parse_list
from monomd.options import MonoMdOptions
from monomd.styles import get_css

__all__ = [
    "__version__",
    "render",
    "render_markdown",
    "RenderResult",
    "RenderContext",
    "MonoMdOptions",
    "sequential_ids",
    "parse_inline",
    "parse_list",
    "parse_nested_blockquote",
    "escape_html",
    "get_css",
    "MonoMdError",
    "ValidationError",
    "InvalidOptionsError",
    "InputTooLargeError",
    "ParsingError",
    "TableFormatError",
    "ListFormatError",
    "RenderingError",
]
