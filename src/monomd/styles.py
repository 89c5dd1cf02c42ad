#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/monomd/styles.py
"""Bundled stylesheet for rendered fragments.

The stylesheet targets the default ``monomd-body`` wrapper class and the
fixed class names the renderer emits (``info-block``, ``code-output``,
``checklist-item``...). It is shipped as ``monomd/static/monomd.css``.
"""

from __future__ import annotations

from functools import lru_cache
from importlib import resources

STYLESHEET_NAME = "monomd.css"


@lru_cache(maxsize=1)
def get_css() -> str:
    """Return the bundled stylesheet text.

    Returns
    -------
    str
        CSS for the rendered fragment, including the Font Awesome import
        used by the admonition header icons

    """
    return resources.files("monomd").joinpath("static").joinpath(STYLESHEET_NAME).read_text(encoding="utf-8")
