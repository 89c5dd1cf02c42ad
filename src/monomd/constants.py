#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/monomd/constants.py
"""Constants and default values for the monomd renderer.

This module centralizes the literal types, default option values, class names
and fixed markup fragments used across the rendering pipeline.

Constants are organized by category:
1. Type Definitions - Literal types shared between modules
2. Rendering Defaults - Default values for ``MonoMdOptions``
3. Markup Fragments - Class names and inline styles injected into the output
4. Security Limits - Bounds that keep pathological input in check
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

Alignment = Literal["left", "center", "right"]
AdmonitionKind = Literal["info", "warn", "alert"]
ListKind = Literal["unordered", "ordered", "checklist"]

ADMONITION_KINDS: tuple[AdmonitionKind, ...] = ("info", "warn", "alert")

# =============================================================================
# Rendering Defaults
# =============================================================================

DEFAULT_INCLUDE_CSS = True
DEFAULT_WRAPPER_CLASS = "monomd-body"
DEFAULT_LINK_TARGET: str | None = "_blank"
DEFAULT_CHECKBOX_ID_PREFIX = "checkbox"

DEFAULT_ADMONITION_LABELS: dict[str, str] = {
    "info": "Information",
    "warn": "Caution",
    "alert": "Warning",
}

# =============================================================================
# Markup Fragments
# =============================================================================

ACCENT_LINK_STYLE = "color: var(--accent); text-decoration: none; border-bottom: 1px solid var(--accent);"
INTERNAL_LINK_STYLE = ACCENT_LINK_STYLE + " cursor: pointer;"

CSS_CLASS_INTERNAL_LINK = "internal-link"
CSS_CLASS_ARTICLE_IMAGE = "article-image"
CSS_CLASS_CODE_CONTAINER = "code-block-container"
CSS_CLASS_CODE_PROGRAM = "code-program"
CSS_CLASS_CODE_OUTPUT = "code-output"
CSS_CLASS_ADMONITION = "info-block"
CSS_CLASS_ADMONITION_TYPE_PREFIX = "info-type-"
CSS_CLASS_ADMONITION_HEADER = "info-header"
CSS_CLASS_ADMONITION_CONTENT = "info-content"
CSS_CLASS_CHECKLIST_ITEM = "checklist-item"
CSS_CLASS_CHECKLIST_CONTENT = "checklist-content"

# Two spaces of leading whitespace make one list nesting level
LIST_INDENT_WIDTH = 2

# =============================================================================
# Security Limits
# =============================================================================

DEFAULT_MAX_INPUT_CHARS = 2_000_000
DEFAULT_MAX_NESTING_DEPTH = 32
