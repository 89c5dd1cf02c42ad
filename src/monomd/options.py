#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/monomd/options.py
"""Configuration options for MonoMD rendering.

Options are immutable: use :meth:`CloneFrozenMixin.create_updated` to derive
a modified copy rather than mutating an instance.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, fields, replace
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from monomd.constants import (
    ADMONITION_KINDS,
    DEFAULT_ADMONITION_LABELS,
    DEFAULT_CHECKBOX_ID_PREFIX,
    DEFAULT_INCLUDE_CSS,
    DEFAULT_LINK_TARGET,
    DEFAULT_MAX_INPUT_CHARS,
    DEFAULT_MAX_NESTING_DEPTH,
    DEFAULT_WRAPPER_CLASS,
)
from monomd.exceptions import ValidationError


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class MonoMdOptions(CloneFrozenMixin):
    """Configuration options for rendering MonoMD markup to HTML.

    Parameters
    ----------
    include_css : bool, default True
        Return the stylesheet in ``RenderResult.css`` and embed it in a
        ``<style>`` block ahead of the fragment in ``full_html``.
    wrapper_class : str, default "monomd-body"
        Class of the ``<div>`` wrapping the fragment. The bundled stylesheet
        targets the default name.
    link_target : str or None, default "_blank"
        ``target`` attribute of inline links; ``None`` omits the attribute.
    checkbox_id_prefix : str, default "checkbox"
        Prefix of the per-call checkbox ids (``checkbox-1``, ``checkbox-2``...).
        Ignored when an ``id_factory`` is passed to :func:`monomd.render`.
    admonition_labels : dict, default {"info": "Information", ...}
        Heading label shown for each admonition kind. Missing kinds fall back
        to the defaults.
    max_input_chars : int, default 2_000_000
        Inputs longer than this raise ``InputTooLargeError``.
    max_nesting_depth : int, default 32
        Deepest blockquote or list nesting rendered; deeper lines are folded
        into the deepest allowed level.

    """

    include_css: bool = field(
        default=DEFAULT_INCLUDE_CSS,
        metadata={"help": "Include the bundled stylesheet in the output", "importance": "core"},
    )
    wrapper_class: str = field(
        default=DEFAULT_WRAPPER_CLASS,
        metadata={"help": "CSS class of the element wrapping the rendered fragment", "importance": "advanced"},
    )
    link_target: str | None = field(
        default=DEFAULT_LINK_TARGET,
        metadata={"help": "target attribute for inline links (empty to omit)", "importance": "core"},
    )
    checkbox_id_prefix: str = field(
        default=DEFAULT_CHECKBOX_ID_PREFIX,
        metadata={"help": "Prefix for generated checklist checkbox ids", "importance": "advanced"},
    )
    admonition_labels: Mapping[str, str] = field(
        default_factory=lambda: dict(DEFAULT_ADMONITION_LABELS),
        metadata={"help": "Heading label per admonition kind (info, warn, alert)", "importance": "core"},
    )
    max_input_chars: int = field(
        default=DEFAULT_MAX_INPUT_CHARS,
        metadata={"help": "Maximum accepted input length in characters", "type": int, "importance": "security"},
    )
    max_nesting_depth: int = field(
        default=DEFAULT_MAX_NESTING_DEPTH,
        metadata={"help": "Deepest rendered blockquote/list nesting", "type": int, "importance": "security"},
    )

    def __post_init__(self) -> None:
        """Validate field values.

        Raises
        ------
        ValueError
            If a numeric field is out of range, the id prefix is empty, or an
            admonition label is given for an unknown kind.

        """
        if self.max_input_chars <= 0:
            raise ValueError(f"max_input_chars must be positive, got {self.max_input_chars}")
        if self.max_nesting_depth < 1:
            raise ValueError(f"max_nesting_depth must be at least 1, got {self.max_nesting_depth}")
        if not self.checkbox_id_prefix:
            raise ValueError("checkbox_id_prefix must not be empty")
        unknown = set(self.admonition_labels) - set(ADMONITION_KINDS)
        if unknown:
            raise ValueError(f"admonition_labels has unknown kinds: {', '.join(sorted(unknown))}")

    def admonition_label(self, kind: str) -> str:
        """Return the heading label for an admonition kind."""
        return self.admonition_labels.get(kind, DEFAULT_ADMONITION_LABELS[kind])


def options_from_mapping(values: Mapping[str, Any], base: MonoMdOptions | None = None) -> MonoMdOptions:
    """Build options from a plain mapping such as a parsed JSON file.

    Parameters
    ----------
    values : Mapping[str, Any]
        Field names and values; keys may use dashes instead of underscores.
    base : MonoMdOptions, optional
        Options to start from; defaults to ``MonoMdOptions()``.

    Returns
    -------
    MonoMdOptions
        The merged options.

    Raises
    ------
    ValidationError
        If a key is not an option name or a value fails validation.

    """
    base = base or MonoMdOptions()
    known = {f.name for f in fields(MonoMdOptions)}
    updates: dict[str, Any] = {}
    for key, value in values.items():
        name = key.replace("-", "_")
        if name not in known:
            raise ValidationError(f"Unknown option: {key}", parameter_name=key, parameter_value=value)
        updates[name] = value

    try:
        return base.create_updated(**updates)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"Invalid options: {exc}", original_error=exc) from exc
