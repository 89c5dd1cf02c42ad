#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/monomd/api.py
"""Conversion entry points.

:func:`render` drives one conversion through the pipeline::

    raw text
      -> reserved-character cleanup
      -> escape protection         (EscapeMap)
      -> blank-line marking
      -> five extraction passes    (BlockProtector)
      -> line scan                 (LineScanner, nested builders, inline)
      -> reassembly                (handles, markers, escapes, wrapper)

Every stage works on state owned by the call, so concurrent calls are
independent.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from monomd.context import IdFactory, RenderContext
from monomd.exceptions import InputTooLargeError, InvalidOptionsError, MonoMdError, RenderingError, ValidationError
from monomd.logging_utils import debug_timer
from monomd.options import MonoMdOptions, options_from_mapping
from monomd.placeholders import strip_reserved
from monomd.protector import BlockProtector, mark_blank_lines
from monomd.reassembler import build_full_html, reassemble
from monomd.scanner import LineScanner
from monomd.styles import get_css

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderResult:
    """Output of one conversion.

    Parameters
    ----------
    html : str
        The wrapped HTML fragment
    css : str
        The bundled stylesheet, or an empty string when CSS is not included
    full_html : str
        ``html`` preceded by a ``<style>`` block holding ``css`` when CSS is
        included, otherwise identical to ``html``

    """

    html: str
    css: str
    full_html: str

    def to_dict(self) -> dict[str, str]:
        """Return the result keyed ``html``, ``css`` and ``fullHTML``."""
        return {"html": self.html, "css": self.css, "fullHTML": self.full_html}


def _resolve_options(
    options: Optional[MonoMdOptions],
    include_css: Optional[bool],
    overrides: dict[str, Any],
) -> MonoMdOptions:
    if options is not None and not isinstance(options, MonoMdOptions):
        raise InvalidOptionsError(expected_type=MonoMdOptions, received_type=type(options))

    resolved = options if options is not None else MonoMdOptions()
    if overrides:
        resolved = options_from_mapping(overrides, base=resolved)
    if include_css is not None:
        resolved = resolved.create_updated(include_css=include_css)
    return resolved


def render(
    markdown: str,
    options: Optional[MonoMdOptions] = None,
    *,
    include_css: Optional[bool] = None,
    id_factory: Optional[IdFactory] = None,
    **kwargs: Any,
) -> RenderResult:
    """Render MonoMD markup to an HTML fragment plus its stylesheet.

    Parameters
    ----------
    markdown : str
        Source markup
    options : MonoMdOptions, optional
        Rendering options; defaults to ``MonoMdOptions()``
    include_css : bool, optional
        Shorthand for ``options.include_css``; wins over the options object
    id_factory : callable, optional
        Zero-argument callable returning checklist checkbox ids. Defaults to a
        per-call counter (``checkbox-1``, ``checkbox-2``...), so identical
        input always yields identical output.
    kwargs : Any
        Individual option overrides applied on top of ``options``

    Returns
    -------
    RenderResult
        The fragment, the stylesheet and the combined document

    Raises
    ------
    InvalidOptionsError
        If ``options`` is not a ``MonoMdOptions`` instance.
    ValidationError
        If ``markdown`` is not a string or an override is invalid.
    InputTooLargeError
        If ``markdown`` is longer than ``options.max_input_chars``.
    ParsingError
        If a table or list span violates its structural precondition.
    RenderingError
        If rendering fails for any other reason.

    Examples
    --------
    Basic conversion:
        >>> result = render("# Title\\n\\n**bold** text")
        >>> result.html
        '<div class="monomd-body"><h1>Title</h1>\\n<p><br></p>\\n<p><b>bold</b> text</p></div>'

    Fragment only, without the stylesheet:
        >>> render("plain", include_css=False).full_html
        '<div class="monomd-body"><p>plain</p></div>'

    """
    resolved = _resolve_options(options, include_css, kwargs)

    if not isinstance(markdown, str):
        raise ValidationError(
            f"markdown must be a string, got {type(markdown).__name__}",
            parameter_name="markdown",
            parameter_value=type(markdown).__name__,
        )
    if len(markdown) > resolved.max_input_chars:
        raise InputTooLargeError(size=len(markdown), limit=resolved.max_input_chars)

    context = RenderContext(options=resolved, id_factory=id_factory)
    stage = "escape"
    try:
        with debug_timer(logger, f"Rendering {len(markdown)} characters"):
            text = context.escapes.protect(strip_reserved(markdown))
            stage = "extraction"
            text = BlockProtector(context).protect(mark_blank_lines(text))
            stage = "scan"
            scanned = LineScanner(context).scan(text)
            stage = "reassembly"
            html = reassemble(scanned, context)
    except MonoMdError:
        raise
    except Exception as e:
        raise RenderingError(f"Rendering failed: {e!r}", rendering_stage=stage, original_error=e) from e

    css = get_css() if resolved.include_css else ""
    return RenderResult(html=html, css=css, full_html=build_full_html(html, css))


def render_markdown(markdown: str, options: Optional[MonoMdOptions] = None, **kwargs: Any) -> dict[str, str]:
    """Render markup and return a plain ``{"html", "css", "fullHTML"}`` dict.

    Accepts the same arguments as :func:`render`.
    """
    return render(markdown, options, **kwargs).to_dict()
