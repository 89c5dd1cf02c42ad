#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/monomd/escaper.py
"""Backslash escapes.

``\\X`` takes any single character out of the markup before the other stages
run: the character is swapped for a sentinel token, so no pattern can match
it, and put back only when the fragment is complete.

"""

from __future__ import annotations

import logging
import re
from typing import Iterator, Mapping

from monomd.html_utils import escape_html
from monomd.placeholders import ESCAPE_TAG, TOKEN_RE, make_token

logger = logging.getLogger(__name__)

_BACKSLASH_ESCAPE_RE = re.compile(r"\\(.)")


class EscapeMap(Mapping[str, str]):
    """Ordered mapping from sentinel token to the escaped literal character.

    Examples
    --------
        >>> escapes = EscapeMap()
        >>> protected = escapes.protect(r"\\*not bold\\*")
        >>> "*" in protected
        False
        >>> escapes.restore(protected)
        '*not bold*'

    """

    def __init__(self) -> None:
        """Create an empty map; sentinels are numbered from zero."""
        self._literals: dict[str, str] = {}

    def __getitem__(self, key: str) -> str:
        return self._literals[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._literals)

    def __len__(self) -> int:
        return len(self._literals)

    def protect(self, text: str) -> str:
        """Replace every ``\\X`` in ``text`` with a fresh sentinel."""

        def _swap(match: re.Match[str]) -> str:
            key = make_token(ESCAPE_TAG, len(self._literals))
            self._literals[key] = match.group(1)
            return key

        protected = _BACKSLASH_ESCAPE_RE.sub(_swap, text)
        if self._literals:
            logger.debug("Protected %d escaped characters", len(self._literals))
        return protected

    def restore(self, text: str) -> str:
        """Replace sentinels with their literal characters, HTML-escaped.

        The literal is shown as text; it is never read as markup again.
        """
        return self._substitute(text, lambda char: escape_html(char))

    def restore_source(self, text: str) -> str:
        """Replace sentinels with the original ``\\X`` source, unescaped.

        Used for code, where backslashes are part of the content.
        """
        return self._substitute(text, lambda char: "\\" + char)

    def _substitute(self, text: str, render) -> str:
        if not self._literals:
            return text

        def _restore(match: re.Match[str]) -> str:
            literal = self._literals.get(match.group(0))
            return match.group(0) if literal is None else render(literal)

        return TOKEN_RE.sub(_restore, text)
