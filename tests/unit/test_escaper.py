#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for backslash escape protection and restoration."""

import pytest

from monomd.escaper import EscapeMap
from monomd.placeholders import ESCAPE_TAG, make_token


@pytest.mark.unit
class TestEscapeMapProtect:
    """Tests for EscapeMap.protect."""

    def test_escaped_character_is_hidden(self) -> None:
        """The escaped character must not survive in the working text."""
        escapes = EscapeMap()
        protected = escapes.protect(r"\*not bold\*")

        assert "*" not in protected
        assert "\\" not in protected
        assert len(escapes) == 2

    def test_sentinels_are_unique(self) -> None:
        """Every escape gets its own sentinel, even for the same character."""
        escapes = EscapeMap()
        escapes.protect(r"\# and \#")

        keys = list(escapes)
        assert keys == [make_token(ESCAPE_TAG, 0), make_token(ESCAPE_TAG, 1)]
        assert [escapes[key] for key in keys] == ["#", "#"]

    def test_backslash_before_newline_is_kept(self) -> None:
        """A trailing backslash has nothing on its line to escape."""
        escapes = EscapeMap()
        assert escapes.protect("line\\\nnext") == "line\\\nnext"
        assert len(escapes) == 0

    def test_text_without_escapes_is_unchanged(self) -> None:
        """Plain text passes through untouched."""
        escapes = EscapeMap()
        assert escapes.protect("**bold**") == "**bold**"


@pytest.mark.unit
class TestEscapeMapRestore:
    """Tests for EscapeMap.restore and restore_source."""

    def test_restore_gives_literal(self) -> None:
        """restore puts the bare character back."""
        escapes = EscapeMap()
        assert escapes.restore(escapes.protect(r"\*x\*")) == "*x*"

    def test_restore_escapes_html_metacharacters(self) -> None:
        """An escaped angle bracket is displayed, never parsed as a tag."""
        escapes = EscapeMap()
        assert escapes.restore(escapes.protect(r"\<b>")) == "&lt;b>"

    def test_restore_source_gives_backslash_form(self) -> None:
        """Code regions show the escape exactly as written."""
        escapes = EscapeMap()
        assert escapes.restore_source(escapes.protect(r"a\_b")) == r"a\_b"

    def test_unknown_sentinel_is_left_alone(self) -> None:
        """Tokens that were never issued are not touched."""
        escapes = EscapeMap()
        escapes.protect(r"\*")
        stray = make_token(ESCAPE_TAG, 99)
        assert escapes.restore(stray) == stray
