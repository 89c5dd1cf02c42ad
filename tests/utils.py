"""Helpers shared by the monomd tests."""

import shutil
import tempfile
from pathlib import Path

from bs4 import BeautifulSoup, Tag

from monomd import render


def parse_html(html: str) -> BeautifulSoup:
    """Parse an HTML string with the standard library parser."""
    return BeautifulSoup(html, "html.parser")


def wrapper(html: str, wrapper_class: str = "monomd-body") -> Tag:
    """Return the wrapping ``<div>`` of a rendered fragment."""
    div = parse_html(html).find("div", class_=wrapper_class)
    assert isinstance(div, Tag), f"No wrapper div in {html!r}"
    return div


def render_body(markdown: str, **kwargs) -> Tag:
    """Render markup without CSS and return the wrapper ``<div>``."""
    kwargs.setdefault("include_css", False)
    return wrapper(render(markdown, **kwargs).html)


def create_test_temp_dir() -> Path:
    """Create a temporary directory for test files."""
    return Path(tempfile.mkdtemp())


def cleanup_test_dir(temp_dir: Path) -> None:
    """Clean up test directory and files."""
    if temp_dir.exists():
        shutil.rmtree(temp_dir)
