#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for logging setup and the bundled stylesheet."""

import io
import logging
from pathlib import Path
from typing import Generator

import pytest

from monomd.logging_utils import PACKAGE_LOGGER, configure_logging, debug_timer, resolve_level
from monomd.styles import get_css


@pytest.fixture
def package_logger() -> Generator[logging.Logger, None, None]:
    """Restore the package logger after each test."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    saved = (logger.level, logger.propagate, list(logger.handlers))
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(saved[0])
    logger.propagate = saved[1]
    for handler in saved[2]:
        logger.addHandler(handler)


@pytest.mark.unit
class TestConfigureLogging:
    """Tests for configure_logging."""

    @pytest.mark.parametrize(
        "value,expected",
        [("debug", logging.DEBUG), ("WARNING", logging.WARNING), (logging.ERROR, logging.ERROR), ("nope", logging.INFO)],
    )
    def test_resolve_level(self, value, expected: int) -> None:
        """Names and numbers both resolve; unknown names give INFO."""
        assert resolve_level(value) == expected

    def test_stream_handler(self, package_logger: logging.Logger) -> None:
        """Records from submodules reach the configured stream."""
        stream = io.StringIO()
        configure_logging("INFO", stream=stream)
        logging.getLogger("monomd.scanner").info("hello")

        assert stream.getvalue() == "INFO: hello\n"
        assert package_logger.propagate is False

    def test_reconfigure_replaces_handlers(self, package_logger: logging.Logger) -> None:
        """A second call does not stack handlers."""
        configure_logging("INFO", stream=io.StringIO())
        configure_logging("INFO", stream=io.StringIO())
        assert len(package_logger.handlers) == 1

    def test_log_file(self, package_logger: logging.Logger, temp_dir: Path) -> None:
        """A log file receives a copy of the records."""
        log_path = temp_dir / "monomd.log"
        configure_logging("DEBUG", log_file=str(log_path), stream=io.StringIO())
        logging.getLogger("monomd.api").debug("to file")
        for handler in package_logger.handlers:
            handler.flush()

        assert "to file" in log_path.read_text(encoding="utf-8")

    def test_trace_mode_format(self, package_logger: logging.Logger) -> None:
        """Trace records carry the logger name."""
        stream = io.StringIO()
        configure_logging("DEBUG", trace_mode=True, stream=stream)
        logging.getLogger("monomd.lists").debug("traced")

        assert "[monomd.lists] traced" in stream.getvalue()

    def test_debug_timer_logs_when_enabled(self, package_logger: logging.Logger) -> None:
        """Timings are logged at DEBUG only."""
        stream = io.StringIO()
        configure_logging("DEBUG", stream=stream)
        with debug_timer(logging.getLogger("monomd.api"), "Work"):
            pass
        assert "Work completed in" in stream.getvalue()

        stream = io.StringIO()
        configure_logging("INFO", stream=stream)
        with debug_timer(logging.getLogger("monomd.api"), "Work"):
            pass
        assert stream.getvalue() == ""


@pytest.mark.unit
class TestStylesheet:
    """Tests for the bundled stylesheet."""

    def test_targets_rendered_classes(self) -> None:
        """The stylesheet covers the wrapper and fixed class names."""
        css = get_css()
        for selector in (".monomd-body", ".info-type-info", ".info-type-warn", ".info-type-alert", ".code-output"):
            assert selector in css

    def test_icon_glyphs(self) -> None:
        """Admonition icons use Font Awesome code points."""
        css = get_css()
        assert 'content: "\\f058";' in css
        assert "font-awesome" in css

    def test_cached(self) -> None:
        """Repeated calls return the same string."""
        assert get_css() is get_css()
