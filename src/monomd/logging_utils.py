#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Logging setup shared by the monomd command line and embedding hosts."""

from __future__ import annotations

import logging
import sys
import time
from contextlib import contextmanager
from typing import IO, Iterator, Optional

PACKAGE_LOGGER = "monomd"

_PLAIN_FORMAT = "%(levelname)s: %(message)s"
_TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"


def resolve_level(log_level: int | str) -> int:
    """Turn a level name such as ``"debug"`` into its numeric value.

    Unknown names fall back to ``logging.INFO``.
    """
    if isinstance(log_level, int):
        return log_level
    return getattr(logging, str(log_level).upper(), logging.INFO)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """Attach handlers to the ``monomd`` package logger.

    Only the package logger is touched, so a host application's root
    configuration is left alone. Calling this twice replaces the handlers
    installed by the first call.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name (e.g., "INFO").
    log_file : str, optional
        Path of a file that receives a copy of every record.
    trace_mode : bool, default False
        When true, records carry timestamps and logger names.
    stream : IO[str], optional
        Console stream; defaults to ``sys.stderr``.

    Returns
    -------
    logging.Logger
        The configured package logger.

    """
    level = resolve_level(log_level)
    formatter = logging.Formatter(
        _TRACE_FORMAT if trace_mode else _PLAIN_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S" if trace_mode else None,
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    package_logger.propagate = False
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            package_logger.warning("Could not open log file %s: %s", log_file, exc)
        else:
            file_handler.setFormatter(formatter)
            package_logger.addHandler(file_handler)
            package_logger.debug("Logging to file: %s", log_file)

    return package_logger


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Iterator[None]:
    """Log how long the wrapped block took, at DEBUG level only.

    Examples
    --------
        >>> with debug_timer(logger, "Scanning"):
        ...     html = scanner.scan(text)
        ... # Logs: "Scanning completed in 0.0012s"

    """
    if not logger.isEnabledFor(logging.DEBUG):
        yield
        return

    start = time.perf_counter()
    try:
        yield
    finally:
        logger.debug("%s completed in %.4fs", operation, time.perf_counter() - start)
