"""Logging for the scaffoldgen CLI and service.

The CLI prints projects as JSON on stdout, so console logging always goes to
stderr. Service mode reuses the same verbosity switch for uvicorn's own loggers.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

_ROOT = "scaffoldgen"
CONSOLE_FORMAT = "[scaffoldgen] %(levelname)s %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``scaffoldgen.<name>``, or the package logger when ``name`` is empty."""
    return logging.getLogger(f"{_ROOT}.{name}" if name else _ROOT)


def configure_logging(
    *,
    verbose: bool = False,
    log_file: Path | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Attach console (and optionally file) handlers to the package logger.

    Calling it again replaces the handlers, so repeated CLI invocations in one
    process do not duplicate output.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_ROOT)
    logger.setLevel(level)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(stream or sys.stderr)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        sink = logging.FileHandler(log_file, encoding="utf-8")
        sink.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(sink)

    return logger


def uvicorn_log_level(verbose: bool = False) -> str:
    return "debug" if verbose else "info"


__all__ = ["CONSOLE_FORMAT", "FILE_FORMAT", "configure_logging", "get_logger", "uvicorn_log_level"]
