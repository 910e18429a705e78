"""Tests for scaffoldgen.logging."""

from __future__ import annotations

import io
import logging
from pathlib import Path

from scaffoldgen.logging import configure_logging, get_logger, uvicorn_log_level


def test_get_logger_nests_under_package() -> None:
    assert get_logger().name == "scaffoldgen"
    assert get_logger("parsing.pipeline").name == "scaffoldgen.parsing.pipeline"


def test_console_output_uses_prefix_and_respects_verbosity() -> None:
    stream = io.StringIO()
    configure_logging(stream=stream)

    get_logger("test").debug("hidden")
    get_logger("test").info("shown")

    assert stream.getvalue() == "[scaffoldgen] INFO shown\n"


def test_verbose_enables_debug() -> None:
    stream = io.StringIO()
    logger = configure_logging(verbose=True, stream=stream)

    get_logger("test").debug("details")

    assert logger.level == logging.DEBUG
    assert "[scaffoldgen] DEBUG details" in stream.getvalue()


def test_reconfiguring_replaces_handlers(tmp_path: Path) -> None:
    first = io.StringIO()
    second = io.StringIO()
    configure_logging(stream=first, log_file=tmp_path / "nested" / "scaffoldgen.log")
    logger = configure_logging(stream=second)

    get_logger("test").info("once")

    assert len(logger.handlers) == 1
    assert first.getvalue() == ""
    assert second.getvalue().count("once") == 1


def test_log_file_records_logger_name(tmp_path: Path) -> None:
    log_file = tmp_path / "scaffoldgen.log"
    configure_logging(stream=io.StringIO(), log_file=log_file)

    get_logger("export").warning("disk nearly full")

    assert "WARNING scaffoldgen.export: disk nearly full" in log_file.read_text(encoding="utf-8")


def test_uvicorn_level_follows_verbosity() -> None:
    assert uvicorn_log_level() == "info"
    assert uvicorn_log_level(verbose=True) == "debug"
