"""Tests for the staffctl log handler."""

from __future__ import annotations

import io
import json
import logging
from collections.abc import Generator

import pytest

from staffctl.config.logging import LOGGER_NAME, configure_logging


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Put the staffctl logger back the way the test found it."""
    staff = logging.getLogger(LOGGER_NAME)
    handlers, level, propagate = staff.handlers[:], staff.level, staff.propagate
    yield
    staff.handlers = handlers
    staff.setLevel(level)
    staff.propagate = propagate


def _last_json(stream: io.StringIO) -> dict:
    return json.loads(stream.getvalue().strip().splitlines()[-1])


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        logger = configure_logging(verbose=True, stream=io.StringIO())
        assert logger is logging.getLogger("staffctl")
        assert logger.level == logging.DEBUG

    def test_default_is_warning(self) -> None:
        assert configure_logging(stream=io.StringIO()).level == logging.WARNING

    def test_store_debug_lines_in_json(self) -> None:
        out = io.StringIO()
        configure_logging(verbose=True, log_json=True, stream=out)
        logging.getLogger("staffctl.services.store").debug("Added employee %d", 1)
        parsed = _last_json(out)
        assert parsed["event"] == "Added employee 1"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "staffctl.services.store"
        assert "timestamp" in parsed

    def test_debug_hidden_when_not_verbose(self) -> None:
        out = io.StringIO()
        configure_logging(log_json=True, stream=out)
        logging.getLogger("staffctl.services.workspace").debug("quiet please")
        logging.getLogger("staffctl.services.workspace").warning("Load failed")
        lines = out.getvalue().strip().splitlines()
        assert [json.loads(line)["event"] for line in lines] == ["Load failed"]

    def test_console_renderer_is_plain_text(self) -> None:
        out = io.StringIO()
        configure_logging(stream=out)
        logging.getLogger("staffctl.infrastructure.records_file").warning("disk full")
        text = out.getvalue()
        assert "disk full" in text
        assert "\x1b[" not in text

    def test_reconfigure_replaces_handler(self) -> None:
        configure_logging(stream=io.StringIO())
        logger = configure_logging(verbose=True, log_json=True, stream=io.StringIO())
        assert len(logger.handlers) == 1
        assert not logger.propagate

    def test_other_loggers_untouched(self) -> None:
        out = io.StringIO()
        configure_logging(verbose=True, stream=out)
        logging.getLogger("somelib").warning("not ours")
        assert "not ours" not in out.getvalue()
