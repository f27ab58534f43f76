"""Diagnostic logging for staffctl.

The record file, store and workspace log through stdlib loggers under
``staffctl``.  :func:`configure_logging` gives that tree a single stderr
handler whose records structlog renders as console key-value lines, or
as one JSON object per line with ``--log-json``.  ``-v`` lowers the
threshold from WARNING to DEBUG.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

LOGGER_NAME = "staffctl"


def _formatter(*, log_json: bool, colors: bool) -> structlog.stdlib.ProcessorFormatter:
    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
    ]
    if log_json:
        pre_chain.append(structlog.processors.TimeStamper(fmt="iso"))
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=colors)
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
    )


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Route ``staffctl.*`` records to *stream* (stderr by default).

    Calling it again replaces the handler instead of adding a second one.
    Records do not propagate to the root logger.
    """
    stream = stream or sys.stderr
    handler = logging.StreamHandler(stream)
    handler.setFormatter(_formatter(log_json=log_json, colors=stream.isatty()))

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
    return logger
