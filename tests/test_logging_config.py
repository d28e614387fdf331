# tests/test_logging_config.py

from __future__ import annotations

import logging
import sys

from app.logging_config import UTCFormatter, setup_logging


def test_setup_logging_installs_single_stdout_handler() -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        setup_logging("DEBUG")

        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        handler = root.handlers[0]
        assert handler.stream is sys.stdout
        assert isinstance(handler.formatter, UTCFormatter)
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_unknown_log_level_falls_back_to_info() -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        setup_logging("LOUD")
        assert root.level == logging.INFO

        setup_logging("warning")
        assert root.level == logging.WARNING
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
