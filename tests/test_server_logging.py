"""Tests for server logging setup per transport."""
import logging
import sys
from pathlib import Path as _TestPath

ROOT = _TestPath(__file__).resolve().parents[1]
SRC_PATH = ROOT / 'src'
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

import pytest

from chunk_split_mcp.server import setup_logging


@pytest.fixture
def root_logger():
    """Restore the root logger's handlers and level after each test."""
    logger = logging.getLogger()
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    yield logger
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)


def test_stdio_mode_keeps_stdout_free_for_protocol(root_logger):
    setup_logging("stdio")

    streams = [handler.stream for handler in root_logger.handlers]
    assert sys.stdout not in streams
    assert streams == [sys.stderr]
    assert root_logger.handlers[0].level == logging.INFO


def test_http_mode_logs_info_to_stdout_and_errors_to_stderr(root_logger):
    setup_logging("http")

    levels = {handler.stream: handler.level for handler in root_logger.handlers}
    assert levels == {sys.stdout: logging.INFO, sys.stderr: logging.ERROR}
