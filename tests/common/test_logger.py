from __future__ import annotations

# Standard Library Imports
import logging
from typing import TYPE_CHECKING

# Third Party Imports
import pytest

# SML Imports
from sml.common.exceptions import DimensionError
from sml.common.logger import (
    Logger,
    smlLogCritical,
    smlLogDebug,
    smlLogError,
    smlLogInfo,
    smlLogWarning,
)
from sml.linear_algebra import dotProduct

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from pathlib import Path


CORRECT_OUTPUT: list[list[str | int]] = [
    ["test", logging.DEBUG, "This is a debug message."],
    ["test", logging.INFO, "This is an info message."],
    ["test", logging.WARNING, "This is a warning message."],
    ["test", logging.ERROR, "This is an error message."],
    ["test", logging.CRITICAL, "This is a critical message."],
]

CORRECT_FILE_OUTPUT: list[list[str]] = [
    ["test_logger", "DEBUG", "This is a debug message.\n"],
    ["test_logger", "INFO", "This is an info message.\n"],
    ["test_logger", "WARNING", "This is a warning message.\n"],
    ["test_logger", "ERROR", "This is an error message.\n"],
    ["test_logger", "CRITICAL", "This is a critical message.\n"],
]


def testStdout(caplog: pytest.LogCaptureFixture):
    """Test the logger's output to `sys.stdout`."""
    logger = Logger("test")
    assert logger.filename in ("stdout", None)
    logger.debug("This is a debug message.")
    logger.info("This is an info message.")
    logger.warning("This is a warning message.")
    logger.error("This is an error message.")
    logger.critical("This is a critical message.")

    assert len(caplog.record_tuples) == 5
    for record_tuple, correct in zip(caplog.record_tuples, CORRECT_OUTPUT):
        assert record_tuple == tuple(correct)


def testLogfile(tmp_path: Path):
    """Test the logger's output to a logfile."""
    log_dir = tmp_path / "logs"
    file_logger = Logger("logfile-test", path=str(log_dir))
    assert log_dir.is_dir()

    file_logger.debug("This is a debug message.")
    file_logger.info("This is an info message.")
    file_logger.warning("This is a warning message.")
    file_logger.error("This is an error message.")
    file_logger.critical("This is a critical message.")

    for handler in file_logger.handlers:
        handler.flush()

    with open(file_logger.filename, encoding="utf-8") as logfile:
        lines = logfile.readlines()

    assert len(lines) == 5
    for line, correct in zip(lines, CORRECT_FILE_OUTPUT):
        assert line.split(" - ")[1:] == correct

    for handler in file_logger.handlers:
        handler.close()


def testSingleHandler():
    """Test that a second :class:`.Logger` of the same name doesn't stack another handler."""
    first = Logger("single-handler-test")
    handler_count = len(first.handlers)
    second = Logger("single-handler-test")
    assert len(second.handlers) == handler_count

    third = Logger("single-handler-test", allow_multiple_handlers=True)
    assert len(third.handlers) == handler_count + 1


def testModuleLevelHelpers(caplog: pytest.LogCaptureFixture):
    """Test that the ``smlLog*`` one-liners record to the top-level ``sml`` logger."""
    caplog.set_level(logging.DEBUG, logger="sml")
    smlLogDebug("debug")
    smlLogInfo("info")
    smlLogWarning("warning")
    smlLogError("error")
    smlLogCritical("critical")

    assert caplog.record_tuples == [
        ("sml", logging.DEBUG, "debug"),
        ("sml", logging.INFO, "info"),
        ("sml", logging.WARNING, "warning"),
        ("sml", logging.ERROR, "error"),
        ("sml", logging.CRITICAL, "critical"),
    ]


def testLibraryErrorsReachAttachedLogger(tmp_path: Path):
    """Test that a :class:`.Logger` named ``"sml"`` receives the library's error records."""
    sml_logger = logging.getLogger("sml")
    saved_level = sml_logger.level
    file_logger = Logger("sml", path=str(tmp_path), allow_multiple_handlers=True)
    handler = sml_logger.handlers[-1]

    try:
        with pytest.raises(DimensionError):
            dotProduct([1.0, 2.0], [1.0, 2.0, 3.0])
        handler.flush()

        with open(file_logger.filename, encoding="utf-8") as logfile:
            lines = logfile.readlines()
    finally:
        sml_logger.removeHandler(handler)
        handler.close()
        sml_logger.setLevel(saved_level)

    assert len(lines) == 1
    assert lines[0].split(" - ")[2:] == [
        "ERROR",
        "`dotProduct()` wasn't passed vectors with equal length, 2 != 3\n",
    ]
