import io
from datetime import datetime

import pytest

from cengine.log import Level, Logger

FIXED = datetime(2024, 1, 2, 3, 4, 5)


def make_logger(level=Level.DEBUG):
    stream = io.StringIO()
    return Logger(level, stream, lambda: FIXED), stream


def test_format_error_line():
    logger, _ = make_logger()
    assert logger.format(Level.ERROR, "boom") == "\x1b[31m03:04:05    [ERROR] - boom\n\x1b[0m"


def test_format_ends_with_reset_and_contains_message():
    logger, _ = make_logger()
    line = logger.format(Level.CRITICAL, "melt")
    assert line.startswith("\x1b[41;1m")
    assert line.endswith("\n\x1b[0m")
    assert "[CRITICAL] - melt" in line


def test_debug_has_no_colour_prefix():
    logger, _ = make_logger()
    assert logger.format(Level.DEBUG, "x").startswith("03:04:05 ")


def test_messages_below_level_are_dropped():
    logger, stream = make_logger(Level.WARNING)
    logger.info("quiet")
    logger.notice("quiet")
    assert stream.getvalue() == ""
    logger.error("loud")
    assert "[ERROR] - loud" in stream.getvalue()


def test_debug_only_at_debug_level():
    logger, stream = make_logger(Level.INFO)
    logger.debug("hidden")
    assert stream.getvalue() == ""
    debug_logger, debug_stream = make_logger(Level.DEBUG)
    debug_logger.debug("shown")
    assert "[DEBUG] - shown" in debug_stream.getvalue()


def test_silent_suppresses_everything():
    logger, stream = make_logger(Level.SILENT)
    logger.critical("nothing")
    logger.error("nothing")
    assert stream.getvalue() == ""


def test_write_matches_format():
    logger, stream = make_logger()
    logger.warning("careful")
    assert stream.getvalue() == logger.format(Level.WARNING, "careful")


def test_silent_cannot_be_formatted():
    logger, _ = make_logger()
    with pytest.raises(ValueError):
        logger.format(Level.SILENT, "x")


def test_default_stream_is_stdout(capsys):
    logger = Logger(Level.DEBUG, None, lambda: FIXED)
    logger.notice("hello")
    assert "[NOTICE] - hello" in capsys.readouterr().out