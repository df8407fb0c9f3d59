"""Coloured, levelled console logging with a timestamp and level label."""

from __future__ import annotations

import sys
from datetime import datetime
from enum import IntEnum
from typing import Callable, TextIO

RESET_COLOUR = "\x1b[0m"
TIME_FORMAT = "%H:%M:%S"
BORDER = "-"
MSG_ENDING = "\n"


class Level(IntEnum):
    """Severity levels; a logger emits messages at or above its own level."""

    DEBUG = 0
    INFO = 1
    NOTICE = 2
    WARNING = 3
    ERROR = 4
    CRITICAL = 5
    SILENT = 6


_STYLES: dict[Level, tuple[str, str]] = {
    Level.DEBUG: ("", "[DEBUG]"),
    Level.INFO: ("\x1b[36m", "[INFO]"),
    Level.NOTICE: ("\x1b[32;1m", "[NOTICE]"),
    Level.WARNING: ("\x1b[33m", "[WARNING]"),
    Level.ERROR: ("\x1b[31m", "[ERROR]"),
    Level.CRITICAL: ("\x1b[41;1m", "[CRITICAL]"),
}


class Logger:
    """Writes formatted log lines to a stream, filtered by level."""

    def __init__(
        self,
        level: Level = Level.DEBUG,
        stream: TextIO | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.level = Level(level)
        self.stream = stream
        self.clock = clock if clock is not None else datetime.now

    def format(self, level: Level, message: str) -> str:
        """Return the full line, colour codes included, for a message."""
        level = Level(level)
        try:
            colour, label = _STYLES[level]
        except KeyError:
            raise ValueError(f"{level.name} is not a level messages can be logged at") from None
        stamp = self.clock().strftime(TIME_FORMAT)
        return f"{colour}{stamp} {label:>10} {BORDER} {message}{MSG_ENDING}{RESET_COLOUR}"

    def log(self, level: Level, message: str) -> None:
        level = Level(level)
        if level < self.level:
            return
        text = self.format(level, message)
        stream = self.stream if self.stream is not None else sys.stdout
        stream.write(text)

    def debug(self, message: str) -> None:
        self.log(Level.DEBUG, message)

    def info(self, message: str) -> None:
        self.log(Level.INFO, message)

    def notice(self, message: str) -> None:
        self.log(Level.NOTICE, message)

    def warning(self, message: str) -> None:
        self.log(Level.WARNING, message)

    def error(self, message: str) -> None:
        self.log(Level.ERROR, message)

    def critical(self, message: str) -> None:
        self.log(Level.CRITICAL, message)