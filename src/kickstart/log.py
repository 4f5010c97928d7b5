"""Leveled terminal output for scaffolding progress."""

from __future__ import annotations

import os
import shlex
import sys
from enum import IntEnum
from typing import Sequence

from rich.console import Console
from rich.text import Text

LOG_LEVEL_ENV = "KICKSTART_LOG_LEVEL"
NO_COLOR_ENVS = ("NO_COLOR", "KICKSTART_NO_COLOR")


class LogLevel(IntEnum):
    DEBUG = 20
    INFO = 30
    SUCCESS = 35
    WARNING = 40
    ERROR = 50


_STYLES = {
    LogLevel.DEBUG: "cyan",
    LogLevel.SUCCESS: "bold green",
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "bold red",
}
_active_level: LogLevel | None = None


def parse_level(value: str | None) -> LogLevel:
    """Map a level name to a ``LogLevel``; unknown or empty names mean INFO.

    Example:
        >>> parse_level(" Debug ")
        <LogLevel.DEBUG: 20>
        >>> parse_level("loud")
        <LogLevel.INFO: 30>
    """
    name = (value or "").strip().upper()
    if name == "WARN":
        name = "WARNING"
    return LogLevel.__members__.get(name, LogLevel.INFO)


def active_level() -> LogLevel:
    global _active_level
    if _active_level is None:
        _active_level = parse_level(os.environ.get(LOG_LEVEL_ENV))
    return _active_level


def set_level(value: str | None) -> None:
    """Override the level read from ``KICKSTART_LOG_LEVEL``."""
    global _active_level
    _active_level = parse_level(value)


def reset() -> None:
    """Forget any override so the next call re-reads the environment."""
    global _active_level
    _active_level = None


def _console(stderr: bool) -> Console:
    return Console(
        file=sys.stderr if stderr else sys.stdout,
        soft_wrap=True,
        highlight=False,
        no_color=any(os.environ.get(name) for name in NO_COLOR_ENVS),
    )


def emit(level: LogLevel, message: str, *, style: str | None = None) -> None:
    if level < active_level():
        return
    text = Text(message, style=style or _STYLES.get(level, ""))
    _console(stderr=level >= LogLevel.WARNING).print(text)


def debug(message: str) -> None:
    emit(LogLevel.DEBUG, message)


def info(message: str, *, style: str | None = None) -> None:
    emit(LogLevel.INFO, message, style=style)


def success(message: str) -> None:
    emit(LogLevel.SUCCESS, message)


def warning(message: str) -> None:
    emit(LogLevel.WARNING, message)


def error(message: str) -> None:
    emit(LogLevel.ERROR, message)


def command(argv: Sequence[str], cwd: object | None = None) -> None:
    """Log an external command line at DEBUG before it runs."""
    line = f"$ {shlex.join(argv)}"
    if cwd is not None:
        line = f"{line}  (in {cwd})"
    debug(line)
