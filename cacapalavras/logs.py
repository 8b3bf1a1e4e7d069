"""Timestamped log files and coloured terminal banners."""

from __future__ import annotations

import sys
from datetime import datetime
from enum import Enum
from typing import TextIO

STARS = "*********************************"

ERROR_COLOR = 31
SUCCESS_COLOR = 32
WARNING_COLOR = 33


class LogLevel(Enum):
    """Severity of a log entry."""

    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"

    def __str__(self) -> str:
        return self.value


def format_log_line(level: LogLevel, message: str, when: datetime | None = None) -> str:
    """Return ``message`` prefixed with a ``[YYYY-MM-DD HH:MM:SS] [LEVEL]`` header."""
    moment = when if when is not None else datetime.now()
    stamp = moment.strftime("%Y-%m-%d %H:%M:%S")
    return f"[{stamp}] [{LogLevel(level).value}] {message}"


def log_to_file(
    filename: str,
    level: LogLevel,
    message: str,
    when: datetime | None = None,
) -> None:
    """Append a formatted log line to ``filename``.

    A file that cannot be opened is reported on standard error and the
    entry is dropped, so logging never interrupts the caller.
    """
    line = format_log_line(level, message, when)
    try:
        with open(filename, "a", encoding="utf-8") as handle:
            handle.write(line)
    except OSError as exc:
        print(f"Erro ao abrir o arquivo de log: {exc}", file=sys.stderr)


def format_banner(label: str, color: int, message: str) -> str:
    """Return a starred banner with a bold coloured label."""
    return f"{STARS}\n\033[1;{color}m{label}:\033[0m {message}\n{STARS}\n"


def _emit(label: str, color: int, message: str, enabled: bool, stream: TextIO | None) -> None:
    if not enabled:
        return
    target = stream if stream is not None else sys.stdout
    target.write(format_banner(label, color, message))


def print_error(message: str, enabled: bool = True, stream: TextIO | None = None) -> None:
    """Show ``message`` in a red error banner when ``enabled``."""
    _emit("ERRO", ERROR_COLOR, message, enabled, stream)


def print_success(message: str, enabled: bool = True, stream: TextIO | None = None) -> None:
    """Show ``message`` in a green success banner when ``enabled``."""
    _emit("SUCESSO", SUCCESS_COLOR, message, enabled, stream)


def print_warning(message: str, enabled: bool = True, stream: TextIO | None = None) -> None:
    """Show ``message`` in a yellow warning banner when ``enabled``."""
    _emit("AVISO", WARNING_COLOR, message, enabled, stream)