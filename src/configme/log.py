"""Status output for directory and file creation."""
from __future__ import annotations

import threading
from typing import Protocol

from rich.console import Console
from rich.markup import escape


class LogSink(Protocol):
    """Receives informational and error messages."""

    def info(self, message: str) -> None:
        ...

    def error(self, message: str) -> None:
        ...


class ConsoleLogSink:
    """Prints info messages to stdout and errors to stderr."""

    def __init__(self, console: Console | None = None, error_console: Console | None = None) -> None:
        self.console = console or Console()
        self.error_console = error_console or Console(stderr=True)

    def info(self, message: str) -> None:
        self.console.print(f"[green]{escape(message)}[/green]", soft_wrap=True, highlight=False)

    def error(self, message: str) -> None:
        self.error_console.print(f"[red]{escape(message)}[/red]", soft_wrap=True, highlight=False)


_sink_lock = threading.Lock()
_sink: LogSink = ConsoleLogSink()


def get_log_sink() -> LogSink:
    with _sink_lock:
        return _sink


def set_log_sink(sink: LogSink) -> LogSink:
    """Replace the default sink and return the previous one."""

    global _sink
    with _sink_lock:
        previous, _sink = _sink, sink
    return previous


def log_info(message: str) -> None:
    get_log_sink().info(message)


def log_error(message: str) -> None:
    get_log_sink().error(message)


__all__ = [
    "ConsoleLogSink",
    "LogSink",
    "get_log_sink",
    "log_error",
    "log_info",
    "set_log_sink",
]
