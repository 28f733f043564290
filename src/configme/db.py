"""Creation of empty SQLite database files."""
from __future__ import annotations

import asyncio
import sqlite3
from pathlib import Path
from typing import Optional, Protocol

from .log import LogSink, get_log_sink


class DatabaseCreator(Protocol):
    """Materializes an empty database file at ``path``."""

    async def create(self, path: Path, sink: LogSink) -> None:
        ...


def _open_rwc(path: Path) -> None:
    # mode=rwc: open for reading and writing, create the file when missing
    uri = f"{path.absolute().as_uri()}?mode=rwc"
    conn = sqlite3.connect(uri, uri=True)
    conn.close()


async def ensure_sqlite(path: Path, sink: Optional[LogSink] = None) -> None:
    """Ensure a SQLite database file exists at ``path``.

    The connection is opened in a worker thread and closed straight away.
    Failures are logged, never raised.
    """

    sink = sink or get_log_sink()
    if path.exists():
        return

    try:
        await asyncio.to_thread(_open_rwc, path)
    except (sqlite3.Error, OSError, ValueError) as exc:
        sink.error(f"Failed to create SQLite database {path}: {exc}")
        return
    sink.info(f"Created SQLite database: {path}")


class SqliteCreator:
    """Default :class:`DatabaseCreator` backed by the ``sqlite3`` module."""

    async def create(self, path: Path, sink: LogSink) -> None:
        await ensure_sqlite(path, sink)


__all__ = ["DatabaseCreator", "SqliteCreator", "ensure_sqlite"]
