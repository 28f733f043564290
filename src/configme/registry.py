"""Process-wide configuration directory and the helpers working inside it."""
from __future__ import annotations

import threading
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Union

from .config import resolve_config_dir
from .db import DatabaseCreator, SqliteCreator
from .log import LogSink, get_log_sink
from .models import ConfigOptions, Placement

DEFAULT_DATABASE: DatabaseCreator = SqliteCreator()


class UninitializedError(RuntimeError):
    """Raised when the configuration directory is read before ``init_config``."""


class ReadWriteLock:
    """Many concurrent readers or a single writer.

    Waiting writers take precedence over new readers. Reads are not reentrant
    while a writer is waiting.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if not self._readers:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
                if not self._writers_waiting:
                    self._cond.notify_all()
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


def ensure_dir(path: Path, sink: Optional[LogSink] = None) -> None:
    """Create ``path`` and its parents unless it already exists."""

    sink = sink or get_log_sink()
    if path.exists():
        return
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        sink.error(f"Failed to create directory {path}: {exc}")
        return
    sink.info(f"Created directory: {path}")


def ensure_file(path: Path, sink: Optional[LogSink] = None) -> None:
    """Create an empty file at ``path``; existing files are left untouched."""

    sink = sink or get_log_sink()
    if path.exists():
        return
    ensure_dir(path.parent, sink)
    try:
        path.touch(exist_ok=True)
    except OSError as exc:
        sink.error(f"Failed to create file {path}: {exc}")
        return
    sink.info(f"Created file: {path}")


@dataclass(frozen=True)
class ConfigDir:
    """Handle to a resolved configuration directory.

    ``sink`` falls back to the process-wide log sink when omitted. Set
    ``database`` to ``None`` for applications that never create database files.

    Names passed to the helpers are trusted to be relative. They are joined
    onto ``path`` as given, so an absolute name or one containing ``..``
    points outside the configuration directory.
    """

    path: Path
    sink: Optional[LogSink] = None
    database: Optional[DatabaseCreator] = DEFAULT_DATABASE

    @property
    def log(self) -> LogSink:
        return self.sink or get_log_sink()

    def create_subdirs(self, *names: Union[str, Path]) -> None:
        for name in names:
            ensure_dir(self.path / name, self.log)

    def create_file(self, name: Union[str, Path]) -> Path:
        path = self.path / name
        ensure_file(path, self.log)
        return path

    async def ensure_database_file(self, name: Union[str, Path]) -> Path:
        path = self.path / name
        if path.exists():
            return path
        if self.database is None:
            self.log.error(f"Cannot create database {path}: no database driver configured")
            return path
        ensure_dir(path.parent, self.log)
        await self.database.create(path, self.log)
        return path


class ConfigDirRegistry:
    """Holds the configuration directory shared by the whole process."""

    def __init__(self) -> None:
        self._lock = ReadWriteLock()
        self._current: Optional[ConfigDir] = None

    def initialize(
        self,
        options: ConfigOptions,
        *,
        sink: Optional[LogSink] = None,
        database: Optional[DatabaseCreator] = DEFAULT_DATABASE,
    ) -> ConfigDir:
        """Resolve, create and store the configuration directory.

        Calling it again replaces the stored directory.
        """

        handle = ConfigDir(resolve_config_dir(options), sink=sink, database=database)
        ensure_dir(handle.path, handle.log)
        with self._lock.write():
            self._current = handle
        return handle

    def current(self) -> ConfigDir:
        with self._lock.read():
            handle = self._current
        if handle is None:
            raise UninitializedError(
                "Config directory has not been initialized. Call init_config() first."
            )
        return handle

    def get_config_dir(self) -> Path:
        return self.current().path

    def create_subdirectories(self, *names: Union[str, Path]) -> None:
        self.current().create_subdirs(*names)

    def create_file(self, name: Union[str, Path]) -> Path:
        return self.current().create_file(name)

    async def ensure_database_file(self, name: Union[str, Path]) -> Path:
        return await self.current().ensure_database_file(name)


_registry = ConfigDirRegistry()


def init_config(
    name: Optional[str] = None,
    where: Union[Placement, str] = Placement.HOME,
    hide: bool = False,
    *,
    sink: Optional[LogSink] = None,
    database: Optional[DatabaseCreator] = DEFAULT_DATABASE,
) -> ConfigDir:
    """Initialize the application's configuration directory.

    Example::

        init_config(name="fancyapp", where="home", hide=True)
        # -> ~/.fancyapp
    """

    options = ConfigOptions(name=name, placement=where, hidden=hide)
    return _registry.initialize(options, sink=sink, database=database)


def get_config_dir() -> Path:
    """Return the configuration directory.

    Raises:
        UninitializedError: When :func:`init_config` has not been called yet.
    """

    return _registry.get_config_dir()


def create_subdirs(*names: Union[str, Path]) -> None:
    """Create one or more subdirectories inside the configuration directory."""

    _registry.create_subdirectories(*names)


def create_file(name: Union[str, Path]) -> Path:
    """Create an empty file inside the configuration directory."""

    return _registry.create_file(name)


async def sqlite(name: Union[str, Path]) -> Path:
    """Create an empty SQLite database file inside the configuration directory."""

    return await _registry.ensure_database_file(name)


__all__ = [
    "ConfigDir",
    "ConfigDirRegistry",
    "ReadWriteLock",
    "UninitializedError",
    "create_file",
    "create_subdirs",
    "ensure_dir",
    "ensure_file",
    "get_config_dir",
    "init_config",
    "sqlite",
]
