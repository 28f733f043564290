"""Per-application configuration directory helpers."""
from __future__ import annotations

from .config import expand, resolve, resolve_config_dir
from .log import ConsoleLogSink, LogSink, set_log_sink
from .models import ConfigOptions, InvalidNameError, Placement
from .registry import (
    ConfigDir,
    ConfigDirRegistry,
    UninitializedError,
    create_file,
    create_subdirs,
    get_config_dir,
    init_config,
    sqlite,
)

__all__ = [
    "ConfigDir",
    "ConfigDirRegistry",
    "ConfigOptions",
    "ConsoleLogSink",
    "InvalidNameError",
    "LogSink",
    "Placement",
    "UninitializedError",
    "create_file",
    "create_subdirs",
    "expand",
    "get_config_dir",
    "init_config",
    "resolve",
    "resolve_config_dir",
    "set_log_sink",
    "sqlite",
]
