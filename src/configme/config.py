"""Configuration directory path resolution."""
from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Union

from .models import ConfigOptions, Placement, validate_name

APP_NAME = "configme"
APP_NAME_ENV = "CONFIGME_APP_NAME"


def default_app_name() -> str:
    """Return the name of the running application.

    ``CONFIGME_APP_NAME`` wins when it is set. Otherwise the name is taken from
    the executed script; for ``python -m package`` the package directory name
    is used instead of ``__main__``.
    """

    from_env = os.environ.get(APP_NAME_ENV)
    if from_env:
        return from_env

    argv0 = sys.argv[0] if sys.argv else ""
    if argv0 and argv0 not in {"-c", "-"}:
        script = Path(argv0)
        if script.stem == "__main__":
            return script.parent.name or APP_NAME
        if script.stem:
            return script.stem
    return APP_NAME


def resolve(options: ConfigOptions) -> str:
    """Return the configuration directory as an unexpanded path string."""

    name = options.name
    if name is None:
        name = default_app_name()
        validate_name(name)
    label = f".{name}" if options.hidden else name

    if Placement.parse(options.placement) is Placement.OPT:
        return f"/opt/{label}"
    return f"~/{label}"


def expand(path: Union[str, Path]) -> Path:
    """Expand a leading ``~`` (or ``~user``) to the home directory.

    Unknown users are left unexpanded. No other shell expansion happens.
    """

    return Path(os.path.expanduser(str(path)))


def resolve_config_dir(options: ConfigOptions) -> Path:
    return expand(resolve(options))


__all__ = [
    "APP_NAME",
    "APP_NAME_ENV",
    "default_app_name",
    "expand",
    "resolve",
    "resolve_config_dir",
]
