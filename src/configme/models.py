"""Dataclasses describing how the configuration directory is laid out."""
from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class InvalidNameError(ValueError):
    """Raised when an application name cannot be used as a directory name."""


class Placement(str, Enum):
    """Where the configuration directory lives."""

    HOME = "home"
    OPT = "opt"

    @classmethod
    def parse(cls, value: Union["Placement", str, None]) -> "Placement":
        """Return the placement whose value is exactly ``value``, else ``HOME``."""

        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        return cls.HOME


def validate_name(name: str) -> None:
    """Reject names that are empty, ``.``/``..`` or contain a path separator."""

    separators = {"/", os.sep}
    if os.altsep:
        separators.add(os.altsep)
    if not name or name in {".", ".."}:
        raise InvalidNameError(f"Invalid application name: {name!r}")
    if any(sep in name for sep in separators):
        raise InvalidNameError(f"Application name {name!r} must not contain path separators")


@dataclass(frozen=True, slots=True)
class ConfigOptions:
    """Options controlling the configuration directory location.

    ``name`` defaults to the running application's name, ``placement`` to the
    user's home directory and ``hidden`` to a visible (non-dotted) directory.
    """

    name: Optional[str] = None
    placement: Union[Placement, str] = Placement.HOME
    hidden: bool = False

    def __post_init__(self) -> None:
        if self.name is not None:
            validate_name(self.name)


__all__ = ["ConfigOptions", "InvalidNameError", "Placement", "validate_name"]
