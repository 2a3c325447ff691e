from __future__ import annotations

import ntpath
import os
import posixpath
from enum import Enum
from types import ModuleType


class PathConvention(str, Enum):
    POSIX = "posix"
    WINDOWS = "windows"

    @property
    def pathmod(self) -> ModuleType:
        """The stdlib path module implementing this convention."""
        return ntpath if self is PathConvention.WINDOWS else posixpath


def current_convention() -> PathConvention:
    return PathConvention.WINDOWS if os.name == "nt" else PathConvention.POSIX


def resolve_convention(convention: PathConvention | str | None) -> PathConvention:
    """Map an optional per-call override to a concrete convention.

    Paths captured on another machine (test fixtures, remote clients) can be
    handled by passing the convention explicitly; ``None`` means the host's.
    """
    if convention is None:
        return current_convention()
    return PathConvention(convention)
