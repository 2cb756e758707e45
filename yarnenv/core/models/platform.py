"""
PlatformTag — the host operating-system family.

Only three families matter for path resolution: Windows (LOCALAPPDATA,
case-insensitive ``Path``), macOS (``~/Library/Caches``) and everything
else that behaves like POSIX.
"""

from __future__ import annotations

import ntpath
import posixpath
import sys
from enum import Enum
from types import ModuleType


class PlatformTag(str, Enum):
    """Closed set of OS families the resolvers branch on."""

    WINDOWS = "windows"
    MACOS = "macos"
    OTHER_POSIX = "posix"

    @classmethod
    def from_sys_platform(cls, name: str) -> PlatformTag:
        """Map a runtime platform string (``sys.platform``) to a tag.

        ``win32`` and ``darwin`` are the only special cases; linux, the BSDs,
        cygwin etc. all fall into ``OTHER_POSIX``.
        """
        if name == "win32":
            return cls.WINDOWS
        if name == "darwin":
            return cls.MACOS
        return cls.OTHER_POSIX

    @classmethod
    def detect(cls) -> PlatformTag:
        """Tag for the running interpreter."""
        return cls.from_sys_platform(sys.platform)

    @property
    def path_module(self) -> ModuleType:
        """Path flavour used to join paths for this platform."""
        if self is PlatformTag.WINDOWS:
            return ntpath
        if self is PlatformTag.MACOS or self is PlatformTag.OTHER_POSIX:
            return posixpath
        raise ValueError(f"Unhandled platform: {self!r}")

    def join_path(self, *parts: str) -> str:
        """Join path segments with this platform's separator."""
        return self.path_module.join(*parts)
