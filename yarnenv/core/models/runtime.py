"""
RuntimeConfig — the process-wide, read-only configuration snapshot.

Built once from a HostContext by ``build_runtime_config`` and then only
read by the rest of the tool.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

from yarnenv.core.models.directories import ResolvedDirectories
from yarnenv.core.models.platform import PlatformTag

VersionColor = Literal["red", "yellow", "green", "white"]


class RuntimeConfig(BaseModel):
    """Derived paths and flags for the current process."""

    model_config = ConfigDict(frozen=True)

    platform: PlatformTag
    directories: ResolvedDirectories
    path_env_key: str
    node_bin_path: str
    tool_bin_path: str
    production: bool = False

    def to_dict(self) -> dict:
        """Convert to a JSON/YAML-serializable dictionary."""
        return {
            "platform": self.platform.value,
            "directories": self.directories.to_dict(),
            "path_env_key": self.path_env_key,
            "node_bin_path": self.node_bin_path,
            "tool_bin_path": self.tool_bin_path,
            "production": self.production,
        }
