"""
Host context — everything the resolvers need to know about the machine.

Captured ONCE at startup (see ``yarnenv.core.config.loader``) and passed
explicitly to every resolver, so that resolution for any platform can be
reproduced without touching the real process environment.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field

from yarnenv.core.models.platform import PlatformTag

EnvironmentSnapshot = Mapping[str, str | None]


def snapshot_environment(env: Mapping[str, str | None]) -> EnvironmentSnapshot:
    """Freeze a copy of ``env``, keeping key case and insertion order."""
    return MappingProxyType(dict(env))


class HostContext(BaseModel):
    """Immutable capture of platform, environment and well-known dirs."""

    model_config = ConfigDict(frozen=True)

    platform: PlatformTag
    env: dict[str, str | None] = Field(default_factory=dict)
    home_dir: str
    temp_dir: str

    # Interpreter running the tool, and the file its bin path is derived from
    executable: str = ""
    module_file: str = ""
    bundled: bool = False

    @property
    def snapshot(self) -> EnvironmentSnapshot:
        """The environment as a read-only mapping."""
        return snapshot_environment(self.env)

    def with_platform(self, platform: PlatformTag) -> HostContext:
        """Copy of this context pretending to run on ``platform``."""
        return self.model_copy(update={"platform": platform})
