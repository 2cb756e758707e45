"""
Domain models — Pydantic types for environment resolution.

All models are re-exported here for convenient access:

    from yarnenv.core.models import HostContext, PlatformTag, ResolvedDirectories
"""

from yarnenv.core.models.directories import ResolvedDirectories
from yarnenv.core.models.host import EnvironmentSnapshot, HostContext, snapshot_environment
from yarnenv.core.models.platform import PlatformTag
from yarnenv.core.models.runtime import RuntimeConfig, VersionColor

__all__ = [
    # host.py
    "EnvironmentSnapshot",
    "HostContext",
    # platform.py
    "PlatformTag",
    # directories.py
    "ResolvedDirectories",
    # runtime.py
    "RuntimeConfig",
    "VersionColor",
    "snapshot_environment",
]
