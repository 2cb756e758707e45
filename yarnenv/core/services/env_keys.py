"""
Environment-key normalization.

Windows environment names are case-insensitive, and the search path is
usually spelled ``Path`` but not always.  Child processes must be handed
the exact key that is already present, otherwise they end up with two
competing entries.
"""

from __future__ import annotations

import logging

from yarnenv.core.models.host import EnvironmentSnapshot
from yarnenv.core.models.platform import PlatformTag

logger = logging.getLogger(__name__)

POSIX_PATH_KEY = "PATH"
WINDOWS_PATH_KEY = "Path"


def resolve_path_key_name(platform: PlatformTag, env: EnvironmentSnapshot) -> str:
    """Name of the executable search-path variable in ``env``.

    Non-Windows platforms always get ``PATH``.  On Windows the LAST key
    matching ``path`` case-insensitively wins (in iteration order), and
    ``Path`` is used when there is none.
    """
    if platform is not PlatformTag.WINDOWS:
        return POSIX_PATH_KEY

    path_key = WINDOWS_PATH_KEY
    for key in env:
        if key.lower() == "path":
            path_key = key

    logger.debug("Windows path key resolved to %r", path_key)
    return path_key


def is_production(env: EnvironmentSnapshot) -> bool:
    """True when NODE_ENV says production."""
    return env.get("NODE_ENV") == "production"
