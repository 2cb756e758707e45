"""
Directory resolution — where yarn keeps config, caches and global installs.

Pure functions of (platform, environment, home dir, temp dir).  Nothing
here creates or probes directories; callers walk the cache candidates and
pick the first usable one.

Layout:

    Windows + LOCALAPPDATA   %LOCALAPPDATA%\\Yarn\\<category>
    everything else          ~/.<category>/yarn
    macOS cache              ~/Library/Caches/Yarn
    cache fallback           <tmp>/.yarn-cache
"""

from __future__ import annotations

import logging

from yarnenv.core.data.constants import (
    FALLBACK_PREFIX_FOLDER,
    MACOS_CACHE_FOLDER,
    POSIX_PREFIX,
    TEMP_CACHE_FOLDER,
    TOOL_NAME,
    WINDOWS_APP_FOLDER,
)
from yarnenv.core.models.directories import ResolvedDirectories
from yarnenv.core.models.host import EnvironmentSnapshot
from yarnenv.core.models.platform import PlatformTag

logger = logging.getLogger(__name__)

# Read literally; the conventional name is DESTDIR.
PREFIX_ROOT_ENV = "DESTIR"


def category_directory(
    platform: PlatformTag,
    env: EnvironmentSnapshot,
    user_home: str,
    category: str,
) -> str:
    """Directory for a state category such as ``config`` or ``cache``."""
    local_app_data = env.get("LOCALAPPDATA")
    if platform is PlatformTag.WINDOWS and local_app_data:
        return platform.join_path(local_app_data, WINDOWS_APP_FOLDER, category)

    return platform.join_path(user_home, f".{category}", TOOL_NAME)


def preferred_cache_directories(
    platform: PlatformTag,
    env: EnvironmentSnapshot,
    user_home: str,
    temp_dir: str,
) -> tuple[str, ...]:
    """Cache directory candidates, most preferred first."""
    if platform is PlatformTag.MACOS:
        first = platform.join_path(user_home, "Library", "Caches", MACOS_CACHE_FOLDER)
    elif platform is PlatformTag.WINDOWS or platform is PlatformTag.OTHER_POSIX:
        first = category_directory(platform, env, user_home, "cache")
    else:
        raise ValueError(f"Unhandled platform: {platform!r}")

    return (first, platform.join_path(temp_dir, TEMP_CACHE_FOLDER))


def posix_global_prefix(env: EnvironmentSnapshot) -> str:
    """``/usr/local``, optionally rooted under the staging dir variable."""
    root = env.get(PREFIX_ROOT_ENV) or ""
    if root:
        logger.debug("%s=%s prefixes the POSIX global prefix", PREFIX_ROOT_ENV, root)
    # Plain concatenation: joining would discard ``root`` before "/usr/local".
    return f"{root}{POSIX_PREFIX}"


def resolve_directories(
    platform: PlatformTag,
    env: EnvironmentSnapshot,
    user_home: str,
    temp_dir: str,
) -> ResolvedDirectories:
    """Compute every state directory for one host.

    Args:
        platform: Host OS family.
        env: Environment snapshot; empty values count as unset.
        user_home: The user's home directory.
        temp_dir: The system temp directory (cache fallback).

    Returns:
        ResolvedDirectories. Never raises for any environment content.
    """
    config_dir = category_directory(platform, env, user_home, "config")

    result = ResolvedDirectories(
        config_directory=config_dir,
        cache_directory_candidates=preferred_cache_directories(
            platform, env, user_home, temp_dir,
        ),
        link_registry_directory=platform.join_path(config_dir, "link"),
        global_module_directory=platform.join_path(config_dir, "global"),
        fallback_global_prefix=platform.join_path(user_home, FALLBACK_PREFIX_FOLDER),
        posix_global_prefix=posix_global_prefix(env),
    )

    logger.debug(
        "Resolved %s directories: config=%s cache=%s",
        platform.value, result.config_directory, result.preferred_cache_directory,
    )
    return result
