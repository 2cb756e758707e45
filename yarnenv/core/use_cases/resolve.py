"""
Resolve use case — turn a HostContext into the process RuntimeConfig.
"""

from __future__ import annotations

import logging

from yarnenv.core.models.host import HostContext
from yarnenv.core.models.runtime import RuntimeConfig
from yarnenv.core.services.bin_paths import node_bin_path, tool_bin_path
from yarnenv.core.services.directories import resolve_directories
from yarnenv.core.services.env_keys import is_production, resolve_path_key_name

logger = logging.getLogger(__name__)


def build_runtime_config(host: HostContext) -> RuntimeConfig:
    """Run every resolver once against ``host``.

    Deterministic: the same host always yields an equal RuntimeConfig.
    """
    env = host.snapshot

    config = RuntimeConfig(
        platform=host.platform,
        directories=resolve_directories(host.platform, env, host.home_dir, host.temp_dir),
        path_env_key=resolve_path_key_name(host.platform, env),
        node_bin_path=node_bin_path(host),
        tool_bin_path=tool_bin_path(host.platform, host.module_file, host.bundled),
        production=is_production(env),
    )

    logger.info(
        "Runtime config ready (%s, path key %s)",
        config.platform.value, config.path_env_key,
    )
    return config
