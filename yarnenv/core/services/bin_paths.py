"""
Executable paths — the runtime binary and the tool's own entry script.
"""

from __future__ import annotations

from yarnenv.core.data.constants import BIN_SCRIPT
from yarnenv.core.models.host import HostContext
from yarnenv.core.models.platform import PlatformTag


def node_bin_path(host: HostContext) -> str:
    """Binary of the runtime executing the tool."""
    return host.executable


def tool_bin_path(platform: PlatformTag, module_file: str, bundled: bool) -> str:
    """Path used to re-invoke the tool itself.

    A bundled build is a single file, so it is its own entry point.
    Otherwise the script sits in ``bin/`` next to the package directory.
    """
    if bundled:
        return module_file
    return platform.join_path(platform.path_module.dirname(module_file), "..", "bin", BIN_SCRIPT)
