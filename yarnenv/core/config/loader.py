"""
Host loader — captures the live host or reads a saved host snapshot.

``capture_host_context`` is the only place that touches ``os.environ``,
``sys.platform`` and friends.  ``load_host_context`` reads the same data
from a YAML file so a machine's resolution can be reproduced elsewhere:

    platform: windows
    home_dir: 'C:\\Users\\X'
    temp_dir: 'C:\\Users\\X\\AppData\\Local\\Temp'
    env:
      LOCALAPPDATA: 'C:\\Users\\X\\AppData\\Local'
      Path: 'C:\\Windows'
"""

from __future__ import annotations

import logging
import os
import sys
import tempfile
from pathlib import Path

import yaml
from pydantic import ValidationError

import yarnenv
from yarnenv.core.models.host import HostContext
from yarnenv.core.models.platform import PlatformTag

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when the host context cannot be captured or loaded."""


def capture_host_context() -> HostContext:
    """Snapshot the running process: platform, environment, well-known dirs.

    Raises:
        ConfigError: If the home directory cannot be determined.
    """
    try:
        home_dir = str(Path.home())
    except (KeyError, RuntimeError) as e:
        raise ConfigError(f"Cannot determine the user home directory: {e}") from e

    host = HostContext(
        platform=PlatformTag.detect(),
        env=dict(os.environ),
        home_dir=home_dir,
        temp_dir=tempfile.gettempdir(),
        executable=sys.executable,
        module_file=os.path.abspath(yarnenv.__file__),
        bundled=bool(getattr(sys, "frozen", False)),
    )
    logger.debug(
        "Captured host: platform=%s home=%s tmp=%s (%d env vars)",
        host.platform.value, host.home_dir, host.temp_dir, len(host.env),
    )
    return host


def load_host_context(path: Path) -> HostContext:
    """Load and validate a host snapshot file.

    Args:
        path: YAML file written by ``dump_host_context`` (or by hand).

    Returns:
        Validated HostContext.

    Raises:
        ConfigError: If the file is missing or invalid.
    """
    if not path.is_file():
        raise ConfigError(f"Host file not found: {path}")

    logger.debug("Loading host snapshot from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    # Accept a top-level "host:" wrapper as well as the flat form
    host_data = data.get("host", data) if isinstance(data.get("host"), dict) else data

    try:
        host = HostContext.model_validate(host_data)
    except ValidationError as e:
        raise ConfigError(f"Invalid host snapshot: {e}") from e

    logger.info("Loaded %s host snapshot with %d env vars", host.platform.value, len(host.env))
    return host


def dump_host_context(host: HostContext) -> str:
    """Serialize a host snapshot to YAML that ``load_host_context`` accepts."""
    data = host.model_dump(mode="json")
    return yaml.safe_dump(data, sort_keys=False, default_flow_style=False)
