"""
Shared test fixtures and configuration.
"""

import logging
from pathlib import Path

import pytest

from yarnenv.core import context
from yarnenv.core.models.host import HostContext
from yarnenv.core.models.platform import PlatformTag

WIN_HOME = "C:\\Users\\X"
WIN_LOCALAPPDATA = "C:\\Users\\X\\AppData\\Local"
WIN_TEMP = "C:\\Users\\X\\AppData\\Local\\Temp"


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture(autouse=True)
def _isolate_process_state():
    """Reset the runtime context and root logger around every test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    context.reset_runtime_config()
    yield
    context.reset_runtime_config()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def posix_host() -> HostContext:
    return HostContext(
        platform=PlatformTag.OTHER_POSIX,
        env={"HOME": "/home/u", "PATH": "/usr/bin:/bin"},
        home_dir="/home/u",
        temp_dir="/tmp",
        executable="/usr/bin/python3",
        module_file="/opt/yarnenv/yarnenv/__init__.py",
    )


@pytest.fixture
def macos_host() -> HostContext:
    return HostContext(
        platform=PlatformTag.MACOS,
        env={"HOME": "/Users/u", "PATH": "/usr/bin"},
        home_dir="/Users/u",
        temp_dir="/var/folders/tmp",
        executable="/usr/local/bin/python3",
        module_file="/Users/u/yarnenv/yarnenv/__init__.py",
    )


@pytest.fixture
def windows_host() -> HostContext:
    return HostContext(
        platform=PlatformTag.WINDOWS,
        env={"LOCALAPPDATA": WIN_LOCALAPPDATA, "Path": "C:\\Windows"},
        home_dir=WIN_HOME,
        temp_dir=WIN_TEMP,
        executable="C:\\Python311\\python.exe",
        module_file="C:\\yarnenv\\yarnenv\\__init__.py",
    )
