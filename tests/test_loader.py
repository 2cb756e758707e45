"""
Tests for host loading — live capture and YAML host snapshots.
"""

import textwrap
from pathlib import Path

import pytest

from yarnenv.core.config.loader import (
    ConfigError,
    capture_host_context,
    dump_host_context,
    load_host_context,
)
from yarnenv.core.models.host import HostContext
from yarnenv.core.models.platform import PlatformTag


@pytest.fixture
def windows_host_yml(tmp_path: Path) -> Path:
    """Create a Windows host snapshot in a temp directory."""
    content = textwrap.dedent("""\
        platform: windows
        home_dir: 'C:\\Users\\X'
        temp_dir: 'C:\\Users\\X\\AppData\\Local\\Temp'
        env:
          LOCALAPPDATA: 'C:\\Users\\X\\AppData\\Local'
          Path: 'C:\\Windows'
          PATH: 'C:\\bin'
    """)
    path = tmp_path / "host.yml"
    path.write_text(content)
    return path


@pytest.fixture
def wrapped_host_yml(tmp_path: Path) -> Path:
    """Create a host snapshot nested under a 'host:' key."""
    content = textwrap.dedent("""\
        host:
          platform: macos
          home_dir: /Users/u
          temp_dir: /tmp
    """)
    path = tmp_path / "host.yml"
    path.write_text(content)
    return path


class TestLoadHostContext:
    """Tests for load_host_context()."""

    def test_load_windows_snapshot(self, windows_host_yml: Path):
        host = load_host_context(windows_host_yml)
        assert host.platform is PlatformTag.WINDOWS
        assert host.home_dir == "C:\\Users\\X"
        assert host.env["LOCALAPPDATA"] == "C:\\Users\\X\\AppData\\Local"

    def test_env_order_preserved(self, windows_host_yml: Path):
        host = load_host_context(windows_host_yml)
        assert list(host.env) == ["LOCALAPPDATA", "Path", "PATH"]

    def test_load_wrapped_format(self, wrapped_host_yml: Path):
        host = load_host_context(wrapped_host_yml)
        assert host.platform is PlatformTag.MACOS
        assert host.env == {}

    def test_null_env_value_allowed(self, tmp_path: Path):
        path = tmp_path / "host.yml"
        path.write_text("platform: posix\nhome_dir: /h\ntemp_dir: /t\nenv:\n  DESTIR:\n")
        host = load_host_context(path)
        assert host.env == {"DESTIR": None}

    def test_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="not found"):
            load_host_context(tmp_path / "nonexistent.yml")

    def test_invalid_yaml_raises(self, tmp_path: Path):
        path = tmp_path / "host.yml"
        path.write_text(":: invalid: yaml: [")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_host_context(path)

    def test_non_mapping_raises(self, tmp_path: Path):
        path = tmp_path / "host.yml"
        path.write_text("- just\n- a\n- list\n")
        with pytest.raises(ConfigError, match="Expected a YAML mapping"):
            load_host_context(path)

    def test_unknown_platform_raises(self, tmp_path: Path):
        path = tmp_path / "host.yml"
        path.write_text("platform: beos\nhome_dir: /h\ntemp_dir: /t\n")
        with pytest.raises(ConfigError, match="Invalid host snapshot"):
            load_host_context(path)

    def test_missing_home_raises(self, tmp_path: Path):
        path = tmp_path / "host.yml"
        path.write_text("platform: posix\ntemp_dir: /t\n")
        with pytest.raises(ConfigError, match="Invalid host snapshot"):
            load_host_context(path)


class TestDumpHostContext:
    def test_dump_is_loadable(self, tmp_path: Path, windows_host: HostContext):
        path = tmp_path / "host.yml"
        path.write_text(dump_host_context(windows_host))
        assert load_host_context(path) == windows_host

    def test_dump_uses_platform_value(self, posix_host: HostContext):
        text = dump_host_context(posix_host)
        assert "platform: posix" in text


class TestCaptureHostContext:
    def test_captures_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("YARNENV_TEST_MARKER", "1")
        host = capture_host_context()
        assert host.env["YARNENV_TEST_MARKER"] == "1"
        assert host.platform is PlatformTag.detect()
        assert host.temp_dir
        assert host.module_file.endswith("__init__.py")

    def test_uses_home_directory(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(Path, "home", classmethod(lambda cls: Path("/home/tester")))
        host = capture_host_context()
        assert host.home_dir == str(Path("/home/tester"))

    def test_bundled_flag(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr("sys.frozen", True, raising=False)
        assert capture_host_context().bundled is True

    def test_home_failure_raises(self, monkeypatch: pytest.MonkeyPatch):
        def _no_home(cls):
            raise RuntimeError("Could not determine home directory.")

        monkeypatch.setattr(Path, "home", classmethod(_no_home))
        with pytest.raises(ConfigError, match="home directory"):
            capture_host_context()
