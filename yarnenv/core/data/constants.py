"""
Static constants — URLs, tuning numbers and file-naming conventions.

Pure data. No logic beyond ``constants_as_dict``. No imports beyond stdlib.
"""

from __future__ import annotations

TOOL_NAME = "yarn"

DEPENDENCY_TYPES: tuple[str, ...] = (
    "devDependencies",
    "dependencies",
    "optionalDependencies",
    "peerDependencies",
)

YARN_REGISTRY = "https://registry.yarnpkg.com"

YARN_DOCS = "https://yarnpkg.com/en/docs/cli/"
YARN_INSTALLER_SH = "https://yarnpkg.com/install.sh"
YARN_INSTALLER_MSI = "https://yarnpkg.com/latest.msi"

SELF_UPDATE_VERSION_URL = "https://yarnpkg.com/latest-version"
SELF_UPDATE_TARBALL_URL = "https://yarnpkg.com/latest.tar.gz"
SELF_UPDATE_DOWNLOAD_FOLDER = "updates"

# Bump whenever the on-disk format changes incompatibly.
CACHE_VERSION = 1
LOCKFILE_VERSION = 1

# Max network requests in flight at once.
NETWORK_CONCURRENCY = 8

# HTTP timeout for package downloads (milliseconds).
NETWORK_TIMEOUT = 30 * 1000

# Max child processes running at once.
CHILD_CONCURRENCY = 5

REQUIRED_PACKAGE_KEYS: tuple[str, ...] = ("name", "version", "_uid")

# ── File & folder names ─────────────────────────────────────────

NODE_MODULES_FOLDER = "node_modules"
NODE_PACKAGE_JSON = "package.json"

META_FOLDER = ".yarn-meta"
INTEGRITY_FILENAME = ".yarn-integrity"
LOCKFILE_FILENAME = "yarn.lock"
METADATA_FILENAME = ".yarn-metadata.json"
TARBALL_FILENAME = ".yarn-tarball.tgz"
CLEAN_FILENAME = ".yarnclean"
ACCESS_FILENAME = ".yarn-access"

# Relative to the installed package dir; used when not running bundled.
BIN_SCRIPT = "yarn.js"

DEFAULT_INDENT = "  "
SINGLE_INSTANCE_PORT = 31997
SINGLE_INSTANCE_FILENAME = ".yarn-single-instance"

# ── Directory naming ────────────────────────────────────────────

WINDOWS_APP_FOLDER = "Yarn"
MACOS_CACHE_FOLDER = "Yarn"
TEMP_CACHE_FOLDER = f".{TOOL_NAME}-cache"
FALLBACK_PREFIX_FOLDER = f".{TOOL_NAME}"
POSIX_PREFIX = "/usr/local"


def constants_as_dict() -> dict:
    """Group the static values for display (``yarnenv constants``)."""
    return {
        "network": {
            "network_concurrency": NETWORK_CONCURRENCY,
            "network_timeout_ms": NETWORK_TIMEOUT,
            "child_concurrency": CHILD_CONCURRENCY,
        },
        "versions": {
            "cache_version": CACHE_VERSION,
            "lockfile_version": LOCKFILE_VERSION,
        },
        "files": {
            "node_modules_folder": NODE_MODULES_FOLDER,
            "node_package_json": NODE_PACKAGE_JSON,
            "meta_folder": META_FOLDER,
            "integrity_filename": INTEGRITY_FILENAME,
            "lockfile_filename": LOCKFILE_FILENAME,
            "metadata_filename": METADATA_FILENAME,
            "tarball_filename": TARBALL_FILENAME,
            "clean_filename": CLEAN_FILENAME,
            "access_filename": ACCESS_FILENAME,
            "single_instance_filename": SINGLE_INSTANCE_FILENAME,
        },
        "urls": {
            "registry": YARN_REGISTRY,
            "docs": YARN_DOCS,
            "installer_sh": YARN_INSTALLER_SH,
            "installer_msi": YARN_INSTALLER_MSI,
            "self_update_version": SELF_UPDATE_VERSION_URL,
            "self_update_tarball": SELF_UPDATE_TARBALL_URL,
        },
        "misc": {
            "dependency_types": list(DEPENDENCY_TYPES),
            "required_package_keys": list(REQUIRED_PACKAGE_KEYS),
            "self_update_download_folder": SELF_UPDATE_DOWNLOAD_FOLDER,
            "default_indent": DEFAULT_INDENT,
            "single_instance_port": SINGLE_INSTANCE_PORT,
        },
    }
