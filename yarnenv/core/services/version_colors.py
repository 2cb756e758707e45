"""
Version bump → display color (used by ``outdated`` / ``upgrade-interactive``).
"""

from __future__ import annotations

from types import MappingProxyType

from yarnenv.core.models.runtime import VersionColor

VERSION_COLOR_SCHEME: MappingProxyType[str, VersionColor] = MappingProxyType({
    "major": "red",
    "premajor": "red",
    "minor": "yellow",
    "preminor": "yellow",
    "patch": "green",
    "prepatch": "green",
    "prerelease": "red",
    "unchanged": "white",
    "unknown": "red",
})


def color_for(bump_category: str) -> VersionColor:
    """Color for a bump category; unrecognized ones get ``unknown``'s color.

    No normalization: ``"Major"`` is not ``"major"``.
    """
    return VERSION_COLOR_SCHEME.get(bump_category, VERSION_COLOR_SCHEME["unknown"])
