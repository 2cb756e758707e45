"""
Tests for the version bump color table.
"""

import pytest

from yarnenv.core.services.version_colors import VERSION_COLOR_SCHEME, color_for


class TestColorFor:
    @pytest.mark.parametrize(
        "category, expected",
        [
            ("major", "red"),
            ("premajor", "red"),
            ("minor", "yellow"),
            ("preminor", "yellow"),
            ("patch", "green"),
            ("prepatch", "green"),
            ("prerelease", "red"),
            ("unchanged", "white"),
            ("unknown", "red"),
        ],
    )
    def test_known_categories(self, category: str, expected: str):
        assert color_for(category) == expected

    def test_unrecognized_uses_unknown_color(self):
        assert color_for("sideways") == VERSION_COLOR_SCHEME["unknown"]

    def test_case_sensitive(self):
        # "Minor" is not normalized, so it falls back to unknown's red
        assert color_for("Minor") == "red"


class TestScheme:
    def test_nine_categories(self):
        assert len(VERSION_COLOR_SCHEME) == 9

    def test_closed_color_set(self):
        assert set(VERSION_COLOR_SCHEME.values()) <= {"red", "yellow", "green", "white"}

    def test_read_only(self):
        with pytest.raises(TypeError):
            VERSION_COLOR_SCHEME["major"] = "green"  # type: ignore[index]
