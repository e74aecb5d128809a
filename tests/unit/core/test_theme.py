"""Unit tests for theme loading."""

from pathlib import Path

import pytest
from rich.theme import Theme
from rmrf.core.theme import ThemeColors, get_rich_theme, load_theme


class TestThemeColors:
    """Tests for ThemeColors validation."""

    def test_accepts_short_and_long_hex(self) -> None:
        """#RGB and #RRGGBB are both valid."""
        colors = ThemeColors(success="#0f0", error="#ff0000")

        assert colors.success == "#0f0"
        assert colors.error == "#ff0000"

    @pytest.mark.parametrize("value", ["red", "#12", "#zzzzzz", 42])
    def test_rejects_invalid_colors(self, value: object) -> None:
        """Non-hex values are rejected."""
        with pytest.raises(ValueError):
            ThemeColors(success=value)  # type: ignore[arg-type]


class TestLoadTheme:
    """Tests for load_theme function."""

    def test_missing_file_uses_defaults(self, tmp_path: Path) -> None:
        """No theme file means default colors."""
        assert load_theme(tmp_path / "theme.toml") == ThemeColors()

    def test_user_override(self, tmp_path: Path) -> None:
        """Colors from the file override the defaults."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text('[colors]\nsuccess = "#00ff00"\n')

        colors = load_theme(theme_file)

        assert colors.success == "#00ff00"
        assert colors.error == ThemeColors().error

    def test_invalid_override_falls_back(self, tmp_path: Path) -> None:
        """An invalid color falls back to defaults instead of failing."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text('[colors]\nsuccess = "green"\n')

        assert load_theme(theme_file) == ThemeColors()

    def test_broken_toml_falls_back(self, tmp_path: Path) -> None:
        """Unparseable TOML falls back to defaults."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text("[colors\n")

        assert load_theme(theme_file) == ThemeColors()


class TestGetRichTheme:
    """Tests for get_rich_theme function."""

    def test_builds_styles(self) -> None:
        """Every semantic style used by the CLI is defined."""
        theme = get_rich_theme(ThemeColors())

        assert isinstance(theme, Theme)
        for name in ("success", "error", "warning", "info", "muted", "removed", "bold_header"):
            assert name in theme.styles
