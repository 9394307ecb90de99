"""Unit tests for theme loading."""

import tomllib
from importlib import resources
from pathlib import Path

import pytest
from pydantic import ValidationError
from rich.theme import Theme
from rmdirctl.core.theme import ThemeColors, get_rich_theme, load_theme


class TestThemeColors:
    """Tests for ThemeColors validation."""

    def test_accepts_short_and_long_hex(self) -> None:
        """Both #RGB and #RRGGBB are valid."""
        colors = ThemeColors(success="#0f0", error="#ff0000")
        assert colors.success == "#0f0"
        assert colors.error == "#ff0000"

    @pytest.mark.parametrize("value", ["red", "#12", "#zzzzzz", 123])
    def test_rejects_invalid_colors(self, value: object) -> None:
        """Non-hex values are rejected."""
        with pytest.raises(ValidationError):
            ThemeColors(success=value)  # type: ignore[arg-type]


class TestLoadTheme:
    """Tests for load_theme function."""

    def test_bundled_theme(self, isolated_config_home: Path) -> None:
        """Without user overrides the bundled theme is used."""
        colors = load_theme()
        assert colors.success == "#03b971"
        assert colors.absent == "#226666"

    def test_user_override(self, isolated_config_home: Path) -> None:
        """User colors override bundled ones key by key."""
        theme_dir = isolated_config_home / "rmdirctl"
        theme_dir.mkdir(parents=True)
        (theme_dir / "theme.toml").write_text('[colors]\nsuccess = "#00ff00"\n')

        colors = load_theme()

        assert colors.success == "#00ff00"
        assert colors.error == "#f53263"

    def test_invalid_override_falls_back(self, isolated_config_home: Path) -> None:
        """An invalid user theme falls back to defaults."""
        theme_dir = isolated_config_home / "rmdirctl"
        theme_dir.mkdir(parents=True)
        (theme_dir / "theme.toml").write_text('[colors]\nsuccess = "green"\n')

        assert load_theme() == ThemeColors()


class TestGetRichTheme:
    """Tests for get_rich_theme function."""

    def test_styles(self) -> None:
        """Outcome and semantic styles are defined."""
        theme = get_rich_theme(ThemeColors())

        assert isinstance(theme, Theme)
        for name in ("success", "error", "removed", "absent", "bold_header", "dim"):
            assert name in theme.styles

    def test_only_cli_styles(self) -> None:
        """The theme defines exactly the styles the CLI prints with."""
        theme = get_rich_theme(ThemeColors())

        expected = {
            "muted",
            "header",
            "border",
            "success",
            "warning",
            "error",
            "info",
            "removed",
            "absent",
            "bold_header",
            "dim",
        }
        assert expected <= set(theme.styles)
        assert set(ThemeColors.model_fields) == expected - {"bold_header", "dim"}

    def test_bundled_theme_matches_fields(self) -> None:
        """Every key in the bundled theme file is a known colour."""
        bundled = resources.files("rmdirctl.data").joinpath("theme.toml")
        data = tomllib.loads(bundled.read_text())

        assert set(data["colors"]) == set(ThemeColors.model_fields)
