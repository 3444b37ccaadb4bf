"""Unit tests for theme module.

Tests for theme loading, validation, and Rich theme generation.
"""

# pyright: reportPrivateUsage=false

from pathlib import Path
from unittest.mock import patch

import emplace.core.theme as theme_module
import pytest
from emplace.core.theme import (
    ThemeColors,
    _load_toml_colors,
    get_bundled_theme_path,
    get_rich_theme,
    get_theme,
    load_theme,
)
from rich.theme import Theme


class TestThemeColors:
    """Tests for ThemeColors Pydantic model."""

    def test_default_values(self) -> None:
        """ThemeColors has sensible defaults."""
        colors = ThemeColors()
        assert colors.text == "#ffffff"
        assert colors.package == "#69B9A1"
        assert colors.flag == "#faf870"

    def test_valid_hex_colors(self) -> None:
        """ThemeColors accepts short and long hex codes."""
        colors = ThemeColors(text="#AABBCC", muted="#abc")
        assert colors.text == "#AABBCC"
        assert colors.muted == "#abc"

    def test_strips_whitespace(self) -> None:
        """Surrounding whitespace is ignored."""
        assert ThemeColors(flag="  #123456 ").flag == "#123456"

    @pytest.mark.parametrize(
        ("value", "message"),
        [
            ("ffffff", "must start with '#'"),
            ("#ff", "must be #RGB or #RRGGBB"),
            ("#gggggg", "invalid hex color"),
            (123, "must be a string"),
        ],
    )
    def test_invalid_colors(self, value: object, message: str) -> None:
        """ThemeColors rejects malformed colors."""
        with pytest.raises(ValueError, match=message):
            ThemeColors(text=value)  # type: ignore[arg-type]

    def test_extra_fields_forbidden(self) -> None:
        """ThemeColors rejects unknown fields."""
        with pytest.raises(ValueError):
            ThemeColors(unknown_field="#ffffff")  # type: ignore[call-arg]


class TestLoadTomlColors:
    """Tests for _load_toml_colors internal function."""

    def test_loads_valid_toml(self, tmp_path: Path) -> None:
        """Loads colors from valid TOML file."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text('[colors]\ntext = "#000000"\nflag = "#aabbcc"\nlevel = 3\n')

        result = _load_toml_colors(theme_file)

        assert result == {"text": "#000000", "flag": "#aabbcc"}

    def test_returns_none_for_missing_file(self, tmp_path: Path) -> None:
        """Returns None when file doesn't exist."""
        assert _load_toml_colors(tmp_path / "nonexistent.toml") is None

    def test_returns_none_for_invalid_toml(self, tmp_path: Path) -> None:
        """Returns None for malformed TOML."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text("not valid [ toml syntax")

        assert _load_toml_colors(theme_file) is None

    def test_returns_none_for_non_table_colors(self, tmp_path: Path) -> None:
        """Returns None when colors is not a table."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text('colors = "red"\n')

        assert _load_toml_colors(theme_file) is None


class TestLoadTheme:
    """Tests for load_theme function."""

    def test_bundled_theme_exists(self) -> None:
        """The default theme ships with the package."""
        assert get_bundled_theme_path().is_file()

    def test_loads_bundled_theme(self, tmp_path: Path) -> None:
        """Loads theme from bundled data file."""
        with patch("emplace.core.theme.get_theme_path", return_value=tmp_path / "none.toml"):
            colors = load_theme()

        assert colors.header == "#69B9A1"
        assert colors.command == "#c1ff62"

    def test_user_theme_overrides_bundled(self, tmp_path: Path) -> None:
        """User theme overrides bundled theme values."""
        user_theme = tmp_path / "theme.toml"
        user_theme.write_text('[colors]\npackage = "#ff0000"\n')

        with patch("emplace.core.theme.get_theme_path", return_value=user_theme):
            colors = load_theme()

        assert colors.package == "#ff0000"
        assert colors.text == "#ffffff"

    def test_invalid_user_colors_fall_back_to_defaults(self, tmp_path: Path) -> None:
        """Invalid user colors are replaced by the defaults."""
        user_theme = tmp_path / "theme.toml"
        user_theme.write_text('[colors]\npackage = "red"\n')

        with patch("emplace.core.theme.get_theme_path", return_value=user_theme):
            colors = load_theme()

        assert colors == ThemeColors()


class TestGetRichTheme:
    """Tests for get_rich_theme function."""

    def test_includes_package_styles(self) -> None:
        """Theme includes styles used for package rendering."""
        theme = get_rich_theme(ThemeColors())

        for style in ("package", "flag", "manager", "command", "error", "bold_header"):
            assert style in theme.styles

    def test_uses_provided_colors(self) -> None:
        """Uses provided ThemeColors instance."""
        theme = get_rich_theme(ThemeColors(flag="#123456"))
        assert theme.styles["flag"].color is not None
        assert theme.styles["flag"].color.triplet is not None
        assert theme.styles["flag"].color.triplet.hex == "#123456"


class TestGetTheme:
    """Tests for get_theme caching function."""

    def test_caches_theme(self) -> None:
        """get_theme returns cached instance on subsequent calls."""
        theme_module._cached_theme = None

        theme1 = get_theme()
        theme2 = get_theme()

        assert isinstance(theme1, Theme)
        assert theme1 is theme2
