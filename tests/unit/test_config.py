"""
Unit tests for catalogs, settings and theme.
"""

from pathlib import Path

import pytest

from zero.config.catalog import FRAMEWORKS, MODULE_IDS, MODULES, PACKAGE_MANAGERS
from zero.config.settings import (
    ConfigurationError,
    WizardSettings,
    get_settings_path,
    load_settings,
    load_yaml_file,
)
from zero.config.theme import DARK, LIGHT, MONO, detect_dark_background, resolve_palette


# =============================================================================
# Catalog Tests
# =============================================================================


class TestCatalog:
    """Tests for the option catalogs."""

    def test_catalog_order(self):
        """Test catalogs keep their fixed order."""
        assert [f.id for f in FRAMEWORKS] == ["nextjs", "expo"]
        assert MODULE_IDS == ["neon", "clerk", "payload", "stripe", "email"]
        assert [p.id for p in PACKAGE_MANAGERS] == ["npm", "pnpm", "yarn", "bun"]

    def test_module_details(self):
        """Test modules carry their env vars and per-framework packages."""
        modules = {m.id: m for m in MODULES}
        assert modules["clerk"].short_label == "Auth"
        assert modules["clerk"].packages["expo"] == ["@clerk/clerk-expo"]
        assert modules["email"].env_vars == []
        assert modules["email"].packages == {}

    def test_package_manager_commands(self):
        """Test package managers expose their dev command."""
        managers = {p.id: p for p in PACKAGE_MANAGERS}
        assert managers["bun"].dev == ["bun", "run", "dev"]


# =============================================================================
# Settings Tests
# =============================================================================


class TestSettings:
    """Tests for loading WizardSettings."""

    def test_defaults(self):
        """Test defaults when no file or env is present."""
        settings = load_settings()
        assert settings == WizardSettings()
        assert settings.tick_interval == 0.1
        assert settings.splash_seconds == 3.0
        assert settings.name_limit == 80

    def test_default_path_uses_zero_home(self, isolated_env: Path):
        """Test the default file lives under ZERO_HOME."""
        assert get_settings_path() == isolated_env.resolve() / "settings.yaml"

    def test_default_file_loaded(self, isolated_env: Path):
        """Test the default settings file is picked up."""
        isolated_env.mkdir(parents=True)
        (isolated_env / "settings.yaml").write_text("show_splash: false\n", encoding="utf-8")
        assert load_settings().show_splash is False

    def test_explicit_file(self, temp_dir: Path):
        """Test an explicit settings file."""
        path = temp_dir / "custom.yaml"
        path.write_text("theme: light\nname_limit: 20\n", encoding="utf-8")
        settings = load_settings(path)
        assert settings.theme == "light"
        assert settings.name_limit == 20

    def test_missing_explicit_file(self, temp_dir: Path):
        """Test a missing explicit file is an error."""
        with pytest.raises(ConfigurationError, match="not found"):
            load_settings(temp_dir / "nope.yaml")

    def test_invalid_yaml(self, temp_dir: Path):
        """Test malformed YAML raises ConfigurationError."""
        path = temp_dir / "bad.yaml"
        path.write_text("theme: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_yaml_file(path)

    def test_non_mapping(self, temp_dir: Path):
        """Test a YAML list is rejected."""
        path = temp_dir / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="mapping"):
            load_settings(path)

    def test_invalid_value(self, temp_dir: Path):
        """Test out-of-range values are rejected."""
        path = temp_dir / "bad.yaml"
        path.write_text("tick_interval: 0\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Invalid settings"):
            load_settings(path)

    def test_env_overrides(self, temp_dir: Path, monkeypatch: pytest.MonkeyPatch):
        """Test ZERO_* variables override file values."""
        path = temp_dir / "custom.yaml"
        path.write_text("splash_seconds: 5.0\n", encoding="utf-8")
        monkeypatch.setenv("ZERO_SPLASH_SECONDS", "1.5")
        monkeypatch.setenv("ZERO_SHOW_SPLASH", "no")
        monkeypatch.setenv("ZERO_DOMAIN_LIMIT", "64")

        settings = load_settings(path)
        assert settings.splash_seconds == 1.5
        assert settings.show_splash is False
        assert settings.domain_limit == 64

    def test_skip_env(self, monkeypatch: pytest.MonkeyPatch):
        """Test skip_env ignores environment overrides."""
        monkeypatch.setenv("ZERO_THEME", "mono")
        assert load_settings(skip_env=True).theme == "auto"


# =============================================================================
# Theme Tests
# =============================================================================


class TestTheme:
    """Tests for palette resolution."""

    @pytest.mark.parametrize(
        ("theme", "palette"), [("dark", DARK), ("light", LIGHT), ("mono", MONO)]
    )
    def test_explicit_themes(self, theme, palette):
        """Test explicit theme names."""
        assert resolve_palette(theme) is palette

    @pytest.mark.parametrize(
        ("value", "dark"),
        [("15;0", True), ("0;15", False), ("0;default;7", False), ("", True), ("garbage", True)],
    )
    def test_detect_background(self, monkeypatch, value, dark):
        """Test COLORFGBG parsing."""
        monkeypatch.setenv("COLORFGBG", value)
        assert detect_dark_background() is dark

    def test_auto_theme(self, monkeypatch):
        """Test auto follows the detected background."""
        monkeypatch.setenv("COLORFGBG", "0;15")
        assert resolve_palette("auto") is LIGHT
        monkeypatch.delenv("COLORFGBG")
        assert resolve_palette("auto") is DARK
