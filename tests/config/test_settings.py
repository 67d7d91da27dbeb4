"""Tests for RecipeKitSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from recipekit.config.discovery import CONFIG_ENV_VAR
from recipekit.config.settings import RecipeKitSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.delenv("RECIPEKIT_LIMITS__MAX_SERVINGS", raising=False)


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = RecipeKitSettings.load(start=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.verbose is False
        assert settings.limits.max_servings == 1000
        assert settings.wire.sort_keys is True

    def test_frozen(self, tmp_path: Path) -> None:
        settings = RecipeKitSettings.load(start=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "recipekit.toml").write_text("[limits]\nmax_servings = 12\n")
        settings = RecipeKitSettings.load(start=tmp_path)
        assert settings.limits.max_servings == 12
        assert settings.limits.max_time == 10080
        assert settings.config_path == (tmp_path / "recipekit.toml").resolve()

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("[wire]\nindent = 4\n")
        settings = RecipeKitSettings.load(config_path=str(custom))
        assert settings.wire.indent == 4
        assert settings.config_path == custom

    def test_missing_explicit_path_uses_defaults(self, tmp_path: Path) -> None:
        settings = RecipeKitSettings.load(config_path=tmp_path / "nope.toml")
        assert settings.config_path is None
        assert settings.wire.indent == 2

    def test_invalid_toml(self, tmp_path: Path) -> None:
        bad = tmp_path / "recipekit.toml"
        bad.write_text("[limits\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            RecipeKitSettings.load(config_path=bad)


class TestPriority:
    def test_env_beats_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "recipekit.toml").write_text("[limits]\nmax_servings = 12\n")
        monkeypatch.setenv("RECIPEKIT_LIMITS__MAX_SERVINGS", "30")
        settings = RecipeKitSettings.load(start=tmp_path)
        assert settings.limits.max_servings == 30

    def test_init_beats_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RECIPEKIT_VERBOSE", "false")
        settings = RecipeKitSettings.load(start=tmp_path, verbose=True)
        assert settings.verbose is True


class TestCodec:
    def test_codec_follows_wire_section(self, tmp_path: Path) -> None:
        (tmp_path / "recipekit.toml").write_text("[wire]\nindent = 4\nsort_keys = false\n")
        codec = RecipeKitSettings.load(start=tmp_path).codec()
        assert codec.indent == 4
        assert codec.sort_keys is False
