"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``RECIPEKIT_*`` prefix, ``__`` for nested sections
  3. TOML file    — ``recipekit.toml`` discovered via walk-up
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from recipekit.config.discovery import find_config
from recipekit.config.models import WireConfig
from recipekit.domain.validation import ValidationLimits
from recipekit.serialization.codec import JSONCodec


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Feed the sections of a recipekit.toml file into the settings model."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path is None or not toml_path.is_file():
            return
        try:
            self._data = tomllib.loads(toml_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as exc:
            msg = f"Invalid TOML in {toml_path}: {exc}"
            raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# The TOML path is handed to settings_customise_sources through a
# thread-local because pydantic-settings builds sources from a classmethod.
_tls = threading.local()


class RecipeKitSettings(BaseSettings):
    """Frozen settings shared by the CLI and the boundary services.

    Attributes:
        config_path: The recipekit.toml in effect, if any.
        limits: Validator bounds (``[limits]``).
        wire: JSON output format (``[wire]``).
    """

    model_config = {
        "frozen": True,
        "env_prefix": "RECIPEKIT_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    limits: ValidationLimits = Field(default_factory=ValidationLimits)
    wire: WireConfig = Field(default_factory=WireConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, getattr(_tls, "toml_path", None)),
        )

    @classmethod
    def load(
        cls,
        *,
        config_path: str | Path | None = None,
        start: Path | None = None,
        **overrides: Any,
    ) -> RecipeKitSettings:
        """Build settings from an explicit config file or walk-up discovery.

        An explicit *config_path* that does not exist is ignored, leaving
        env vars and defaults in effect.
        """
        toml_path: Path | None
        if config_path:
            candidate = Path(config_path)
            toml_path = candidate if candidate.is_file() else None
        else:
            toml_path = find_config(start)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **overrides)
        finally:
            _tls.toml_path = None

    def codec(self) -> JSONCodec:
        """JSON codec honouring the ``[wire]`` section."""
        return JSONCodec(indent=self.wire.indent, sort_keys=self.wire.sort_keys)
