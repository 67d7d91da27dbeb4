"""Locate and load ``recipekit.toml``.

Lookup order: the ``RECIPEKIT_CONFIG`` env var, then a walk up the
directory tree from the starting point (the way git finds ``.git/``).
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path

from recipekit.config.models import RecipeKitConfig

CONFIG_FILENAME = "recipekit.toml"
CONFIG_ENV_VAR = "RECIPEKIT_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest recipekit.toml at or above *start* (default: cwd).

    When RECIPEKIT_CONFIG is set it wins outright: the named file is
    returned if it exists, otherwise None (no walk-up fallback).
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_config(path: Path | None = None, cwd: Path | None = None) -> RecipeKitConfig:
    """Parse *path* (or the discovered file) into a RecipeKitConfig.

    Missing file means all defaults.
    """
    target = path if path is not None else find_config(cwd)
    if target is None:
        return RecipeKitConfig()
    data = tomllib.loads(target.read_text(encoding="utf-8"))
    return RecipeKitConfig.model_validate(data)
