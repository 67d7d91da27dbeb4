"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, recipekit.toml only contains
overrides.  An empty file (or none at all) yields the standard limits and
the canonical wire format.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from recipekit.domain.validation import ValidationLimits

# --- recipekit.toml sections ---


class WireConfig(BaseModel):
    """[wire] section."""

    model_config = {"frozen": True}

    indent: int | None = 2
    sort_keys: bool = True


class RecipeKitConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    limits: ValidationLimits = Field(default_factory=ValidationLimits)
    wire: WireConfig = Field(default_factory=WireConfig)
