"""RecipeService — decode, validate, and build recipe entities.

Implements the boundary flow::

    raw bytes -> DTO (structural check) -> validator -> Recipe -> wire dict

Existing recipes are passed in by the caller; nothing is loaded or stored
here.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Literal
from uuid import UUID

from recipekit.domain.dto import CreateRecipeDTO, UpdateRecipeDTO
from recipekit.domain.models import Recipe
from recipekit.domain.validation import validate_create, validate_update
from recipekit.domain.wire import DecodeError
from recipekit.services.base import BaseService
from recipekit.services.result import NO_UPDATES, ServiceResult

logger = logging.getLogger(__name__)

PayloadKind = Literal["create", "update"]


class RecipeService(BaseService):
    """Boundary operations for ``/api/recipes``."""

    def create_recipe(
        self,
        payload: str | bytes,
        *,
        user_id: UUID | None = None,
        now: datetime | None = None,
    ) -> ServiceResult:
        """Handle ``POST /api/recipes``."""
        op = "create_recipe"
        try:
            dto = self._codec.decode(CreateRecipeDTO, payload)
        except DecodeError as exc:
            return self._decode_failed(op, exc)

        if err := validate_create(dto, self._limits):
            return self._invalid(op, err)

        recipe = Recipe.from_create(dto, user_id=user_id, now=now)
        logger.debug("Built recipe %s", recipe.id)
        return ServiceResult.success(op, {"recipe": self._codec.to_dict(recipe)})

    def update_recipe(
        self,
        existing: Recipe,
        payload: str | bytes,
        *,
        now: datetime | None = None,
    ) -> ServiceResult:
        """Handle ``PUT /api/recipes/{id}`` against *existing*.

        Only present fields are validated and applied.  A lone prep or cook
        time is checked with its twin at 0, so the merged total is not
        re-validated.
        """
        op = "update_recipe"
        try:
            dto = self._codec.decode(UpdateRecipeDTO, payload)
        except DecodeError as exc:
            return self._decode_failed(op, exc)

        if not dto.has_updates:
            return ServiceResult.failure(op, NO_UPDATES, "No fields to update")

        if err := validate_update(dto, self._limits):
            return self._invalid(op, err)

        updated = existing.apply_update(dto, now=now)
        changed = sorted(self._codec.to_dict(dto))
        return ServiceResult.success(
            op,
            {"recipe": self._codec.to_dict(updated), "updated_fields": changed},
        )

    def toggle_favorite(self, existing: Recipe, *, now: datetime | None = None) -> ServiceResult:
        """Handle ``PATCH /api/recipes/{id}/favorite``."""
        updated = existing.toggle_favorite(now=now)
        return ServiceResult.success("toggle_favorite", {"recipe": self._codec.to_dict(updated)})

    def validate_payload(self, kind: PayloadKind, payload: str | bytes) -> ServiceResult:
        """Decode and validate without building an entity."""
        op = f"validate_{kind}"
        dto: CreateRecipeDTO | UpdateRecipeDTO
        try:
            if kind == "create":
                dto = self._codec.decode(CreateRecipeDTO, payload)
            else:
                dto = self._codec.decode(UpdateRecipeDTO, payload)
        except DecodeError as exc:
            return self._decode_failed(op, exc)

        if isinstance(dto, CreateRecipeDTO):
            err = validate_create(dto, self._limits)
        else:
            err = validate_update(dto, self._limits)
        if err:
            return self._invalid(op, err)

        return ServiceResult.success(op, {"valid": True, "payload": self._codec.to_dict(dto)})
