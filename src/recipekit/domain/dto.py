"""Boundary payload shapes: request DTOs, public projections, envelopes.

``UpdateRecipeDTO`` implements partial updates: a field that is absent
(missing key or JSON ``null``) means "leave unchanged", while a present
value, even an empty one, is applied after validation.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import Field, StrictBool, StrictInt, StrictStr

from recipekit.domain.errors import ValidationError
from recipekit.domain.models import Recipe, User
from recipekit.domain.wire import DecodeError, WireModel, parse_utc, utc_now

# ---------------------------------------------------------------------------
# Recipe requests
# ---------------------------------------------------------------------------


class CreateRecipeDTO(WireModel):
    """Payload for ``POST /api/recipes``."""

    name: StrictStr
    description: StrictStr | None = None
    ingredients: list[StrictStr]
    instructions: list[StrictStr]
    prep_time: StrictInt = 0
    cook_time: StrictInt = 0
    servings: StrictInt = 1
    tags: list[StrictStr] = Field(default_factory=list)
    image: StrictStr | None = None
    is_favorite: StrictBool | None = None


class UpdateRecipeDTO(WireModel):
    """Payload for ``PUT /api/recipes/{id}``; every field optional."""

    name: StrictStr | None = None
    description: StrictStr | None = None
    ingredients: list[StrictStr] | None = None
    instructions: list[StrictStr] | None = None
    prep_time: StrictInt | None = None
    cook_time: StrictInt | None = None
    servings: StrictInt | None = None
    tags: list[StrictStr] | None = None
    image: StrictStr | None = None
    is_favorite: StrictBool | None = None

    @classmethod
    def from_recipe(cls, recipe: Recipe) -> UpdateRecipeDTO:
        """Snapshot every updatable field of *recipe*."""
        return cls(
            name=recipe.name,
            description=recipe.description,
            ingredients=list(recipe.ingredients),
            instructions=list(recipe.instructions),
            prep_time=recipe.prep_time,
            cook_time=recipe.cook_time,
            servings=recipe.servings,
            tags=list(recipe.tags),
            image=recipe.image,
            is_favorite=recipe.is_favorite,
        )

    def present_fields(self) -> dict[str, Any]:
        """Fields carrying a value, keyed by Python attribute name."""
        return {name: value for name, value in self if value is not None}

    @property
    def has_updates(self) -> bool:
        return any(value is not None for _, value in self)


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------


class CurrentUserDTO(WireModel):
    """Public view of a user returned by ``GET /api/auth/me``."""

    id: UUID
    email: StrictStr
    name: StrictStr
    picture: StrictStr | None = None

    @classmethod
    def from_user(cls, user: User) -> CurrentUserDTO:
        return cls(id=user.id, email=user.email, name=user.name, picture=user.picture)

    def to_user(
        self,
        google_id: str = "",
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ) -> User:
        """Rebuild a full User.

        Missing timestamps default to the current time.  They are
        placeholders, not the account's real creation data.
        """
        now = utc_now()
        created = parse_utc(created_at) if created_at is not None else now
        updated = parse_utc(updated_at) if updated_at is not None else max(now, created)
        return User(
            id=self.id,
            google_id=google_id,
            email=self.email,
            name=self.name,
            picture=self.picture,
            created_at=created,
            updated_at=updated,
        )


# ---------------------------------------------------------------------------
# Envelopes
# ---------------------------------------------------------------------------


class ErrorResponse(WireModel):
    """``{"error": ..., "statusCode": ...}``"""

    error: StrictStr
    status_code: StrictInt | None = None

    def __str__(self) -> str:
        return self.error

    @classmethod
    def from_validation_error(cls, err: ValidationError, status_code: int = 400) -> ErrorResponse:
        return cls(error=err.message, status_code=status_code)

    @classmethod
    def from_decode_error(cls, err: DecodeError, status_code: int = 400) -> ErrorResponse:
        return cls(error=err.message, status_code=status_code)


class SuccessResponse(WireModel):
    """``{"success": true}``"""

    success: StrictBool = True
