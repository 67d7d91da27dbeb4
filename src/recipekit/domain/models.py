"""Canonical entities: Recipe and User.

Entities are frozen.  Derived values (total time, counts, initials) are
plain properties computed on read and never serialized.  Changes go
through methods that return a new, re-validated instance.

INVARIANT: ``created_at <= updated_at`` for every entity.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any, Self
from uuid import UUID, uuid4

from pydantic import Field, StrictBool, StrictInt, StrictStr, model_validator

from recipekit.domain.wire import UtcDateTime, WireModel, parse_utc, utc_now

if TYPE_CHECKING:
    from recipekit.domain.dto import CreateRecipeDTO, UpdateRecipeDTO


def format_minutes(total: int) -> str:
    """Format a minute count as ``"Xh Ym"``, ``"Xh"``, or ``"Ym"``.

    Negative counts keep their sign: ``-5`` is ``"-5m"``.
    """
    if total < 0:
        return "-" + format_minutes(-total)
    hours, mins = divmod(total, 60)
    if hours > 0:
        return f"{hours}h {mins}m" if mins > 0 else f"{hours}h"
    return f"{mins}m"


class _Timestamped(WireModel):
    created_at: UtcDateTime = Field(default_factory=utc_now)
    updated_at: UtcDateTime = Field(default_factory=utc_now)

    @model_validator(mode="after")
    def _check_timestamps(self) -> Self:
        if self.created_at > self.updated_at:
            msg = "createdAt must not be later than updatedAt"
            raise ValueError(msg)
        return self

    def _rebuilt(self, **changes: Any) -> Self:
        """Return a validated copy with *changes* applied."""
        data = self.model_dump()
        data.update(changes)
        return type(self).model_validate(data)


class Recipe(_Timestamped):
    """A recipe owned (optionally) by a user."""

    id: UUID = Field(default_factory=uuid4)
    user_id: UUID | None = None
    name: StrictStr
    description: StrictStr | None = None
    ingredients: list[StrictStr]
    instructions: list[StrictStr]
    prep_time: StrictInt = 0
    cook_time: StrictInt = 0
    servings: StrictInt = 1
    tags: list[StrictStr] = Field(default_factory=list)
    # URL or inline base64 data
    image: StrictStr | None = None
    is_favorite: StrictBool = False

    # --- Derived ---

    @property
    def total_time(self) -> int:
        """Prep plus cook time, in minutes."""
        return self.prep_time + self.cook_time

    @property
    def total_time_formatted(self) -> str:
        return format_minutes(self.total_time)

    @property
    def ingredient_count(self) -> int:
        return len(self.ingredients)

    @property
    def step_count(self) -> int:
        return len(self.instructions)

    @property
    def has_image(self) -> bool:
        return bool(self.image)

    # --- Construction and changes ---

    @classmethod
    def from_create(
        cls,
        dto: CreateRecipeDTO,
        *,
        user_id: UUID | None = None,
        recipe_id: UUID | None = None,
        now: datetime | None = None,
    ) -> Recipe:
        """Build a new recipe from a (validated) create payload."""
        stamp = parse_utc(now) if now is not None else utc_now()
        return cls(
            id=recipe_id or uuid4(),
            user_id=user_id,
            name=dto.name,
            description=dto.description,
            ingredients=list(dto.ingredients),
            instructions=list(dto.instructions),
            prep_time=dto.prep_time,
            cook_time=dto.cook_time,
            servings=dto.servings,
            tags=list(dto.tags),
            image=dto.image,
            is_favorite=dto.is_favorite if dto.is_favorite is not None else False,
            created_at=stamp,
            updated_at=stamp,
        )

    def apply_update(self, dto: UpdateRecipeDTO, *, now: datetime | None = None) -> Recipe:
        """Merge the present fields of *dto* into a new recipe.

        ``id``, ``user_id`` and ``created_at`` are preserved.  ``updated_at``
        moves to *now* but never before ``created_at``.
        """
        changes = dto.present_fields()
        changes["updated_at"] = self._next_stamp(now)
        return self._rebuilt(**changes)

    def with_favorite(self, is_favorite: bool, *, now: datetime | None = None) -> Recipe:
        return self._rebuilt(is_favorite=is_favorite, updated_at=self._next_stamp(now))

    def toggle_favorite(self, *, now: datetime | None = None) -> Recipe:
        return self.with_favorite(not self.is_favorite, now=now)

    def _next_stamp(self, now: datetime | None) -> datetime:
        stamp = parse_utc(now) if now is not None else utc_now()
        return max(stamp, self.created_at)


class User(_Timestamped):
    """An account matched to an external identity provider subject."""

    id: UUID = Field(default_factory=uuid4)
    google_id: StrictStr
    email: StrictStr
    name: StrictStr
    picture: StrictStr | None = None

    @property
    def initials(self) -> str:
        """First letters of the first two name tokens, or the first two characters.

        Examples:
            "John Doe" -> "JD", "John Paul Jones" -> "JP", "Prince" -> "PR"
        """
        parts = [part for part in self.name.split(" ") if part]
        if len(parts) >= 2:
            return (parts[0][:1] + parts[1][:1]).upper()
        return parts[0][:2].upper() if parts else ""

    @property
    def display_name(self) -> str:
        return self.name
