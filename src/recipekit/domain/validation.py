"""Recipe field validation.

Every check is a pure function returning ``None`` on success or the first
:class:`~recipekit.domain.errors.ValidationError` it hits.  DTO-level
validation runs the checks in a fixed order and short-circuits:

    name -> description -> ingredients -> instructions -> time -> servings

Update payloads are checked field by field, only where a value is present.
When only one of ``prep_time``/``cook_time`` is present it is validated as
if its twin were 0.  Each field therefore stays within its own bounds, but
merging the update into an existing recipe is not re-checked as a whole.
"""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel

from recipekit.domain.dto import CreateRecipeDTO, UpdateRecipeDTO
from recipekit.domain.errors import RecipeValidationFailed, ValidationError


class ValidationLimits(BaseModel):
    """Inclusive bounds applied by the validator."""

    model_config = {"frozen": True}

    min_name_length: int = 1
    max_name_length: int = 255
    max_description_length: int = 5000
    min_ingredients: int = 1
    max_ingredients: int = 100
    min_instructions: int = 1
    max_instructions: int = 100
    min_servings: int = 1
    max_servings: int = 1000
    min_time: int = 0
    # One week, in minutes.
    max_time: int = 10080


DEFAULT_LIMITS = ValidationLimits()


# ---------------------------------------------------------------------------
# Field validators
# ---------------------------------------------------------------------------


def validate_name(name: str, limits: ValidationLimits = DEFAULT_LIMITS) -> ValidationError | None:
    trimmed = name.strip()
    if not trimmed:
        return ValidationError.field_required("Recipe name is required")
    if len(trimmed) < limits.min_name_length:
        plural = "" if limits.min_name_length == 1 else "s"
        return ValidationError.field_too_short(
            f"Recipe name must be at least {limits.min_name_length} character{plural}"
        )
    if len(trimmed) > limits.max_name_length:
        return ValidationError.field_too_long(
            f"Recipe name cannot exceed {limits.max_name_length} characters"
        )
    return None


def validate_description(
    description: str | None, limits: ValidationLimits = DEFAULT_LIMITS
) -> ValidationError | None:
    if description is None:
        return None
    if len(description) > limits.max_description_length:
        return ValidationError.field_too_long(
            f"Description cannot exceed {limits.max_description_length} characters"
        )
    return None


def _validate_steps(
    items: Sequence[str],
    *,
    minimum: int,
    maximum: int,
    required_msg: str,
    singular: str,
    plural: str,
) -> ValidationError | None:
    if not items:
        return ValidationError.field_required(required_msg)
    if len(items) < minimum:
        return ValidationError.invalid_value(f"Must have at least {minimum} {singular.lower()}")
    if len(items) > maximum:
        return ValidationError.invalid_value(f"Cannot exceed {maximum} {plural}")
    for position, item in enumerate(items, start=1):
        if not item.strip():
            return ValidationError.invalid_value(f"{singular} #{position} cannot be empty")
    return None


def validate_ingredients(
    ingredients: Sequence[str], limits: ValidationLimits = DEFAULT_LIMITS
) -> ValidationError | None:
    return _validate_steps(
        ingredients,
        minimum=limits.min_ingredients,
        maximum=limits.max_ingredients,
        required_msg="At least one ingredient is required",
        singular="Ingredient",
        plural="ingredients",
    )


def validate_instructions(
    instructions: Sequence[str], limits: ValidationLimits = DEFAULT_LIMITS
) -> ValidationError | None:
    return _validate_steps(
        instructions,
        minimum=limits.min_instructions,
        maximum=limits.max_instructions,
        required_msg="At least one instruction step is required",
        singular="Instruction",
        plural="instructions",
    )


def validate_time(
    prep_time: int, cook_time: int, limits: ValidationLimits = DEFAULT_LIMITS
) -> ValidationError | None:
    """Check both times; negativity is reported before upper bounds."""
    if prep_time < limits.min_time:
        return ValidationError.invalid_value("Prep time cannot be negative")
    if cook_time < limits.min_time:
        return ValidationError.invalid_value("Cook time cannot be negative")
    if prep_time > limits.max_time:
        return ValidationError.invalid_value(
            f"Prep time cannot exceed {limits.max_time} minutes"
        )
    if cook_time > limits.max_time:
        return ValidationError.invalid_value(
            f"Cook time cannot exceed {limits.max_time} minutes"
        )
    return None


def validate_servings(
    servings: int, limits: ValidationLimits = DEFAULT_LIMITS
) -> ValidationError | None:
    if servings < limits.min_servings:
        return ValidationError.invalid_value(f"Servings must be at least {limits.min_servings}")
    if servings > limits.max_servings:
        return ValidationError.invalid_value(f"Servings cannot exceed {limits.max_servings}")
    return None


# ---------------------------------------------------------------------------
# DTO validators
# ---------------------------------------------------------------------------


def validate_create(
    dto: CreateRecipeDTO, limits: ValidationLimits = DEFAULT_LIMITS
) -> ValidationError | None:
    """Run every check against a create payload."""
    return (
        validate_name(dto.name, limits)
        or validate_description(dto.description, limits)
        or validate_ingredients(dto.ingredients, limits)
        or validate_instructions(dto.instructions, limits)
        or validate_time(dto.prep_time, dto.cook_time, limits)
        or validate_servings(dto.servings, limits)
    )


def validate_update(
    dto: UpdateRecipeDTO, limits: ValidationLimits = DEFAULT_LIMITS
) -> ValidationError | None:
    """Check only the fields present in an update payload."""
    if dto.name is not None and (err := validate_name(dto.name, limits)):
        return err
    if dto.description is not None and (err := validate_description(dto.description, limits)):
        return err
    if dto.ingredients is not None and (err := validate_ingredients(dto.ingredients, limits)):
        return err
    if dto.instructions is not None and (err := validate_instructions(dto.instructions, limits)):
        return err
    if dto.prep_time is not None or dto.cook_time is not None:
        err = validate_time(dto.prep_time or 0, dto.cook_time or 0, limits)
        if err:
            return err
    if dto.servings is not None and (err := validate_servings(dto.servings, limits)):
        return err
    return None


def validate(
    dto: CreateRecipeDTO | UpdateRecipeDTO, limits: ValidationLimits = DEFAULT_LIMITS
) -> ValidationError | None:
    """Dispatch to :func:`validate_create` or :func:`validate_update`."""
    if isinstance(dto, CreateRecipeDTO):
        return validate_create(dto, limits)
    return validate_update(dto, limits)


def ensure_valid(
    dto: CreateRecipeDTO | UpdateRecipeDTO, limits: ValidationLimits = DEFAULT_LIMITS
) -> None:
    """Raise :class:`RecipeValidationFailed` if *dto* does not validate."""
    err = validate(dto, limits)
    if err is not None:
        raise RecipeValidationFailed(err)
