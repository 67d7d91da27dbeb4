"""Reusable single-value validation rules.

Small building blocks for forms and boundaries that need checks beyond the
recipe validator.  Each rule returns ``None`` or a ValidationError.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from recipekit.domain.errors import ValidationError
from recipekit.domain.text import is_blank, is_valid_email


class ValidationRule[T](Protocol):
    """Contract shared by all rules."""

    def check(self, value: T) -> ValidationError | None: ...


@dataclass(frozen=True)
class NotEmptyRule:
    """Rejects empty or whitespace-only strings."""

    field_name: str

    def check(self, value: str) -> ValidationError | None:
        if is_blank(value):
            return ValidationError.field_required(f"{self.field_name} is required")
        return None


@dataclass(frozen=True)
class RangeRule[T: (int, float)]:
    """Accepts values within ``[minimum, maximum]``."""

    field_name: str
    minimum: T
    maximum: T

    def check(self, value: T) -> ValidationError | None:
        if self.minimum <= value <= self.maximum:
            return None
        return ValidationError.invalid_value(
            f"{self.field_name} must be between {self.minimum} and {self.maximum}"
        )


@dataclass(frozen=True)
class EmailRule:
    field_name: str = "Email"

    def check(self, value: str) -> ValidationError | None:
        if is_valid_email(value):
            return None
        return ValidationError.invalid_format(f"{self.field_name} must be a valid email address")
