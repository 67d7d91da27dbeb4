"""Validation error taxonomy.

A closed set of failure kinds, each carrying an end-user displayable
message.  Validators *return* these values; they are never raised across
subsystem boundaries.  Callers that prefer exceptions opt in through
:class:`RecipeValidationFailed` at their own boundary.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class ValidationErrorKind(StrEnum):
    """Kinds of field validation failure."""

    FIELD_REQUIRED = "field_required"
    FIELD_TOO_SHORT = "field_too_short"
    FIELD_TOO_LONG = "field_too_long"
    INVALID_VALUE = "invalid_value"
    # Not produced by the recipe validator; used by EmailRule.
    INVALID_FORMAT = "invalid_format"


class ValidationError(BaseModel):
    """One validation failure: a kind plus its message."""

    model_config = {"frozen": True}

    kind: ValidationErrorKind
    message: str

    def __str__(self) -> str:
        return self.message

    @classmethod
    def field_required(cls, message: str) -> ValidationError:
        return cls(kind=ValidationErrorKind.FIELD_REQUIRED, message=message)

    @classmethod
    def field_too_short(cls, message: str) -> ValidationError:
        return cls(kind=ValidationErrorKind.FIELD_TOO_SHORT, message=message)

    @classmethod
    def field_too_long(cls, message: str) -> ValidationError:
        return cls(kind=ValidationErrorKind.FIELD_TOO_LONG, message=message)

    @classmethod
    def invalid_value(cls, message: str) -> ValidationError:
        return cls(kind=ValidationErrorKind.INVALID_VALUE, message=message)

    @classmethod
    def invalid_format(cls, message: str) -> ValidationError:
        return cls(kind=ValidationErrorKind.INVALID_FORMAT, message=message)


class RecipeValidationFailed(Exception):
    """Raised by ``ensure_valid`` when a DTO fails validation."""

    def __init__(self, error: ValidationError) -> None:
        super().__init__(error.message)
        self.error = error

    @property
    def kind(self) -> ValidationErrorKind:
        return self.error.kind
