"""Wire-level building blocks shared by entities, DTOs, and envelopes.

Every boundary shape inherits :class:`WireModel`, which pins the field
naming (snake_case in Python, camelCase on the wire), immutability, and
unknown-key policy.  :data:`UtcDateTime` fixes the date representation:
ISO-8601, UTC, whole seconds, ``Z`` suffix.

Structural failures (malformed JSON, wrong types, missing keys, bad dates)
surface as :class:`DecodeError`, which is deliberately unrelated to the
validation taxonomy in :mod:`recipekit.domain.errors`.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, PlainSerializer, PlainValidator
from pydantic.alias_generators import to_camel

WIRE_DATETIME_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def parse_utc(value: Any) -> datetime:
    """Coerce *value* to an aware UTC datetime truncated to whole seconds.

    Accepts ``datetime`` instances and ISO-8601 strings.  Naive values are
    rejected: a wire date without an offset is ambiguous.
    """
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError as exc:
            msg = f"Invalid ISO-8601 datetime: {value!r}"
            raise ValueError(msg) from exc
    if not isinstance(value, datetime):
        msg = f"Expected an ISO-8601 datetime string, got {type(value).__name__}"
        raise ValueError(msg)
    if value.tzinfo is None or value.utcoffset() is None:
        msg = "Datetime must include a UTC offset"
        raise ValueError(msg)
    try:
        return value.astimezone(UTC).replace(microsecond=0)
    except OverflowError as exc:
        msg = f"Datetime out of range: {value!r}"
        raise ValueError(msg) from exc


def format_utc(value: datetime) -> str:
    """Render *value* in the wire format (``2024-01-01T00:00:00Z``)."""
    return value.astimezone(UTC).strftime(WIRE_DATETIME_FORMAT)


def utc_now() -> datetime:
    """Current time at wire precision."""
    return datetime.now(UTC).replace(microsecond=0)


UtcDateTime = Annotated[
    datetime,
    PlainValidator(parse_utc),
    PlainSerializer(format_utc, return_type=str, when_used="json"),
]


class WireModel(BaseModel):
    """Base for all boundary shapes.

    Frozen, camelCase aliases on the wire, unknown keys ignored.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class DecodeError(Exception):
    """Structural failure while decoding a wire payload.

    Attributes:
        message: Human-readable summary.
        errors: Per-location details (``loc``, ``msg``) when available.
    """

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.errors = errors or []
