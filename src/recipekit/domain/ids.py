"""UUID helpers for route building and placeholders.

INVARIANT: Entity IDs are permanent. Once assigned, an ID never changes.
"""

from __future__ import annotations

from uuid import UUID

ZERO_UUID = UUID(int=0)


def parse_uuid(text: str) -> UUID | None:
    """Parse *text* as a UUID, returning None instead of raising."""
    try:
        return UUID(text)
    except (ValueError, AttributeError, TypeError):
        return None


def format_uuid(value: UUID) -> str:
    """Canonical upper-case form used in route paths."""
    return str(value).upper()
