"""String helpers used by forms and validation rules."""

from __future__ import annotations

import re

EMAIL_PATTERN = re.compile(r"[A-Z0-9a-z._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,64}")


def trimmed(value: str) -> str:
    """*value* without leading/trailing whitespace and newlines."""
    return value.strip()


def is_blank(value: str) -> bool:
    """True for empty or whitespace-only strings."""
    return not value.strip()


def is_valid_email(value: str) -> bool:
    """Basic email shape check.

    Matches anywhere in the string, so ``"Name <a@b.co>"`` passes.
    """
    return EMAIL_PATTERN.search(value) is not None
