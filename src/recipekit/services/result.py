"""ServiceResult and ServiceError — the boundary service contract.

INVARIANT: Boundary services return ServiceResult; they never raise for
bad client input.  Decode failures and validation failures both become a
failed result, distinguished by ``error.code``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from recipekit.domain.dto import ErrorResponse

# Error codes
DECODE_ERROR = "DECODE_ERROR"
VALIDATION_ERROR = "VALIDATION_ERROR"
NO_UPDATES = "NO_UPDATES"


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    status_code: int = 400
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for all boundary service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"create_recipe"``).
        data: Wire-shaped payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def success(cls, op: str, data: dict[str, Any], warnings: list[str] | None = None) -> ServiceResult:
        return cls(ok=True, op=op, data=data, warnings=warnings or [])

    @classmethod
    def failure(
        cls,
        op: str,
        code: str,
        message: str,
        *,
        status_code: int = 400,
        detail: dict[str, Any] | None = None,
    ) -> ServiceResult:
        error = ServiceError(
            code=code, message=message, status_code=status_code, detail=detail or {}
        )
        return cls(ok=False, op=op, error=error)


def to_error_response(result: ServiceResult) -> ErrorResponse:
    """Wire envelope for a failed result.

    Raises:
        ValueError: If *result* succeeded.
    """
    if result.ok or result.error is None:
        msg = f"Operation {result.op!r} succeeded; there is no error to report"
        raise ValueError(msg)
    return ErrorResponse(error=result.error.message, status_code=result.error.status_code)
