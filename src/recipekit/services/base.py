"""BaseService — shared foundation for the boundary services.

Services are stateless: they hold only the validator limits and the JSON
codec derived from settings, and perform no I/O.  Persistence and
transport stay with the caller.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from recipekit.domain.validation import DEFAULT_LIMITS, ValidationLimits
from recipekit.serialization.codec import JSONCodec, shared_codec
from recipekit.services.result import DECODE_ERROR, VALIDATION_ERROR, ServiceResult

if TYPE_CHECKING:
    from recipekit.config.settings import RecipeKitSettings
    from recipekit.domain.errors import ValidationError
    from recipekit.domain.wire import DecodeError

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class RecipeService(BaseService):
            def create_recipe(self, payload) -> ServiceResult:
                dto = self._codec.decode(CreateRecipeDTO, payload)
                ...
    """

    def __init__(self, settings: RecipeKitSettings | None = None) -> None:
        if settings is None:
            self._limits: ValidationLimits = DEFAULT_LIMITS
            self._codec: JSONCodec = shared_codec
        else:
            self._limits = settings.limits
            self._codec = settings.codec()

    @property
    def codec(self) -> JSONCodec:
        return self._codec

    def _decode_failed(self, op: str, exc: DecodeError) -> ServiceResult:
        logger.debug("Rejected %s payload (structural): %s", op, exc.message)
        return ServiceResult.failure(
            op, DECODE_ERROR, exc.message, detail={"errors": exc.errors}
        )

    def _invalid(self, op: str, err: ValidationError) -> ServiceResult:
        logger.debug("Rejected %s payload (%s): %s", op, err.kind, err.message)
        return ServiceResult.failure(
            op, VALIDATION_ERROR, err.message, detail={"kind": str(err.kind)}
        )
