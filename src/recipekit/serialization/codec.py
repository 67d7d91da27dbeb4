"""JSON codec shared by every wire payload.

Encoding is deterministic: keys sorted, two-space indent, absent optional
fields omitted, dates as ``YYYY-MM-DDTHH:MM:SSZ``.  Decoding ignores
unknown keys, rejects wrong JSON types, and raises :class:`DecodeError`
for any structural problem before validation ever runs.

A single :data:`shared_codec` is built at import time.  It holds no
mutable state and is safe to share between threads.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from recipekit.domain.wire import DecodeError

logger = logging.getLogger(__name__)


def _error_details(exc: PydanticValidationError) -> list[dict[str, Any]]:
    return [
        {"loc": ".".join(str(part) for part in err["loc"]), "msg": err["msg"]}
        for err in exc.errors(include_url=False)
    ]


def _decode_failure(target: str, exc: PydanticValidationError) -> DecodeError:
    details = _error_details(exc)
    first = details[0] if details else {"loc": "", "msg": "invalid payload"}
    where = f"{first['loc']}: " if first["loc"] else ""
    message = f"Invalid {target} payload: {where}{first['msg']}"
    logger.debug("Decode failed for %s: %s", target, details)
    return DecodeError(message, details)


@dataclass(frozen=True)
class JSONCodec:
    """Encode/decode configuration.

    Attributes:
        indent: Spaces per indentation level (``None`` for compact output).
        sort_keys: Emit object keys in lexicographic order.
    """

    indent: int | None = 2
    sort_keys: bool = True

    # --- Encoding ---

    def to_dict(self, model: BaseModel) -> dict[str, Any]:
        """Wire-shaped dict for *model* (aliases, ISO dates, no None values)."""
        return model.model_dump(mode="json", by_alias=True, exclude_none=True)

    def _dumps(self, data: Any) -> str:
        return json.dumps(data, indent=self.indent, sort_keys=self.sort_keys, ensure_ascii=False)

    def encode(self, model: BaseModel) -> str:
        return self._dumps(self.to_dict(model))

    def encode_bytes(self, model: BaseModel) -> bytes:
        return self.encode(model).encode("utf-8")

    def encode_list(self, models: Iterable[BaseModel]) -> str:
        return self._dumps([self.to_dict(model) for model in models])

    # --- Decoding ---

    def decode[M: BaseModel](self, model_cls: type[M], raw: str | bytes) -> M:
        """Parse *raw* JSON into *model_cls*.

        Raises:
            DecodeError: Malformed JSON, wrong types, missing required keys,
                or unparseable dates.
        """
        try:
            return model_cls.model_validate_json(raw)
        except PydanticValidationError as exc:
            raise _decode_failure(model_cls.__name__, exc) from exc

    def from_dict[M: BaseModel](self, model_cls: type[M], data: dict[str, Any]) -> M:
        """Validate an already-parsed JSON object against *model_cls*."""
        try:
            return model_cls.model_validate(data)
        except PydanticValidationError as exc:
            raise _decode_failure(model_cls.__name__, exc) from exc

    def decode_list[M: BaseModel](self, model_cls: type[M], raw: str | bytes) -> list[M]:
        adapter = TypeAdapter(list[model_cls])  # type: ignore[valid-type]
        try:
            return adapter.validate_json(raw)
        except PydanticValidationError as exc:
            raise _decode_failure(f"list[{model_cls.__name__}]", exc) from exc


shared_codec = JSONCodec()


def encode(model: BaseModel) -> str:
    """Encode *model* with :data:`shared_codec`."""
    return shared_codec.encode(model)


def encode_list(models: Iterable[BaseModel]) -> str:
    return shared_codec.encode_list(models)


def decode[M: BaseModel](model_cls: type[M], raw: str | bytes) -> M:
    """Decode *raw* into *model_cls* with :data:`shared_codec`."""
    return shared_codec.decode(model_cls, raw)


def decode_list[M: BaseModel](model_cls: type[M], raw: str | bytes) -> list[M]:
    return shared_codec.decode_list(model_cls, raw)
