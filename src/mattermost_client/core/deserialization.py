"""Body decoding and typed conversion helpers."""

from __future__ import annotations

import json
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter, ValidationError

from .errors import MattermostDeserializationError

T = TypeVar("T")

DEFAULT_CHARSET = "utf-8"


@dataclass(slots=True, frozen=True)
class TypeToken(Generic[T]):
    """Carries a parametric type such as ``dict[str, str]`` to runtime."""

    type: Any

    def __repr__(self) -> str:
        return f"TypeToken({self.type!r})"


def decode_text(body: bytes, *, charset: str | None) -> str:
    encoding = charset or DEFAULT_CHARSET
    try:
        return body.decode(encoding, errors="replace")
    except LookupError:
        return body.decode(DEFAULT_CHARSET, errors="replace")


def decode_json(body: bytes, *, http_status: int | None = None) -> object:
    """Decode a JSON document and map failures to deserialization errors."""

    try:
        return json.loads(body)
    except (ValueError, RecursionError) as exc:
        raise MattermostDeserializationError(
            "response body is not valid JSON",
            http_status=http_status,
        ) from exc


def convert(document: object, target: Any, *, http_status: int | None = None) -> Any:
    """Validate a decoded JSON document into ``target``."""

    try:
        return _adapter_for(target).validate_python(document)
    except ValidationError as exc:
        raise MattermostDeserializationError(
            f"response body does not match {_describe(target)}",
            http_status=http_status,
        ) from exc


def _adapter_for(target: Any) -> TypeAdapter[Any]:
    try:
        return _cached_adapter(target)
    except TypeError:
        # unhashable type expressions are not cached
        return TypeAdapter(target)


@lru_cache(maxsize=256)
def _cached_adapter(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


def _describe(target: Any) -> str:
    if isinstance(target, type):
        return target.__qualname__
    return repr(target)


__all__ = [
    "TypeToken",
    "decode_text",
    "decode_json",
    "convert",
]
