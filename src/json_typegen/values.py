"""Tagged JSON value tree and the parser that builds it."""

from __future__ import annotations

import json
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from .errors import ParseError, SchemaError


@dataclass(frozen=True)
class JsonNull:
    pass


@dataclass(frozen=True)
class JsonBool:
    value: bool


@dataclass(frozen=True)
class JsonNumber:
    value: int | float


@dataclass(frozen=True)
class JsonString:
    value: str


@dataclass(frozen=True)
class JsonArray:
    items: tuple[JsonValue, ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[JsonValue]:
        return iter(self.items)


@dataclass(frozen=True)
class JsonObject:
    """Object with its fields kept in document order."""

    fields: tuple[tuple[str, JsonValue], ...] = ()

    def items(self) -> Iterator[tuple[str, JsonValue]]:
        return iter(self.fields)

    def keys(self) -> list[str]:
        return [key for key, _ in self.fields]


JsonValue = JsonNull | JsonBool | JsonNumber | JsonString | JsonArray | JsonObject


def from_python(data: Any) -> JsonValue:
    """Wrap a decoded JSON document in the tagged variant tree."""
    if data is None:
        return JsonNull()
    # bool is a subclass of int, check it first
    if isinstance(data, bool):
        return JsonBool(data)
    if isinstance(data, (int, float)):
        return JsonNumber(data)
    if isinstance(data, str):
        return JsonString(data)
    if isinstance(data, list):
        return JsonArray(tuple(from_python(item) for item in data))
    if isinstance(data, dict):
        return JsonObject(tuple((str(key), from_python(value)) for key, value in data.items()))
    raise TypeError(f"Unsupported JSON value of type {type(data).__name__}")


def _reject_constant(token: str) -> Any:
    raise ValueError(f"Unexpected token {token} in JSON")


def parse_json(text: str) -> JsonArray | JsonObject:
    """Parse ``text`` and ensure the document root is an object or array.

    Raises ``ParseError`` with the decoder's own message for malformed input,
    including the non-standard ``NaN``, ``Infinity`` and ``-Infinity`` tokens, and
    ``SchemaError`` for scalar roots (null, booleans, numbers, strings).
    """
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except ValueError as exc:
        raise ParseError(str(exc) or "Invalid JSON") from exc
    value = from_python(data)
    if not isinstance(value, (JsonArray, JsonObject)):
        raise SchemaError()
    return value
