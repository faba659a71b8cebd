"""Type descriptors inferred from JSON values and their textual rendering."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Literal

from .values import (
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
)

ScalarKind = Literal["string", "number", "boolean", "null", "object"]


@dataclass(frozen=True)
class Scalar:
    kind: ScalarKind


@dataclass(frozen=True)
class ArrayOf:
    element: TypeDescriptor


@dataclass(frozen=True)
class UnionOf:
    """Alternatives, unique by rendered text and kept in first-seen order."""

    members: tuple[TypeDescriptor, ...]


@dataclass(frozen=True)
class Reference:
    """Points at a generated declaration by name."""

    name: str


@dataclass(frozen=True)
class UnknownArray:
    """Element type of an empty array."""


TypeDescriptor = Scalar | ArrayOf | UnionOf | Reference | UnknownArray


def render(descriptor: TypeDescriptor) -> str:
    """Render a descriptor using the declaration type grammar."""
    if isinstance(descriptor, Scalar):
        return descriptor.kind
    if isinstance(descriptor, ArrayOf):
        return f"{render(descriptor.element)}[]"
    if isinstance(descriptor, UnionOf):
        rendered = [render(member) for member in descriptor.members]
        if len(rendered) == 1:
            return rendered[0]
        return "(" + " | ".join(rendered) + ")"
    if isinstance(descriptor, Reference):
        return descriptor.name
    if isinstance(descriptor, UnknownArray):
        return "unknown[]"
    raise TypeError(f"Unknown type descriptor: {descriptor!r}")


def union_of(types: Iterable[TypeDescriptor]) -> TypeDescriptor:
    """Deduplicate ``types`` by rendered text; a single survivor is returned bare."""
    seen: dict[str, TypeDescriptor] = {}
    for descriptor in types:
        seen.setdefault(render(descriptor), descriptor)
    members = tuple(seen.values())
    if len(members) == 1:
        return members[0]
    return UnionOf(members)


def classify(value: JsonValue) -> TypeDescriptor:
    """Map a JSON value to the descriptor of its structural type."""
    if isinstance(value, JsonNull):
        return Scalar("null")
    if isinstance(value, JsonArray):
        if not value.items:
            return UnknownArray()
        return ArrayOf(union_of(classify(item) for item in value))
    if isinstance(value, JsonObject):
        return Scalar("object")
    if isinstance(value, JsonBool):
        return Scalar("boolean")
    if isinstance(value, JsonNumber):
        return Scalar("number")
    if isinstance(value, JsonString):
        return Scalar("string")
    raise TypeError(f"Unknown JSON value: {value!r}")
