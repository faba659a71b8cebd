"""Recursive generation of record declarations from JSON objects."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Literal

from .descriptors import ArrayOf, Reference, Scalar, TypeDescriptor, UnknownArray, classify, render
from .naming import declaration_name, item_name, render_key
from .options import ConvertOptions
from .values import JsonArray, JsonNull, JsonObject, JsonValue

DeclarationKind = Literal["record", "alias"]

ALIAS_PROPERTY = "value"


@dataclass(frozen=True)
class Property:
    raw_key: str
    rendered_key: str
    type: TypeDescriptor
    optional: bool = False

    def render(self) -> str:
        marker = "?" if self.optional else ""
        return f"  {self.rendered_key}{marker}: {render(self.type)};"


@dataclass(frozen=True)
class Declaration:
    """One named block of output.

    Records carry one property per object key. Aliases carry a single synthetic
    ``value`` property holding the aliased type.
    """

    name: str
    kind: DeclarationKind
    properties: tuple[Property, ...] = ()

    @classmethod
    def alias(cls, name: str, target: TypeDescriptor) -> Declaration:
        return cls(
            name=name,
            kind="alias",
            properties=(Property(ALIAS_PROPERTY, ALIAS_PROPERTY, target),),
        )

    def render(self, options: ConvertOptions) -> str:
        prefix = options.export_prefix
        if self.kind == "alias":
            return f"{prefix}type {self.name} = {render(self.properties[0].type)};"
        body = "\n".join(prop.render() for prop in self.properties)
        if options.use_interface:
            return f"{prefix}interface {self.name} {{\n{body}\n}}"
        return f"{prefix}type {self.name} = {{\n{body}\n}};"


@dataclass
class DeclarationRegistry:
    """Declarations discovered during one conversion, keyed by name.

    Insertion order is discovery order, so nested records precede the records
    that contain them. Registering an existing name replaces its declaration.
    """

    _declarations: dict[str, Declaration] = field(default_factory=dict)

    def register(self, declaration: Declaration) -> None:
        self._declarations[declaration.name] = declaration

    def get(self, name: str) -> Declaration | None:
        return self._declarations.get(name)

    def names(self) -> list[str]:
        return list(self._declarations)

    def __iter__(self) -> Iterator[Declaration]:
        return iter(self._declarations.values())

    def __len__(self) -> int:
        return len(self._declarations)


def generate_declaration(
    obj: JsonObject,
    name: str,
    options: ConvertOptions,
    registry: DeclarationRegistry,
) -> Declaration:
    """Build the record for ``obj`` and every record nested inside it.

    Nested records are registered before ``obj``'s own record. The returned
    declaration is also stored in ``registry`` under ``name``.
    """
    properties = tuple(
        Property(
            raw_key=key,
            rendered_key=render_key(key),
            type=_field_type(key, value, options, registry),
            optional=options.optional_properties,
        )
        for key, value in obj.items()
    )
    declaration = Declaration(name=name, kind="record", properties=properties)
    registry.register(declaration)
    return declaration


def _field_type(
    key: str,
    value: JsonValue,
    options: ConvertOptions,
    registry: DeclarationRegistry,
) -> TypeDescriptor:
    if isinstance(value, JsonNull):
        return Scalar("null")
    if isinstance(value, JsonArray):
        if not value.items:
            return UnknownArray()
        first = value.items[0]
        if isinstance(first, JsonObject):
            element_name = item_name(key)
            generate_declaration(first, element_name, options, registry)
            return ArrayOf(Reference(element_name))
        return classify(value)
    if isinstance(value, JsonObject):
        nested_name = declaration_name(key)
        generate_declaration(value, nested_name, options, registry)
        return Reference(nested_name)
    return classify(value)
