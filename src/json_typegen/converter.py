"""Root-level dispatch from a parsed document to declaration text."""

from __future__ import annotations

from .assembler import assemble
from .descriptors import ArrayOf, Reference, classify
from .generator import Declaration, DeclarationRegistry, generate_declaration
from .naming import ITEM_SUFFIX
from .options import ConvertOptions
from .values import JsonArray, JsonObject, parse_json


def convert_value(root: JsonArray | JsonObject, options: ConvertOptions) -> str:
    """Generate the declarations for an already parsed document root."""
    if isinstance(root, JsonArray):
        if not root.items or not isinstance(root.items[0], JsonObject):
            # Empty and primitive-led arrays produce a single alias.
            return Declaration.alias(options.root_name, classify(root)).render(options)
        registry = DeclarationRegistry()
        element_name = options.root_name + ITEM_SUFFIX
        generate_declaration(root.items[0], element_name, options, registry)
        registry.register(Declaration.alias(options.root_name, ArrayOf(Reference(element_name))))
        return assemble(registry, options)
    registry = DeclarationRegistry()
    generate_declaration(root, options.root_name, options, registry)
    return assemble(registry, options)


def convert_text(json_text: str, options: ConvertOptions) -> str:
    """Parse ``json_text`` and generate its declarations.

    Raises ``ParseError`` or ``SchemaError`` on bad input.
    """
    return convert_value(parse_json(json_text), options)
