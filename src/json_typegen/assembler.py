"""Ordering and joining of generated declarations."""

from __future__ import annotations

from .generator import Declaration, DeclarationRegistry
from .options import ConvertOptions

SEPARATOR = "\n\n"


def ordered(registry: DeclarationRegistry, root_name: str) -> list[Declaration]:
    """Sort declarations by name with the root declaration moved to the end."""
    return sorted(registry, key=lambda decl: (decl.name == root_name, decl.name))


def assemble(registry: DeclarationRegistry, options: ConvertOptions) -> str:
    """Render every registered declaration, separated by a blank line."""
    return SEPARATOR.join(
        declaration.render(options) for declaration in ordered(registry, options.root_name)
    )
