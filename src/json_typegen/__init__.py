"""
json_typegen
============

Infer structural types from JSON documents and emit TypeScript-style
interface and type declarations.

>>> from json_typegen import default_options, json_to_typescript
>>> print(json_to_typescript('{"id": 1}', default_options()).output)
interface Root {
  id: number;
}
"""

from importlib.metadata import PackageNotFoundError, version

from .api import json_to_typescript
from .options import ConvertOptions, ConvertResult, default_options

DISTRIBUTION = "json-typegen"


def get_version() -> str:
    """Installed distribution version, '0.0.0' for an uninstalled checkout."""
    try:
        return version(DISTRIBUTION)
    except PackageNotFoundError:
        return "0.0.0"


__all__ = [
    "ConvertOptions",
    "ConvertResult",
    "default_options",
    "get_version",
    "json_to_typescript",
]
