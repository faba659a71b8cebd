"""Property-key quoting and declaration-name derivation."""

from __future__ import annotations

import re

_IDENTIFIER = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")
_NAME_INVALID = re.compile(r"[^A-Za-z0-9_]")
_UNDERSCORE_LOWER = re.compile(r"_([a-z])")

ITEM_SUFFIX = "Item"


def render_key(key: str) -> str:
    """Return ``key`` bare when it is a valid identifier, else double-quoted."""
    if _IDENTIFIER.fullmatch(key):
        return key
    return f'"{key}"'


def capitalize(value: str) -> str:
    return value[:1].upper() + value[1:]


def sanitize_name(name: str) -> str:
    """Reduce ``name`` to identifier characters and camel-case ``_x`` runs.

    >>> sanitize_name("__created_at__")
    'createdAt'
    """
    cleaned = _NAME_INVALID.sub("", name).strip("_")
    return _UNDERSCORE_LOWER.sub(lambda match: match.group(1).upper(), cleaned)


def declaration_name(key: str) -> str:
    """Name of the record generated for the object stored under ``key``."""
    return capitalize(sanitize_name(key))


def item_name(key: str) -> str:
    """Name of the record generated for the elements of an array under ``key``."""
    return declaration_name(key) + ITEM_SUFFIX
