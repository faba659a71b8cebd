"""Errors raised while turning JSON text into declarations."""

from __future__ import annotations

SCHEMA_ERROR_MESSAGE = "Input must be a JSON object or array"


class ConversionError(ValueError):
    """Base class for failures surfaced through ``ConvertResult.error``."""


class ParseError(ConversionError):
    """The input text is not valid JSON; carries the parser's message as-is."""


class SchemaError(ConversionError):
    """The input is valid JSON but its root is not an object or array."""

    def __init__(self, message: str = SCHEMA_ERROR_MESSAGE) -> None:
        super().__init__(message)
