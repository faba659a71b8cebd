"""Public API for downstream modules."""

from __future__ import annotations

from pathlib import Path

from .converter import convert_text
from .errors import ConversionError
from .options import ConvertOptions, ConvertResult, load_options, save_options

__all__ = [
    "ConvertOptions",
    "ConvertResult",
    "json_to_typescript",
    "convert_file",
    "load_options",
    "save_options",
]

NESTING_ERROR_MESSAGE = "Input is nested too deeply"


def json_to_typescript(json_text: str, options: ConvertOptions) -> ConvertResult:
    """Convert JSON text into declarations without ever raising.

    Invalid JSON and scalar roots come back as failed results whose ``error``
    explains the problem; ``output`` is empty in that case.
    """
    try:
        output = convert_text(json_text, options)
    except ConversionError as exc:
        return ConvertResult.failed(str(exc))
    except RecursionError:
        return ConvertResult.failed(NESTING_ERROR_MESSAGE)
    return ConvertResult.ok(output)


def convert_file(path: str | Path, options: ConvertOptions) -> ConvertResult:
    """Read a JSON document from disk and convert it."""
    return json_to_typescript(Path(path).read_text(), options)
