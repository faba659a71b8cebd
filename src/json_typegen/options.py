"""Typed options and results for JSON to declaration conversion."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import ujson as json
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator


class ConvertOptions(BaseModel):
    """Knobs controlling how declarations are emitted.

    Every field is required: the converter never assumes defaults. Config files
    may use either the snake_case field names or the camelCase aliases.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="forbid")

    root_name: str = Field(alias="rootName")
    use_interface: bool = Field(alias="useInterface")
    optional_properties: bool = Field(alias="optionalProperties")
    add_export: bool = Field(alias="addExport")

    @property
    def export_prefix(self) -> str:
        return "export " if self.add_export else ""


class ConvertResult(BaseModel):
    """Outcome of a single conversion call."""

    success: bool
    output: str = ""
    error: str | None = None

    @model_validator(mode="after")
    def validate_outcome(self) -> ConvertResult:
        if not self.success:
            if self.output:
                raise ValueError("failed results must not carry output")
            if not self.error:
                raise ValueError("failed results require an error message")
        return self

    @classmethod
    def ok(cls, output: str) -> ConvertResult:
        return cls(success=True, output=output)

    @classmethod
    def failed(cls, error: str) -> ConvertResult:
        return cls(success=False, output="", error=error)


def default_options() -> ConvertOptions:
    """Options the interactive tool starts with."""
    return ConvertOptions(
        root_name="Root",
        use_interface=True,
        optional_properties=False,
        add_export=False,
    )


def load_options(path: str | Path) -> ConvertOptions:
    """Load options from YAML or JSON."""
    path = Path(path)
    data: Any
    text = path.read_text()
    if path.suffix in {".yaml", ".yml"}:
        data = yaml.safe_load(text)
    else:
        data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError(f"Invalid options file {path}: expected a mapping")
    try:
        return ConvertOptions(**data)
    except ValidationError as exc:
        raise ValueError(f"Invalid options file {path}") from exc


def save_options(options: ConvertOptions, path: str | Path) -> None:
    """Persist options as YAML or JSON based on file suffix."""
    path = Path(path)
    payload = options.model_dump(mode="python", by_alias=True)
    if path.suffix in {".yaml", ".yml"}:
        path.write_text(yaml.safe_dump(payload, sort_keys=False))
    else:
        path.write_text(json.dumps(payload, indent=2))
