"""Export the JSON Schema for conversion options files.

Editors and CI can validate `.json` options files against it.
"""

from __future__ import annotations

from pathlib import Path

import typer
import ujson as json

from json_typegen.options import ConvertOptions

app = typer.Typer(help="Export JSON Schema for `ConvertOptions`.")


@app.command()
def main(
    out: Path = typer.Argument(..., help="Output path (usually .json)."),
    pretty: bool = typer.Option(True, help="Write pretty-printed JSON."),
) -> None:
    schema = ConvertOptions.model_json_schema(by_alias=True)
    text = json.dumps(schema, indent=2 if pretty else 0)
    out.write_text(text)
    typer.echo(f"Wrote options schema to {out}")


if __name__ == "__main__":
    app()
