"""Command-line utilities for the json_typegen package."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated, NoReturn

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import get_version
from .api import json_to_typescript
from .history import ConversionHistory
from .options import ConvertOptions, default_options, load_options, save_options

app = typer.Typer(help="Generate TypeScript declarations from JSON")
console = Console()
err_console = Console(stderr=True)


def _fail(message: str) -> NoReturn:
    err_console.print(f"[bold red]Error:[/] {escape(message)}")
    raise typer.Exit(code=1)


def _resolve_options(
    config: Path | None,
    root_name: str | None,
    type_alias: bool,
    optional: bool,
    export: bool,
) -> ConvertOptions:
    """Start from the config file (or defaults) and apply command-line switches."""
    if config is None:
        base = default_options()
    else:
        try:
            base = load_options(config)
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--config") from exc
    updates: dict[str, object] = {}
    if root_name is not None:
        updates["root_name"] = root_name
    if type_alias:
        updates["use_interface"] = False
    if optional:
        updates["optional_properties"] = True
    if export:
        updates["add_export"] = True
    return base.model_copy(update=updates)


@app.command()
def version() -> None:
    """Print the installed package version."""
    typer.echo(get_version())


@app.command()
def convert(
    source: Annotated[
        Path | None,
        typer.Argument(help="JSON file to convert; reads stdin when omitted or '-'."),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option(exists=True, readable=True, help="Options file (.yaml/.yml/.json)."),
    ] = None,
    root_name: Annotated[str | None, typer.Option(help="Name of the root declaration.")] = None,
    type_alias: Annotated[
        bool, typer.Option("--type-alias", help="Emit `type X = {...};` instead of interfaces.")
    ] = False,
    optional: Annotated[bool, typer.Option("--optional", help="Mark every property optional.")] = False,
    export: Annotated[bool, typer.Option("--export", help="Prefix declarations with `export`.")] = False,
    out: Annotated[Path | None, typer.Option(help="Write declarations to this file.")] = None,
    history: Annotated[
        Path | None, typer.Option(help="Record successful conversions in this history file.")
    ] = None,
) -> None:
    """Convert a JSON document into type declarations."""
    options = _resolve_options(config, root_name, type_alias, optional, export)
    store = _load_history(history) if history is not None else None
    if source is None or str(source) == "-":
        text = sys.stdin.read()
    else:
        if not source.exists():
            raise typer.BadParameter(f"{source} does not exist")
        text = source.read_text()
    result = json_to_typescript(text, options)
    if not result.success:
        _fail(result.error or "Conversion failed")
    if store is not None and history is not None:
        store.record(text, result.output)
        store.save(history)
    if out is None:
        typer.echo(result.output)
        return
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(result.output + "\n")
    console.print(f"[bold green]Declarations written:[/] {escape(str(out))}")


@app.command("init-config")
def init_config(
    out: Annotated[Path, typer.Argument(help="Destination options file (.yaml/.yml/.json).")],
) -> None:
    """Write the default conversion options to a config file."""
    out.parent.mkdir(parents=True, exist_ok=True)
    save_options(default_options(), out)
    console.print(f"[bold green]Options written:[/] {escape(str(out))}")


@app.command("history")
def history_cmd(path: Annotated[Path, typer.Argument(help="History file.")]) -> None:
    """List recorded conversions, newest first."""
    store = _load_history(path)
    if not store.entries:
        console.print("History is empty.")
        return
    table = Table(title=f"History ({escape(str(path))})")
    table.add_column("ID")
    table.add_column("Input")
    table.add_column("When")
    for entry in store.entries:
        table.add_row(entry.ident, escape(entry.preview()), entry.formatted_time())
    console.print(table)


@app.command("history-show")
def history_show(
    path: Annotated[Path, typer.Argument(help="History file.")],
    ident: Annotated[str, typer.Argument(help="Entry identifier.")],
) -> None:
    """Print the declarations recorded for a history entry."""
    entry = _load_history(path).find(ident)
    if entry is None:
        _fail(f"No history entry {ident} in {path}")
    typer.echo(entry.output)


@app.command("history-clear")
def history_clear(path: Annotated[Path, typer.Argument(help="History file.")]) -> None:
    """Remove every recorded conversion."""
    store = _load_history(path)
    removed = len(store)
    store.clear()
    store.save(path)
    console.print(f"[bold]Removed:[/] {removed} entries")


def _load_history(path: Path) -> ConversionHistory:
    try:
        return ConversionHistory.load(path)
    except ValueError as exc:
        raise typer.BadParameter(f"Unreadable history file {path}: {exc}") from exc


def main() -> None:
    """Entry point for `python -m json_typegen.cli`."""
    app()


if __name__ == "__main__":
    main()
