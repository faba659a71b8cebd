from pathlib import Path

import ujson as json
from typer.testing import CliRunner

from json_typegen import api
from json_typegen.cli import app
from json_typegen.history import ConversionHistory


def test_cli_convert_file_to_stdout(tmp_path: Path) -> None:
    source = tmp_path / "payload.json"
    source.write_text('{"user": {"name": "John"}}')
    runner = CliRunner()
    result = runner.invoke(app, ["convert", str(source)])
    assert result.exit_code == 0, result.output
    assert "interface User {\n  name: string;\n}\n\ninterface Root {" in result.output


def test_cli_convert_stdin_with_switches() -> None:
    runner = CliRunner()
    result = runner.invoke(
        app,
        ["convert", "--root-name", "Payload", "--type-alias", "--optional", "--export"],
        input='{"id": 1}',
    )
    assert result.exit_code == 0, result.output
    assert "export type Payload = {\n  id?: number;\n};" in result.output


def test_cli_convert_writes_out_file(tmp_path: Path) -> None:
    source = tmp_path / "rows.json"
    source.write_text("[1, 2]")
    out = tmp_path / "types" / "rows.ts"
    runner = CliRunner()
    result = runner.invoke(app, ["convert", str(source), "--out", str(out)])
    assert result.exit_code == 0, result.output
    assert out.read_text() == "type Root = number[];\n"


def test_cli_convert_reports_errors(tmp_path: Path) -> None:
    source = tmp_path / "scalar.json"
    source.write_text("42")
    runner = CliRunner()
    result = runner.invoke(app, ["convert", str(source)])
    assert result.exit_code == 1
    assert "Input must be a JSON object or array" in result.output


def test_cli_init_config_then_convert(tmp_path: Path) -> None:
    runner = CliRunner()
    cfg = tmp_path / "options.yaml"
    result = runner.invoke(app, ["init-config", str(cfg)])
    assert result.exit_code == 0, result.output
    options = api.load_options(cfg)
    api.save_options(options.model_copy(update={"root_name": "Config"}), cfg)

    result = runner.invoke(app, ["convert", "--config", str(cfg)], input="[]")
    assert result.exit_code == 0, result.output
    assert "type Config = unknown[];" in result.output


def test_cli_rejects_invalid_config(tmp_path: Path) -> None:
    cfg = tmp_path / "options.json"
    cfg.write_text(json.dumps({"rootName": "Root"}))
    runner = CliRunner()
    result = runner.invoke(app, ["convert", "--config", str(cfg)], input="{}")
    assert result.exit_code != 0


def test_cli_history_roundtrip(tmp_path: Path) -> None:
    history_path = tmp_path / "history.json"
    runner = CliRunner()
    result = runner.invoke(app, ["convert", "--history", str(history_path)], input='{"a": 1}')
    assert result.exit_code == 0, result.output
    failed = runner.invoke(app, ["convert", "--history", str(history_path)], input="nope")
    assert failed.exit_code == 1

    store = ConversionHistory.load(history_path)
    assert len(store) == 1
    entry = store.entries[0]

    listing = runner.invoke(app, ["history", str(history_path)])
    assert listing.exit_code == 0, listing.output
    assert entry.ident in listing.output

    shown = runner.invoke(app, ["history-show", str(history_path), entry.ident])
    assert shown.exit_code == 0, shown.output
    assert "interface Root {\n  a: number;\n}" in shown.output

    missing = runner.invoke(app, ["history-show", str(history_path), "nope"])
    assert missing.exit_code == 1

    cleared = runner.invoke(app, ["history-clear", str(history_path)])
    assert cleared.exit_code == 0, cleared.output
    assert len(ConversionHistory.load(history_path)) == 0
    empty = runner.invoke(app, ["history", str(history_path)])
    assert "History is empty." in empty.output


def test_cli_version() -> None:
    result = CliRunner().invoke(app, ["version"])
    assert result.exit_code == 0
    assert result.output.strip()


def test_cli_convert_rejects_corrupt_history(tmp_path: Path) -> None:
    history_path = tmp_path / "history.json"
    history_path.write_text("{not json")
    runner = CliRunner()
    result = runner.invoke(app, ["convert", "--history", str(history_path)], input='{"a": 1}')
    assert result.exit_code == 2
    assert "Unreadable" in result.output
    assert history_path.read_text() == "{not json"
