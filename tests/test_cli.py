"""CLI behaviour tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from apidoc.cli import _build_parser, main


def test_cli_parses_overrides() -> None:
    parser = _build_parser()
    args = parser.parse_args(["--source", "src", "--destination", "out", "--debug", "-v"])

    assert args.source == "src"
    assert args.destination == "out"
    assert args.debug is True
    assert args.verbose is True
    assert args.config is None


def test_cli_debug_defaults_to_config_value() -> None:
    args = _build_parser().parse_args([])

    assert args.debug is None


def test_cli_reports_missing_configuration(tmp_path: Path, monkeypatch, capsys) -> None:
    monkeypatch.chdir(tmp_path)

    with pytest.raises(SystemExit) as excinfo:
        main([])

    assert excinfo.value.code == 1
    assert "Missing required configuration" in capsys.readouterr().err


def test_cli_runs_generation_from_config_file(tmp_path: Path, monkeypatch, capsys) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "a.js").write_text("export function a() {}\n", encoding="utf-8")
    (tmp_path / ".apidoc.json").write_text(
        json.dumps({"source": "./src", "destination": "./docs"}), encoding="utf-8"
    )

    main([])

    index = json.loads((tmp_path / "docs" / "index.json").read_text(encoding="utf-8"))
    assert any(doc["name"] == "a" for doc in index)
    assert "Generated" in capsys.readouterr().out


def test_cli_exits_non_zero_when_publish_fails(tmp_path: Path, monkeypatch, capsys) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.syspath_prepend(str(tmp_path))
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "a.js").write_text("export const a = 1;\n", encoding="utf-8")
    (tmp_path / "apidoc_failing_publish.py").write_text(
        "from apidoc.plugins import Plugin as _Base\n\n\n"
        "class Plugin(_Base):\n"
        "    def on_publish(self, writer):\n"
        "        raise RuntimeError('renderer crashed')\n",
        encoding="utf-8",
    )
    (tmp_path / "apidoc.yml").write_text(
        "source: ./src\ndestination: ./docs\nplugins:\n  - apidoc_failing_publish\n",
        encoding="utf-8",
    )

    with pytest.raises(SystemExit) as excinfo:
        main(["-c", "apidoc.yml"])

    assert excinfo.value.code == 1
    assert "renderer crashed" in capsys.readouterr().err
