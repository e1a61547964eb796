"""CLI behavior tests."""

import io
import sys

import pytest

from metacmd import cli
from metacmd.catalog import default_registry
from metacmd.cli import main
from metacmd.listing import render_listing


def _run_cli(capsys: pytest.CaptureFixture, argv: list[str]):
    """Run CLI main() and capture exit code/stdout/stderr."""
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    captured = capsys.readouterr()
    return exc_info.value.code, captured.out, captured.err


def test_default_command_prints_builtin_listing(capsys):
    code, out, err = _run_cli(capsys, [])

    assert code == 0
    assert out == render_listing(default_registry())
    assert err == ""


def test_list_command_uses_registry_file(capsys, sample_registry_file):
    code, out, _err = _run_cli(capsys, ["list", "-r", str(sample_registry_file)])

    assert code == 0
    assert out.startswith("General\n  \\go ")
    assert "\\quit" not in out


def test_missing_registry_file_exits_with_error(capsys, tmp_path):
    code, out, err = _run_cli(capsys, ["-r", str(tmp_path / "missing.json")])

    assert code == 1
    assert out == ""
    assert "Error: Registry file not found" in err


def test_unknown_command_is_rejected_by_parser(capsys):
    code, _out, err = _run_cli(capsys, ["serve"])

    assert code == 2
    assert "invalid choice" in err


def test_closed_stdout_reports_sink_error(capsys, monkeypatch):
    closed = io.StringIO()
    closed.close()
    monkeypatch.setattr(sys, "stdout", closed)

    with pytest.raises(SystemExit) as exc_info:
        main([])

    assert exc_info.value.code == 1
    assert "Error: Could not write listing" in capsys.readouterr().err


def test_repl_command_runs_shell_with_loaded_registry(capsys, monkeypatch, sample_registry_file):
    seen = []
    monkeypatch.setattr(cli, "run_repl", lambda registry: seen.append(registry))

    code, _out, _err = _run_cli(capsys, ["repl", "--registry", str(sample_registry_file)])

    assert code == 0
    assert len(seen) == 1
    assert set(seen[0].commands) == {"go", "?"}


def test_unexpected_error_exits_with_message(capsys, monkeypatch):
    def _boom(registry):
        raise RuntimeError("boom")

    monkeypatch.setattr(cli, "run_repl", _boom)

    code, _out, err = _run_cli(capsys, ["repl"])

    assert code == 1
    assert "Error: Unexpected: boom" in err


def test_log_file_records_structured_events(capsys, tmp_path):
    log_path = tmp_path / "logs" / "run.log"

    code, _out, _err = _run_cli(capsys, ["-l", str(log_path)])

    assert code == 0
    text = log_path.read_text(encoding="utf-8")
    assert "=== app_start ===" in text
    assert "=== registry_loaded ===" in text
    assert "source: builtin" in text
    assert "=== listing_rendered ===" in text
    assert "=== app_stop ===" in text
    assert "reason: completed" in text
