"""CLI behaviour tests."""

from __future__ import annotations

from pathlib import Path

import pytest

import termkit.cli as cli_module
from termkit.cli import _build_parser, main
from termkit.errors import MissingCommands


def test_cli_runs_without_flags() -> None:
    args = _build_parser().parse_args([])
    assert args.verbose is False
    assert args.config is None
    assert args.log_file is None


def test_cli_accepts_config_and_verbose() -> None:
    args = _build_parser().parse_args(["-v", "--config", "custom.yml"])
    assert args.verbose is True
    assert args.config == Path("custom.yml")


def test_main_exits_one_with_single_line_diagnostic(monkeypatch, capsys, tmp_path: Path) -> None:
    class FailingOrchestrator:
        def __init__(self, config) -> None:
            self.config = config

        def run(self):
            raise MissingCommands(["cmake"])

    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.setattr(cli_module, "Orchestrator", FailingOrchestrator)

    with pytest.raises(SystemExit) as excinfo:
        main([])

    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    diagnostic = [line for line in err.splitlines() if line.startswith("Error:")]
    assert diagnostic == ["Error: Missing required commands: cmake. Install them and re-run."]
    assert "Traceback" not in err


def test_main_reports_missing_config_file(capsys, tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--config", str(tmp_path / "absent.yml")])

    assert excinfo.value.code == 1
    assert "Config file not found" in capsys.readouterr().err


def test_main_prints_next_steps_on_success(monkeypatch, capsys, tmp_path: Path) -> None:
    class PassingOrchestrator:
        def __init__(self, config) -> None:
            self.config = config

        def run(self):
            return None

    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.setattr(cli_module, "Orchestrator", PassingOrchestrator)

    main([])

    out = capsys.readouterr().out
    assert "=== Setup complete ===" in out
    assert "tmux new-session -A -s main" in out
