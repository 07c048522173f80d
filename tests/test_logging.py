"""Tests for the termkit logger and its host-stamped file sink."""

from __future__ import annotations

from pathlib import Path

from termkit.logging import configure_logging, get_logger, record_host_fact


def test_file_sink_stamps_records_with_probed_host_facts(tmp_path: Path, capsys) -> None:
    log_file = tmp_path / "logs" / "termkit.log"
    configure_logging(log_file=log_file)
    logger = get_logger("orchestrator")

    logger.info("before probing")
    record_host_fact("package_manager", "apt")
    record_host_fact("nvim", "0.7.0")
    logger.info("after probing")

    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert "[unprobed] before probing" in lines[0]
    assert lines[-1].endswith("[package_manager=apt nvim=0.7.0] after probing")
    assert "termkit.orchestrator" in lines[-1]

    err = capsys.readouterr().err
    assert "[termkit] INFO after probing" in err
    assert "package_manager=apt" not in err


def test_file_sink_keeps_debug_records_without_verbose(tmp_path: Path, capsys) -> None:
    log_file = tmp_path / "termkit.log"
    configure_logging(log_file=log_file)

    get_logger("deploy").debug("Wrote 12 bytes to .tmux.conf")

    assert "Wrote 12 bytes" in log_file.read_text(encoding="utf-8")
    assert "Wrote 12 bytes" not in capsys.readouterr().err


def test_reconfiguring_forgets_previous_host_facts(tmp_path: Path) -> None:
    configure_logging(log_file=tmp_path / "first.log")
    record_host_fact("clipboard", "x11")

    second = tmp_path / "second.log"
    configure_logging(log_file=second)
    get_logger().info("fresh run")

    assert "[unprobed] fresh run" in second.read_text(encoding="utf-8")
