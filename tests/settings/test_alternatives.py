"""Tests for default terminal registration."""

from __future__ import annotations

from pathlib import Path

from termkit.settings import AlternativesRegistrar
from tests._fixtures.fake_host import FakeHost

EMULATOR = "/usr/bin/mate-terminal"


def test_register_default_uses_set_when_alternative_exists(tmp_path: Path) -> None:
    host = FakeHost(tmp_path)

    assert AlternativesRegistrar(host.runner, as_root=False).register_default(EMULATOR) is True

    assert host.calls == [["sudo", "update-alternatives", "--set", "x-terminal-emulator", EMULATOR]]


def test_register_default_installs_alternative_when_set_fails(tmp_path: Path) -> None:
    host = FakeHost(tmp_path)
    host.fail("update-alternatives", "--set")

    assert AlternativesRegistrar(host.runner, as_root=True).register_default(EMULATOR) is True

    assert host.calls[-1] == [
        "update-alternatives",
        "--install",
        "/usr/bin/x-terminal-emulator",
        "x-terminal-emulator",
        EMULATOR,
        "50",
    ]


def test_register_default_reports_failure_without_raising(tmp_path: Path) -> None:
    host = FakeHost(tmp_path)
    host.fail("update-alternatives")

    assert AlternativesRegistrar(host.runner, as_root=True).register_default(EMULATOR) is False
    assert len(host.calls) == 2
