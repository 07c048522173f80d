"""Subprocess helpers shared by components that shell out."""

from __future__ import annotations

import os
import subprocess
from typing import Callable, Iterable, List

CommandRunner = Callable[..., str]


def run_command(args: Iterable[str], *, capture_output: bool = False) -> str:
    """Run a command to completion, raising ``CalledProcessError`` on failure."""
    completed = subprocess.run(
        list(args),
        check=True,
        text=True,
        capture_output=capture_output,
    )
    if capture_output:
        return completed.stdout
    return ""


def is_root() -> bool:
    geteuid = getattr(os, "geteuid", None)
    if callable(geteuid):
        return geteuid() == 0
    return False


def privileged(args: Iterable[str], *, as_root: bool | None = None) -> List[str]:
    """Prefix ``args`` with sudo unless the process already runs as root."""
    command = list(args)
    if as_root is None:
        as_root = is_root()
    if as_root:
        return command
    return ["sudo", *command]


__all__ = ["CommandRunner", "is_root", "privileged", "run_command"]
