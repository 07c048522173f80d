"""Registers a terminal emulator with Debian's update-alternatives."""

from __future__ import annotations

import subprocess
from typing import List

from ..logging import get_logger
from ..process import CommandRunner, privileged, run_command

_LINK_NAME = "x-terminal-emulator"
_LINK_PATH = "/usr/bin/x-terminal-emulator"
_PRIORITY = "50"


class AlternativesRegistrar:
    """Makes an emulator the ``x-terminal-emulator`` default."""

    def __init__(
        self, runner: CommandRunner | None = None, *, as_root: bool | None = None
    ) -> None:
        self._runner = runner or run_command
        self._as_root = as_root
        self.logger = get_logger("alternatives")

    def commands_for(self, emulator: str) -> List[List[str]]:
        return [
            privileged(["update-alternatives", "--set", _LINK_NAME, emulator], as_root=self._as_root),
            privileged(
                ["update-alternatives", "--install", _LINK_PATH, _LINK_NAME, emulator, _PRIORITY],
                as_root=self._as_root,
            ),
        ]

    def register_default(self, emulator: str) -> bool:
        """Select ``emulator``, installing the alternative first if unknown.

        Returns False when neither command succeeds.
        """
        set_command, install_command = self.commands_for(emulator)
        try:
            self._runner(set_command, capture_output=True)
            return True
        except (OSError, subprocess.CalledProcessError) as exc:
            self.logger.debug("%s failed: %s", " ".join(set_command), exc)
        try:
            self._runner(install_command)
            return True
        except (OSError, subprocess.CalledProcessError) as exc:
            self.logger.warning("Could not register %s as default terminal: %s", emulator, exc)
            return False


__all__ = ["AlternativesRegistrar"]
