"""Writes MATE Terminal settings into the dconf database."""

from __future__ import annotations

import subprocess
from typing import Iterable, List

from ..errors import SettingsWriteError
from ..logging import get_logger
from ..models import SettingEntry, SettingValue
from ..process import CommandRunner, run_command


def format_gvariant(value: SettingValue) -> str:
    """Render a bool or string as GVariant text for ``dconf write``."""
    if isinstance(value, bool):
        return "true" if value else "false"
    escaped = str(value).replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


class SettingsWriter:
    """Issues one unconditional ``dconf write`` per key under a profile path."""

    def __init__(self, profile: str, runner: CommandRunner | None = None) -> None:
        self.profile = profile if profile.endswith("/") else profile + "/"
        self._runner = runner or run_command
        self.logger = get_logger("settings")

    def command_for(self, key: str, value: SettingValue) -> List[str]:
        return ["dconf", "write", f"{self.profile}{key}", format_gvariant(value)]

    def write_setting(self, key: str, value: SettingValue) -> None:
        command = self.command_for(key, value)
        self.logger.debug("Running %s", " ".join(command))
        try:
            self._runner(command)
        except subprocess.CalledProcessError as exc:
            raise SettingsWriteError(key, f"dconf exited with status {exc.returncode}") from exc
        except OSError as exc:
            raise SettingsWriteError(key, str(exc)) from exc

    def write_many(self, entries: Iterable[SettingEntry]) -> List[str]:
        """Write each entry independently; return the keys that failed."""
        failed: List[str] = []
        for entry in entries:
            try:
                self.write_setting(entry.key, entry.value)
            except SettingsWriteError as exc:
                self.logger.warning("%s (skipped)", exc)
                failed.append(entry.key)
        return failed


__all__ = ["SettingsWriter", "format_gvariant"]
