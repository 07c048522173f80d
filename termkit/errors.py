"""Error taxonomy for termkit runs."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence


class TermkitError(RuntimeError):
    """Base class for conditions that abort or degrade a provisioning run."""


class ConfigError(TermkitError):
    """Raised when a configuration file cannot be parsed."""


class ProbeError(TermkitError):
    """Raised when a required probe command could not run."""


class UnsupportedPackageManager(TermkitError):
    """Raised when no known package manager is present on the host."""


class InstallError(TermkitError):
    """Raised when the package manager reports a failed install."""


class MissingCommands(TermkitError):
    """Aggregated failure of the post-install capability check."""

    def __init__(self, missing: Sequence[str]) -> None:
        self.missing = list(missing)
        super().__init__(
            "Missing required commands: "
            + ", ".join(self.missing)
            + ". Install them and re-run."
        )


class DeployError(TermkitError):
    """Raised when a configuration file cannot be written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Failed to write {path}: {reason}")


class SettingsWriteError(TermkitError):
    """Raised when a settings-store write fails."""

    def __init__(self, key: str, reason: str) -> None:
        self.key = key
        super().__init__(f"Failed to set {key}: {reason}")


__all__ = [
    "ConfigError",
    "DeployError",
    "InstallError",
    "MissingCommands",
    "ProbeError",
    "SettingsWriteError",
    "TermkitError",
    "UnsupportedPackageManager",
]
