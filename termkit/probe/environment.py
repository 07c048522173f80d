"""Read-only probes of the host: package manager, session type, editor version."""

from __future__ import annotations

import os
import re
import shutil
import subprocess
from dataclasses import dataclass
from typing import Callable, Mapping, Optional, Sequence, Tuple

from ..errors import ProbeError
from ..logging import get_logger
from ..models import (
    WAYLAND_BINDING,
    X11_FALLBACK_BINDING,
    ClipboardBinding,
    PackageManagerKind,
    VersionProbe,
)
from ..process import CommandRunner, run_command

WhichFn = Callable[[str], Optional[str]]

_COMPONENT_PATTERN = re.compile(r"^(\d+)")
_logger = get_logger("probe")


@dataclass(frozen=True)
class PackageManagerProbe:
    """Maps an executable on PATH to the package manager family it implies."""

    kind: PackageManagerKind
    executable: str

    def matches(self, which: WhichFn) -> bool:
        return which(self.executable) is not None


# Evaluated in order; the first match wins.
PACKAGE_MANAGER_PROBES: Tuple[PackageManagerProbe, ...] = (
    PackageManagerProbe(PackageManagerKind.PACMAN, "pacman"),
    PackageManagerProbe(PackageManagerKind.DNF, "dnf"),
    PackageManagerProbe(PackageManagerKind.ZYPPER, "zypper"),
    PackageManagerProbe(PackageManagerKind.APT, "apt-get"),
)

SESSION_TYPE_VARIABLE = "XDG_SESSION_TYPE"
WAYLAND_SESSION = "wayland"


def detect_package_manager(
    which: WhichFn = shutil.which,
    registry: Sequence[PackageManagerProbe] = PACKAGE_MANAGER_PROBES,
) -> PackageManagerKind:
    """Return the first registered package manager whose executable resolves."""
    for probe in registry:
        if probe.matches(which):
            _logger.debug("Found %s on PATH", probe.executable)
            return probe.kind
    return PackageManagerKind.UNKNOWN


def detect_clipboard_binding(environ: Mapping[str, str] | None = None) -> ClipboardBinding:
    """Pick wl-clipboard on Wayland sessions and xclip everywhere else."""
    env = os.environ if environ is None else environ
    if env.get(SESSION_TYPE_VARIABLE) == WAYLAND_SESSION:
        return WAYLAND_BINDING
    return X11_FALLBACK_BINDING


def parse_version(text: str) -> Tuple[int, ...]:
    """Parse ``0.10.0-dev+12`` style strings into integer components."""
    cleaned = text.strip()
    if cleaned[:1] in {"v", "V"}:
        cleaned = cleaned[1:]
    components = []
    for part in cleaned.split("."):
        match = _COMPONENT_PATTERN.match(part)
        if not match:
            break
        components.append(int(match.group(1)))
    if not components:
        raise ValueError(f"unrecognised version string {text!r}")
    return tuple(components)


def detect_editor_version(
    binary: str = "nvim", runner: CommandRunner = run_command
) -> VersionProbe:
    """Run ``<binary> --version`` and parse the first line, e.g. ``NVIM v0.9.5``."""
    try:
        output = runner([binary, "--version"], capture_output=True)
    except (OSError, subprocess.CalledProcessError) as exc:
        raise ProbeError(f"Could not run '{binary} --version': {exc}") from exc

    lines = (output or "").splitlines()
    tokens = lines[0].split() if lines else []
    if len(tokens) < 2:
        raise ProbeError(f"'{binary} --version' did not report a version")
    token = tokens[1]
    raw = token[1:] if token.startswith("v") else token
    try:
        components = parse_version(raw)
    except ValueError as exc:
        raise ProbeError(f"'{binary} --version' reported {token!r}: {exc}") from exc
    return VersionProbe(raw=raw, components=components)


__all__ = [
    "PACKAGE_MANAGER_PROBES",
    "PackageManagerProbe",
    "WhichFn",
    "detect_clipboard_binding",
    "detect_editor_version",
    "detect_package_manager",
    "parse_version",
]
