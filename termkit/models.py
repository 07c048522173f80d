"""Core data models shared across termkit components."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple, Union

SettingValue = Union[bool, str]


class PackageManagerKind(str, Enum):
    """Package manager families termkit knows how to drive."""

    PACMAN = "pacman"
    DNF = "dnf"
    ZYPPER = "zypper"
    APT = "apt"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class PackagePlan:
    """Ordered package names for one package manager.

    Lists are authoritative per manager; the same tool may appear under a
    different name in another plan.
    """

    kind: PackageManagerKind
    packages: Tuple[str, ...]


@dataclass(frozen=True)
class ClipboardBinding:
    """Copy and paste commands substituted into the tmux config."""

    name: str
    copy_command: str
    paste_command: str


WAYLAND_BINDING = ClipboardBinding(
    name="wayland",
    copy_command="wl-copy",
    paste_command="wl-paste",
)

X11_FALLBACK_BINDING = ClipboardBinding(
    name="x11",
    copy_command="xclip -selection clipboard",
    paste_command="xclip -selection clipboard -o",
)


@dataclass(frozen=True)
class VersionProbe:
    """Editor version reported by the binary itself."""

    raw: str
    components: Tuple[int, ...]

    def is_older_than(self, minimum: Tuple[int, ...]) -> bool:
        """Compare component-wise, treating missing trailing components as zero."""
        width = max(len(self.components), len(minimum))
        current = self.components + (0,) * (width - len(self.components))
        floor = tuple(minimum) + (0,) * (width - len(minimum))
        return current < floor

    def __str__(self) -> str:
        return ".".join(str(part) for part in self.components)


@dataclass(frozen=True)
class DeployTarget:
    """A home-relative file rendered from a bundled template."""

    path: str
    template: str


@dataclass(frozen=True)
class SettingEntry:
    """Key/value pair for the terminal emulator settings store."""

    key: str
    value: SettingValue


@dataclass
class SetupOutcome:
    """Summary of a provisioning run."""

    package_manager: PackageManagerKind
    plan: Optional[PackagePlan] = None
    clipboard: Optional[ClipboardBinding] = None
    editor_version: Optional[VersionProbe] = None
    compatibility_mode: bool = False
    changed_files: List[str] = field(default_factory=list)
    startup_merged: bool = False
    auto_launch: bool = False
    failed_settings: List[str] = field(default_factory=list)
