"""Host environment probes."""

from __future__ import annotations

from .environment import (
    PACKAGE_MANAGER_PROBES,
    PackageManagerProbe,
    WhichFn,
    detect_clipboard_binding,
    detect_editor_version,
    detect_package_manager,
    parse_version,
)

__all__ = [
    "PACKAGE_MANAGER_PROBES",
    "PackageManagerProbe",
    "WhichFn",
    "detect_clipboard_binding",
    "detect_editor_version",
    "detect_package_manager",
    "parse_version",
]
