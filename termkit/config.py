"""Configuration loading for termkit (bundled defaults.yml plus user config.yml)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

import yaml

from .errors import ConfigError
from .models import PackageManagerKind, SettingEntry
from .probe.environment import parse_version

DEFAULTS_PATH = Path(__file__).with_name("defaults.yml")


@dataclass
class EditorConfig:
    """Editor binary and the oldest version that supports the plugin manager."""

    binary: str = "nvim"
    min_version: Tuple[int, ...] = (0, 8, 0)


@dataclass
class ShellConfig:
    """Startup file that gains the alias-sourcing block."""

    startup_file: str = ".bashrc"
    marker: str = ".bash_aliases"


@dataclass
class TerminalConfig:
    """MATE Terminal settings written through dconf."""

    profile: str = "/org/mate/terminal/profiles/default/"
    auto_launch_command: str = "tmux new-session -A -s main"
    default_emulator: str = "/usr/bin/mate-terminal"
    colors: List[SettingEntry] = field(default_factory=list)

    def auto_launch_settings(self) -> List[SettingEntry]:
        return [
            SettingEntry("use-custom-command", True),
            SettingEntry("custom-command", self.auto_launch_command),
        ]


@dataclass
class TermkitConfig:
    """Effective settings for one provisioning run."""

    packages: Dict[PackageManagerKind, List[str]] = field(default_factory=dict)
    required_commands: List[str] = field(default_factory=list)
    alternative_commands: List[List[str]] = field(default_factory=list)
    editor: EditorConfig = field(default_factory=EditorConfig)
    shell: ShellConfig = field(default_factory=ShellConfig)
    terminal: TerminalConfig = field(default_factory=TerminalConfig)
    templates_dir: Optional[Path] = None
    source: Optional[Path] = None


def default_config_path(environ: Mapping[str, str] | None = None) -> Path:
    env = os.environ if environ is None else environ
    base = env.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / "termkit" / "config.yml"


def load_config(
    config_path: Path | None = None, *, environ: Mapping[str, str] | None = None
) -> TermkitConfig:
    """Load bundled defaults and merge the user's config file over them.

    An explicit ``config_path`` must exist; the default location is optional.
    """
    data = _read_yaml(DEFAULTS_PATH)

    source: Optional[Path] = None
    if config_path is not None:
        path = config_path.expanduser()
        if not path.is_file():
            raise ConfigError(f"Config file not found: {path}")
        source = path
    else:
        candidate = default_config_path(environ)
        if candidate.is_file():
            source = candidate

    if source is not None:
        data = _deep_merge(data, _read_yaml(source))

    config = _build_config(data)
    config.source = source
    templates_dir = _as_str(data.get("templates_dir"))
    if templates_dir:
        base = source.parent if source is not None else Path.cwd()
        config.templates_dir = (base / Path(templates_dir).expanduser()).resolve()
    return config


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read {path}: {exc.strerror or exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigError(f"{path.name} must contain a mapping at the root")
    return loaded


def _deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    merged: Dict[str, Any] = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = _deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def _build_config(data: Mapping[str, Any]) -> TermkitConfig:
    packages: Dict[PackageManagerKind, List[str]] = {}
    for name, names in _as_dict(data.get("packages")).items():
        try:
            kind = PackageManagerKind(str(name).lower())
        except ValueError as exc:
            raise ConfigError(f"Unknown package manager in packages: {name}") from exc
        if kind is PackageManagerKind.UNKNOWN:
            raise ConfigError("Packages cannot be configured for the unknown manager")
        packages[kind] = _as_str_list(names)

    verify = _as_dict(data.get("verify"))
    alternatives = [
        group for group in (_as_str_list(item) for item in _as_list(verify.get("alternatives"))) if group
    ]

    editor_data = _as_dict(data.get("editor"))
    editor = EditorConfig()
    if editor_data.get("binary"):
        editor.binary = str(editor_data["binary"])
    if editor_data.get("min_version") is not None:
        try:
            editor.min_version = parse_version(str(editor_data["min_version"]))
        except ValueError as exc:
            raise ConfigError(f"Invalid editor.min_version: {exc}") from exc

    shell_data = _as_dict(data.get("shell"))
    shell = ShellConfig()
    if shell_data.get("startup_file"):
        shell.startup_file = str(shell_data["startup_file"])
    if shell_data.get("marker"):
        shell.marker = str(shell_data["marker"])

    terminal_data = _as_dict(data.get("terminal"))
    terminal = TerminalConfig()
    for attr in ("profile", "auto_launch_command", "default_emulator"):
        if terminal_data.get(attr):
            setattr(terminal, attr, str(terminal_data[attr]))
    if not terminal.profile.endswith("/"):
        terminal.profile += "/"
    terminal.colors = [
        SettingEntry(str(key), _as_setting_value(key, value))
        for key, value in _as_dict(terminal_data.get("colors")).items()
    ]

    return TermkitConfig(
        packages=packages,
        required_commands=_as_str_list(verify.get("required")),
        alternative_commands=alternatives,
        editor=editor,
        shell=shell,
        terminal=terminal,
    )


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) else None


def _as_list(value: Any) -> List[Any]:
    return list(value) if isinstance(value, list) else []


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


def _as_setting_value(key: Any, value: Any) -> bool | str:
    if isinstance(value, bool):
        return value
    if isinstance(value, (str, int, float)):
        return str(value)
    raise ConfigError(f"Unsupported value for terminal setting {key}: {value!r}")


__all__ = [
    "DEFAULTS_PATH",
    "EditorConfig",
    "ShellConfig",
    "TerminalConfig",
    "TermkitConfig",
    "default_config_path",
    "load_config",
]
