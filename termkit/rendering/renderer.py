"""Jinja2 rendering of bundled configuration templates."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Tuple

from jinja2 import (
    ChoiceLoader,
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError,
    TemplateNotFound,
)

from ..errors import ConfigError
from ..models import ClipboardBinding, DeployTarget, VersionProbe

BUNDLED_TEMPLATES_DIR = Path(__file__).with_name("templates")

DEPLOY_TARGETS: Tuple[DeployTarget, ...] = (
    DeployTarget(".tmux.conf", "tmux.conf.j2"),
    DeployTarget(".config/nvim/init.lua", "nvim/init.lua.j2"),
    DeployTarget(".config/nvim/lua/plugins/init.lua", "nvim/plugins.lua.j2"),
    DeployTarget(".bash_aliases", "bash_aliases.j2"),
)

STARTUP_BLOCK_TEMPLATE = "bashrc_block.j2"


def build_context(
    *,
    clipboard: ClipboardBinding,
    editor_version: VersionProbe,
    compatibility_mode: bool,
    min_version: Tuple[int, ...],
    aliases_file: str = ".bash_aliases",
) -> Dict[str, Any]:
    """Collect probe values into the mapping every template renders against."""
    return {
        "clipboard": clipboard,
        "editor_version": str(editor_version),
        "compatibility_mode": compatibility_mode,
        "min_version": ".".join(str(part) for part in min_version),
        "aliases_file": aliases_file,
    }


class TemplateRenderer:
    """Renders configuration bodies from templates.

    Templates in ``templates_dir`` shadow the bundled ones of the same name.
    Rendering is strict: an undefined variable is an error, never an empty
    string.
    """

    def __init__(self, templates_dir: Path | None = None) -> None:
        self.templates_dir = templates_dir
        loaders: List[FileSystemLoader] = []
        if templates_dir is not None:
            loaders.append(FileSystemLoader(str(templates_dir)))
        loaders.append(FileSystemLoader(str(BUNDLED_TEMPLATES_DIR)))
        self._env = Environment(
            loader=ChoiceLoader(loaders),
            undefined=StrictUndefined,
            autoescape=False,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, template_name: str, context: Mapping[str, Any]) -> str:
        try:
            template = self._env.get_template(template_name)
        except TemplateNotFound as exc:
            raise ConfigError(f"Template not found: {template_name}") from exc
        try:
            return template.render(**context)
        except TemplateError as exc:
            raise ConfigError(f"Failed to render {template_name}: {exc}") from exc

    def bind(self, template_name: str, context: Mapping[str, Any]) -> Callable[[], str]:
        """Return a zero-argument callable that renders ``template_name`` afresh."""
        frozen = dict(context)

        def _render() -> str:
            return self.render(template_name, frozen)

        return _render
