"""Provisioning pipeline: probe, install, verify, deploy, configure."""

from __future__ import annotations

import os
import shutil
from pathlib import Path
from typing import Callable, Mapping

from .config import TermkitConfig
from .deploy import AppendOnceMerger, FileDeployer, check_marker
from .errors import ConfigError
from .logging import get_logger, record_host_fact
from .models import PackageManagerKind, SetupOutcome
from .packages import PackageInstaller, resolve_plan
from .probe.environment import (
    WhichFn,
    detect_clipboard_binding,
    detect_editor_version,
    detect_package_manager,
)
from .process import CommandRunner, run_command
from .prompt import confirm
from .rendering import DEPLOY_TARGETS, STARTUP_BLOCK_TEMPLATE, TemplateRenderer, build_context
from .settings import AlternativesRegistrar, SettingsWriter
from .verify import CapabilityVerifier

AUTO_LAUNCH_PROMPT = "Launch tmux automatically in MATE Terminal? [y/N] "


class Orchestrator:
    """Runs one provisioning pass against the local machine.

    Host access (PATH lookups, environment, subprocesses, stdin) is injected
    so the whole flow can run against fakes.
    """

    def __init__(
        self,
        config: TermkitConfig,
        *,
        home: Path | None = None,
        which: WhichFn = shutil.which,
        environ: Mapping[str, str] | None = None,
        runner: CommandRunner | None = None,
        input_fn: Callable[[str], str] = input,
        as_root: bool | None = None,
        renderer: TemplateRenderer | None = None,
        deployer: FileDeployer | None = None,
        merger: AppendOnceMerger | None = None,
    ) -> None:
        self.config = config
        self.home = (home or Path.home()).expanduser()
        self._which = which
        self._environ = os.environ if environ is None else environ
        self._runner = runner or run_command
        self._input = input_fn
        self.installer = PackageInstaller(self._runner, as_root=as_root)
        self.verifier = CapabilityVerifier(which)
        self.renderer = renderer or TemplateRenderer(config.templates_dir)
        self.deployer = deployer or FileDeployer()
        self.merger = merger or AppendOnceMerger()
        self.settings = SettingsWriter(config.terminal.profile, self._runner)
        self.alternatives = AlternativesRegistrar(self._runner, as_root=as_root)
        self.logger = get_logger("orchestrator")

    def run(self) -> SetupOutcome:
        kind = detect_package_manager(self._which)
        self.logger.info("Detected package manager: %s", kind.value)
        record_host_fact("package_manager", kind.value)
        outcome = SetupOutcome(package_manager=kind)

        plan = resolve_plan(kind, self.config.packages)
        outcome.plan = plan
        self.installer.install(plan)

        self.verifier.verify(self.config.required_commands, self.config.alternative_commands)

        clipboard = detect_clipboard_binding(self._environ)
        outcome.clipboard = clipboard
        record_host_fact("clipboard", clipboard.name)
        self.logger.info("Using %s clipboard commands (%s)", clipboard.name, clipboard.copy_command)

        editor = self.config.editor
        version = detect_editor_version(editor.binary, self._runner)
        outcome.editor_version = version
        record_host_fact(editor.binary, version)
        outcome.compatibility_mode = version.is_older_than(editor.min_version)
        if outcome.compatibility_mode:
            self.logger.warning(
                "%s %s is older than %s; plugin manager bootstrap disabled",
                editor.binary,
                version,
                ".".join(str(part) for part in editor.min_version),
            )

        context = build_context(
            clipboard=clipboard,
            editor_version=version,
            compatibility_mode=outcome.compatibility_mode,
            min_version=editor.min_version,
        )
        shell = self.config.shell
        startup_block = self.renderer.render(STARTUP_BLOCK_TEMPLATE, context)
        try:
            check_marker(shell.marker, startup_block)
        except ValueError as exc:
            raise ConfigError(f"Invalid shell.marker: {exc}") from exc

        for target in DEPLOY_TARGETS:
            path = self.home / target.path
            self.logger.info("Installing %s", target.path)
            if self.deployer.deploy(path, self.renderer.bind(target.template, context)):
                outcome.changed_files.append(target.path)

        outcome.startup_merged = self._merge_startup_block(startup_block)

        outcome.auto_launch = confirm(AUTO_LAUNCH_PROMPT, default=False, input_fn=self._input)
        if outcome.auto_launch:
            failed = self.settings.write_many(self.config.terminal.auto_launch_settings())
            outcome.failed_settings.extend(failed)
            if not failed:
                self.logger.info("MATE Terminal will now launch tmux on startup")

        self.logger.info("Setting MATE Terminal colors")
        outcome.failed_settings.extend(self.settings.write_many(self.config.terminal.colors))

        if kind is PackageManagerKind.APT:
            self.logger.info("Setting MATE Terminal as default terminal emulator")
            self.alternatives.register_default(self.config.terminal.default_emulator)

        return outcome

    def _merge_startup_block(self, block: str) -> bool:
        shell = self.config.shell
        merged = self.merger.merge_append(self.home / shell.startup_file, shell.marker, block)
        if merged:
            self.logger.info("Added %s sourcing to %s", shell.marker, shell.startup_file)
        else:
            self.logger.info("%s already sources %s, skipping", shell.startup_file, shell.marker)
        return merged


__all__ = ["AUTO_LAUNCH_PROMPT", "Orchestrator"]
