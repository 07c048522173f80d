"""Package plans and install commands per package manager."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from .errors import InstallError, UnsupportedPackageManager
from .logging import get_logger
from .models import PackageManagerKind, PackagePlan
from .process import CommandRunner, privileged, run_command


@dataclass(frozen=True)
class InstallRecipe:
    """Commands that bring a package list onto the host."""

    install: Tuple[str, ...]
    refresh: Optional[Tuple[str, ...]] = None


INSTALL_RECIPES: Dict[PackageManagerKind, InstallRecipe] = {
    PackageManagerKind.PACMAN: InstallRecipe(install=("pacman", "-Syu", "--needed", "--noconfirm")),
    PackageManagerKind.DNF: InstallRecipe(install=("dnf", "install", "-y")),
    PackageManagerKind.ZYPPER: InstallRecipe(install=("zypper", "--non-interactive", "install")),
    PackageManagerKind.APT: InstallRecipe(
        install=("apt-get", "install", "-y"),
        refresh=("apt-get", "update"),
    ),
}


def resolve_plan(
    kind: PackageManagerKind, packages: Mapping[PackageManagerKind, Sequence[str]]
) -> PackagePlan:
    """Return the configured package list for ``kind`` without deduplication."""
    if kind is PackageManagerKind.UNKNOWN or kind not in INSTALL_RECIPES:
        raise UnsupportedPackageManager("Unsupported package manager. Install packages manually.")
    names = packages.get(kind)
    if not names:
        raise UnsupportedPackageManager(f"No package list configured for {kind.value}.")
    return PackagePlan(kind=kind, packages=tuple(names))


def install_commands(plan: PackagePlan, *, as_root: bool | None = None) -> List[List[str]]:
    """Build the command lines that install ``plan``, in execution order."""
    recipe = INSTALL_RECIPES.get(plan.kind)
    if recipe is None:
        raise UnsupportedPackageManager("Unsupported package manager. Install packages manually.")
    commands: List[List[str]] = []
    if recipe.refresh:
        commands.append(privileged(recipe.refresh, as_root=as_root))
    commands.append(privileged([*recipe.install, *plan.packages], as_root=as_root))
    return commands


class PackageInstaller:
    """Runs the install commands for a resolved plan."""

    def __init__(
        self, runner: CommandRunner | None = None, *, as_root: bool | None = None
    ) -> None:
        self._runner = runner or run_command
        self._as_root = as_root
        self.logger = get_logger("packages")

    def install(self, plan: PackagePlan) -> None:
        self.logger.info("Installing %d packages with %s", len(plan.packages), plan.kind.value)
        for command in install_commands(plan, as_root=self._as_root):
            self.logger.debug("Running %s", " ".join(command))
            try:
                self._runner(command)
            except subprocess.CalledProcessError as exc:
                raise InstallError(
                    f"'{' '.join(command)}' exited with status {exc.returncode}"
                ) from exc
            except OSError as exc:
                raise InstallError(f"Could not run '{command[0]}': {exc}") from exc


__all__ = [
    "INSTALL_RECIPES",
    "InstallRecipe",
    "PackageInstaller",
    "install_commands",
    "resolve_plan",
]
