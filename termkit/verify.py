"""Post-install capability check."""

from __future__ import annotations

import shutil
from typing import Iterable, List, Sequence

from .errors import MissingCommands
from .logging import get_logger
from .probe.environment import WhichFn


class CapabilityVerifier:
    """Checks that every required executable resolves on PATH.

    All misses are collected before failing so one message carries the
    complete remediation list.
    """

    def __init__(self, which: WhichFn = shutil.which) -> None:
        self._which = which
        self.logger = get_logger("verify")

    def missing(
        self,
        required: Iterable[str],
        alternatives: Iterable[Sequence[str]] = (),
    ) -> List[str]:
        """Return missing commands in check order; OR-groups render as ``a|b``."""
        missing: List[str] = []
        seen = set()
        for command in required:
            if command in seen:
                continue
            seen.add(command)
            if self._which(command) is None:
                missing.append(command)
        for group in alternatives:
            names = [name for name in group if name]
            if not names:
                continue
            if not any(self._which(name) is not None for name in names):
                missing.append("|".join(names))
        return missing

    def verify(
        self,
        required: Iterable[str],
        alternatives: Iterable[Sequence[str]] = (),
    ) -> None:
        missing = self.missing(required, alternatives)
        if missing:
            raise MissingCommands(missing)
        self.logger.info("All required commands are available")


__all__ = ["CapabilityVerifier"]
