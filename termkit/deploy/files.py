"""Full-replace deployment of rendered configuration files."""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path
from typing import Callable

from ..errors import DeployError
from ..logging import get_logger

RenderFn = Callable[[], str]


class FileDeployer:
    """Writes rendered content over a target path atomically.

    ``render`` is called on every deploy; identical content leaves the file
    untouched, so repeated runs converge on the same bytes.
    """

    def __init__(self, *, encoding: str = "utf-8") -> None:
        self.encoding = encoding
        self.logger = get_logger("deploy")

    def deploy(self, path: Path, render: RenderFn) -> bool:
        """Write ``render()`` to ``path``; return True when the file changed.

        Symlinked targets are written through, so the link itself survives.
        """
        payload = render().encode(self.encoding)
        target = Path(os.path.realpath(path))
        try:
            current = target.read_bytes()
        except FileNotFoundError:
            current = None
        except OSError as exc:
            raise DeployError(path, exc.strerror or str(exc)) from exc

        if current == payload:
            self.logger.debug("%s already up to date", path)
            return False

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            self._replace(target, payload)
        except OSError as exc:
            raise DeployError(path, exc.strerror or str(exc)) from exc
        self.logger.debug("Wrote %d bytes to %s", len(payload), target)
        return True

    @staticmethod
    def _replace(path: Path, payload: bytes) -> None:
        mode = None
        if path.exists():
            mode = stat.S_IMODE(path.stat().st_mode)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(payload)
                handle.flush()
                os.fsync(handle.fileno())
            if mode is not None:
                os.chmod(tmp_path, mode)
            else:
                os.chmod(tmp_path, 0o666 & ~_current_umask())
            os.replace(tmp_path, path)
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


__all__ = ["FileDeployer", "RenderFn"]
