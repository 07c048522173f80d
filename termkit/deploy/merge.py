"""Append-once merging of managed blocks into user-owned files."""

from __future__ import annotations

from pathlib import Path

from ..errors import DeployError
from ..logging import get_logger


def check_marker(marker: str, block: str) -> None:
    """Raise ValueError unless ``marker`` can identify ``block`` once appended."""
    if not marker:
        raise ValueError("marker must be a non-empty string")
    if marker not in block:
        raise ValueError(f"marker {marker!r} does not occur in the block to append")


class AppendOnceMerger:
    """Appends a block to a file unless a marker shows it is already there.

    Existing content is never decoded or rewritten, so files in any encoding
    are left intact. One marker identifies one managed block, so a file
    supports a single block per marker.
    """

    def __init__(self, *, encoding: str = "utf-8") -> None:
        self.encoding = encoding
        self.logger = get_logger("merge")

    def merge_append(self, path: Path, marker: str, block: str) -> bool:
        """Append ``block`` to ``path`` when ``marker`` is absent; return True if appended."""
        check_marker(marker, block)

        try:
            existing = path.read_bytes()
        except FileNotFoundError:
            existing = b""
        except OSError as exc:
            raise DeployError(path, exc.strerror or str(exc)) from exc

        if marker.encode(self.encoding) in existing:
            self.logger.debug("%s already contains %s", path, marker)
            return False

        payload = block.encode(self.encoding)
        if existing and not existing.endswith(b"\n"):
            payload = b"\n" + payload
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("ab") as handle:
                handle.write(payload)
        except OSError as exc:
            raise DeployError(path, exc.strerror or str(exc)) from exc
        return True


__all__ = ["AppendOnceMerger", "check_marker"]
