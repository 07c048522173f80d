"""Idempotent file deployment."""

from __future__ import annotations

from .files import FileDeployer, RenderFn
from .merge import AppendOnceMerger, check_marker

__all__ = ["AppendOnceMerger", "FileDeployer", "RenderFn", "check_marker"]
