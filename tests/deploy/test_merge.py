"""Tests for append-once merging."""

from __future__ import annotations

from pathlib import Path

import pytest

from termkit.deploy import AppendOnceMerger, check_marker
from termkit.errors import DeployError

BLOCK = "\n# Source bash aliases\nif [ -f ~/.bash_aliases ]; then\n    . ~/.bash_aliases\nfi\n"


def test_merge_creates_missing_file_with_exactly_the_block(tmp_path: Path) -> None:
    bashrc = tmp_path / ".bashrc"

    assert AppendOnceMerger().merge_append(bashrc, ".bash_aliases", BLOCK) is True

    assert bashrc.read_text(encoding="utf-8") == BLOCK


def test_merge_twice_keeps_a_single_block(tmp_path: Path) -> None:
    bashrc = tmp_path / ".bashrc"
    bashrc.write_text("export EDITOR=nvim\n", encoding="utf-8")
    merger = AppendOnceMerger()

    assert merger.merge_append(bashrc, ".bash_aliases", BLOCK) is True
    assert merger.merge_append(bashrc, ".bash_aliases", BLOCK) is False

    content = bashrc.read_text(encoding="utf-8")
    assert content.count("# Source bash aliases") == 1
    assert content.startswith("export EDITOR=nvim\n")


def test_merge_adds_newline_before_block_when_file_lacks_one(tmp_path: Path) -> None:
    bashrc = tmp_path / ".bashrc"
    bashrc.write_text("alias x=y", encoding="utf-8")

    AppendOnceMerger().merge_append(bashrc, ".bash_aliases", BLOCK)

    assert bashrc.read_text(encoding="utf-8") == "alias x=y\n" + BLOCK


def test_merge_skips_when_user_already_sources_the_marker(tmp_path: Path) -> None:
    bashrc = tmp_path / ".bashrc"
    original = "[ -f ~/.bash_aliases ] && . ~/.bash_aliases\n"
    bashrc.write_text(original, encoding="utf-8")

    assert AppendOnceMerger().merge_append(bashrc, ".bash_aliases", BLOCK) is False
    assert bashrc.read_text(encoding="utf-8") == original


def test_merge_requires_marker_inside_block(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        AppendOnceMerger().merge_append(tmp_path / ".bashrc", "# managed", BLOCK)


def test_merge_wraps_io_failures(tmp_path: Path) -> None:
    blocker = tmp_path / "home"
    blocker.write_text("file", encoding="utf-8")

    with pytest.raises(DeployError):
        AppendOnceMerger().merge_append(blocker / ".bashrc", ".bash_aliases", BLOCK)


def test_merge_leaves_non_utf8_startup_file_bytes_intact(tmp_path: Path) -> None:
    bashrc = tmp_path / ".bashrc"
    original = b"# caf\xe9 settings\nexport EDITOR=nvim\n"
    bashrc.write_bytes(original)
    merger = AppendOnceMerger()

    assert merger.merge_append(bashrc, ".bash_aliases", BLOCK) is True
    assert merger.merge_append(bashrc, ".bash_aliases", BLOCK) is False

    assert bashrc.read_bytes() == original + BLOCK.encode("utf-8")


def test_check_marker_rejects_empty_marker() -> None:
    with pytest.raises(ValueError):
        check_marker("", BLOCK)
