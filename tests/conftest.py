from __future__ import annotations

import logging
from pathlib import Path

import pytest

from termkit.config import TermkitConfig, load_config
from tests._fixtures.fake_host import FakeHost


@pytest.fixture
def fake_host(tmp_path: Path) -> FakeHost:
    """Provide a fake host whose home directory lives under tmp_path."""
    return FakeHost(tmp_path)


@pytest.fixture
def default_config(tmp_path: Path) -> TermkitConfig:
    """Bundled defaults only, ignoring any config.yml of the developer running the tests."""
    return load_config(environ={"XDG_CONFIG_HOME": str(tmp_path / "xdg")})


@pytest.fixture(autouse=True)
def _reset_termkit_logger():
    yield
    logger = logging.getLogger("termkit")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
