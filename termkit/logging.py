"""Logging for termkit runs.

Console output stays terse. The optional log file is meant to be attached to
bug reports, so every record there carries the host facts probed so far
(package manager, clipboard binding, editor version).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict

_LOGGER_NAME = "termkit"
CONSOLE_FORMAT = "[termkit] %(levelname)s %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(host)s] %(message)s"


class HostFactsFilter(logging.Filter):
    """Stamps each record with ``host``: the probed facts as ``key=value`` pairs."""

    def __init__(self) -> None:
        super().__init__()
        self.facts: Dict[str, str] = {}

    def filter(self, record: logging.LogRecord) -> bool:
        record.host = " ".join(f"{key}={value}" for key, value in self.facts.items()) or "unprobed"
        return True


_HOST_FACTS = HostFactsFilter()


def get_logger(name: str | None = None) -> logging.Logger:
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def record_host_fact(key: str, value: object) -> None:
    """Remember a probed host value for the file sink; later values win."""
    _HOST_FACTS.facts[key] = str(value)
    get_logger("host").debug("%s=%s", key, value)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Attach the console handler and, when ``log_file`` is given, the host-stamped file sink.

    Host facts from a previous run are forgotten.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False
    _HOST_FACTS.facts.clear()

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        sink = logging.FileHandler(log_file, encoding="utf-8")
        # The file always records debug detail; -v only affects the console.
        sink.setLevel(logging.DEBUG)
        sink.addFilter(_HOST_FACTS)
        sink.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(sink)
        logger.setLevel(logging.DEBUG)

    return logger


__all__ = ["configure_logging", "get_logger", "record_host_fact"]
