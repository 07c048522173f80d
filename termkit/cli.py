"""CLI entrypoint for termkit."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import load_config
from .errors import TermkitError
from .logging import configure_logging
from .orchestrator import Orchestrator


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="termkit",
        description=(
            "Install tmux, Neovim and friends, then deploy their configuration "
            "and MATE Terminal settings. Safe to re-run."
        ),
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a YAML config merged over the bundled defaults "
        "(defaults to $XDG_CONFIG_HOME/termkit/config.yml when present).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write timestamped log records to this file.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for termkit."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logger = configure_logging(verbose=bool(args.verbose), log_file=args.log_file)
    logger.info("=== Linux Setup: tmux + neovim + bash aliases + MATE Terminal ===")

    try:
        config = load_config(args.config)
        Orchestrator(config).run()
    except TermkitError as exc:
        parser.exit(1, f"Error: {exc}\n")
    except KeyboardInterrupt:
        parser.exit(130, "\nInterrupted. Re-run termkit to finish the setup.\n")

    print("")
    print("=== Setup complete ===")
    print(f"Start a new terminal or run: {config.terminal.auto_launch_command}")
    print(f"Then open neovim: {config.editor.binary}")


if __name__ == "__main__":
    main(sys.argv[1:])
