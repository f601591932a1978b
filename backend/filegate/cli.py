"""Command-line entry point.

Usage:
    filegate -s /path/to/share [-host 0.0.0.0] [-server_port 8080]
    python -m filegate -h

Flags override FILEGATE_* environment variables and .env values.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from filegate import __version__
from filegate.config import Settings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="filegate",
        description="Browse and download a local directory tree over HTTP.",
    )
    parser.add_argument("-s", metavar="<path>", required=True, help="Directory to serve")
    parser.add_argument("-host", metavar="<host>", default=None, help="Server host (default: localhost)")
    parser.add_argument(
        "-server_port", metavar="<port>", type=int, default=None,
        help="Server port (default: 8080)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def settings_from_args(args: argparse.Namespace) -> Settings:
    overrides: dict = {"root_dir": args.s}
    if args.host is not None:
        overrides["host"] = args.host
    if args.server_port is not None:
        overrides["port"] = args.server_port
    return Settings(**overrides)


def main(argv: Sequence[str] | None = None) -> int:
    from filegate.main import run, setup_logging

    args = build_parser().parse_args(argv)
    settings = settings_from_args(args)
    setup_logging(settings)

    if not Path(args.s).expanduser().is_dir():
        logger.critical("Root directory does not exist or is not a directory: %s", args.s)
        return 1

    try:
        run(settings)
    except KeyboardInterrupt:
        logger.info("Interrupted")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
