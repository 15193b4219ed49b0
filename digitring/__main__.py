"""Entry point for the digit ring viewer."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication

from .config import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV
from .gui import NumberListWindow


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="digitring", description="Inspect numbers stored as digit rings.")
    parser.add_argument("file", nargs="?", type=Path, help="text file whose first line holds a decimal number")
    parser.add_argument(
        "--log-level",
        default=os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL),
        help=f"logging level (default: ${LOG_LEVEL_ENV} or {DEFAULT_LOG_LEVEL})",
    )
    return parser


def main() -> int:
    """Launch the PySide6 event loop and show the digit ring window."""
    args, qt_args = _build_parser().parse_known_args()
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = QApplication([sys.argv[0], *qt_args])
    window = NumberListWindow()
    if args.file is not None:
        window.load(args.file)
    window.show()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
