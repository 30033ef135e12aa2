"""Command-line front door for vimbo.

Parses CLI options, configures logging, and dispatches into the interactive
cheatsheet runtime. Terminal I/O failures end the run with exit status 1.
"""

from __future__ import annotations

import argparse
import logging
import sys
import termios

from . import __version__
from .config import DEFAULT_PYGMENTS_STYLE, SessionConfig
from .runtime import run_cheatsheet
from .ui_theme import available_theme_names

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_TERMINAL_FAILURE = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vimbo",
        description="Terminal Vim cheatsheet and search helper.",
    )
    parser.add_argument(
        "-q",
        "--query",
        default="",
        help="Optional initial search query (e.g. 'copy', 'paste', 'delete').",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument(
        "--style",
        default=DEFAULT_PYGMENTS_STYLE,
        help="Pygments style name for Ex-command highlighting.",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument(
        "--nopager",
        action="store_true",
        help="Print matching cheats directly without the interactive view.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Write debug logs to stderr.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    """Parse CLI arguments and run the cheatsheet; return the exit status."""
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    config = SessionConfig(theme=args.theme, style=args.style, no_color=args.no_color)

    logger.debug("starting vimbo")
    try:
        run_cheatsheet(args.query, config, nopager=args.nopager)
    except (OSError, termios.error, EOFError) as exc:
        logger.debug("terminal I/O failure", exc_info=True)
        sys.stderr.write(f"vimbo: terminal I/O failed: {exc}\n")
        return EXIT_TERMINAL_FAILURE
    logger.debug("exiting vimbo")
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
