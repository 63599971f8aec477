"""Command line entry point for myshell"""

import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler

from . import __version__
from .config import ShellConfig
from .exit_codes import EXIT_CODE_FAILURE
from .shell import Shell, make_console

logger = logging.getLogger("myshell")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="myshell",
        description="A small interactive shell with builtins and PATH lookup",
    )
    parser.add_argument("--prompt", default=None,
                        help="prompt text (default: $MYSHELL_PROMPT or '$ ')")
    parser.add_argument("--debug", action="store_true", default=None,
                        help="log dispatch and process details to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(debug: bool) -> None:
    """Send package logs to stderr through rich"""
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    logger.propagate = False


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    config = ShellConfig.from_env()
    if args.prompt is not None:
        config.prompt = args.prompt
    if args.debug:
        config.debug = True

    configure_logging(config.debug)

    shell = Shell(config=config, console=make_console())
    try:
        return shell.repl()
    except OSError as e:
        logger.debug("input failed", exc_info=True)
        shell.report_error(f"myshell: cannot read input: {e}")
        return EXIT_CODE_FAILURE


if __name__ == "__main__":
    sys.exit(main())
