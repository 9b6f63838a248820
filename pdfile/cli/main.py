"""Command line interface for the pdfile toolkit."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from ..config import PdfileConfig, load_config
from ..core.utils import configure_logging, get_logger
from ..exceptions import PdfileError
from ..tools import load_builtin_plugins
from ..tools.common.interfaces import ToolContext
from ..tools.common.pipeline import registry
from .commands import (
    add_image,
    config,
    image,
    insert_date,
    install,
    merge,
    remove_pages,
    reorder,
    rotate,
    sign,
    to_word,
)
from .prompts import Cancelled

LOGGER = get_logger("pdfile.cli")

EXIT_OK = 0
EXIT_FAILURE = 1

COMMAND_MODULES = [
    merge,
    to_word,
    sign,
    add_image,
    insert_date,
    remove_pages,
    reorder,
    rotate,
    image,
    config,
    install,
]


def _create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pdfile", description="PDF toolkit for the command line")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug output")
    subparsers = parser.add_subparsers(dest="command")
    subparsers.required = True
    for module in COMMAND_MODULES:
        module.configure_parser(subparsers)
    return parser


def _run_tool(args, settings: PdfileConfig) -> int:
    context: ToolContext = args.build_context(args, settings)
    return EXIT_OK if registry.execute(args.tool_name, context) else EXIT_FAILURE


def main(argv: Sequence[str] | None = None) -> int:
    parser = _create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    load_builtin_plugins()
    settings = load_config()
    LOGGER.debug("Running %s with %s", args.command, settings)

    handler = getattr(args, "handler", None) or _run_tool
    try:
        return handler(args, settings)
    except Cancelled:
        print("Cancelled")
        return EXIT_OK
    except PdfileError as exc:
        LOGGER.error("%s", exc)
        return EXIT_FAILURE


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":  # pragma: no cover
    run()
