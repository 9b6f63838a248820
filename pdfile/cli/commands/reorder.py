"""CLI helpers for reordering pages and moving a single page."""

from __future__ import annotations

from argparse import ArgumentParser, _SubParsersAction

from ...config import PdfileConfig
from ...core.pages import parse_page_list
from ...core.validator import PDF_EXTENSIONS
from ...exceptions import PdfValidationError
from ...tools.common.interfaces import ToolContext
from ...tools.pages.reorder import DIRECTIONS
from .common import add_output_option, add_yes_option, input_file, output_file, required_pages


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser("reorder", help="Reorder the pages of a PDF")
    parser.add_argument("file", help="Input PDF file")
    parser.add_argument("-n", "--order", help='New page order, e.g. "3,1,2"')
    add_output_option(parser)
    add_yes_option(parser)
    parser.set_defaults(tool_name="reorder", build_context=_build_reorder_context)

    move = subparsers.add_parser("move-page", help="Move one page up or down")
    move.add_argument("file", help="Input PDF file")
    move.add_argument("page", help="Page number to move")
    move.add_argument("direction", help="up or down")
    add_output_option(move)
    move.set_defaults(tool_name="move_page", build_context=_build_move_context)


def _build_reorder_context(args, settings: PdfileConfig) -> ToolContext:
    pdf_path = input_file(args.file, PDF_EXTENSIONS)
    order = required_pages(
        args.order,
        yes=args.yes,
        flag="--order",
        question="Enter the new page order (comma-separated, e.g. 3,1,2):",
    )
    return ToolContext(
        input_path=pdf_path,
        output_path=output_file(args.output),
        settings=settings,
        config={"order": order},
    )


def _build_move_context(args, settings: PdfileConfig) -> ToolContext:
    pdf_path = input_file(args.file, PDF_EXTENSIONS)
    pages = parse_page_list(args.page)
    if len(pages) != 1:
        raise PdfValidationError(f"Expected a single page number, got {args.page!r}")
    if args.direction not in DIRECTIONS:
        raise PdfValidationError(f"Direction must be 'up' or 'down', got {args.direction!r}")
    return ToolContext(
        input_path=pdf_path,
        output_path=output_file(args.output),
        settings=settings,
        config={"page": pages[0], "direction": args.direction},
    )
