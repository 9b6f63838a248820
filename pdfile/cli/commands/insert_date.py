"""CLI helpers for inserting a date stamp."""

from __future__ import annotations

from argparse import ArgumentParser, _SubParsersAction

from ...config import PdfileConfig
from ...core.validator import PDF_EXTENSIONS
from ...exceptions import PdfValidationError
from ...tools.common.interfaces import ToolContext
from ...tools.stamp.date import DATE_FORMATS, DEFAULT_FORMAT, DateOptions
from .common import add_output_option, add_yes_option, input_file, output_file, page_option


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser("insert-date", help="Insert today's date into a PDF")
    parser.add_argument("file", help="Input PDF file")
    add_output_option(parser)
    parser.add_argument("--x", type=float, help="X position in points from the left")
    parser.add_argument("--y", type=float, help="Y position in points from the top")
    parser.add_argument("-s", "--size", type=float, default=12, help="Font size in points")
    parser.add_argument(
        "-f",
        "--format",
        default=DEFAULT_FORMAT,
        help=f"Date format: {', '.join(DATE_FORMATS)}",
    )
    parser.add_argument("-p", "--pages", help="Pages to stamp, e.g. 1,3 (default: last page)")
    parser.add_argument("--all-pages", action="store_true", help="Stamp every page")
    parser.add_argument("--text", help="Custom text instead of the date")
    add_yes_option(parser)
    parser.set_defaults(tool_name="insert_date", build_context=_build_context)


def _build_context(args, settings: PdfileConfig) -> ToolContext:
    pdf_path = input_file(args.file, PDF_EXTENSIONS)
    if args.format not in DATE_FORMATS:
        raise PdfValidationError(f"Invalid format. Use: {', '.join(DATE_FORMATS)}")
    if args.size <= 0:
        raise PdfValidationError("Font size must be positive")
    options = DateOptions(
        x=args.x,
        y=args.y,
        font_size=args.size,
        format=args.format,
        text=args.text,
        pages=page_option(args.pages),
        all_pages=args.all_pages,
    )
    return ToolContext(
        input_path=pdf_path,
        output_path=output_file(args.output),
        settings=settings,
        config={"options": options},
    )
