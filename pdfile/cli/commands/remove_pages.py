"""CLI helpers for removing pages."""

from __future__ import annotations

from argparse import ArgumentParser, _SubParsersAction

from ...config import PdfileConfig
from ...core.validator import PDF_EXTENSIONS
from ...tools.common.interfaces import ToolContext
from .common import add_output_option, add_yes_option, input_file, output_file, required_pages


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser("remove-pages", help="Remove specific pages from a PDF")
    parser.add_argument("file", help="Input PDF file")
    parser.add_argument("-p", "--pages", help='Comma-separated page numbers to remove (e.g. "1,3,5")')
    add_output_option(parser)
    add_yes_option(parser)
    parser.set_defaults(tool_name="remove_pages", build_context=_build_context)


def _build_context(args, settings: PdfileConfig) -> ToolContext:
    pdf_path = input_file(args.file, PDF_EXTENSIONS)
    pages = required_pages(
        args.pages,
        yes=args.yes,
        flag="--pages",
        question="Enter page numbers to remove (comma-separated, e.g. 1,3,5):",
    )
    return ToolContext(
        input_path=pdf_path,
        output_path=output_file(args.output),
        settings=settings,
        config={"pages": pages},
    )
