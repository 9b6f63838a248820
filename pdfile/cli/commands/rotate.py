"""CLI helpers for rotating pages."""

from __future__ import annotations

from argparse import ArgumentParser, _SubParsersAction

from ...config import PdfileConfig
from ...core.pages import parse_page_list
from ...core.validator import PDF_EXTENSIONS
from ...exceptions import PdfValidationError
from ...tools.common.interfaces import ToolContext
from ...tools.pages.rotate import VALID_ROTATIONS
from ..prompts import ask, ask_required
from .common import add_output_option, add_yes_option, input_file, output_file


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser("rotate", help="Rotate pages in a PDF")
    parser.add_argument("file", help="Input PDF file")
    parser.add_argument(
        "-p",
        "--pages",
        help='Comma-separated page numbers to rotate (e.g. "1,3,5"); all pages if omitted',
    )
    parser.add_argument("-r", "--rotation", help="Rotation in degrees: 90, 180, 270 or -90")
    add_output_option(parser)
    add_yes_option(parser)
    parser.set_defaults(tool_name="rotate", build_context=_build_context)


def _parse_rotation(value: str) -> int:
    try:
        rotation = int(value)
    except ValueError:
        rotation = None
    if rotation not in VALID_ROTATIONS:
        raise PdfValidationError(
            "Invalid rotation angle. Must be 90, 180, 270, or -90 degrees"
        )
    return rotation


def _build_context(args, settings: PdfileConfig) -> ToolContext:
    pdf_path = input_file(args.file, PDF_EXTENSIONS)

    pages_text = args.pages
    if pages_text is None and not args.yes:
        pages_text = ask("Enter page numbers to rotate (comma-separated, or press Enter for all pages):")
    pages = parse_page_list(pages_text)

    rotation_text = args.rotation
    if rotation_text is None:
        if args.yes:
            raise PdfValidationError("--rotation option is required with --yes flag")
        rotation_text = ask_required("Rotation angle (90, 180, 270 or -90):")
    rotation = _parse_rotation(rotation_text)

    return ToolContext(
        input_path=pdf_path,
        output_path=output_file(args.output),
        settings=settings,
        config={"pages": pages, "rotation": rotation},
    )
