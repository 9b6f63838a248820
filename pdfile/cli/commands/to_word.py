"""CLI helpers for the PDF to Word conversion."""

from __future__ import annotations

from argparse import ArgumentParser, _SubParsersAction

from ...config import PdfileConfig
from ...core.validator import PDF_EXTENSIONS
from ...tools.common.interfaces import ToolContext
from .common import add_output_option, add_yes_option, input_file, output_file


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser("to-word", help="Convert a PDF to a Word document")
    parser.add_argument("file", help="Input PDF file")
    add_output_option(parser)
    add_yes_option(parser)
    parser.set_defaults(tool_name="to_word", build_context=_build_context)


def _build_context(args, settings: PdfileConfig) -> ToolContext:
    return ToolContext(
        input_path=input_file(args.file, PDF_EXTENSIONS),
        output_path=output_file(args.output),
        settings=settings,
    )
