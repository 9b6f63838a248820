"""CLI helpers for merging PDFs."""

from __future__ import annotations

from argparse import ArgumentParser, _SubParsersAction

from ...config import PdfileConfig
from ...core.paths import normalize_path
from ...core.validator import ensure_pdf_exists
from ...tools.common.interfaces import ToolContext
from ...tools.merger import validate_merge_inputs
from .common import add_output_option, add_yes_option, output_file


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser("merge", help="Combine multiple PDFs into one")
    parser.add_argument("files", nargs="+", help="Input PDF files, in merge order")
    add_output_option(parser)
    add_yes_option(parser)
    parser.set_defaults(tool_name="merge", build_context=_build_context)


def _build_context(args, settings: PdfileConfig) -> ToolContext:
    inputs = validate_merge_inputs(normalize_path(file) for file in args.files)
    for path in inputs:
        ensure_pdf_exists(path)
    return ToolContext(
        output_path=output_file(args.output),
        settings=settings,
        config={"inputs": inputs},
    )
