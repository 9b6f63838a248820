"""Merge several PDFs into one document."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence

from pypdf import PdfWriter

from ...config import CompressionSettings
from ...core.document import load_reader, write_pdf
from ...core.utils import get_logger, resolve_path
from ...core.validator import split_by_extension
from ...exceptions import PdfValidationError
from ..common.interfaces import BaseTool
from ..common.pipeline import register_tool

LOGGER = get_logger("pdfile.tools.merge")

MIN_INPUTS = 2


def validate_merge_inputs(inputs: Iterable[str | Path]) -> list[Path]:
    """Check there are enough inputs and that every one is a PDF."""

    pdf_paths, invalid = split_by_extension(inputs)
    if invalid:
        names = ", ".join(str(path) for path in invalid)
        raise PdfValidationError(f"Invalid file types (must be PDF): {names}")
    if len(pdf_paths) < MIN_INPUTS:
        raise PdfValidationError(f"At least {MIN_INPUTS} PDF files are required to merge")
    return [resolve_path(path) for path in pdf_paths]


def merge_pdfs(
    inputs: Iterable[str | Path],
    output: str | Path,
    *,
    compression: CompressionSettings | None = None,
) -> Path:
    """Append every page of *inputs*, in order, into *output*.

    Raises:
        PdfValidationError: If fewer than two PDFs are given.
        PdfOperationError: If an input cannot be read or the output written.
    """

    pdf_paths = validate_merge_inputs(inputs)
    output_path = resolve_path(output)

    writer = PdfWriter()
    for pdf_path in pdf_paths:
        LOGGER.debug("Processing input PDF %s", pdf_path)
        reader = load_reader(pdf_path)
        for page_index, page in enumerate(reader.pages):
            LOGGER.debug("Adding page %s from %s", page_index, pdf_path)
            writer.add_page(page)

    write_pdf(writer, output_path, compression)
    LOGGER.info("Merged %d PDFs into %s", len(pdf_paths), output_path)
    return output_path


@register_tool("merge")
class MergeTool(BaseTool):
    name = "merge"
    output_suffix = "_merged"

    def run(self) -> Path:
        context = self.context
        inputs: Sequence[str | Path] = list(context.config.get("inputs") or [])
        pdf_paths = validate_merge_inputs(inputs)
        output = context.resolve_output(pdf_paths[0], self.output_suffix)

        LOGGER.debug("Merging %d input(s) into %s", len(pdf_paths), output)
        return merge_pdfs(pdf_paths, output, compression=context.settings.compression)


__all__ = ["merge_pdfs", "validate_merge_inputs", "MergeTool"]
