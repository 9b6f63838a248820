"""Remove pages from a PDF."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from pypdf import PdfWriter

from ...config import CompressionSettings
from ...core.document import load_reader, write_pdf
from ...core.pages import check_bounds
from ...core.utils import get_logger, resolve_path
from ...exceptions import InvalidPageSelectionError
from ..common.interfaces import BaseTool
from ..common.pipeline import register_tool

LOGGER = get_logger("pdfile.tools.remove_pages")


def remove_pages(
    input: str | Path,
    indices: Sequence[int],
    output: str | Path,
    *,
    compression: CompressionSettings | None = None,
) -> Path:
    """Write *input* without the 0-based pages in *indices*.

    Raises:
        InvalidPageSelectionError: If nothing is selected, an index is out of
            range, or the selection covers every page.
    """

    if not indices:
        raise InvalidPageSelectionError([], "no pages specified for removal")

    source = resolve_path(input)
    reader = load_reader(source)
    total_pages = len(reader.pages)
    check_bounds(indices, total_pages)

    removed = set(indices)
    if len(removed) == total_pages:
        raise InvalidPageSelectionError(indices, "cannot remove all pages from PDF")

    writer = PdfWriter()
    for page_index, page in enumerate(reader.pages):
        if page_index in removed:
            LOGGER.debug("Removing page %s from %s", page_index + 1, source)
            continue
        writer.add_page(page)

    destination = write_pdf(writer, resolve_path(output), compression)
    LOGGER.info("PDF with %d page(s) removed saved to %s", len(removed), destination)
    return destination


@register_tool("remove_pages")
class RemovePagesTool(BaseTool):
    name = "remove_pages"
    output_suffix = "_removed_pages"

    def run(self) -> Path:
        context = self.context
        source = context.require_input()
        output = context.resolve_output(source, self.output_suffix)
        return remove_pages(
            source,
            context.config.get("pages") or [],
            output,
            compression=context.settings.compression,
        )


__all__ = ["remove_pages", "RemovePagesTool"]
