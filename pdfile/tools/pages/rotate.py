"""Rotate pages in a PDF."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from ...config import CompressionSettings
from ...core.document import load_reader, write_pdf, writer_from
from ...core.pages import check_bounds
from ...core.utils import get_logger, resolve_path
from ...exceptions import PdfValidationError
from ..common.interfaces import BaseTool
from ..common.pipeline import register_tool

LOGGER = get_logger("pdfile.tools.rotate")

VALID_ROTATIONS = (90, 180, 270, -90)


def rotate_pages(
    input: str | Path,
    indices: Sequence[int],
    rotation: int,
    output: str | Path,
    *,
    compression: CompressionSettings | None = None,
) -> Path:
    """Rotate the 0-based *indices* by *rotation* degrees; all pages if empty."""

    if rotation not in VALID_ROTATIONS:
        raise PdfValidationError(
            "Invalid rotation angle. Must be 90, 180, 270, or -90 degrees"
        )

    source = resolve_path(input)
    reader = load_reader(source)
    total_pages = len(reader.pages)
    targets = list(dict.fromkeys(indices)) if indices else list(range(total_pages))
    check_bounds(targets, total_pages)

    writer = writer_from(reader)
    for page_index in targets:
        writer.pages[page_index].rotate(rotation)

    destination = write_pdf(writer, resolve_path(output), compression)
    LOGGER.info(
        "PDF with %d page(s) rotated %s degrees saved to %s", len(targets), rotation, destination
    )
    return destination


@register_tool("rotate")
class RotatePagesTool(BaseTool):
    name = "rotate"
    output_suffix = "_rotated"

    def run(self) -> Path:
        context = self.context
        source = context.require_input()
        output = context.resolve_output(source, self.output_suffix)
        return rotate_pages(
            source,
            context.config.get("pages") or [],
            context.config.get("rotation", 90),
            output,
            compression=context.settings.compression,
        )


__all__ = ["rotate_pages", "RotatePagesTool", "VALID_ROTATIONS"]
