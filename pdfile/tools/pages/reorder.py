"""Reorder pages in a PDF, or move a single page up or down."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from pypdf import PdfWriter

from ...config import CompressionSettings
from ...core.document import load_reader, write_pdf
from ...core.pages import check_bounds, check_permutation
from ...core.utils import get_logger, resolve_path
from ...exceptions import InvalidPageSelectionError, PdfValidationError
from ..common.interfaces import BaseTool
from ..common.pipeline import register_tool

LOGGER = get_logger("pdfile.tools.reorder")

DIRECTIONS = ("up", "down")


def reorder_pages(
    input: str | Path,
    order: Sequence[int],
    output: str | Path,
    *,
    compression: CompressionSettings | None = None,
) -> Path:
    """Rebuild *input* so its pages follow the 0-based *order*.

    *order* must name every page exactly once.
    """

    source = resolve_path(input)
    reader = load_reader(source)
    check_permutation(order, len(reader.pages))

    writer = PdfWriter()
    for page_index in order:
        writer.add_page(reader.pages[page_index])

    destination = write_pdf(writer, resolve_path(output), compression)
    LOGGER.info("Reordered PDF saved to %s", destination)
    return destination


def moved_order(index: int, direction: str, page_count: int) -> list[int]:
    """Return the page order after moving page *index* one step."""

    if direction not in DIRECTIONS:
        raise PdfValidationError(f"Direction must be 'up' or 'down', got {direction!r}")
    check_bounds([index], page_count)

    target = index - 1 if direction == "up" else index + 1
    if target < 0 or target >= page_count:
        edge = "top" if direction == "up" else "bottom"
        raise InvalidPageSelectionError(
            [index + 1], f"cannot move page {direction}, it is already at the {edge}"
        )

    order = list(range(page_count))
    order[index], order[target] = order[target], order[index]
    return order


def move_page(
    input: str | Path,
    index: int,
    direction: str,
    output: str | Path,
    *,
    compression: CompressionSettings | None = None,
) -> Path:
    source = resolve_path(input)
    page_count = len(load_reader(source).pages)
    order = moved_order(index, direction, page_count)
    LOGGER.debug("Moving page %s %s in %s", index + 1, direction, source)
    return reorder_pages(source, order, output, compression=compression)


@register_tool("reorder")
class ReorderPagesTool(BaseTool):
    name = "reorder"
    output_suffix = "_reordered"

    def run(self) -> Path:
        context = self.context
        source = context.require_input()
        output = context.resolve_output(source, self.output_suffix)
        return reorder_pages(
            source,
            context.config.get("order") or [],
            output,
            compression=context.settings.compression,
        )


@register_tool("move_page")
class MovePageTool(BaseTool):
    name = "move_page"
    output_suffix = "_reordered"

    def run(self) -> Path:
        context = self.context
        source = context.require_input()
        output = context.resolve_output(source, self.output_suffix)
        return move_page(
            source,
            context.config["page"],
            context.config["direction"],
            output,
            compression=context.settings.compression,
        )


__all__ = ["reorder_pages", "move_page", "moved_order", "ReorderPagesTool", "MovePageTool"]
