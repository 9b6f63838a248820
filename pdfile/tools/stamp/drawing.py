"""Overlay rendering helpers.

pypdf cannot draw text or images by itself, so each stamp is rendered onto a
single reportlab page of the same size and merged on top of the target page.
Coordinates given to the callbacks are PDF user space: origin bottom-left.
"""

from __future__ import annotations

import io
import math
from typing import Callable, Iterable

from pypdf import PageObject, PdfReader, PdfWriter
from reportlab.pdfgen.canvas import Canvas

from ...core.utils import get_logger

LOGGER = get_logger("pdfile.tools.stamp")

DrawCallback = Callable[[Canvas, float, float], None]


def page_size(page: PageObject) -> tuple[float, float]:
    box = page.mediabox
    return float(box.width), float(box.height)


def render_overlay(width: float, height: float, draw: DrawCallback) -> PageObject:
    """Render *draw* onto a blank ``width`` x ``height`` page."""

    buffer = io.BytesIO()
    canvas = Canvas(buffer, pagesize=(width, height))
    draw(canvas, width, height)
    canvas.showPage()
    canvas.save()
    buffer.seek(0)
    return PdfReader(buffer).pages[0]


def stamp_pages(writer: PdfWriter, indices: Iterable[int], draw: DrawCallback) -> int:
    """Merge a freshly rendered overlay onto each page in *indices*."""

    count = 0
    for page_index in indices:
        page = writer.pages[page_index]
        width, height = page_size(page)
        overlay = render_overlay(width, height, draw)
        if page.mediabox.left or page.mediabox.bottom:
            overlay.add_transformation(
                (1, 0, 0, 1, float(page.mediabox.left), float(page.mediabox.bottom))
            )
        page.merge_page(overlay)
        LOGGER.debug("Stamped page %s (%.0fx%.0f)", page_index + 1, width, height)
        count += 1
    return count


def top_to_bottom(page_height: float, y_from_top: float, item_height: float) -> float:
    """Convert a top-left based y coordinate into PDF bottom-left space."""

    return page_height - y_from_top - item_height


def is_finite(*values: float) -> bool:
    return all(math.isfinite(value) for value in values)


__all__ = ["page_size", "render_overlay", "stamp_pages", "top_to_bottom", "is_finite"]
