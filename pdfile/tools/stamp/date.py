"""Insert today's date into a PDF."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfgen.canvas import Canvas

from ...config import CompressionSettings
from ...core.document import load_reader, write_pdf, writer_from
from ...core.pages import resolve_target_pages
from ...core.utils import get_logger, resolve_path
from ...exceptions import PdfValidationError
from ..common.interfaces import BaseTool
from ..common.pipeline import register_tool
from .drawing import stamp_pages, top_to_bottom

LOGGER = get_logger("pdfile.tools.insert_date")

DATE_FORMATS = ("MM/DD/YYYY", "DD/MM/YYYY", "YYYY-MM-DD", "Month DD, YYYY")
DEFAULT_FORMAT = DATE_FORMATS[0]
FONT_NAME = "Helvetica"

_MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

RGB = tuple[float, float, float]


def format_date(date: dt.date, fmt: str = DEFAULT_FORMAT) -> str:
    if fmt == "MM/DD/YYYY":
        return f"{date.month:02d}/{date.day:02d}/{date.year}"
    if fmt == "DD/MM/YYYY":
        return f"{date.day:02d}/{date.month:02d}/{date.year}"
    if fmt == "YYYY-MM-DD":
        return f"{date.year}-{date.month:02d}-{date.day:02d}"
    if fmt == "Month DD, YYYY":
        return f"{_MONTHS[date.month - 1]} {date.day}, {date.year}"
    raise PdfValidationError(f"Invalid format. Use: {', '.join(DATE_FORMATS)}")


@dataclass
class DateOptions:
    """Placement and styling of the inserted date.

    ``y`` is measured from the top edge of the page. ``pages`` holds 0-based
    indices; without it the date goes on the last page, or on every page when
    ``all_pages`` is set.
    """

    x: float | None = None
    y: float | None = None
    font_size: float = 12
    color: RGB = (0.0, 0.0, 0.0)
    background: RGB | None = None
    rotation: float = 0
    format: str = DEFAULT_FORMAT
    text: str | None = None
    pages: Sequence[int] | None = None
    all_pages: bool = False
    today: dt.date | None = None

    def date_text(self) -> str:
        if self.text is not None:
            return self.text
        return format_date(self.today or dt.date.today(), self.format)


def insert_date(
    input: str | Path,
    options: DateOptions,
    output: str | Path,
    *,
    compression: CompressionSettings | None = None,
) -> Path:
    text = options.date_text()
    font_size = options.font_size
    if font_size <= 0:
        raise PdfValidationError(f"Font size must be positive, got {font_size}")

    source = resolve_path(input)
    reader = load_reader(source)
    targets = resolve_target_pages(options.pages, len(reader.pages), all_pages=options.all_pages)
    text_width = stringWidth(text, FONT_NAME, font_size)

    def draw(canvas: Canvas, width: float, height: float) -> None:
        x = options.x if options.x is not None else width - text_width - 50
        y = top_to_bottom(height, options.y if options.y is not None else 30, font_size)
        canvas.saveState()
        canvas.translate(x, y)
        canvas.rotate(options.rotation)
        if options.background is not None:
            canvas.setFillColorRGB(*options.background)
            canvas.rect(-2, -2, text_width + 4, font_size + 4, stroke=0, fill=1)
        canvas.setFillColorRGB(*options.color)
        canvas.setFont(FONT_NAME, font_size)
        canvas.drawString(0, 0, text)
        canvas.restoreState()

    writer = writer_from(reader)
    stamp_pages(writer, targets, draw)
    destination = write_pdf(writer, resolve_path(output), compression)
    LOGGER.info("PDF with date '%s' saved to %s", text, destination)
    return destination


@register_tool("insert_date")
class InsertDateTool(BaseTool):
    name = "insert_date"
    output_suffix = "_with_date"

    def run(self) -> Path:
        context = self.context
        source = context.require_input()
        output = context.resolve_output(source, self.output_suffix)
        options = context.config.get("options") or DateOptions()
        return insert_date(source, options, output, compression=context.settings.compression)


__all__ = ["DATE_FORMATS", "DateOptions", "format_date", "insert_date", "InsertDateTool"]
