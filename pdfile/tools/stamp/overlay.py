"""Overlay an arbitrary image onto PDF pages."""

from __future__ import annotations

import tempfile
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Sequence

from reportlab.lib.utils import ImageReader
from reportlab.pdfgen.canvas import Canvas

from ...config import CompressionSettings
from ...core.document import load_reader, write_pdf, writer_from
from ...core.pages import resolve_target_pages
from ...core.utils import get_logger, has_extension, resolve_path
from ...exceptions import MagickError, PdfValidationError
from ...magick import INSTALL_HINT, check_imagemagick, convert_to_png
from ..common.interfaces import BaseTool
from ..common.pipeline import register_tool
from .drawing import is_finite, stamp_pages, top_to_bottom

LOGGER = get_logger("pdfile.tools.add_image")

NATIVE_EXTENSIONS = (".png", ".jpg", ".jpeg")


@dataclass
class OverlayOptions:
    """Placement of an image overlay.

    ``y`` is measured from the top edge. Without ``pages`` every page gets
    the overlay.
    """

    image_path: Path
    x: float | None = None
    y: float | None = None
    width: float | None = None
    height: float | None = None
    opacity: float = 1.0
    rotation: float = 0
    pages: Sequence[int] | None = None


@contextmanager
def embeddable_image(image_path: Path) -> Iterator[Path]:
    """Yield a PNG/JPEG version of *image_path*, converting other formats."""

    if has_extension(image_path, NATIVE_EXTENSIONS):
        yield image_path
        return
    if not check_imagemagick():
        raise MagickError(
            f"Image format '{image_path.suffix}' requires ImageMagick. {INSTALL_HINT}"
        )
    with tempfile.TemporaryDirectory(prefix="pdfile-overlay-") as workdir:
        converted = Path(workdir) / "overlay.png"
        LOGGER.debug("Converting %s to PNG", image_path)
        convert_to_png(image_path, converted)
        yield converted


def add_image_overlay(
    input: str | Path,
    options: OverlayOptions,
    output: str | Path,
    *,
    compression: CompressionSettings | None = None,
) -> Path:
    image_path = resolve_path(options.image_path)
    if not image_path.is_file():
        raise PdfValidationError(f"Image file does not exist: {image_path}")
    if not 0 <= options.opacity <= 1:
        raise PdfValidationError(f"Opacity must be between 0 and 1, got {options.opacity}")

    source = resolve_path(input)
    reader = load_reader(source)
    targets = resolve_target_pages(options.pages, len(reader.pages), all_pages=True)

    with embeddable_image(image_path) as embeddable:
        image = ImageReader(str(embeddable))
        image_width, image_height = image.getSize()
        width = options.width if options.width is not None else float(image_width)
        height = options.height if options.height is not None else float(image_height)
        if width <= 0 or height <= 0 or not is_finite(width, height):
            raise PdfValidationError(f"Invalid image dimensions: width={width}, height={height}")

        def draw(canvas: Canvas, page_width: float, page_height: float) -> None:
            x = options.x if options.x is not None else (page_width - width) / 2
            y_from_top = options.y if options.y is not None else (page_height - height) / 2
            y = top_to_bottom(page_height, y_from_top, height)
            if not is_finite(x, y):
                raise PdfValidationError(f"Invalid image position: x={x}, y={y}")
            canvas.saveState()
            canvas.setFillAlpha(options.opacity)
            canvas.translate(x, y)
            canvas.rotate(options.rotation)
            canvas.drawImage(image, 0, 0, width=width, height=height, mask="auto")
            canvas.restoreState()

        writer = writer_from(reader)
        stamp_pages(writer, targets, draw)

    destination = write_pdf(writer, resolve_path(output), compression)
    LOGGER.info("PDF with image overlay saved to %s", destination)
    return destination


@register_tool("add_image")
class AddImageOverlayTool(BaseTool):
    name = "add_image"
    output_suffix = "_with_overlay"

    def run(self) -> Path:
        context = self.context
        source = context.require_input()
        output = context.resolve_output(source, self.output_suffix)
        return add_image_overlay(
            source,
            context.config["options"],
            output,
            compression=context.settings.compression,
        )


__all__ = ["OverlayOptions", "add_image_overlay", "AddImageOverlayTool"]
