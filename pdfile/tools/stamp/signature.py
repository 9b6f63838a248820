"""Place a signature image onto a PDF."""

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
from ...core.utils import get_logger, resolve_path
from ...core.validator import ensure_file
from ...exceptions import MagickError, PdfValidationError
from ...magick import INSTALL_HINT, check_imagemagick, feather_alpha, remove_background
from ..common.interfaces import BaseTool
from ..common.pipeline import register_tool
from .drawing import stamp_pages

LOGGER = get_logger("pdfile.tools.sign")

SIGNATURE_EXTENSIONS = (".png",)
BACKGROUND_COLOR = "white"
DEFAULT_SCALE = 0.3


@dataclass
class SignatureOptions:
    """Where and how the signature is drawn.

    Coordinates are PDF points from the bottom-left corner. ``pages`` holds
    0-based indices; the last page is signed when it is empty.
    """

    signature_file: Path
    x: float | None = None
    y: float | None = None
    width: float | None = None
    height: float | None = None
    opacity: float = 1.0
    pages: Sequence[int] | None = None
    remove_bg: bool = True
    fuzz: float = 15
    feather: float = 20


@contextmanager
def prepared_signature(source: Path, options: SignatureOptions) -> Iterator[Path]:
    """Yield a signature image with its white background made transparent.

    The processed copy lives in a temporary directory that is removed on
    exit. Without ImageMagick the original image is yielded unchanged.
    """

    if not options.remove_bg:
        yield source
        return
    if not check_imagemagick():
        LOGGER.warning("ImageMagick not found. Signature will be used without background removal.")
        LOGGER.warning(INSTALL_HINT)
        yield source
        return

    with tempfile.TemporaryDirectory(prefix="pdfile-signature-") as workdir:
        processed = Path(workdir) / "processed.png"
        LOGGER.info("Processing signature (removing background)...")
        if not remove_background(source, processed, BACKGROUND_COLOR, options.fuzz):
            raise MagickError(f"Failed to remove background from {source}")
        if options.feather > 0:
            feathered = Path(workdir) / "feathered.png"
            if feather_alpha(processed, feathered, options.feather):
                processed = feathered
            else:
                LOGGER.warning("Feathering failed, using non-feathered signature")
        yield processed


def signature_size(
    image_size: tuple[int, int], width: float | None, height: float | None
) -> tuple[float, float]:
    image_width, image_height = image_size
    sig_width = width if width is not None else image_width * DEFAULT_SCALE
    sig_height = height if height is not None else image_height * sig_width / image_width
    return sig_width, sig_height


def add_signature(
    input: str | Path,
    options: SignatureOptions,
    output: str | Path,
    *,
    compression: CompressionSettings | None = None,
) -> Path:
    signature = ensure_file(options.signature_file, SIGNATURE_EXTENSIONS, label="Signature")
    if not 0 <= options.opacity <= 1:
        raise PdfValidationError(f"Opacity must be between 0 and 1, got {options.opacity}")

    source = resolve_path(input)
    reader = load_reader(source)
    targets = resolve_target_pages(options.pages, len(reader.pages))

    with prepared_signature(signature, options) as image_path:
        image = ImageReader(str(image_path))
        sig_width, sig_height = signature_size(image.getSize(), options.width, options.height)

        def draw(canvas: Canvas, width: float, height: float) -> None:
            x = options.x if options.x is not None else width - sig_width - 50
            y = options.y if options.y is not None else 80
            canvas.setFillAlpha(options.opacity)
            canvas.drawImage(image, x, y, width=sig_width, height=sig_height, mask="auto")

        writer = writer_from(reader)
        stamp_pages(writer, targets, draw)

    destination = write_pdf(writer, resolve_path(output), compression)
    LOGGER.info("Signed PDF saved to %s", destination)
    return destination


@register_tool("sign")
class AddSignatureTool(BaseTool):
    name = "sign"
    output_suffix = "_signed"

    def run(self) -> Path:
        context = self.context
        source = context.require_input()
        output = context.resolve_output(source, self.output_suffix)
        return add_signature(
            source,
            context.config["options"],
            output,
            compression=context.settings.compression,
        )


__all__ = ["SignatureOptions", "add_signature", "prepared_signature", "signature_size", "AddSignatureTool"]
