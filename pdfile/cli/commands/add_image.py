"""CLI helpers for image overlays."""

from __future__ import annotations

from argparse import ArgumentParser, _SubParsersAction

from ...config import PdfileConfig
from ...core.paths import normalize_path
from ...core.validator import PDF_EXTENSIONS
from ...exceptions import PdfValidationError
from ...tools.common.interfaces import ToolContext
from ...tools.stamp.overlay import OverlayOptions
from .common import add_output_option, add_yes_option, input_file, output_file, page_option


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser("add-image", help="Add an image overlay to a PDF")
    parser.add_argument("pdf", help="Input PDF file")
    parser.add_argument("image", help="Image to overlay")
    add_output_option(parser)
    parser.add_argument("--x", type=float, help="X position in points from the left")
    parser.add_argument("--y", type=float, help="Y position in points from the top")
    parser.add_argument("-w", "--width", type=float, help="Image width in points")
    parser.add_argument("-H", "--height", type=float, help="Image height in points")
    parser.add_argument("--opacity", type=float, default=1.0, help="Opacity from 0 to 1")
    parser.add_argument("--rotation", type=float, default=0, help="Rotation in degrees")
    parser.add_argument("-p", "--pages", help="Pages to cover, e.g. 1,3 (default: all pages)")
    add_yes_option(parser)
    parser.set_defaults(tool_name="add_image", build_context=_build_context)


def _build_context(args, settings: PdfileConfig) -> ToolContext:
    pdf_path = input_file(args.pdf, PDF_EXTENSIONS)
    image = normalize_path(args.image)
    if not image.is_file():
        raise PdfValidationError(f"Image file not found: {image}")
    options = OverlayOptions(
        image_path=image,
        x=args.x,
        y=args.y,
        width=args.width,
        height=args.height,
        opacity=args.opacity,
        rotation=args.rotation,
        pages=page_option(args.pages),
    )
    return ToolContext(
        input_path=pdf_path,
        output_path=output_file(args.output),
        settings=settings,
        config={"options": options},
    )
